"""Event processing: repo whitelist and cleanup of closed pull requests."""

from prkeeper.events.cleanup_comment import format_cleanup_comment
from prkeeper.events.errors import CleanupFailed, CleanupStage
from prkeeper.events.pull_closed import PullCleaner, PullClosedExecutor
from prkeeper.events.whitelist import RepoWhitelist, is_allowed

__all__ = [
    "CleanupFailed",
    "CleanupStage",
    "PullCleaner",
    "PullClosedExecutor",
    "RepoWhitelist",
    "format_cleanup_comment",
    "is_allowed",
]
