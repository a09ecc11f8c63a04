"""Git platform adapters (comment posting and host dispatch)."""

from prkeeper.adapters.base import CommentPoster, GitPlatformError
from prkeeper.adapters.github import GitHubAdapter
from prkeeper.adapters.proxy import ClientProxy

__all__ = ["ClientProxy", "CommentPoster", "GitHubAdapter", "GitPlatformError"]
