"""Clean up after a closed or merged pull request.

Steps run in order and stop at the first failure:

1. delete workspace state for the pull request
2. release its locks
3. if any locks were released, post a summary comment

Workspace state goes first: a retry after a failed delete re-deletes
(idempotent) before touching locks. If releasing locks fails after the
workspace is gone, the locks stay for a later retry. Nothing is rolled back.
"""

import logging
from abc import ABC, abstractmethod

from prkeeper.adapters.base import CommentPoster
from prkeeper.events.cleanup_comment import format_cleanup_comment
from prkeeper.events.errors import CleanupFailed, CleanupStage
from prkeeper.locking.base import LockStore
from prkeeper.models import PullRequest, Repo, VCSHost
from prkeeper.workspace import WorkspaceManager

LOG = logging.getLogger("prkeeper.events.pull_closed")


class PullCleaner(ABC):
    """Cleans up pull requests after they are closed or merged."""

    @abstractmethod
    def clean_up_pull(self, repo: Repo, pull: PullRequest, host: VCSHost) -> None:
        """Delete the pull request's workspaces and every lock it holds.

        Raises CleanupFailed tagged with the stage that failed.
        """


class PullClosedExecutor(PullCleaner):
    """Runs the cleanup steps against the workspace, lock and comment clients."""

    def __init__(
        self,
        workspace: WorkspaceManager,
        locker: LockStore,
        vcs_client: CommentPoster,
    ) -> None:
        self.workspace = workspace
        self.locker = locker
        self.vcs_client = vcs_client

    def clean_up_pull(self, repo: Repo, pull: PullRequest, host: VCSHost) -> None:
        LOG.debug("Deleting workspace state for %s#%s", repo.full_name, pull.number)
        try:
            self.workspace.delete(repo, pull)
        except Exception as e:
            raise CleanupFailed(CleanupStage.WORKSPACE, e) from e

        LOG.debug("Releasing locks for %s#%s", repo.full_name, pull.number)
        try:
            locks = self.locker.unlock_by_pull(repo.full_name, pull.number)
        except Exception as e:
            raise CleanupFailed(CleanupStage.LOCKS, e) from e

        if not locks:
            LOG.info("Cleaned up %s#%s (no locks held)", repo.full_name, pull.number)
            return

        body = format_cleanup_comment(locks)
        try:
            self.vcs_client.create_comment(repo, pull.number, body, host)
        except Exception as e:
            raise CleanupFailed(CleanupStage.COMMENT, e) from e
        LOG.info("Cleaned up %s#%s, released %d lock(s)", repo.full_name, pull.number, len(locks))
