"""Workspace state for pull requests.

Each pull request gets a directory under
<data_dir>/repos/<owner>/<name>/<pull number>; all of its workspaces live
inside it, so deleting that directory clears every workspace at once.
"""

import logging
import shutil
from abc import ABC, abstractmethod
from pathlib import Path

from prkeeper.models import PullRequest, Repo

REPOS_DIR = "repos"

LOG = logging.getLogger("prkeeper.workspace")


class WorkspaceManager(ABC):
    """Owns on-disk state for pull requests."""

    @abstractmethod
    def delete(self, repo: Repo, pull: PullRequest) -> None:
        """Remove all state for the pull request across every workspace.

        Must succeed when nothing is there.
        """


class DirectoryWorkspaceManager(WorkspaceManager):
    """Workspace manager rooted at a data directory."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)

    def pull_dir(self, repo: Repo, pull: PullRequest) -> Path:
        """Directory holding every workspace of the pull request."""
        return self._data_dir / REPOS_DIR / repo.owner / repo.name / str(pull.number)

    def delete(self, repo: Repo, pull: PullRequest) -> None:
        path = self.pull_dir(repo, pull)
        if not path.exists():
            LOG.debug("No workspace state at %s", path)
            return
        shutil.rmtree(path)
        LOG.info("Deleted workspace state for %s#%s", repo.full_name, pull.number)
