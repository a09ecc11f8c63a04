"""Abstract lock store interface.

The cleanup executor depends on LockStore, not on a concrete backend, so
backends (in-process, database, key-value store) are swappable.
"""

from abc import ABC, abstractmethod
from typing import List

from prkeeper.models import LockRecord


class LockConflict(Exception):
    """Raised when a project/workspace is already locked by another pull request."""

    def __init__(self, held: LockRecord) -> None:
        super().__init__(
            f"{held.project_path} workspace {held.workspace} is locked by pull request #{held.pull_number}"
        )
        self.held = held


class LockStore(ABC):
    """Holds locks on (project path, workspace) pairs for pull requests."""

    @abstractmethod
    def unlock_by_pull(self, repo_full_name: str, pull_number: int) -> List[LockRecord]:
        """Release every lock held by the pull request.

        Returns the released records; an empty list (not an error) when the
        pull request held none.
        """
