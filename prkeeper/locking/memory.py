"""In-process lock store.

Locks are keyed by (project path, workspace). Records live only as long as
the process; releasing a lock does not touch workspace or plan files.
"""

import logging
import threading
from typing import Dict, List, Tuple

from prkeeper.locking.base import LockConflict, LockStore
from prkeeper.models import LockRecord

LOG = logging.getLogger("prkeeper.locking.memory")


class MemoryLockStore(LockStore):
    """Thread-safe dict-backed lock store."""

    def __init__(self) -> None:
        self._mutex = threading.Lock()
        self._locks: Dict[Tuple[str, str], LockRecord] = {}
        # repo full name per key, so unlock_by_pull can filter by repo
        self._repos: Dict[Tuple[str, str], str] = {}

    def lock(self, repo_full_name: str, path: str, workspace: str, pull_number: int) -> LockRecord:
        """Lock path/workspace for the pull request.

        Locking again from the same pull request returns the existing record.
        Raises LockConflict if another pull request holds it.
        """
        record = LockRecord.for_project(repo_full_name, path, workspace, pull_number)
        key = (record.project_path, record.workspace)
        with self._mutex:
            held = self._locks.get(key)
            if held is not None:
                if held.pull_number != pull_number:
                    raise LockConflict(held)
                return held
            self._locks[key] = record
            self._repos[key] = repo_full_name
        LOG.info("Locked %s workspace %s for #%s", record.project_path, workspace, pull_number)
        return record

    def unlock(self, project_path: str, workspace: str) -> LockRecord | None:
        """Release one lock. Returns the record or None if it was not held."""
        key = (project_path, workspace)
        with self._mutex:
            self._repos.pop(key, None)
            record = self._locks.pop(key, None)
        if record is not None:
            LOG.info("Unlocked %s workspace %s", project_path, workspace)
        return record

    def unlock_by_pull(self, repo_full_name: str, pull_number: int) -> List[LockRecord]:
        with self._mutex:
            keys = [
                key
                for key, record in self._locks.items()
                if record.pull_number == pull_number and self._repos.get(key) == repo_full_name
            ]
            released = [self._locks.pop(key) for key in keys]
            for key in keys:
                self._repos.pop(key, None)
        LOG.debug("Released %d lock(s) for %s#%s", len(released), repo_full_name, pull_number)
        return released

    def list_locks(self) -> List[LockRecord]:
        """Current locks sorted by project path, then workspace."""
        with self._mutex:
            records = list(self._locks.values())
        return sorted(records, key=lambda r: (r.project_path, r.workspace))
