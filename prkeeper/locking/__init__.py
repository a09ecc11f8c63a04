"""Project locks: store interface and in-process implementation."""

from prkeeper.locking.base import LockConflict, LockStore
from prkeeper.locking.memory import MemoryLockStore

__all__ = ["LockConflict", "LockStore", "MemoryLockStore"]
