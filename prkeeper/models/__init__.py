"""Data models for repositories, pull requests, locks and comments (Pydantic)."""

from prkeeper.models.comment import Comment
from prkeeper.models.lock import LockRecord
from prkeeper.models.pull_request import PullRequest
from prkeeper.models.repo import Repo, VCSHost

__all__ = ["Comment", "LockRecord", "PullRequest", "Repo", "VCSHost"]
