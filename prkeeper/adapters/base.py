"""Abstract base for Git platform clients."""

from abc import ABC, abstractmethod

from prkeeper.models import Repo, VCSHost


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class CommentPoster(ABC):
    """Posts notes to a pull request discussion thread."""

    @abstractmethod
    def create_comment(self, repo: Repo, pull_number: int, body: str, host: VCSHost) -> None:
        """Append a comment to the pull request."""
        ...
