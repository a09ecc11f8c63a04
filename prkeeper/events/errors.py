"""Errors raised while cleaning up a closed pull request."""

from enum import Enum


class CleanupStage(str, Enum):
    """Cleanup step that failed."""

    WORKSPACE = "workspace"
    LOCKS = "locks"
    COMMENT = "comment"


class CleanupFailed(Exception):
    """Raised when a cleanup stage fails.

    Carries the stage and the collaborator error (also set as __cause__).
    """

    def __init__(self, stage: CleanupStage, cause: BaseException) -> None:
        super().__init__(f"cleanup failed at {stage.value}: {cause}")
        self.stage = stage
        self.cause = cause
