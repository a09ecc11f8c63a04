"""Project lock record (project path + workspace)."""

from pydantic import BaseModel, Field


class LockRecord(BaseModel):
    """Lock on a (project path, workspace) pair.

    project_path is normally "<repo full name>/<path inside repo>".
    """

    project_path: str
    workspace: str = Field(min_length=1)
    pull_number: int | None = None

    @classmethod
    def for_project(
        cls,
        repo_full_name: str,
        path: str,
        workspace: str,
        pull_number: int | None = None,
    ) -> "LockRecord":
        """Build a record whose project_path is repo_full_name/path."""
        return cls(
            project_path=f"{repo_full_name}/{path}",
            workspace=workspace,
            pull_number=pull_number,
        )
