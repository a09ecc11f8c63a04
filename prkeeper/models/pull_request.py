"""Pull request (or merge request) model."""

from pydantic import BaseModel


class PullRequest(BaseModel):
    """Pull request (or merge request)."""

    number: int
    author: str = ""
    head_branch: str = ""
    base_branch: str = ""
    state: str = "open"
    html_url: str | None = None
