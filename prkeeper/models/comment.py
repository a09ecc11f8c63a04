"""Comment on a pull request."""

from datetime import datetime

from pydantic import BaseModel


class Comment(BaseModel):
    """Comment on a pull request discussion thread."""

    id: int
    body: str
    author: str
    created_at: datetime
    updated_at: datetime | None = None
