"""Repository identity on a hosting platform."""

from enum import Enum

from pydantic import BaseModel


class VCSHost(str, Enum):
    """Hosting platform type; selects the client that talks to its API."""

    GITHUB = "github"
    GITLAB = "gitlab"


class Repo(BaseModel):
    """Repository identified by full name (owner/name) and hostname."""

    full_name: str
    owner: str
    name: str
    hostname: str

    @classmethod
    def from_full_name(cls, full_name: str, hostname: str) -> "Repo":
        """Build Repo from "owner/name".

        Raises ValueError when full_name is not exactly two non-empty
        parts separated by "/".
        """
        parts = full_name.split("/")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Invalid repo full name: {full_name!r}")
        owner, name = parts
        return cls(full_name=full_name, owner=owner, name=name, hostname=hostname)
