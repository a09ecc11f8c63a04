"""Repository whitelist: which repos may use the service.

The whitelist is a comma-separated list of patterns matched against
"<hostname>/<owner>/<repo>":

- "*" matches every repo
- "github.com/owner/*" matches by prefix (pattern without the trailing "*")
- anything else must match exactly

Patterns are compared as-is; whitespace around commas is not stripped.
"""

from pydantic import BaseModel

WILDCARD = "*"


def _matches(pattern: str, candidate: str) -> bool:
    if pattern == WILDCARD:
        return True
    if pattern.endswith(WILDCARD):
        return candidate.startswith(pattern[: -len(WILDCARD)])
    return candidate == pattern


def is_allowed(whitelist: str, repo_full_name: str, hostname: str) -> bool:
    """Return True if hostname/repo_full_name matches any whitelist pattern."""
    candidate = f"{hostname}/{repo_full_name}"
    return any(_matches(pattern, candidate) for pattern in whitelist.split(","))


class RepoWhitelist(BaseModel):
    """Whitelist string from config."""

    whitelist: str = ""

    def is_whitelisted(self, repo_full_name: str, hostname: str) -> bool:
        """Return True if the repo may use the service."""
        return is_allowed(self.whitelist, repo_full_name, hostname)
