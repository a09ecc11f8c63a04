"""GitHub API adapter."""

from datetime import datetime
from typing import Any, Dict

import requests

from prkeeper.adapters.base import CommentPoster, GitPlatformError
from prkeeper.models import Comment, Repo, VCSHost


def _parse_iso(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _comment_from_api(data: Dict[str, Any]) -> Comment:
    user = data.get("user") or {}
    created = _parse_iso(data["created_at"])
    updated = _parse_iso(data.get("updated_at") or data["created_at"])
    return Comment(
        id=data["id"],
        body=data.get("body") or "",
        author=user.get("login", ""),
        created_at=created,
        updated_at=updated,
    )


class GitHubAdapter(CommentPoster):
    """GitHub API implementation."""

    def __init__(self, token: str, api_url: str = "https://api.github.com") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _request(
        self,
        method: str,
        path: str,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        try:
            resp = self._session.request(method, url, json=json, timeout=30)
        except requests.RequestException as e:
            raise GitPlatformError(f"{method} {path} failed: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except ValueError:
                pass
            raise GitPlatformError(f"{resp.status_code}: {msg}")
        return resp

    def post_comment(self, repo_full_name: str, pull_number: int, body: str) -> Comment:
        """Post a comment on the pull request and return it."""
        resp = self._request(
            "POST",
            f"/repos/{repo_full_name}/issues/{pull_number}/comments",
            json={"body": body},
        )
        return _comment_from_api(resp.json())

    def create_comment(self, repo: Repo, pull_number: int, body: str, host: VCSHost) -> None:
        self.post_comment(repo.full_name, pull_number, body)
