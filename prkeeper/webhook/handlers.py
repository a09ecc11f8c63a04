"""Handle GitHub webhook events.

Every event is checked against the repo whitelist before anything else.
pull_request closed (merged or not) runs the pull cleaner.
"""

import logging
from typing import Any, Dict
from urllib.parse import urlparse

from pydantic import BaseModel

from prkeeper.config import AppConfig
from prkeeper.events import CleanupFailed, PullCleaner, RepoWhitelist
from prkeeper.models import PullRequest, Repo, VCSHost

LOG = logging.getLogger("prkeeper.webhook.handlers")


class WebhookResult(BaseModel):
    """HTTP status and message returned to the webhook sender."""

    status_code: int = 200
    message: str = ""


def _object(value: Any) -> Dict[str, Any]:
    """value if it is a JSON object, else an empty dict."""
    return value if isinstance(value, dict) else {}


def _hostname_from_payload(repo_payload: Dict[str, Any], default: str) -> str:
    """Host part of repository.html_url, or default when missing."""
    html_url = str(repo_payload.get("html_url") or "")
    try:
        hostname = urlparse(html_url).hostname if html_url else None
    except ValueError:
        hostname = None
    return hostname or default


def _pull_from_payload(pull: Dict[str, Any]) -> PullRequest:
    head = _object(pull.get("head"))
    base = _object(pull.get("base"))
    user = _object(pull.get("user"))
    return PullRequest(
        number=int(pull["number"]),
        author=user.get("login", ""),
        head_branch=head.get("ref", ""),
        base_branch=base.get("ref", ""),
        state=pull.get("state", "closed"),
        html_url=pull.get("html_url"),
    )


def _respond(log: logging.Logger, level: int, status_code: int, message: str) -> WebhookResult:
    log.log(level, message)
    return WebhookResult(status_code=status_code, message=message)


def handle_github_event(
    config: AppConfig,
    event: str,
    payload: Dict[str, Any],
    cleaner: PullCleaner,
    log: logging.Logger | None = None,
) -> WebhookResult:
    """Handle a GitHub webhook event.

    Supported events:
    - pull_request (action=closed): delete workspaces and locks of the pull request.
    Events from repos not in config.bot.repo_whitelist are rejected with 403.
    """
    logger = log or LOG
    if event != "pull_request":
        return _respond(logger, logging.DEBUG, 200, f"Ignoring unsupported event {event!r}")

    repo_payload = _object(payload.get("repository"))
    full_name = str(repo_payload.get("full_name") or "")
    hostname = _hostname_from_payload(repo_payload, config.github.hostname)
    try:
        repo = Repo.from_full_name(full_name, hostname)
    except ValueError as e:
        return _respond(logger, logging.WARNING, 400, f"Invalid pull request event: {e}")

    whitelist = RepoWhitelist(whitelist=config.bot.repo_whitelist)
    if not whitelist.is_whitelisted(repo.full_name, repo.hostname):
        return _respond(logger, logging.WARNING, 403, "Ignoring pull request event from non-whitelisted repo")

    action = payload.get("action")
    if action != "closed":
        return _respond(logger, logging.DEBUG, 200, f"Ignoring pull request event with action {action!r}")

    pull_payload = _object(payload.get("pull_request"))
    if pull_payload.get("number") is None:
        return _respond(logger, logging.WARNING, 400, "Invalid pull request event: missing pull_request.number")
    try:
        pull = _pull_from_payload(pull_payload)
    except (TypeError, ValueError) as e:
        return _respond(logger, logging.WARNING, 400, f"Invalid pull request event: {e}")

    try:
        cleaner.clean_up_pull(repo, pull, VCSHost.GITHUB)
    except CleanupFailed as e:
        logger.error(
            "Cleanup of %s#%s failed at stage %s: %s",
            repo.full_name,
            pull.number,
            e.stage.value,
            e.cause,
        )
        return WebhookResult(status_code=503, message=f"Error cleaning pull request ({e.stage.value}): {e.cause}")
    return _respond(logger, logging.INFO, 200, "Pull request cleaned successfully")
