"""Client proxy that routes calls to the client registered for a host."""

import logging
from typing import Dict

from prkeeper.adapters.base import CommentPoster, GitPlatformError
from prkeeper.models import Repo, VCSHost

LOG = logging.getLogger("prkeeper.adapters.proxy")


class ClientProxy(CommentPoster):
    """Dispatch to per-host clients (GitHub, GitLab)."""

    def __init__(self, clients: Dict[VCSHost, CommentPoster] | None = None) -> None:
        self._clients: Dict[VCSHost, CommentPoster] = dict(clients or {})

    def register(self, host: VCSHost, client: CommentPoster) -> None:
        """Set the client used for host (replaces any previous one)."""
        self._clients[host] = client

    def _client_for(self, host: VCSHost) -> CommentPoster:
        client = self._clients.get(host)
        if client is None:
            raise GitPlatformError(f"No client configured for host {host.value}")
        return client

    def create_comment(self, repo: Repo, pull_number: int, body: str, host: VCSHost) -> None:
        LOG.debug("Posting comment on %s#%s via %s", repo.full_name, pull_number, host.value)
        self._client_for(host).create_comment(repo, pull_number, body, host)
