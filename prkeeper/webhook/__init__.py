"""Webhook server and handlers for Git platform events."""

from prkeeper.webhook.handlers import WebhookResult, handle_github_event
from prkeeper.webhook.server import make_webhook_server, run_webhook_server

__all__ = ["WebhookResult", "handle_github_event", "make_webhook_server", "run_webhook_server"]
