"""Webhook HTTP server for Git platform events.

Serves a health check and the GitHub webhook path. When a webhook secret
is configured, POST bodies must carry a valid X-Hub-Signature-256.
"""

import json
import logging
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any
from urllib.parse import parse_qs

from prkeeper.config import AppConfig
from prkeeper.events import PullCleaner
from prkeeper.logging import ACCESS_LOGGER
from prkeeper.webhook.handlers import WebhookResult, handle_github_event
from prkeeper.webhook.signature import SIGNATURE_HEADER, verify_signature

LOG = logging.getLogger("prkeeper.webhook")
# Per-request access lines; enabled with logging.access_log
ACCESS_LOG = logging.getLogger(ACCESS_LOGGER)


class WebhookHandler(BaseHTTPRequestHandler):
    """Handle GET /health and POST /webhook/github."""

    config: AppConfig
    cleaner: PullCleaner

    def do_GET(self) -> None:
        if self.path == "/health" or self.path == "/":
            self._write_json(200, {"status": "ok", "service": "prkeeper"})
            return
        self.send_response(404)
        self.end_headers()

    def do_POST(self) -> None:
        if self.path == self.config.github.webhook_path:
            self._handle_github_webhook()
            return
        self.send_response(404)
        self.end_headers()

    def _parse_webhook_body(self, body: bytes) -> dict:
        """Parse webhook body as JSON.

        Supports raw JSON and application/x-www-form-urlencoded (payload=...).
        """
        if not body:
            return {}
        content_type = self.headers.get("Content-Type", "")
        if "application/x-www-form-urlencoded" in content_type:
            parsed = parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)
            raw = (parsed.get("payload") or [None])[0]
            if raw is None:
                return {}
            return json.loads(raw)
        return json.loads(body.decode("utf-8", errors="replace"))

    def _handle_github_webhook(self) -> None:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length) if length else b""
        secret = self.config.webhook_secret_resolved
        if secret and not verify_signature(secret, body, self.headers.get(SIGNATURE_HEADER)):
            LOG.warning("Rejected webhook with invalid signature")
            self._write_result(WebhookResult(status_code=400, message="Invalid webhook signature"))
            return
        try:
            payload = self._parse_webhook_body(body)
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            LOG.warning("Invalid webhook JSON (%d bytes)", len(body))
            self._write_result(WebhookResult(status_code=400, message="Invalid JSON payload"))
            return
        event = self.headers.get("X-GitHub-Event", "")
        LOG.info("Webhook event: %s", event)
        result = handle_github_event(self.config, event, payload, self.cleaner)
        self._write_result(result)

    def _write_result(self, result: WebhookResult) -> None:
        self._write_json(result.status_code, {"message": result.message})

    def _write_json(self, status_code: int, data: dict) -> None:
        self.send_response(status_code)
        self.send_header("Content-Type", "application/json")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def log_message(self, format: str, *args: Any) -> None:
        ACCESS_LOG.info(format, *args)


def make_webhook_server(config: AppConfig, cleaner: PullCleaner) -> HTTPServer:
    """Build (but do not start) the HTTP server bound to config.webhook."""
    handler = type(
        "BoundWebhookHandler",
        (WebhookHandler,),
        {"config": config, "cleaner": cleaner},
    )
    return HTTPServer((config.webhook.host, config.webhook.port), handler)


def run_webhook_server(config: AppConfig, cleaner: PullCleaner) -> None:
    """Run HTTP server for webhooks and health check."""
    server = make_webhook_server(config, cleaner)
    LOG.info("Webhook server listening on %s:%s", config.webhook.host, config.webhook.port)
    server.serve_forever()
