"""GitHub webhook signature check (X-Hub-Signature-256)."""

import hashlib
import hmac

SIGNATURE_HEADER = "X-Hub-Signature-256"
_PREFIX = "sha256="


def verify_signature(secret: str, body: bytes, signature: str | None) -> bool:
    """Return True if signature is "sha256=<hex HMAC of body with secret>"."""
    if not signature or not signature.startswith(_PREFIX):
        return False
    expected = hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(expected, signature[len(_PREFIX) :])
