"""
Verification of webhook payloads sent by RazorpayX.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Optional

from .errors import ValidationError
from .utils import is_defined

__all__ = ["compute_webhook_signature", "validate_webhook_signature"]


def compute_webhook_signature(body: str, secret: str) -> str:
    return hmac.new(
        secret.encode("utf-8"),
        body.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def validate_webhook_signature(
    body: Optional[str],
    signature: Optional[str],
    secret: Optional[str],
) -> bool:
    """
    Check the ``X-Razorpay-Signature`` header against the raw request body.

    ``body`` must be the exact bytes received (decoded as UTF-8), not a
    re-serialised JSON document. Empty strings are accepted; ``None`` is not.
    """
    if not is_defined(body) or not is_defined(signature) or not is_defined(secret):
        raise ValidationError(
            "Invalid Parameters: Please give request body, signature sent in "
            "X-Razorpay-Signature header and webhook secret from dashboard as parameters"
        )

    expected = compute_webhook_signature(body, secret)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
