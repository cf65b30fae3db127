"""
Core primitives shared by every RazorpayX resource.
"""

from .client import ApiResponse, FailureKind, HttpClient, TransportFailure
from .config import (
    ACCOUNT_HEADER,
    ALLOWED_HEADERS,
    ClientConfig,
    filter_headers,
    load_client_config,
)
from .environment import ClientEnvironment, build_environment
from .errors import (
    ApiError,
    ApiErrorDetail,
    ConfigurationError,
    RazorpayxError,
    ValidationError,
)
from .types import Collection, Notes, TransactionMode, TransactionStatus
from .utils import get_date_in_secs, is_defined, is_non_null_object, normalize_date
from .webhooks import compute_webhook_signature, validate_webhook_signature

__all__ = [
    "ACCOUNT_HEADER",
    "ALLOWED_HEADERS",
    "ApiError",
    "ApiErrorDetail",
    "ApiResponse",
    "ClientConfig",
    "ClientEnvironment",
    "Collection",
    "ConfigurationError",
    "FailureKind",
    "HttpClient",
    "Notes",
    "RazorpayxError",
    "TransactionMode",
    "TransactionStatus",
    "TransportFailure",
    "ValidationError",
    "build_environment",
    "compute_webhook_signature",
    "filter_headers",
    "get_date_in_secs",
    "is_defined",
    "is_non_null_object",
    "load_client_config",
    "normalize_date",
    "validate_webhook_signature",
]
