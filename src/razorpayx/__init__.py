"""
Public facade for the RazorpayX client package.

The most useful pieces are re-exported so integrators can write
``from razorpayx import ...`` without navigating the package.
"""

from ._version import __version__
from .api import RazorpayxClient, create_client
from .core import (
    ACCOUNT_HEADER,
    ALLOWED_HEADERS,
    ApiError,
    ApiErrorDetail,
    ApiResponse,
    ClientConfig,
    Collection,
    ConfigurationError,
    HttpClient,
    RazorpayxError,
    TransactionMode,
    TransactionStatus,
    ValidationError,
    get_date_in_secs,
    is_defined,
    load_client_config,
    normalize_date,
    validate_webhook_signature,
)
from .resources import AccountType, ContactType, PayoutLinkStatus, PayoutPurpose

__all__ = (
    "ACCOUNT_HEADER",
    "ALLOWED_HEADERS",
    "AccountType",
    "ApiError",
    "ApiErrorDetail",
    "ApiResponse",
    "ClientConfig",
    "Collection",
    "ConfigurationError",
    "ContactType",
    "HttpClient",
    "PayoutLinkStatus",
    "PayoutPurpose",
    "RazorpayxClient",
    "RazorpayxError",
    "TransactionMode",
    "TransactionStatus",
    "ValidationError",
    "__version__",
    "create_client",
    "get_date_in_secs",
    "is_defined",
    "load_client_config",
    "normalize_date",
    "validate_webhook_signature",
)
