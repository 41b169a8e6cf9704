"""HTTP client wrappers for the Adamik API."""

from .client import AdamikApiClient, ApiMethod, ApiResponse, default_client

__all__ = [
    "AdamikApiClient",
    "ApiMethod",
    "ApiResponse",
    "default_client",
]
