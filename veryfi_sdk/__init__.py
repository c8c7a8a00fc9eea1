"""
Veryfi Python SDK.

Usage:
    from veryfi_sdk import Client

    client = Client(
        client_id="vrf...",
        client_secret="...",
        username="jane.doe",
        api_key="...",
    )
    document = client.process_document("receipt.jpg")
    print(document["vendor"]["name"], document["total"])
"""

from veryfi_sdk.client import AsyncClient, Client
from veryfi_sdk.config import DEFAULT_CATEGORIES, ClientConfig
from veryfi_sdk.errors import (
    AccessLimitReached,
    APIError,
    BadRequest,
    ConfigurationError,
    InternalError,
    NotFound,
    TransportError,
    UnauthorizedAccessToken,
    UnexpectedHTTPMethod,
    VeryfiClientError,
)
from veryfi_sdk.files import add_mime_type, check_mime_type
from veryfi_sdk.models import Document, LineItem, Vendor

__all__ = [
    "Client",
    "AsyncClient",
    "ClientConfig",
    "DEFAULT_CATEGORIES",
    "VeryfiClientError",
    "ConfigurationError",
    "TransportError",
    "APIError",
    "BadRequest",
    "UnauthorizedAccessToken",
    "NotFound",
    "UnexpectedHTTPMethod",
    "AccessLimitReached",
    "InternalError",
    "add_mime_type",
    "check_mime_type",
    "Document",
    "LineItem",
    "Vendor",
]

__version__ = "1.0.0"
