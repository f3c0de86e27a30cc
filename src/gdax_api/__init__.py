"""gdax_api - Async client for the GDAX REST API.

Public market data works without keys; private endpoints are signed with
HMAC-SHA256 once the client is upgraded with API credentials.
"""

from .agent import RequestAgent
from .client import GdaxClient
from .config import DEFAULT_BASE_URL, SANDBOX_BASE_URL, AgentConfig
from .query import encode_query
from .signing import build_prehash, sign_message
from .types import (
    ApiError,
    Credentials,
    GdaxError,
    InvalidCredentialFormat,
    Signature,
    TransportError,
    Unauthenticated,
)

__version__ = "0.1.0"
__all__ = [
    # Clients
    "GdaxClient",
    "RequestAgent",
    # Configuration
    "AgentConfig",
    "DEFAULT_BASE_URL",
    "SANDBOX_BASE_URL",
    # Types
    "Credentials",
    "Signature",
    "GdaxError",
    "Unauthenticated",
    "InvalidCredentialFormat",
    "TransportError",
    "ApiError",
    # Signing utilities
    "sign_message",
    "build_prehash",
    "encode_query",
]
