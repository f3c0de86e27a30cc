"""Type definitions for the GDAX API client."""

import os
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

import httpx

Scalar = Union[str, int, float, bool]
QueryValue = Union[Scalar, List[Scalar], None]
QueryParams = Mapping[str, QueryValue]
Body = Mapping[str, Any]


@dataclass(frozen=True)
class Credentials:
    """API key triple issued by the exchange."""

    public_key: str
    private_key: str = field(repr=False)  # base64-encoded API secret
    passphrase: str = field(repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Optional["Credentials"]:
        """Load credentials from GDAX_API_KEY, GDAX_API_SECRET and GDAX_API_PASSPHRASE.

        Returns None when none of the variables is set.

        Raises:
            ValueError: If only some of the variables are set.
        """
        environ = os.environ if environ is None else environ
        names = ("GDAX_API_KEY", "GDAX_API_SECRET", "GDAX_API_PASSPHRASE")
        values = [environ.get(name) for name in names]

        if not any(values):
            return None
        if not all(values):
            missing = [name for name, value in zip(names, values) if not value]
            raise ValueError(f"Incomplete credentials, missing: {', '.join(missing)}")

        return cls(public_key=values[0], private_key=values[1], passphrase=values[2])


@dataclass(frozen=True)
class Signature:
    """Request signature and the timestamp it was computed for."""

    digest: str  # base64 HMAC-SHA256
    timestamp: float  # seconds since epoch


class GdaxError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class Unauthenticated(GdaxError):
    """A private endpoint was called on an agent without credentials."""

    def __init__(self, message: str = "api keys are required to access private endpoints"):
        super().__init__(message)


class InvalidCredentialFormat(GdaxError):
    """The API secret could not be base64-decoded."""


class TransportError(GdaxError):
    """The request failed without a usable response (connection, timeout, decoding)."""


class ApiError(GdaxError):
    """The server answered with a non-success status.

    ``reason`` is the most specific rejection available: the server's error
    field, else the decoded body, else the raw text, else the response.
    """

    def __init__(
        self,
        status_code: int,
        reason: Any,
        response: Optional[httpx.Response] = None,
    ):
        self.status_code = status_code
        self.reason = reason
        self.response = response
        super().__init__(f"ApiError({status_code}): {reason}")
