"""Configuration for the GDAX request agent."""

from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import urlparse

DEFAULT_BASE_URL = "https://api.gdax.com"
SANDBOX_BASE_URL = "https://api-public.sandbox.gdax.com"
DEFAULT_TIMEOUT = 10.0  # seconds
DEFAULT_USER_AGENT = "GDAX API Client (gdax-api python package)"


@dataclass(frozen=True)
class AgentConfig:
    """Connection settings shared by every request an agent sends."""

    base_url: Optional[str] = None
    sandbox: bool = False
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def resolved_base_url(self) -> str:
        """Return the API root, defaulting to the production or sandbox URL.

        Raises:
            ValueError: If base_url carries a path; signatures cover the
                endpoint path only, so the root must be a bare origin.
        """
        if self.base_url:
            base_url = self.base_url.rstrip("/")
            if urlparse(base_url).path:
                raise ValueError(f"base_url must not include a path: {self.base_url!r}")
            return base_url
        return SANDBOX_BASE_URL if self.sandbox else DEFAULT_BASE_URL

    def default_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
