"""Pwned Passwords range API client.

Pwned Passwords exposes a k-anonymity range endpoint: the client sends
the first 5 hex characters of a password's SHA-1 digest and receives
every known digest suffix sharing that prefix, with occurrence counts.

API Documentation: https://haveibeenpwned.com/API/v3#PwnedPasswords
No API key or rate limit applies to the range endpoint.
"""

import re
from typing import TYPE_CHECKING

import httpx
import structlog
from pydantic import BaseModel, Field

from pwnedcheck import __version__
from pwnedcheck.clients.base import TextFetcher
from pwnedcheck.exceptions import ParseError, TransportError
from pwnedcheck.hashing import PREFIX_LENGTH

if TYPE_CHECKING:
    from pwnedcheck.config import Settings

logger = structlog.get_logger(__name__)

_PREFIX_RE = re.compile(rf"[0-9A-F]{{{PREFIX_LENGTH}}}")


class PwnedPasswordsConfig(BaseModel):
    """Configuration for the Pwned Passwords range client."""

    base_url: str = Field(
        default="https://api.pwnedpasswords.com",
        description="Range API base URL",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    user_agent: str = Field(
        default=f"pwnedcheck/{__version__}",
        description="User-Agent header sent with each query",
    )
    add_padding: bool = Field(
        default=True,
        description="Ask the service to pad responses with zero-count decoys",
    )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PwnedPasswordsConfig":
        """Build client configuration from global settings."""
        return cls(
            base_url=settings.api_base_url,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            add_padding=settings.add_padding,
        )


def build_range_url(base_url: str, prefix: str) -> str:
    """Build the range query URL for a digest prefix.

    Args:
        base_url: API base URL (trailing slash optional)
        prefix: 5-character hex digest prefix

    Returns:
        URL of the form `<base_url>/range/<PREFIX>`

    Raises:
        ParseError: If the base URL is empty or the prefix isn't 5 hex chars
    """
    base = base_url.strip().rstrip("/")
    if not base:
        raise ParseError("Range API base URL is empty")

    normalized = prefix.upper()
    if not _PREFIX_RE.fullmatch(normalized):
        raise ParseError(
            "Digest prefix must be 5 hexadecimal characters",
            prefix_length=len(prefix),
        )
    return f"{base}/range/{normalized}"


class HttpxTextFetcher:
    """TextFetcher backed by httpx.

    A fresh AsyncClient is opened and closed for every fetch unless one
    is injected, in which case the caller owns its lifetime.

    Example:
        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport) as http:
            fetcher = HttpxTextFetcher(config, client=http)
    """

    def __init__(
        self,
        config: PwnedPasswordsConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._client = client

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "text/plain",
        }
        if self.config.add_padding:
            headers["Add-Padding"] = "true"
        return headers

    async def fetch_text(self, url: str) -> str:
        """Fetch a URL and return its body.

        Raises:
            TransportError: On connection, timeout, read or status failure
        """
        if self._client is not None:
            return await self._get_text(self._client, url)

        async with httpx.AsyncClient(timeout=httpx.Timeout(self.config.timeout)) as client:
            return await self._get_text(client, url)

    async def _get_text(self, client: httpx.AsyncClient, url: str) -> str:
        try:
            response = await client.get(url, headers=self._headers())
            response.raise_for_status()
            return response.text

        except httpx.HTTPStatusError as e:
            raise TransportError(
                "Pwned Passwords request failed",
                url=url,
                status_code=e.response.status_code,
                detail=str(e),
            ) from e

        except httpx.RequestError as e:
            raise TransportError(
                "Failed to connect to Pwned Passwords",
                url=url,
                detail=str(e),
            ) from e


class RangeClient:
    """Client for the Pwned Passwords range endpoint.

    Performs exactly one fetch per query, with no retries or caching.

    Example:
        client = RangeClient(PwnedPasswordsConfig())
        body = await client.fetch_range("A94A8")
    """

    def __init__(
        self,
        config: PwnedPasswordsConfig | None = None,
        fetcher: TextFetcher | None = None,
    ) -> None:
        """Initialize range client.

        Args:
            config: Client configuration (defaults to the public API)
            fetcher: Transport override; defaults to HttpxTextFetcher
        """
        self.config = config or PwnedPasswordsConfig()
        self.fetcher: TextFetcher = fetcher or HttpxTextFetcher(self.config)

    async def fetch_range(self, prefix: str) -> str:
        """Fetch all digest suffixes sharing a prefix.

        Args:
            prefix: 5-character hex digest prefix

        Returns:
            Raw text body of the range response

        Raises:
            ParseError: If the prefix can't form a valid query
            TransportError: If the request fails
        """
        url = build_range_url(self.config.base_url, prefix)
        logger.debug("Querying Pwned Passwords range", prefix=prefix.upper())
        return await self.fetcher.fetch_text(url)
