"""Base protocols for pwnedcheck transport implementations.

Defines the interface for pluggable HTTP transports.
"""

from typing import Protocol


class TextFetcher(Protocol):
    """Protocol for fetching the text body of a URL.

    Any object implementing this protocol can be used with RangeClient.
    This keeps the network exchange swappable:
    - HttpxTextFetcher - default, backed by httpx
    - Test doubles returning canned range responses
    """

    async def fetch_text(self, url: str) -> str:
        """Fetch the full text body of a successful GET response.

        Args:
            url: Absolute URL to fetch

        Returns:
            Decoded response body

        Raises:
            TransportError: If the request fails or the status is not 2xx
        """
        ...
