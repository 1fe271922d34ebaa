"""pwnedcheck data source clients."""

from pwnedcheck.clients.base import TextFetcher
from pwnedcheck.clients.pwned_passwords import (
    HttpxTextFetcher,
    PwnedPasswordsConfig,
    RangeClient,
    build_range_url,
)

__all__ = [
    # Base protocols
    "TextFetcher",
    # Pwned Passwords
    "HttpxTextFetcher",
    "PwnedPasswordsConfig",
    "RangeClient",
    "build_range_url",
]
