"""Pytest fixtures for pwnedcheck tests."""

import pytest
import structlog

from pwnedcheck.config import reset_settings

# SHA-1("test") = A94A8 + FE5CCB19BA61C4C0873D391E987982FBBD3
UNRELATED_BODY = """
FD8D510BFF2210462F26307C2143E990E6E:2
FDFAEE848356AD27F8FB494E5C1B11956C2:2
FF36DC7D3284A39991ADA90CAF20D1E3C0D:1
FFF983A91443AE72BD98E59ADAB93B31974:2
"""

MATCHING_BODY = """
FD8D510BFF2210462F26307C2143E990E6E:2
FDFAEE848356AD27F8FB494E5C1B11956C2:2
FE5CCB19BA61C4C0873D391E987982FBBD3:42
FF36DC7D3284A39991ADA90CAF20D1E3C0D:1
FFF983A91443AE72BD98E59ADAB93B31974:2
"""


class FakeFetcher:
    """TextFetcher double returning a canned body and recording URLs."""

    def __init__(self, body: str = "", error: Exception | None = None) -> None:
        self.body = body
        self.error = error
        self.urls: list[str] = []

    async def fetch_text(self, url: str) -> str:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture(autouse=True)
def reset_global_state(monkeypatch):
    """Reset settings, env and logging config around each test."""
    for name in (
        "PWNEDCHECK_API_BASE_URL",
        "PWNEDCHECK_TIMEOUT",
        "PWNEDCHECK_USER_AGENT",
        "PWNEDCHECK_ADD_PADDING",
        "PWNEDCHECK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()


@pytest.fixture
def unrelated_body() -> str:
    """Range response for A94A8 that doesn't list the 'test' suffix."""
    return UNRELATED_BODY


@pytest.fixture
def matching_body() -> str:
    """Range response for A94A8 listing the 'test' suffix 42 times."""
    return MATCHING_BODY


@pytest.fixture
def make_fetcher():
    """Factory for FakeFetcher instances."""
    return FakeFetcher
