"""Password breach check pipeline.

Ties together digest, range query, suffix match and classification:

    digest_and_split -> RangeClient.fetch_range -> find_entry -> classify

Each check is independent; nothing is cached or retried, and the
password is never logged or kept beyond the digest computation.
"""

import asyncio

import structlog

from pwnedcheck.classifier import classify
from pwnedcheck.clients.base import TextFetcher
from pwnedcheck.clients.pwned_passwords import PwnedPasswordsConfig, RangeClient
from pwnedcheck.hashing import digest_and_split
from pwnedcheck.matcher import find_entry
from pwnedcheck.models import CheckResult

logger = structlog.get_logger(__name__)


class PasswordChecker:
    """Checks passwords against the Pwned Passwords corpus.

    Holds only configuration, so one instance can serve concurrent
    checks.

    Example:
        checker = PasswordChecker()
        result = await checker.check("hunter2")
        if result.compromised:
            print(f"Seen {result.count} times")
    """

    def __init__(
        self,
        config: PwnedPasswordsConfig | None = None,
        fetcher: TextFetcher | None = None,
    ) -> None:
        """Initialize the checker.

        Args:
            config: Range client configuration (defaults to the public API)
            fetcher: Transport override, e.g. a test double
        """
        self.client = RangeClient(config, fetcher)

    async def check(self, password: str | bytes) -> CheckResult:
        """Check whether a password appears in the breach corpus.

        Args:
            password: Password to check

        Returns:
            CheckResult, compromised with a count if the password was found

        Raises:
            TransportError: If the range query fails
            ParseError: If the matching response line is malformed
        """
        prefix, suffix = digest_and_split(password)

        body = await self.client.fetch_range(prefix)
        result = classify(find_entry(body, suffix))

        logger.debug(
            "Password check complete",
            prefix=prefix,
            status=result.status.value,
        )
        return result


async def check(
    password: str | bytes,
    *,
    config: PwnedPasswordsConfig | None = None,
    fetcher: TextFetcher | None = None,
) -> CheckResult:
    """Check a single password with a one-off checker."""
    return await PasswordChecker(config, fetcher).check(password)


def check_sync(
    password: str | bytes,
    *,
    config: PwnedPasswordsConfig | None = None,
    fetcher: TextFetcher | None = None,
) -> CheckResult:
    """Synchronous wrapper for check().

    Must not be called from a running event loop.
    """
    return asyncio.run(check(password, config=config, fetcher=fetcher))
