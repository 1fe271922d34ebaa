"""pwnedcheck: k-anonymity password breach checks.

Checks passwords against the Pwned Passwords corpus while sending only
the first 5 characters of their SHA-1 digest over the network.
"""

__version__ = "0.1.0"

from pwnedcheck.checker import PasswordChecker, check, check_sync
from pwnedcheck.exceptions import (
    CompromisedError,
    ParseError,
    PwnedCheckError,
    TransportError,
)
from pwnedcheck.models import CheckResult, CheckStatus

__all__ = [
    "__version__",
    "CheckResult",
    "CheckStatus",
    "CompromisedError",
    "ParseError",
    "PasswordChecker",
    "PwnedCheckError",
    "TransportError",
    "check",
    "check_sync",
]
