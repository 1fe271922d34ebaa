"""SHA-1 digest computation for range queries.

The digest is rendered as 40 uppercase hex characters and split into
the 5-character prefix sent to the service and the 35-character
suffix that is only ever compared locally.
"""

import hashlib
from typing import NamedTuple

PREFIX_LENGTH = 5
SUFFIX_LENGTH = 35


class DigestSplit(NamedTuple):
    """A password digest split for a k-anonymity range query."""

    prefix: str
    suffix: str

    @property
    def digest(self) -> str:
        """Full 40-character uppercase hex digest."""
        return self.prefix + self.suffix


def digest_and_split(password: str | bytes) -> DigestSplit:
    """Hash a password and split the digest into prefix and suffix.

    The password is hashed exactly as given: strings are encoded as
    UTF-8 with no case folding or Unicode normalization. Lone surrogates
    are encoded as-is so every string has a digest.

    Args:
        password: Password to hash (may be empty)

    Returns:
        DigestSplit with 5-char prefix and 35-char suffix
    """
    if isinstance(password, str):
        data = password.encode("utf-8", "surrogatepass")
    else:
        data = password
    hex_digest = hashlib.sha1(data).hexdigest().upper()  # noqa: S324
    return DigestSplit(hex_digest[:PREFIX_LENGTH], hex_digest[PREFIX_LENGTH:])
