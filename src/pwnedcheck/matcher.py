"""Range response parsing and suffix matching.

A range response is plain text with one `SUFFIX:COUNT` line per digest
sharing the queried prefix. Lines that don't have that shape are
skipped; only a bad count on the line we are looking for is an error.
"""

import re
from collections.abc import Iterator

import structlog

from pwnedcheck.exceptions import ParseError
from pwnedcheck.hashing import SUFFIX_LENGTH
from pwnedcheck.models import RangeEntry

logger = structlog.get_logger(__name__)

# Counts must fit a signed 64-bit integer
MAX_COUNT = 2**63 - 1

_SUFFIX_RE = re.compile(rf"[0-9A-F]{{{SUFFIX_LENGTH}}}")
_COUNT_RE = re.compile(r"[0-9]+")


def _split_lines(body: str) -> Iterator[tuple[int, str, str]]:
    """Yield (line number, suffix field, count field) for suffix-shaped lines.

    Suffixes are upper-cased so matching does not depend on the
    service's hex case.
    """
    for lineno, raw_line in enumerate(body.split("\n"), start=1):
        line = raw_line.strip()
        if not line:
            continue

        suffix_field, sep, count_field = line.partition(":")
        if not sep:
            continue

        suffix_field = suffix_field.strip().upper()
        if not _SUFFIX_RE.fullmatch(suffix_field):
            continue

        yield lineno, suffix_field, count_field.strip()


def _parse_count(count_field: str) -> int | None:
    """Parse a count field, returning None if it isn't a valid count."""
    if not _COUNT_RE.fullmatch(count_field):
        return None
    count = int(count_field)
    if count > MAX_COUNT:
        return None
    return count


def parse_range_response(body: str) -> Iterator[RangeEntry]:
    """Parse every well-formed entry of a range response.

    Args:
        body: Raw text body returned for a prefix query

    Yields:
        RangeEntry for each `SUFFIX:COUNT` line; malformed lines are skipped
    """
    for _, suffix, count_field in _split_lines(body):
        count = _parse_count(count_field)
        if count is None:
            continue
        yield RangeEntry(suffix=suffix, count=count)


def find_entry(body: str, suffix: str) -> int | None:
    """Find the occurrence count for a digest suffix in a range response.

    Comparison is case-insensitive and exact-length. The first matching
    line wins.

    Args:
        body: Raw text body returned for a prefix query
        suffix: 35-character digest suffix to look for

    Returns:
        Occurrence count if the suffix is listed, None otherwise

    Raises:
        ParseError: If the matching line's count is not a valid integer
    """
    wanted = suffix.upper()
    scanned = 0

    for lineno, candidate, count_field in _split_lines(body):
        scanned += 1
        if candidate != wanted:
            continue

        count = _parse_count(count_field)
        if count is None:
            raise ParseError(
                "Invalid occurrence count in range response",
                line=lineno,
                count=count_field,
            )
        logger.debug("Suffix matched in range response", entries_scanned=scanned)
        return count

    logger.debug("Suffix not found in range response", entries_scanned=scanned)
    return None
