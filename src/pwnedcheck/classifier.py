"""Classification of a suffix match into a check result."""

from pwnedcheck.models import CheckResult, CheckStatus


def classify(count: int | None) -> CheckResult:
    """Turn a range lookup outcome into a caller-facing result.

    A missing entry and a zero count (a padding decoy) both mean the
    password was not found.

    Args:
        count: Occurrence count from the matcher, or None if no match

    Returns:
        CheckResult, compromised only when count >= 1
    """
    if count is None or count < 1:
        return CheckResult(status=CheckStatus.NOT_COMPROMISED)
    return CheckResult(status=CheckStatus.COMPROMISED, count=count)
