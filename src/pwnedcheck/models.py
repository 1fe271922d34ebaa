"""Pydantic models for range responses and check results."""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from pwnedcheck.exceptions import CompromisedError


class CheckStatus(str, Enum):
    """Outcome of a password check."""

    NOT_COMPROMISED = "not_compromised"
    COMPROMISED = "compromised"


class RangeEntry(BaseModel):
    """A single `SUFFIX:COUNT` line from a range response."""

    suffix: Annotated[
        str,
        Field(
            min_length=35,
            max_length=35,
            pattern=r"^[0-9A-F]{35}$",
            description="Uppercase hex digest suffix",
        ),
    ]
    count: Annotated[int, Field(ge=0, description="Occurrences in the breach corpus")]

    model_config = {"frozen": True}


class CheckResult(BaseModel):
    """Caller-facing result of a password check."""

    status: Annotated[CheckStatus, Field(description="Check outcome")]
    count: Annotated[
        int,
        Field(default=0, ge=0, description="Times the password appears in breaches"),
    ]

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _count_matches_status(self) -> "CheckResult":
        """Compromised results carry a count of at least 1, clean ones 0."""
        if self.status == CheckStatus.COMPROMISED and self.count < 1:
            raise ValueError("compromised result requires count >= 1")
        if self.status == CheckStatus.NOT_COMPROMISED and self.count != 0:
            raise ValueError("not-compromised result must have count 0")
        return self

    @property
    def compromised(self) -> bool:
        """Check if the password was found in the breach corpus."""
        return self.status == CheckStatus.COMPROMISED

    def raise_for_compromise(self) -> None:
        """Raise CompromisedError if the password was found.

        Raises:
            CompromisedError: Carrying the occurrence count
        """
        if self.compromised:
            raise CompromisedError(self.count)
