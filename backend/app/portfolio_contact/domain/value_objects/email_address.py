"""EmailAddress value object for syntactically checked sender addresses."""

import re
from dataclasses import dataclass


# local@domain.tld with no whitespace or extra "@" in any part
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(value: str) -> bool:
    """Check whether a string has the ``x@y.z`` shape accepted by the contact form."""
    return _EMAIL_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True)
class EmailAddress:
    """Immutable value object representing a syntactically valid email address.

    Attributes:
        value: The email address string, stored verbatim.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate email format after initialization."""
        if not is_valid_email(self.value):
            raise ValueError(f"Invalid email address: {self.value}")

    def __str__(self) -> str:
        return self.value
