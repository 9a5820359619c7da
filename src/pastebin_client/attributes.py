"""Paste attributes with a fixed wire encoding."""

from enum import Enum
from typing import Self


class VisibilityLevel(Enum):
    """Whether a paste is listed publicly or only reachable through its URL."""

    PUBLIC = "0"
    UNLISTED = "1"

    def encode(self: Self) -> str:
        """Return the value sent as `api_paste_private`."""
        return self.value

    @classmethod
    def parse(cls, value: str) -> Self | None:
        """
        Parse a visibility level from free-form input, ignoring case.

        Both the names (`public`, `unlisted`) and the wire codes (`0`, `1`) are accepted.
        Return None if `value` matches neither.
        """
        lowered = value.lower()
        for level in cls:
            if lowered in (level.name.lower(), level.value):
                return level
        return None

    def __str__(self: Self) -> str:
        return self.value


class ExpirationDate(Enum):
    """How long the service keeps a paste before it expires."""

    NEVER = "N"
    TEN_MINUTES = "10M"
    ONE_HOUR = "1H"
    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    TWO_WEEKS = "2W"
    ONE_MONTH = "1M"
    SIX_MONTH = "6M"
    ONE_YEAR = "1Y"

    def encode(self: Self) -> str:
        """Return the value sent as `api_paste_expire_date`."""
        return self.value

    @classmethod
    def parse(cls, value: str) -> Self | None:
        """Parse an expiration date from its short code, ignoring case. Return None for anything else."""
        lowered = value.lower()
        for expiration in cls:
            if lowered == expiration.value.lower():
                return expiration
        return None

    def __str__(self: Self) -> str:
        return self.value
