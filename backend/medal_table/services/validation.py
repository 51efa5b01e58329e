"""
Input validation and coercion for medal data.

Medal counts arriving through display paths are untrusted and may be any
type. They are coerced into a small tagged result, ValidatedCount or
INVALID, instead of being passed around raw. Sort keys are checked
against MedalSortType either as a predicate or as a raising validator.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from medal_table.core.exceptions import InvalidSortTypeException
from medal_table.models.enums import MedalSortType

UNAVAILABLE_MARKER = "—"

SORT_TYPE_VALUES = tuple(member.value for member in MedalSortType)


@dataclass(frozen=True)
class ValidatedCount:
    value: int

    is_valid = True

    def value_or_zero(self) -> int:
        return self.value

    def display(self) -> str:
        return str(self.value)


class InvalidCount:
    """Marker for a medal count that failed validation."""

    is_valid = False
    value = None

    def value_or_zero(self) -> int:
        return 0

    def display(self) -> str:
        return UNAVAILABLE_MARKER

    def __repr__(self) -> str:
        return "INVALID"


INVALID = InvalidCount()

CoercedCount = Union[ValidatedCount, InvalidCount]


def coerce_medal_count(value: Any) -> CoercedCount:
    """
    Coerce an arbitrary value into a medal count. Never raises.

    - int >= 0 is accepted as-is (bool is not an int here).
    - str is accepted when it parses as an int >= 0 and the parsed value
      printed back equals the stripped input. Surrounding whitespace is
      tolerated; "3.0", "2abc", "007", "+5" and "1_000" are not.
    - Everything else is INVALID.
    """
    if isinstance(value, bool):
        return INVALID

    if isinstance(value, int):
        return ValidatedCount(value) if value >= 0 else INVALID

    if isinstance(value, str):
        stripped = value.strip()
        try:
            parsed = int(stripped)
        except ValueError:
            return INVALID
        if parsed >= 0 and str(parsed) == stripped:
            return ValidatedCount(parsed)

    return INVALID


def is_valid_sort_type(value: Any) -> bool:
    """Case-sensitive check against the four sort keys."""
    return isinstance(value, str) and value in SORT_TYPE_VALUES


def validate_sort_type(value: Any) -> MedalSortType:
    """Parse a sort key, raising InvalidSortTypeException on failure."""
    if not is_valid_sort_type(value):
        raise InvalidSortTypeException(value, SORT_TYPE_VALUES)
    return MedalSortType(value)


def get_default_sort_type() -> MedalSortType:
    return MedalSortType.GOLD


def normalize_sort_param(value: Optional[str]) -> MedalSortType:
    """Display-path variant: absent or invalid falls back to the default."""
    if value and is_valid_sort_type(value):
        return MedalSortType(value)
    return get_default_sort_type()
