"""
Static country table for the medal board.

Maps ISO 3166-1 alpha-3 codes to a display name and the row of the flag
in the sprite sheet. The table is loaded once and never mutated.
"""
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple

from medal_table.core.exceptions import UnknownCountryCodeException

FLAG_HEIGHT = 17  # px per flag in the sprite sheet
FLAG_WIDTH = 28


class CountryInfo(NamedTuple):
    name: str
    position: int


COUNTRY_MAP: Mapping[str, CountryInfo] = MappingProxyType({
    "AUT": CountryInfo("Austria", 0),
    "BLR": CountryInfo("Belarus", 1),
    "CAN": CountryInfo("Canada", 2),
    "CHN": CountryInfo("China", 3),
    "FRA": CountryInfo("France", 4),
    "DEU": CountryInfo("Germany", 5),
    "ITA": CountryInfo("Italy", 6),
    "NLD": CountryInfo("Netherlands", 7),
    "NOR": CountryInfo("Norway", 8),
    "RUS": CountryInfo("Russia", 9),
    "CHE": CountryInfo("Switzerland", 10),
    "SWE": CountryInfo("Sweden", 11),
    "USA": CountryInfo("United States of America", 12),
})


def is_valid_country_code(code: Any) -> bool:
    """
    Check if a given value is a known country code.

    Only strings qualify; the comparison is case-insensitive.
    """
    return isinstance(code, str) and code.upper() in COUNTRY_MAP


def normalize_country_code(code: Any) -> str:
    """Return the canonical (uppercase) form of a known country code."""
    if not is_valid_country_code(code):
        raise UnknownCountryCodeException(code)
    return code.upper()


def get_country_info(code: str) -> CountryInfo:
    """
    Get country information by code.

    Callers must check the code with is_valid_country_code first; anything
    else raises UnknownCountryCodeException.
    """
    return COUNTRY_MAP[normalize_country_code(code)]


def flag_offset(code: str) -> int:
    """Vertical offset in px of the country's flag within the sprite sheet."""
    return get_country_info(code).position * FLAG_HEIGHT
