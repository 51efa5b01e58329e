"""
Ranking engine shared by the API and the dashboard.

All sorting is descending (highest first) with a per-key tie-breaker:
- total: ties broken by most gold
- gold: ties broken by most silver
- silver: ties broken by most gold
- bronze: ties broken by most gold

Records equal on both keys keep their input order. The same functions
serve the initial server-side ranking and every in-memory re-sort, so
both produce identical output for the same data and key.
"""
import logging
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple, TypeVar

from medal_table.models.enums import MedalSortType
from medal_table.schemas.medals import MedalCountry, MedalCountryWithTotal

logger = logging.getLogger(__name__)

# sort key -> (primary field, tie-break field)
TIE_BREAKS: Mapping[MedalSortType, Tuple[str, str]] = MappingProxyType({
    MedalSortType.TOTAL: ("total", "gold"),
    MedalSortType.GOLD: ("gold", "silver"),
    MedalSortType.SILVER: ("silver", "gold"),
    MedalSortType.BRONZE: ("bronze", "gold"),
})

T = TypeVar("T", bound=MedalCountry)


def calculate_total(country: MedalCountry) -> int:
    """Calculate total medals for a country"""
    return country.gold + country.silver + country.bronze


def sort_medal_data(countries: Sequence[T], sort_type: MedalSortType) -> List[T]:
    """
    Return a new list sorted by sort_type with its tie-break rule.

    An unrecognised sort type leaves the order unchanged.
    """
    try:
        primary, tie_break = TIE_BREAKS[MedalSortType(sort_type)]
    except ValueError:
        logger.debug(f"Unrecognised sort type {sort_type!r}, keeping input order")
        return list(countries)

    # sorted() is stable, so full ties keep input order
    return sorted(
        countries,
        key=lambda c: (-getattr(c, primary), -getattr(c, tie_break)),
    )


def _assign_ranks(countries: Sequence[MedalCountryWithTotal]) -> List[MedalCountryWithTotal]:
    return [
        country.model_copy(update={"rank": index + 1})
        for index, country in enumerate(countries)
    ]


def enrich_medal_data(
    countries: Sequence[MedalCountry],
    sort_type: MedalSortType = MedalSortType.GOLD,
) -> List[MedalCountryWithTotal]:
    """
    Add computed fields (total and rank) to medal data.

    Totals are computed first, the list is sorted, then ranks are the
    1-based positions in the final order.
    """
    enriched = [
        MedalCountryWithTotal(
            code=country.code,
            gold=country.gold,
            silver=country.silver,
            bronze=country.bronze,
            total=calculate_total(country),
            rank=1,  # set after sorting
        )
        for country in countries
    ]
    return _assign_ranks(sort_medal_data(enriched, sort_type))


def resort_medal_data(
    countries: Sequence[MedalCountryWithTotal],
    sort_type: MedalSortType,
) -> List[MedalCountryWithTotal]:
    """Re-sort already ranked data in memory, keeping totals and renumbering ranks."""
    return _assign_ranks(sort_medal_data(countries, sort_type))
