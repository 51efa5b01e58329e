"""
Table row view models for the medal dashboard.

Rows are built defensively: the country code and every medal count may be
malformed. An unknown code drops the row, an invalid count shows the
unavailable marker and contributes nothing to the row total.
"""
import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from medal_table.core.countries import flag_offset, get_country_info, is_valid_country_code
from medal_table.schemas.medals import MedalCountryWithTotal
from medal_table.services.validation import CoercedCount, coerce_medal_count

logger = logging.getLogger(__name__)

COLUMNS = ("#", "Code", "Country", "Gold", "Silver", "Bronze", "Total")


@dataclass(frozen=True)
class TableRow:
    ranking: int
    code: str
    name: str
    flag_offset: int
    gold: CoercedCount
    silver: CoercedCount
    bronze: CoercedCount
    total: int

    def cells(self) -> List[str]:
        return [
            str(self.ranking),
            self.code,
            self.name,
            self.gold.display(),
            self.silver.display(),
            self.bronze.display(),
            str(self.total),
        ]


def build_table_row(
    ranking: int,
    country_code: Any,
    gold: Any,
    silver: Any,
    bronze: Any,
) -> Optional[TableRow]:
    """Return the row for one country, or None if the code is not known."""
    if not is_valid_country_code(country_code):
        logger.debug(f"Dropping row with unknown country code {country_code!r}")
        return None

    code = country_code.upper()
    counts = [coerce_medal_count(value) for value in (gold, silver, bronze)]
    return TableRow(
        ranking=ranking,
        code=code,
        name=get_country_info(code).name,
        flag_offset=flag_offset(code),
        gold=counts[0],
        silver=counts[1],
        bronze=counts[2],
        total=sum(count.value_or_zero() for count in counts),
    )


def build_table_rows(countries: Iterable[MedalCountryWithTotal]) -> List[TableRow]:
    rows = []
    for country in countries:
        row = build_table_row(country.rank, country.code, country.gold, country.silver, country.bronze)
        if row is not None:
            rows.append(row)
    return rows


def render_table(rows: Iterable[TableRow]) -> str:
    """Plain-text rendering with one column per field, right-aligned counts."""
    body = [row.cells() for row in rows]
    widths = [
        max([len(COLUMNS[i])] + [len(cells[i]) for cells in body])
        for i in range(len(COLUMNS))
    ]

    def fmt(cells: List[str]) -> str:
        left = [cells[i].ljust(widths[i]) for i in range(3)]
        right = [cells[i].rjust(widths[i]) for i in range(3, len(COLUMNS))]
        return "  ".join(left + right).rstrip()

    lines = [fmt(list(COLUMNS)), "  ".join("-" * w for w in widths)]
    lines.extend(fmt(cells) for cells in body)
    return "\n".join(lines)
