import pytest

from medal_table.core.countries import FLAG_HEIGHT
from medal_table.dashboard.table import COLUMNS, build_table_row, build_table_rows, render_table
from medal_table.schemas.medals import MedalCountryWithTotal
from medal_table.services.validation import INVALID, UNAVAILABLE_MARKER, ValidatedCount


def test_valid_row():
    row = build_table_row(1, "USA", 39, 41, 33)
    assert row is not None
    assert row.code == "USA"
    assert row.name == "United States of America"
    assert row.flag_offset == 12 * FLAG_HEIGHT
    assert row.total == 113
    assert row.cells() == ["1", "USA", "United States of America", "39", "41", "33", "113"]


def test_lowercase_code_is_canonicalised():
    row = build_table_row(3, "usa", 1, 2, 3)
    assert row.code == "USA"
    assert row.name == "United States of America"


@pytest.mark.parametrize("code", ["GBR", "XXX", "", None, 840, True, ["USA"]])
def test_unknown_code_drops_row(code):
    assert build_table_row(1, code, 1, 1, 1) is None


def test_invalid_medal_value_shows_marker_and_is_excluded_from_total():
    row = build_table_row(2, "CHN", "2abc", 5, 3)
    assert row.gold is INVALID
    assert row.cells()[3] == UNAVAILABLE_MARKER
    assert row.total == 8


def test_zero_is_shown_as_zero_not_marker():
    row = build_table_row(2, "ITA", 0, 2, 6)
    assert row.gold == ValidatedCount(0)
    assert row.cells()[3] == "0"
    assert row.total == 8


def test_each_field_is_validated_independently():
    row = build_table_row(4, "NOR", None, "7", 3.5)
    assert row.cells()[3:] == [UNAVAILABLE_MARKER, "7", UNAVAILABLE_MARKER, "7"]


def test_all_fields_invalid_total_is_zero():
    row = build_table_row(5, "SWE", "x", "y", "z")
    assert row.total == 0
    assert row.cells()[-1] == "0"


def test_build_table_rows_keeps_rank_order():
    ranked = [
        MedalCountryWithTotal(code="RUS", gold=13, silver=11, bronze=9, total=33, rank=1),
        MedalCountryWithTotal(code="NOR", gold=11, silver=5, bronze=10, total=26, rank=2),
    ]
    rows = build_table_rows(ranked)
    assert [(r.ranking, r.code) for r in rows] == [(1, "RUS"), (2, "NOR")]


def test_build_table_rows_skips_unknown_codes():
    # GBR is well-formed for the schema but not in the country table
    ranked = [
        MedalCountryWithTotal(code="GBR", gold=22, silver=21, bronze=22, total=65, rank=1),
        MedalCountryWithTotal(code="NOR", gold=11, silver=5, bronze=10, total=26, rank=2),
    ]
    rows = build_table_rows(ranked)
    assert [r.code for r in rows] == ["NOR"]
    assert rows[0].ranking == 2


def test_render_table():
    rows = [build_table_row(1, "RUS", 13, 11, 9), build_table_row(2, "ITA", 0, "n/a", 6)]
    lines = render_table(rows).splitlines()

    assert len(lines) == 4
    for column in COLUMNS:
        assert column in lines[0]
    assert lines[2].split()[:3] == ["1", "RUS", "Russia"]
    assert lines[3].split() == ["2", "ITA", "Italy", "0", UNAVAILABLE_MARKER, "6", "6"]


def test_render_empty_table_has_header_only():
    assert len(render_table([]).splitlines()) == 2
