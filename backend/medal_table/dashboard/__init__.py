"""Dashboard package - the presentation side of the medal table."""
from medal_table.dashboard.client import FetchMedalDataResult, fetch_medal_data
from medal_table.dashboard.state import DashboardState
from medal_table.dashboard.table import TableRow, build_table_row, build_table_rows, render_table

__all__ = [
    "FetchMedalDataResult",
    "fetch_medal_data",
    "DashboardState",
    "TableRow",
    "build_table_row",
    "build_table_rows",
    "render_table",
]
