"""Medal dashboard CLI interface."""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from medal_table.core.config import settings
from medal_table.dashboard.client import fetch_medal_data
from medal_table.dashboard.state import DashboardState
from medal_table.dashboard.table import build_table_rows, render_table
from medal_table.models.enums import MedalSortType
from medal_table.services.validation import SORT_TYPE_VALUES, normalize_sort_param

logger = logging.getLogger(__name__)


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Olympic medal dashboard - medal counts by country"
    )

    parser.add_argument(
        "--sort",
        type=str,
        default=None,
        help="Initial sort (total, gold, silver, bronze). Invalid values fall back to gold"
    )

    parser.add_argument(
        "--resort",
        action="append",
        default=[],
        choices=SORT_TYPE_VALUES,
        metavar="KEY",
        help="Re-sort in memory after loading; may be repeated"
    )

    parser.add_argument(
        "--api-url",
        type=str,
        default=None,
        help=f"Base URL of the medals API (default: {settings.API_URL})"
    )

    return parser.parse_args(args)


async def load_dashboard(
    sort_param: Optional[str],
    *,
    base_url: Optional[str] = None,
    client=None,
) -> DashboardState:
    """Normalise the sort parameter, fetch once and build the initial state."""
    sort_type = normalize_sort_param(sort_param)
    result = await fetch_medal_data(sort_type, base_url=base_url, client=client)
    return DashboardState.initial(result.data, sort_type, result.error)


def render_state(state: DashboardState) -> str:
    if state.error:
        return f"Unable to Load Medal Data\n{state.error}"
    return f"{render_table(build_table_rows(state.data))}\n\n{state.summary()}"


def main(args: Optional[List[str]] = None) -> int:
    parsed = parse_args(args)
    logging.basicConfig(level=settings.LOG_LEVEL)

    state = asyncio.run(load_dashboard(parsed.sort, base_url=parsed.api_url))
    print(render_state(state))

    for key in parsed.resort:
        state = state.resort(MedalSortType(key))
        print()
        print(render_state(state))

    return 1 if state.error else 0


if __name__ == "__main__":
    sys.exit(main())
