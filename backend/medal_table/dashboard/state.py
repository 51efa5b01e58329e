from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence

from medal_table.models.enums import MedalSortType, UIState
from medal_table.schemas.medals import MedalCountryWithTotal
from medal_table.services.ranking import resort_medal_data
from medal_table.services.validation import is_valid_sort_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardState:
    """
    Display state of the medal dashboard.

    SUCCESS accepts any number of resorts, each one a synchronous in-memory
    re-sort of the data already held. ERROR is terminal until the page is
    loaded again.
    """
    ui: UIState
    data: List[MedalCountryWithTotal] = field(default_factory=list)
    sort_type: MedalSortType = MedalSortType.GOLD
    error: Optional[str] = None

    @classmethod
    def initial(
        cls,
        data: Sequence[MedalCountryWithTotal],
        sort_type: MedalSortType,
        error: Optional[str] = None,
    ) -> "DashboardState":
        return cls(
            ui=UIState.ERROR if error else UIState.SUCCESS,
            data=list(data),
            sort_type=sort_type,
            error=error,
        )

    def resort(self, sort_type: MedalSortType) -> "DashboardState":
        if not is_valid_sort_type(sort_type):
            # Unknown key keeps the current order and ranks
            logger.debug(f"Ignoring resort by unrecognised key {sort_type!r}")
            return self

        sort_type = MedalSortType(sort_type)
        # Nothing to do in error state or if the sort is unchanged
        if self.ui == UIState.ERROR or self.sort_type == sort_type:
            return self

        logger.debug(f"Re-sorting {len(self.data)} countries by {sort_type.value}")
        return replace(
            self,
            data=resort_medal_data(self.data, sort_type),
            sort_type=sort_type,
        )

    def summary(self) -> str:
        key = MedalSortType(self.sort_type).value.capitalize()
        return f"Displaying {len(self.data)} countries sorted by {key} medals"
