from medal_table.models.enums import MedalSortType, UIState

__all__ = ["MedalSortType", "UIState"]
