import enum

class MedalSortType(str, enum.Enum):
    TOTAL = "total"
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"

class UIState(str, enum.Enum):
    SUCCESS = "success"
    ERROR = "error"
