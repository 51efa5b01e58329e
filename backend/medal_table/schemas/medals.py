from __future__ import annotations
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from medal_table.models.enums import MedalSortType


class MedalCountry(BaseModel):
    """One row of the canonical dataset."""
    code: str = Field(
        strict=True,
        min_length=3,
        max_length=3,
        pattern=r"^[A-Z]{3}$",
        description="ISO 3166-1 alpha-3 country code",
    )
    gold: int = Field(strict=True, ge=0)
    silver: int = Field(strict=True, ge=0)
    bronze: int = Field(strict=True, ge=0)

    model_config = ConfigDict(frozen=True)


class MedalCountryWithTotal(MedalCountry):
    """Medal data with computed fields for API responses."""
    total: int = Field(ge=0)
    rank: int = Field(ge=1, description="Position in current sort order")


class MedalsMeta(BaseModel):
    total_countries: int = Field(alias="totalCountries")
    sort_type: MedalSortType = Field(alias="sortType")
    timestamp: datetime

    model_config = ConfigDict(populate_by_name=True)


class MedalsResponse(BaseModel):
    data: List[MedalCountryWithTotal]
    meta: MedalsMeta


class ErrorResponse(BaseModel):
    error: str
    message: str
