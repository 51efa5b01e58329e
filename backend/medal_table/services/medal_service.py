import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from medal_table.core.config import settings
from medal_table.core.exceptions import MedalDataValidationException
from medal_table.models.enums import MedalSortType
from medal_table.schemas.medals import MedalCountry, MedalsMeta, MedalsResponse
from medal_table.services.ranking import enrich_medal_data

logger = logging.getLogger(__name__)

_medal_data_adapter = TypeAdapter(List[MedalCountry])


def format_validation_errors(error: ValidationError) -> str:
    """One line per problem: 'Error <n>: <path> - <message>'."""
    lines = []
    for index, err in enumerate(error.errors(), start=1):
        path = ".".join(str(part) for part in err["loc"])
        lines.append(f"Error {index}: {path} - {err['msg']}")
    return "\n".join(lines)


class MedalService:
    """Loads the canonical medal dataset and builds ranked responses."""

    def __init__(self, data_path: Optional[Union[str, Path]] = None):
        self.data_path = Path(data_path) if data_path is not None else Path(settings.MEDALS_DATA_PATH)

    def load_medal_data(self) -> List[MedalCountry]:
        """
        Load and validate the dataset from disk.

        The file is read on every call. Any malformed entry fails the
        whole load with MedalDataValidationException.
        """
        try:
            raw = json.loads(self.data_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise MedalDataValidationException(
                f"Unexpected error validating medal data: {e}"
            ) from e

        try:
            countries = _medal_data_adapter.validate_python(raw)
        except ValidationError as e:
            raise MedalDataValidationException(
                f"Medal data validation failed:\n{format_validation_errors(e)}"
            ) from e

        logger.debug(f"Loaded {len(countries)} countries from {self.data_path}")
        return countries

    def get_ranked_medals(self, sort_type: MedalSortType) -> MedalsResponse:
        countries = enrich_medal_data(self.load_medal_data(), sort_type)
        return MedalsResponse(
            data=countries,
            meta=MedalsMeta(
                total_countries=len(countries),
                sort_type=sort_type,
                timestamp=datetime.now(timezone.utc),
            ),
        )
