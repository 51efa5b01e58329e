"""Server-side fetch of ranked medal data for the dashboard."""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

import httpx
from pydantic import TypeAdapter

from medal_table.core.config import settings
from medal_table.models.enums import MedalSortType
from medal_table.schemas.medals import MedalCountryWithTotal

logger = logging.getLogger(__name__)

_ranked_adapter = TypeAdapter(List[MedalCountryWithTotal])


@dataclass
class FetchMedalDataResult:
    data: List[MedalCountryWithTotal] = field(default_factory=list)
    error: Optional[str] = None


async def fetch_medal_data(
    sort_type: MedalSortType,
    *,
    base_url: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> FetchMedalDataResult:
    """
    Fetch ranked medal data from the API.

    Never raises: HTTP, transport and decoding failures are logged and
    returned as an empty result carrying an error message.
    """
    url = f"{(base_url or settings.API_URL).rstrip('/')}{settings.API_V1_PREFIX}/medals"
    params = {"sort": MedalSortType(sort_type).value}
    headers = {"Accept": "application/json"}

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.API_TIMEOUT_SECONDS) as own_client:
                response = await own_client.get(url, params=params, headers=headers)
        else:
            response = await client.get(url, params=params, headers=headers)

        if response.is_error:
            raise httpx.HTTPStatusError(
                f"HTTP error! status: {response.status_code}",
                request=response.request,
                response=response,
            )

        data = _ranked_adapter.validate_python(response.json()["data"])
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
        logger.error(f"Failed to fetch medal data: {e}")
        return FetchMedalDataResult(data=[], error=str(e) or "Failed to load medal data")

    return FetchMedalDataResult(data=data)
