import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse

from medal_table.api.dependencies import get_medal_service
from medal_table.core.config import settings
from medal_table.core.exceptions import InvalidSortTypeException, MedalDataValidationException
from medal_table.schemas.medals import ErrorResponse, MedalsResponse
from medal_table.services.medal_service import MedalService
from medal_table.services.validation import get_default_sort_type, validate_sort_type

router = APIRouter(prefix="/medals", tags=["medals"])  # API prefix handled in main.py

logger = logging.getLogger(__name__)


@router.get(
    "",
    response_model=MedalsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def list_medals(
    response: Response,
    sort: Optional[str] = Query(None, description="One of: total, gold, silver, bronze (default: gold)"),
    service: MedalService = Depends(get_medal_service),
):
    """
    Retrieve all medal data with optional sorting.

    GET /api/v1/medals               sorted by gold, ties by silver
    GET /api/v1/medals?sort=total    sorted by total, ties by gold
    GET /api/v1/medals?sort=silver   sorted by silver, ties by gold
    GET /api/v1/medals?sort=bronze   sorted by bronze, ties by gold
    """
    sort_type = get_default_sort_type()
    if sort:
        try:
            sort_type = validate_sort_type(sort)
        except InvalidSortTypeException as e:
            logger.info(f"Rejected sort parameter {sort!r}")
            return JSONResponse(
                status_code=400,
                content=ErrorResponse(error="Invalid sort parameter", message=str(e)).model_dump(),
            )

    try:
        payload = service.get_ranked_medals(sort_type)
    except MedalDataValidationException:
        logger.error("Error processing medals request", exc_info=True)
        return _internal_error()
    except Exception:
        logger.error("Unexpected error processing medals request", exc_info=True)
        return _internal_error()

    response.headers["Cache-Control"] = settings.MEDALS_CACHE_CONTROL
    return payload


def _internal_error() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            message="Failed to process medal data",
        ).model_dump(),
    )
