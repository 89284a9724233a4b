"""Portfolio statistics endpoint."""

import logging

from fastapi import APIRouter, Depends

from app.portfolio_contact.application.dto.contact_dto import StatsDTO
from app.portfolio_contact.application.exceptions import InternalError
from app.portfolio_contact.application.use_cases.contact_queries import GetStatsUseCase
from app.portfolio_contact.presentation.api.dependencies import get_stats_use_case

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats", response_model=StatsDTO)
async def get_stats(
    use_case: GetStatsUseCase = Depends(get_stats_use_case),
) -> StatsDTO:
    """Get visit and message counts.

    Raises:
        InternalError: 500 if the store could not be read.
    """
    try:
        return await use_case.execute()
    except Exception as e:
        logger.exception(f"Stats error: {e}")
        raise InternalError("Could not fetch stats") from e
