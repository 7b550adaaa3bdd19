"""Risk routes — E-Factor for the landed-cost calculator."""

import logging

from fastapi import APIRouter, HTTPException

from exportdesk.core.risk import EFactorAggregator, WeatherDataUnavailableError
from exportdesk.core.weather import OpenWeatherClient, WeatherAPIError
from exportdesk.schemas.shipment import EFactorRequest

router = APIRouter(prefix="/risk", tags=["Risk"])

logger = logging.getLogger(__name__)

aggregator = EFactorAggregator()


@router.post("/efactor")
async def compute_efactor(req: EFactorRequest):
    """E-Factor from caller-supplied port samples."""
    try:
        assessment = aggregator.compute(req.samples)
    except WeatherDataUnavailableError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return assessment.model_dump()


@router.get("/efactor/live")
async def live_efactor():
    """E-Factor from current conditions at the monitored ports.

    Risk is reported unavailable (502) rather than defaulting to 1.0
    when no port could be read.
    """
    client = OpenWeatherClient()
    try:
        samples = await client.fetch_all()
        assessment = aggregator.compute(samples)
    except (WeatherAPIError, WeatherDataUnavailableError) as e:
        logger.error(f"E-Factor unavailable: {e}")
        raise HTTPException(status_code=502, detail=f"Risk unavailable: {e}")
    return assessment.model_dump()
