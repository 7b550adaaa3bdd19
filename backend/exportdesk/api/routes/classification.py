"""Classification routes — HS candidate search for the product wizard."""

import random

from fastapi import APIRouter, HTTPException

from exportdesk.config import settings
from exportdesk.core.classification import ClassificationScorer, apply_confidence_jitter
from exportdesk.data.tariff_catalog import list_categories, lookup_tariff
from exportdesk.schemas.shipment import RankRequest

router = APIRouter(prefix="/classification", tags=["Classification"])

scorer = ClassificationScorer()


@router.get("/categories")
async def get_categories():
    """Product categories and subcategories accepted by the scorer."""
    return {"categories": list_categories()}


@router.post("/rank")
async def rank_candidates(req: RankRequest):
    """Rank tariff candidates for a product description.

    With ``jitter`` set, confidences get the cosmetic ±3 display noise;
    the order is the deterministic ranking either way.
    """
    limit = req.limit or settings.CLASSIFY_DEFAULT_LIMIT
    matches = scorer.rank(req, limit=limit)

    if req.jitter:
        matches = apply_confidence_jitter(
            matches,
            random.Random(),
            spread=settings.CONFIDENCE_JITTER,
            floor=settings.CONFIDENCE_FLOOR,
            ceiling=settings.CONFIDENCE_CEILING,
        )

    return {"matches": [m.model_dump() for m in matches], "total": len(matches)}


@router.get("/tariff/{hs_code}")
async def get_tariff(hs_code: str):
    entry = lookup_tariff(hs_code)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"HS code '{hs_code}' not in catalog")
    return entry.model_dump()
