"""Classification Scorer — ranks tariff catalog entries against a
product query.

Scoring is additive and deterministic:
- +40 when the entry's category matches the query category
- +30 when the entry's subcategory matches the query subcategory
- +8 per entry keyword found (case-insensitive substring) in the description
The raw score is capped at 99, so 100 is never produced.
"""

from typing import Iterable

from exportdesk.data.tariff_catalog import TARIFF_CATALOG
from exportdesk.schemas.shipment import ClassificationMatch, ClassificationQuery, TariffEntry

CATEGORY_POINTS = 40
SUBCATEGORY_POINTS = 30
KEYWORD_POINTS = 8
MAX_CONFIDENCE = 99
DEFAULT_LIMIT = 4


class ClassificationScorer:
    """Score and rank HS candidates for a free-text product description."""

    def score(self, entry: TariffEntry, query: ClassificationQuery) -> int:
        """Confidence in [0, 99] that ``entry`` classifies the queried product."""
        score = 0

        if query.category and entry.category == query.category:
            score += CATEGORY_POINTS
        if query.subcategory and entry.subcategory == query.subcategory:
            score += SUBCATEGORY_POINTS

        description = (query.free_text_description or "").lower()
        if description.strip():
            matched = [kw for kw in entry.keywords if kw.lower() in description]
            score += len(matched) * KEYWORD_POINTS

        return min(score, MAX_CONFIDENCE)

    def rank(
        self,
        query: ClassificationQuery,
        catalog: Iterable[TariffEntry] | None = None,
        limit: int = DEFAULT_LIMIT,
    ) -> list[ClassificationMatch]:
        """Top ``limit`` candidates by confidence, best first.

        Entries scoring 0 are dropped. Ties keep catalog order (sorted()
        is stable), so identical inputs always produce identical output.
        """
        if catalog is None:
            catalog = TARIFF_CATALOG

        scored = [
            ClassificationMatch(entry=entry, confidence=self.score(entry, query))
            for entry in catalog
        ]
        scored = [m for m in scored if m.confidence > 0]
        scored = sorted(scored, key=lambda m: m.confidence, reverse=True)

        return scored[:max(limit, 0)]
