"""Presentation jitter for classification confidences.

Applied after ranking, for display only: ordering is already decided
and must not be re-derived from the jittered numbers.
"""

import random

from exportdesk.schemas.shipment import ClassificationMatch


def apply_confidence_jitter(
    matches: list[ClassificationMatch],
    rng: random.Random | None = None,
    spread: int = 3,
    floor: int = 45,
    ceiling: int = 99,
) -> list[ClassificationMatch]:
    """Return copies of ``matches`` with confidence nudged by ±spread.

    The result is clamped to [floor, ceiling] and keeps input order.
    Pass a seeded ``random.Random`` for reproducible output.
    """
    rng = rng or random.Random()
    jittered = []
    for match in matches:
        noisy = match.confidence + rng.randint(-spread, spread)
        noisy = max(floor, min(ceiling, noisy))
        jittered.append(match.model_copy(update={"confidence": noisy}))
    return jittered
