"""Decimal rounding shared by the engines.

Every rounded figure the engine emits goes through ``round_half_up`` so
that results are reproducible regardless of binary float artefacts
(``round(0.125, 2)`` is 0.12 with the builtin, 0.13 here).
"""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int = 4) -> float:
    """Round half away from zero to ``places`` decimals."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
