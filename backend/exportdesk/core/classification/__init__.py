from .scorer import ClassificationScorer
from .jitter import apply_confidence_jitter

__all__ = ["ClassificationScorer", "apply_confidence_jitter"]
