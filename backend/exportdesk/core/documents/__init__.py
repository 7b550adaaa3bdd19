from .checklist import ChecklistBuilder, hs_chapter
from .status import DocumentStatusTracker, FinalizeBlockedError

__all__ = [
    "ChecklistBuilder",
    "hs_chapter",
    "DocumentStatusTracker",
    "FinalizeBlockedError",
]
