from .rejections import Rejection, RejectionReason, reject
from .letters import is_sub_multiset, letter_counts
from .scoring import score
from .validation import Accept, MIN_LENGTH, normalize, validate

__all__ = [
    "Accept", "MIN_LENGTH", "Rejection", "RejectionReason", "is_sub_multiset",
    "letter_counts", "normalize", "reject", "score", "validate",
]
