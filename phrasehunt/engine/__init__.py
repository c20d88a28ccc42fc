from .histogram import Target, histogram, is_subset, equals
from .candidates import filter_candidates, order_candidates
from .verify import verify, md5_hex, make_digest_fn

__all__ = [
    "Target", "histogram", "is_subset", "equals",
    "filter_candidates", "order_candidates",
    "verify", "md5_hex", "make_digest_fn",
]
