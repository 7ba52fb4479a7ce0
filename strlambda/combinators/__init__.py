"""Function combinators built on as_callable."""
from .combinators import (
    I, K, compose, flip, guard, invoke, not_, pluck, prefilter_at,
    prefilter_slice, returning, sequence, uncurry, until,
)

__all__ = [
    "I", "K", "compose", "sequence", "flip", "uncurry", "guard", "returning",
    "prefilter_at", "prefilter_slice", "not_", "invoke", "pluck", "until",
]
