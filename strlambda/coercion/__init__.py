"""The single "coerce to callable" operation every higher-order helper uses."""
from .coercion import apply, as_callable, call, to_function

__all__ = ["as_callable", "to_function", "call", "apply"]
