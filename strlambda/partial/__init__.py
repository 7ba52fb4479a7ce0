"""Currying and hole-based partial application."""
from .partial_application import (
    HOLE,
    CurriedCallable,
    Hole,
    PartialCallable,
    curry,
    ncurry,
    partial,
    rcurry,
    rncurry,
    saturate,
)

__all__ = [
    "HOLE",
    "Hole",
    "CurriedCallable",
    "PartialCallable",
    "curry",
    "rcurry",
    "ncurry",
    "rncurry",
    "partial",
    "saturate",
]
