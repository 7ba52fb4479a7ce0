"""List operations that accept text expressions as their function argument."""
from .list_operations import every, filter, foldl, foldr, map, reduce, select, some, zip

__all__ = ["map", "reduce", "foldl", "foldr", "select", "filter", "some", "every", "zip"]
