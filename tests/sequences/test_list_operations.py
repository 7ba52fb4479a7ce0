"""
Unit tests for the list operations.
"""

import pytest

from strlambda.sequences.list_operations import (
    every, filter, foldl, foldr, map, reduce, select, some, zip,
)
from strlambda.system.errors import CoercionTypeError

# --- Test map / select ---

def test_map_text():
    """map accepts a text expression."""
    assert map("1+", [1, 2, 3]) == [2, 3, 4]
    assert map('"im" + root', ["probable", "possible"]) == ["improbable", "impossible"]

def test_map_fusion():
    """Mapping twice equals mapping the composition."""
    assert map("+1", map("*2", [1, 2, 3])) == [3, 5, 7]

def test_map_callable():
    """Callables work unchanged."""
    assert map(str, [1, 2]) == ["1", "2"]

def test_select():
    """select keeps elements where fn is truthy."""
    assert select("%2", [1, 2, 3, 4]) == [1, 3]
    assert filter is select

def test_non_callable_rejected():
    """The function argument goes through as_callable."""
    with pytest.raises(CoercionTypeError):
        map(3, [1, 2])

# --- Test folds ---

def test_reduce():
    """reduce folds from the left."""
    assert reduce("x y -> 2*x+y", 0, [1, 0, 1, 0]) == 10
    assert foldl is reduce

def test_foldr():
    """foldr folds from the right."""
    assert foldr("x y -> 2*x+y", 100, [1, 0, 1, 0]) == 104

def test_fold_empty():
    """Folding nothing returns the initial value."""
    assert reduce("+", 7, []) == 7
    assert foldr("+", 7, []) == 7

# --- Test some / every ---

def test_some():
    """some is true if any element satisfies fn."""
    assert some(">2", [1, 2, 3]) is True
    assert some(">10", [1, 2, 3]) is False
    assert some(">10", []) is False

def test_every():
    """every is true if all elements satisfy fn."""
    assert every("<2", [1, 2, 3]) is False
    assert every("<10", [1, 2, 3]) is True
    assert every("<10", []) is True

def test_some_stops_early():
    """some does not look past the first match."""
    seen = []
    some(lambda x: seen.append(x) or x > 1, [1, 2, 3])
    assert seen == [1, 2]

# --- Test zip ---

def test_zip_transposes():
    """zip transposes a matrix."""
    assert zip([1, 2], [3, 4]) == [[1, 3], [2, 4]]

def test_zip_truncates():
    """zip stops at the shortest input."""
    assert zip([1, 2, 3], "ab") == [[1, "a"], [2, "b"]]
