"""
List operations over text expressions and callables.

These shadow the builtins of the same name on purpose; each one coerces its
function argument with as_callable before use.

>>> map('1+', [1, 2, 3])
[2, 3, 4]
>>> select('%2', [1, 2, 3, 4])
[1, 3]
"""

import builtins
import logging
from typing import Any, Iterable, List, Sequence

from strlambda.coercion.coercion import as_callable

logger = logging.getLogger(__name__)


def map(fn: Any, sequence: Iterable[Any]) -> List[Any]:
    """Applies fn to each element."""
    fn = as_callable(fn)
    return [fn(item) for item in sequence]


def reduce(fn: Any, init: Any, sequence: Iterable[Any]) -> Any:
    """
    reduce(fn, init, [x1, x2, x3]) == fn(fn(fn(init, x1), x2), x3)

    >>> reduce('x y -> 2*x+y', 0, [1, 0, 1, 0])
    10
    """
    fn = as_callable(fn)
    result = init
    for item in sequence:
        result = fn(result, item)
    return result


foldl = reduce


def foldr(fn: Any, init: Any, sequence: Sequence[Any]) -> Any:
    """
    foldr(fn, init, [x1, x2, x3]) == fn(x1, fn(x2, fn(x3, init)))

    >>> foldr('x y -> 2*x+y', 100, [1, 0, 1, 0])
    104
    """
    fn = as_callable(fn)
    result = init
    for item in reversed(list(sequence)):
        result = fn(item, result)
    return result


def select(fn: Any, sequence: Iterable[Any]) -> List[Any]:
    """Returns the elements for which fn is truthy."""
    fn = as_callable(fn)
    return [item for item in sequence if fn(item)]


filter = select


def some(fn: Any, sequence: Iterable[Any]) -> Any:
    """Returns the first truthy fn(x), else the last result (False when empty)."""
    fn = as_callable(fn)
    value: Any = False
    for item in sequence:
        value = fn(item)
        if value:
            return value
    return value


def every(fn: Any, sequence: Iterable[Any]) -> Any:
    """Returns the first falsy fn(x), else the last result (True when empty)."""
    fn = as_callable(fn)
    value: Any = True
    for item in sequence:
        value = fn(item)
        if not value:
            return value
    return value


def zip(*sequences: Sequence[Any]) -> List[List[Any]]:
    """
    Transposes sequences, truncating to the shortest.

    >>> zip([1, 2], [3, 4])
    [[1, 3], [2, 4]]
    """
    return [list(row) for row in builtins.zip(*sequences)]
