"""
Combinators over callables and text expressions.

Each combinator coerces its function arguments with as_callable, so
compose('1+', '2*')(2) == 5.
"""

import collections.abc
import logging
from typing import Any, Callable, Optional

from strlambda.coercion.coercion import as_callable

logger = logging.getLogger(__name__)


def I(x: Any) -> Any:
    """The identity function."""
    return x


def K(x: Any) -> Callable[..., Any]:
    """Returns a constant function: K(x)(*anything) == x."""
    def constant(*ignored: Any) -> Any:
        return x
    return constant


def _first(*args: Any) -> Any:
    return args[0] if args else None


def compose(*fns: Any) -> Callable[..., Any]:
    """compose(f1, f2, ..., fn)(*args) == f1(f2(...fn(*args)))"""
    fns = [as_callable(fn) for fn in fns]

    def composed(*args: Any) -> Any:
        for fn in reversed(fns):
            args = (fn(*args),)
        return args[0] if args else None
    return composed


def sequence(*fns: Any) -> Callable[..., Any]:
    """sequence(f1, f2, ..., fn)(*args) == fn(...f2(f1(*args)))"""
    fns = [as_callable(fn) for fn in fns]

    def sequenced(*args: Any) -> Any:
        for fn in fns:
            args = (fn(*args),)
        return args[0] if args else None
    return sequenced


def flip(fn: Any) -> Callable[..., Any]:
    """flip(fn)(a, b, *rest) == fn(b, a, *rest)"""
    fn = as_callable(fn)

    def flipped(*args: Any) -> Any:
        return fn(*(args[1:2] + args[0:1] + args[2:]))
    return flipped


def uncurry(fn: Any) -> Callable[..., Any]:
    """uncurry(fn)(a, *rest) == fn(a)(*rest)"""
    fn = as_callable(fn)

    def uncurried(*args: Any) -> Any:
        return fn(*args[:1])(*args[1:])
    return uncurried


def guard(fn: Any, guard: Optional[Any] = None, otherwise: Optional[Any] = None) -> Callable[..., Any]:
    """
    Calls fn when guard(*args) is truthy, otherwise otherwise(*args).

    Both default to returning the first argument, so guard(fn) applies fn
    only to truthy values:

    >>> guard('[_]')(None) is None
    True
    >>> guard('/', 'p q -> q', K('n/a'))(1, 0)
    'n/a'
    """
    fn = as_callable(fn)
    test = as_callable(guard) if guard is not None else _first
    fallback = as_callable(otherwise) if otherwise is not None else _first

    def guarded(*args: Any) -> Any:
        return (fn if test(*args) else fallback)(*args)
    return guarded


def returning(fn: Any) -> Callable[..., Any]:
    """
    Calls fn for its side effect and returns the first argument (the
    receiver), which makes procedural methods chainable.
    """
    fn = as_callable(fn)

    def chained(receiver: Any, *args: Any) -> Any:
        fn(receiver, *args)
        return receiver
    return chained


def prefilter_at(fn: Any, index: int, filter: Any) -> Callable[..., Any]:
    """prefilter_at(fn, i, g)(a0, ..., ai, ...) == fn(a0, ..., g(ai), ...)"""
    fn = as_callable(fn)
    filter = as_callable(filter)

    def prefiltered(*args: Any) -> Any:
        args = list(args)
        args[index] = filter(args[index])
        return fn(*args)
    return prefiltered


def prefilter_slice(fn: Any, filter: Any, start: int = 0, end: Optional[int] = None) -> Callable[..., Any]:
    """
    Replaces args[start:end] by filter(*args[start:end]) before calling fn.
    A list or tuple result is spliced in item by item.

    >>> prefilter_slice('[a, b, c]', '[a + b]', 1, 3)(1, 2, 3, 4)
    [1, 5, 4]
    """
    fn = as_callable(fn)
    filter = as_callable(filter)

    def prefiltered(*args: Any) -> Any:
        args = list(args)
        window = slice(start, end)
        result = filter(*args[window])
        args[window] = list(result) if isinstance(result, (list, tuple)) else [result]
        return fn(*args)
    return prefiltered


def not_(fn: Any) -> Callable[..., bool]:
    """not_(fn)(*args) == not fn(*args)"""
    fn = as_callable(fn)

    def negated(*args: Any) -> bool:
        return not fn(*args)
    return negated


def invoke(method_name: str, *args: Any) -> Callable[..., Any]:
    """
    invoke(name, *args)(obj, *args2) == getattr(obj, name)(*args2, *args)

    >>> invoke('upper')('abc')
    'ABC'
    """
    def invoker(obj: Any, *more: Any) -> Any:
        return getattr(obj, method_name)(*more, *args)
    return invoker


def pluck(name: Any) -> Callable[[Any], Any]:
    """
    Returns a function that looks name up on its argument: by item for
    mappings and integer indexes, by attribute otherwise.
    """
    def plucker(obj: Any) -> Any:
        if isinstance(obj, collections.abc.Mapping) or isinstance(name, int):
            return obj[name]
        return getattr(obj, name)
    return plucker


def until(pred: Any, fn: Any) -> Callable[[Any], Any]:
    """
    Applies fn repeatedly until pred holds and returns that value.

    >>> until('>10', '2*')(1)
    16
    """
    pred = as_callable(pred)
    fn = as_callable(fn)

    def iterate(value: Any) -> Any:
        while not pred(value):
            value = fn(value)
        return value
    return iterate
