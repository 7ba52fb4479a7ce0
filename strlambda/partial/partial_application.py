"""
Partial application of callables and text expressions.

curry/rcurry fix leading or trailing arguments and fire on the next call.
ncurry/rncurry keep collecting arguments until a required count is reached.
partial fills the positions marked with HOLE, left to right.

Every function argument goes through as_callable first, so text
expressions work anywhere a function does:

>>> curry('a/b', 1)(2)
0.5
>>> partial('a - b', HOLE, 1)(10)
9
"""

import logging
from typing import Any, Callable, Iterable, List, Optional, Tuple

from strlambda.coercion.coercion import as_callable

logger = logging.getLogger(__name__)


class Hole:
    """Placeholder for an argument position left open by partial()."""
    _instance: Optional['Hole'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "_"

    def __reduce__(self):
        return (Hole, ())


HOLE = Hole()


def is_hole(value: Any) -> bool:
    return isinstance(value, Hole)


class CurriedCallable:
    """
    A callable with some of its arguments already supplied.

    Args:
        fn: The underlying callable.
        args: Arguments collected so far.
        arity: Required argument count, or None to call unconditionally.
        right: Collected arguments go after (True) or before (False) new ones.

    Calling never mutates the instance; a still-unsaturated call returns a
    new CurriedCallable.
    """

    def __init__(self, fn: Callable[..., Any], args: Iterable[Any] = (), arity: Optional[int] = None, right: bool = False):
        self.fn = fn
        self.args: Tuple[Any, ...] = tuple(args)
        self.arity = arity
        self.right = right

    def __call__(self, *more: Any) -> Any:
        combined = more + self.args if self.right else self.args + more
        if self.arity is not None and len(combined) < self.arity:
            logger.debug(f"Curried call has {len(combined)} of {self.arity} arguments; deferring")
            return CurriedCallable(self.fn, combined, self.arity, self.right)
        return self.fn(*combined)

    def __repr__(self):
        kind = ("rn" if self.right else "n") if self.arity is not None else ("r" if self.right else "")
        kind += "curry"
        return f"<{kind} {self.fn!r} args={self.args!r}>"


class PartialCallable:
    """
    Specializer returned by partial().

    `positions` lists the indices of the holes in `template`; it is computed
    once here and reused by every call.
    """

    def __init__(self, fn: Callable[..., Any], template: Iterable[Any]):
        self.fn = fn
        self.template: Tuple[Any, ...] = tuple(template)
        self.positions: Tuple[int, ...] = tuple(i for i, value in enumerate(self.template) if is_hole(value))

    @property
    def holes(self) -> int:
        return len(self.positions)

    def __call__(self, *args: Any) -> Any:
        specialized: List[Any] = list(self.template) + list(args[len(self.positions):])
        for position, value in zip(self.positions, args):
            specialized[position] = value
        if any(is_hole(value) for value in specialized):
            logger.debug(f"Partial call still has holes: {specialized!r}")
            return PartialCallable(self.fn, specialized)
        return self.fn(*specialized)

    def __repr__(self):
        return f"<partial {self.fn!r} template={self.template!r}>"


def _check_arity(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        logger.error(f"Invalid argument count for ncurry: {n!r}")
        raise ValueError(f"Argument count must be a non-negative integer, got {n!r}")
    return n


def curry(fn: Any, *args: Any) -> CurriedCallable:
    """curry(fn, *args)(*args2) == fn(*args, *args2)"""
    return CurriedCallable(as_callable(fn), args)


def rcurry(fn: Any, *args: Any) -> CurriedCallable:
    """rcurry(fn, *args)(*args2) == fn(*args2, *args)"""
    return CurriedCallable(as_callable(fn), args, right=True)


def ncurry(n: int, fn: Any, *args: Any) -> CurriedCallable:
    """
    Same as curry, except fn is only called once n arguments have been
    collected, across any number of calls:

    >>> ncurry(3, 'a + b + c')(1)(2)(3)
    6
    """
    return CurriedCallable(as_callable(fn), args, arity=_check_arity(n))


def rncurry(n: int, fn: Any, *args: Any) -> CurriedCallable:
    """Same as rcurry, except fn is only called once n arguments have been collected."""
    return CurriedCallable(as_callable(fn), args, arity=_check_arity(n), right=True)


def saturate(fn: Any, *args: Any) -> Callable[..., Any]:
    """
    Returns a function that ignores its own arguments.

    >>> saturate(max, 1, 2)(3, 4)
    2
    """
    fn = as_callable(fn)

    def saturated(*ignored: Any) -> Any:
        return fn(*args)
    return saturated


def partial(fn: Any, *template: Any) -> PartialCallable:
    """
    Returns a specializer that fills the HOLE positions of template.

    From left to right, each argument of the specializer fills the leftmost
    remaining hole; extra arguments are appended. If holes remain, the
    result is another specializer instead of a call.

    >>> partial('[a, b, c]', HOLE, 2, HOLE)(1, 3)
    [1, 2, 3]
    """
    return PartialCallable(as_callable(fn), template)
