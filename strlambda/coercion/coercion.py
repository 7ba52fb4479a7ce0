"""
Coercion of function-shaped values to callables.

`as_callable` is implemented per variant with functools.singledispatch:
callables are returned unchanged and text values are compiled. Anything
else is rejected; there is no implicit constant-function coercion.
"""

import collections.abc
import functools
import logging
from typing import Any, Callable, Iterable, Mapping, Optional

from strlambda.lambda_compiler.lambda_compiler import get_default_compiler
from strlambda.lambda_parser.lambda_parser import has_return
from strlambda.system.errors import CoercionTypeError

logger = logging.getLogger(__name__)


@functools.singledispatch
def as_callable(value: Any, namespace: Optional[Mapping[str, Any]] = None) -> Callable[..., Any]:
    """
    Returns a callable for a text expression or a callable.

    >>> as_callable('+1')(2)
    3
    >>> as_callable('return 1')()
    1

    Raises:
        CoercionTypeError: If value is neither text nor callable.
        LambdaSyntaxError: If value is text that does not compile.
    """
    logger.error(f"as_callable: unsupported value of type {type(value).__name__}")
    raise CoercionTypeError(value)


@as_callable.register(str)
def _text_as_callable(value: str, namespace: Optional[Mapping[str, Any]] = None) -> Callable[..., Any]:
    compiler = get_default_compiler()
    if has_return(value):
        return compiler.compile_statements(value, namespace)
    return compiler.compile(value, namespace)


@as_callable.register(collections.abc.Callable)
def _callable_as_callable(value: Callable[..., Any], namespace: Optional[Mapping[str, Any]] = None) -> Callable[..., Any]:
    return value


to_function = as_callable


def call(fn: Any, *args: Any) -> Any:
    """Coerces fn and calls it with args: call('/', 2, 4) == 0.5."""
    return as_callable(fn)(*args)


def apply(fn: Any, args: Iterable[Any]) -> Any:
    """Coerces fn and applies it to an argument sequence: apply('x+1', [2]) == 3."""
    return as_callable(fn)(*args)
