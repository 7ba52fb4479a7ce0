"""
Text expressions as functions.

    >>> from strlambda import as_callable, curry, map
    >>> as_callable('x -> x + 1')(1)
    2
    >>> map('*2', [1, 2, 3])
    [2, 4, 6]

Everything public is listed in __all__; import the names you need instead of
installing them globally.
"""

from strlambda.coercion.coercion import apply, as_callable, call, to_function
from strlambda.combinators.combinators import (
    I, K, compose, flip, guard, invoke, not_, pluck, prefilter_at,
    prefilter_slice, returning, sequence, uncurry, until,
)
from strlambda.config.settings import CompilerSettings, load_settings
from strlambda.lambda_compiler.compiled_lambda import CompiledLambda
from strlambda.lambda_compiler.lambda_compiler import LambdaCompiler, compile_lambda
from strlambda.lambda_parser.scanner import free_variables
from strlambda.partial.partial_application import (
    HOLE, CurriedCallable, Hole, PartialCallable, curry, ncurry, partial,
    rcurry, rncurry, saturate,
)
from strlambda.sequences.list_operations import (
    every, filter, foldl, foldr, map, reduce, select, some, zip,
)
from strlambda.system.errors import CoercionTypeError, LambdaSyntaxError
from strlambda.system.models import LambdaForm, LambdaSource

_ = HOLE

__version__ = "0.1.0"

__all__ = [
    # compiler
    "compile_lambda", "LambdaCompiler", "CompiledLambda", "free_variables",
    "LambdaForm", "LambdaSource", "CompilerSettings", "load_settings",
    # coercion
    "as_callable", "to_function", "call", "apply",
    # partial application
    "curry", "rcurry", "ncurry", "rncurry", "partial", "saturate",
    "HOLE", "_", "Hole", "CurriedCallable", "PartialCallable",
    # combinators
    "I", "K", "compose", "sequence", "flip", "uncurry", "guard", "returning",
    "prefilter_at", "prefilter_slice", "not_", "invoke", "pluck", "until",
    # list operations
    "map", "reduce", "foldl", "foldr", "select", "filter", "some", "every", "zip",
    # errors
    "LambdaSyntaxError", "CoercionTypeError",
]
