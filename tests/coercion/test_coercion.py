"""
Unit tests for as_callable and the call/apply helpers.
"""

import pytest

from strlambda.coercion.coercion import apply, as_callable, call, to_function
from strlambda.lambda_compiler.compiled_lambda import CompiledLambda
from strlambda.system.errors import CoercionTypeError, LambdaSyntaxError
from strlambda.system.models import LambdaForm

# --- Test text values ---

def test_text_is_compiled():
    """A text expression becomes a compiled function."""
    fn = as_callable("+1")
    assert isinstance(fn, CompiledLambda)
    assert fn(2) == 3

def test_text_with_return_is_a_statement_block():
    """Text containing 'return' is compiled as a function body."""
    fn = as_callable("return 1")
    assert fn.form == LambdaForm.STATEMENT
    assert fn() == 1
    assert fn(1) == 1

def test_text_with_namespace():
    """Extra globals can be supplied for text values."""
    assert as_callable("x -> x * SCALE", namespace={"SCALE": 3})(2) == 6

def test_invalid_text_raises_syntax_error():
    """Text that does not compile raises immediately."""
    with pytest.raises(LambdaSyntaxError):
        as_callable("x -> (x")

# --- Test callables ---

def test_function_is_returned_unchanged():
    """A callable is its own coercion."""
    def double(x):
        return 2 * x
    assert as_callable(double) is double

@pytest.mark.parametrize("value", [max, len, int, str.upper, (lambda: 1)])
def test_builtins_and_types_are_callables(value):
    """Builtins, classes and methods pass through."""
    assert as_callable(value) is value

def test_callable_object_is_returned_unchanged():
    """Instances with __call__ pass through."""
    class Adder:
        def __call__(self, x):
            return x + 1
    adder = Adder()
    assert as_callable(adder) is adder

@pytest.mark.parametrize("value", ["x+1", "x -> y -> x + y", "/", "return 2", max])
def test_idempotent(value):
    """Coercing a coerced value changes nothing."""
    once = as_callable(value)
    assert as_callable(once) is once

# --- Test rejected values ---

@pytest.mark.parametrize("value", [42, 3.5, None, [1, 2], {"x": 1}, b"x+1"])
def test_non_callables_rejected(value):
    """Values that are neither text nor callable raise a type error."""
    with pytest.raises(CoercionTypeError) as excinfo:
        as_callable(value)
    assert excinfo.value.value is value
    assert isinstance(excinfo.value, TypeError)

def test_number_is_not_a_constant_function():
    """as_callable(42) is an error, not K(42)."""
    with pytest.raises(TypeError, match="K\\(value\\)"):
        as_callable(42)

# --- Test helpers ---

def test_to_function_alias():
    """to_function is the same operation."""
    assert to_function is as_callable

def test_call():
    """call coerces then calls with positional arguments."""
    assert call("x+1", 2) == 3
    assert call("/", 2, 4) == 0.5

def test_apply():
    """apply coerces then applies an argument sequence."""
    assert apply("x+1", [2]) == 3
    assert apply("/", (2, 4)) == 0.5
