"""
Unit tests for the custom error types.
"""

from strlambda.system.errors import CoercionTypeError, LambdaSyntaxError


def test_lambda_syntax_error_message():
    """The message includes the input and details."""
    error = LambdaSyntaxError("Body is not a valid expression.", "x -> (x", error_details="'(' was never closed")
    assert isinstance(error, SyntaxError)
    assert "Input: 'x -> (x'" in str(error)
    assert "Details: '(' was never closed" in str(error)
    assert error.expression == "x -> (x"

def test_lambda_syntax_error_without_details():
    """Details are optional."""
    error = LambdaSyntaxError("Body is empty.", "x ->")
    assert "Details" not in str(error)
    assert error.error_details == ""

def test_coercion_type_error():
    """The offending value is kept."""
    error = CoercionTypeError(42)
    assert isinstance(error, TypeError)
    assert error.value == 42
    assert "int" in str(error)
