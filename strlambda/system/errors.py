"""
System-wide custom error types.
"""
from typing import Any


class LambdaSyntaxError(SyntaxError):
    """
    Custom exception raised when a text expression cannot be compiled.
    Inherits from SyntaxError so callers catching the host's own syntax
    errors also catch this one.
    """
    def __init__(self, message: str, expression: str, error_details: str = ""):
        """
        Initializes the LambdaSyntaxError.

        Args:
            message: A high-level error message.
            expression: The original text expression that caused the error.
            error_details: Specific details from the host parser, if available.
        """
        full_message = f"{message}\nInput: '{expression}'"
        if error_details:
            full_message += f"\nDetails: {error_details}"
        super().__init__(full_message)
        self.expression = expression
        self.error_details = error_details


class CoercionTypeError(TypeError):
    """
    Raised when a value cannot be coerced to a callable.

    Only text values and callables are accepted; other values (numbers,
    None, containers) are rejected instead of being turned into constant
    functions.
    """
    def __init__(self, value: Any):
        super().__init__(
            f"Cannot coerce {type(value).__name__} value {value!r} to a callable. "
            f"Use K(value) for a constant function."
        )
        self.value = value
