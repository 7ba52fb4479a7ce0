"""Grammar selection and free-variable detection for text expressions."""
from .lambda_parser import LambdaParser
from .scanner import free_variables

__all__ = ["LambdaParser", "free_variables"]
