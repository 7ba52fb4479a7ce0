"""Builds host functions from text expressions."""
from .compiled_lambda import CompiledLambda
from .lambda_compiler import LambdaCompiler, compile_lambda, get_default_compiler

__all__ = ["CompiledLambda", "LambdaCompiler", "compile_lambda", "get_default_compiler"]
