"""
Compiles text expressions into Python functions.

The parser supplies the parameter list and body; this module turns them into
an `ast.Lambda` (or, for statement blocks, a function definition) and asks
the interpreter to compile and evaluate it.
"""

import ast
import builtins
import functools
import logging
import textwrap
from typing import Any, Dict, List, Mapping, Optional

from strlambda.config.settings import CompilerSettings, load_settings
from strlambda.lambda_compiler.compiled_lambda import CompiledLambda
from strlambda.lambda_parser.lambda_parser import LambdaParser
from strlambda.system.errors import LambdaSyntaxError
from strlambda.system.models import LambdaSource

logger = logging.getLogger(__name__)

FILENAME = "<strlambda>"
STATEMENT_FUNCTION_NAME = "strlambda_fn"


class LambdaCompiler:
    """
    Builds callables from text expressions.

    Every compilation re-derives the parameters from the text. When
    settings.cache_size is positive, results for texts compiled without an
    extra namespace are kept in an LRU cache of that size.
    """

    def __init__(self, settings: Optional[CompilerSettings] = None):
        self.settings = settings or CompilerSettings()
        self.parser = LambdaParser(self.settings)
        if self.settings.cache_size:
            self._compile_cached = functools.lru_cache(maxsize=self.settings.cache_size)(self._compile_text)
        else:
            self._compile_cached = None
        logger.debug(f"LambdaCompiler initialized (cache_size={self.settings.cache_size})")

    def compile(self, text: str, namespace: Optional[Mapping[str, Any]] = None) -> CompiledLambda:
        """
        Compiles a text expression.

        Args:
            text: The text expression, e.g. 'x -> x + 1' or '/2'.
            namespace: Extra global names visible to the body.

        Returns:
            A CompiledLambda taking the derived parameters.

        Raises:
            LambdaSyntaxError: If the body or parameter list is not valid Python.
        """
        if namespace is None and self._compile_cached is not None:
            return self._compile_cached(text)
        return self._compile_text(text, namespace)

    def compile_statements(self, text: str, namespace: Optional[Mapping[str, Any]] = None) -> CompiledLambda:
        """
        Compiles a statement block containing an explicit 'return'.

        The block becomes the body of a function declaring no named
        parameters; positional arguments are available to it as `args`.
        """
        source = self.parser.parse_statements(text)
        block = textwrap.indent(textwrap.dedent(text).strip("\n"), "    ")
        definition = f"def {STATEMENT_FUNCTION_NAME}(*args):\n{block}\n"
        try:
            module = ast.parse(definition, filename=FILENAME, mode="exec")
            code = compile(module, FILENAME, "exec")
        except SyntaxError as e:
            logger.error(f"Statement block is not valid Python: {text!r}: {e}")
            raise LambdaSyntaxError("Statement block is not valid Python.", text, error_details=str(e)) from e

        scope = self._globals(namespace)
        exec(code, scope)
        return CompiledLambda(source, scope[STATEMENT_FUNCTION_NAME])

    def cache_info(self):
        """Returns functools cache statistics, or None when caching is off."""
        if self._compile_cached is None:
            return None
        return self._compile_cached.cache_info()

    def _compile_text(self, text: str, namespace: Optional[Mapping[str, Any]] = None) -> CompiledLambda:
        source = self.parser.parse_string(text)
        expression = ast.Expression(body=self._lambda_node(source))
        ast.fix_missing_locations(expression)
        try:
            code = compile(expression, FILENAME, "eval")
        except SyntaxError as e:
            logger.error(f"Could not compile '{text}': {e}")
            raise LambdaSyntaxError("Text expression is not a valid function.", text, error_details=str(e)) from e
        function = eval(code, self._globals(namespace))
        return CompiledLambda(source, function)

    def _lambda_node(self, stage: LambdaSource) -> ast.Lambda:
        if stage.inner is not None:
            body = self._lambda_node(stage.inner)
        else:
            body = self._parse_body(stage)
        return ast.Lambda(args=self._arguments(stage.params), body=body)

    @staticmethod
    def _arguments(params: List[str]) -> ast.arguments:
        return ast.arguments(
            posonlyargs=[],
            args=[ast.arg(arg=name) for name in params],
            vararg=None,
            kwonlyargs=[],
            kw_defaults=[],
            kwarg=None,
            defaults=[],
        )

    @staticmethod
    def _parse_body(stage: LambdaSource) -> ast.expr:
        if not stage.body.strip():
            logger.error(f"Empty body in '{stage.text}'")
            raise LambdaSyntaxError("Body is empty.", stage.text)
        # Parenthesized so the body may span lines or end in a comment.
        try:
            tree = ast.parse(f"({stage.body.strip()}\n)", filename=FILENAME, mode="eval")
        except SyntaxError as e:
            logger.error(f"Body of '{stage.text}' is not a valid expression: {e}")
            raise LambdaSyntaxError("Body is not a valid expression.", stage.text, error_details=str(e)) from e
        return tree.body

    @staticmethod
    def _globals(namespace: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        scope: Dict[str, Any] = {"__builtins__": builtins}
        if namespace:
            scope.update(namespace)
        return scope


_default_compiler: Optional[LambdaCompiler] = None


def get_default_compiler() -> LambdaCompiler:
    """Returns the shared compiler, creating it from the environment on first use."""
    global _default_compiler
    if _default_compiler is None:
        _default_compiler = LambdaCompiler(load_settings())
    return _default_compiler


def reset_default_compiler() -> None:
    """Drops the shared compiler so the next use re-reads the environment."""
    global _default_compiler
    _default_compiler = None


def compile_lambda(text: str, namespace: Optional[Mapping[str, Any]] = None) -> CompiledLambda:
    """
    Compiles a text expression with the shared compiler.

    >>> compile_lambda('x -> x + 1')(1)
    2
    >>> compile_lambda('/2')(4)
    2.0
    """
    return get_default_compiler().compile(text, namespace)
