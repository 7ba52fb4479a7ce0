"""
Grammar selection for text expressions.

Turns a text such as 'x -> x + 1', '_ * 2', '/2' or 'y + 2*x' into a
LambdaSource: the parameter list and the body the compiler should build a
function from.
"""

import keyword
import logging
import re
from typing import List, Optional, Set

from strlambda.config.settings import CompilerSettings
from strlambda.lambda_parser.scanner import free_variables, strip_string_literals
from strlambda.system.errors import LambdaSyntaxError
from strlambda.system.models import LambdaForm, LambdaSource

logger = logging.getLogger(__name__)

_ARROW = re.compile(r"\s*->\s*")
_PARAM_SEPARATOR = re.compile(r"\s*,\s*|\s+")
_UNDERSCORE = re.compile(r"\b_\b")
# '-' may end a section but never start one, so '-2*x' stays an expression.
_LEADING_OPERATOR = re.compile(r"^\s*[+*/%&|^!.=<>]")
_TRAILING_OPERATOR = re.compile(r"[+\-*/%&|^!.=<>]\s*$")
_NAME = re.compile(r"[a-zA-Z_]\w*")
_RETURN = re.compile(r"\breturn\b")


def has_return(text: str) -> bool:
    """True when the text is a statement block with an explicit return."""
    return _RETURN.search(text) is not None


class LambdaParser:
    """
    Decides which grammar a text expression uses and derives its parameters.

    Grammars are tried in order: arrow ('x y -> x + y'), underscore
    ('_ + 1'), section ('/2', '2/', '/') and finally implicit variables
    ('x + 2*y').
    """

    def __init__(self, settings: Optional[CompilerSettings] = None):
        self.settings = settings or CompilerSettings()

    def parse_string(self, text: str) -> LambdaSource:
        """
        Parses a text expression into a LambdaSource.

        Args:
            text: The text expression.

        Returns:
            The parameter list and body for the compiler.

        Raises:
            LambdaSyntaxError: If an arrow parameter list is malformed.
            TypeError: If text is not a string.
        """
        if not isinstance(text, str):
            raise TypeError("Input must be a string.")

        sections = _ARROW.split(text)
        if len(sections) > 1:
            source = self._parse_arrow(text, sections)
        elif _UNDERSCORE.search(strip_string_literals(text)):
            source = LambdaSource(text=text, form=LambdaForm.UNDERSCORE, params=["_"], body=text)
        else:
            source = self._parse_section(text)
            if source is None:
                source = LambdaSource(
                    text=text,
                    form=LambdaForm.IMPLICIT,
                    params=free_variables(text, self.settings.self_keyword),
                    body=text,
                )
        logger.debug(f"Parsed '{text}' as {source.form.value} form with params {source.params}")
        return source

    def parse_statements(self, text: str) -> LambdaSource:
        """Wraps a statement block (one containing 'return') without parameters."""
        if not isinstance(text, str):
            raise TypeError("Input must be a string.")
        return LambdaSource(text=text, form=LambdaForm.STATEMENT, params=[], body=text)

    def _parse_arrow(self, text: str, sections: List[str]) -> LambdaSource:
        # Build from the innermost stage outwards: 'x -> y -> body'
        # becomes x-stage(inner=y-stage(body)).
        innermost = len(sections) - 2
        stage = LambdaSource(
            text=text if innermost == 0 else " -> ".join(sections[innermost:]),
            form=LambdaForm.ARROW,
            params=self._split_params(text, sections[innermost]),
            body=sections[-1],
        )
        for index in range(innermost - 1, -1, -1):
            stage = LambdaSource(
                text=" -> ".join(sections[index:]) if index else text,
                form=LambdaForm.ARROW,
                params=self._split_params(text, sections[index]),
                inner=stage,
            )
        return stage

    def _split_params(self, text: str, segment: str) -> List[str]:
        params = [p for p in _PARAM_SEPARATOR.split(segment.strip()) if p]
        seen: Set[str] = set()
        for name in params:
            if not name.isidentifier() or keyword.iskeyword(name):
                logger.error(f"Invalid parameter name '{name}' in '{text}'")
                raise LambdaSyntaxError(f"Invalid parameter name '{name}'.", text)
            if name in seen:
                logger.error(f"Duplicate parameter name '{name}' in '{text}'")
                raise LambdaSyntaxError(f"Duplicate parameter name '{name}'.", text)
            seen.add(name)
        return params

    def _parse_section(self, text: str) -> Optional[LambdaSource]:
        leading = _LEADING_OPERATOR.search(text)
        trailing = _TRAILING_OPERATOR.search(text)
        if not (leading or trailing):
            return None

        taken = set(_NAME.findall(text))
        prefix = self.settings.section_param_prefix
        params: List[str] = []
        body = text
        if leading:
            first = self._fresh_name(prefix + "1", taken)
            params.append(first)
            body = first + body
        if trailing:
            last = self._fresh_name(prefix + "2", taken)
            params.append(last)
            body = body + last
        return LambdaSource(text=text, form=LambdaForm.SECTION, params=params, body=body)

    @staticmethod
    def _fresh_name(candidate: str, taken: Set[str]) -> str:
        while candidate in taken:
            candidate += "_"
        return candidate
