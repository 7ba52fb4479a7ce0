"""
Free-variable detection for implicit-parameter text expressions.

The scanner blanks out every span that must not be read as a variable
reference, then collects the identifiers that remain in first-occurrence
order. It does not know about bound variables of a lambda written inside
the text; those are reported as free like any other name.
"""

import functools
import keyword
import logging
import re
from typing import List

logger = logging.getLogger(__name__)

# Single- and double-quoted literals, with an optional r/b/u/f prefix.
_STRING_LITERAL = r"""(?:\b[rRbBuUfF]{1,2})?(?:'(?:[^'\\\n]|\\.)*'|"(?:[^"\\\n]|\\.)*")"""
# Capitalized names (globals, classes) and attribute access suffixes.
_CAPITALIZED_OR_ATTRIBUTE = r"(?:\b[A-Z]|\.[a-zA-Z_])\w*"
# Labels: identifiers immediately followed by ':'.
_KEY_LABEL = r"\b[a-zA-Z_]\w*:"

_IDENTIFIER = re.compile(r"\b[a-zA-Z_]\w*")
_STRINGS = re.compile(_STRING_LITERAL)


@functools.lru_cache(maxsize=None)
def _exclusion_pattern(self_keyword: str) -> re.Pattern:
    return re.compile(
        "|".join([
            _STRING_LITERAL,
            _CAPITALIZED_OR_ATTRIBUTE,
            _KEY_LABEL,
            r"\b" + re.escape(self_keyword) + r"\b",
        ])
    )


def strip_string_literals(text: str) -> str:
    """Returns text with every quoted literal replaced by a blank."""
    return _STRINGS.sub(" ", text)


def free_variables(text: str, self_keyword: str = "self") -> List[str]:
    """
    Returns the implicit parameters of a text expression.

    Args:
        text: The expression, e.g. 'y + 2*x'.
        self_keyword: The receiver name that is never a parameter.

    Returns:
        Identifiers in order of first occurrence, without duplicates.
    """
    remaining = _exclusion_pattern(self_keyword).sub(" ", text)
    names: List[str] = []
    for name in _IDENTIFIER.findall(remaining):
        if keyword.iskeyword(name) or name in names:
            continue
        names.append(name)
    logger.debug(f"Free variables of '{text}': {names}")
    return names
