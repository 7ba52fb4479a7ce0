"""
Compiler settings, read from the environment over built-in defaults.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, NonNegativeInt, field_validator

logger = logging.getLogger(__name__)

ENV_PREFIX = "STRLAMBDA_"

# Environment variable suffix -> settings field
_ENV_FIELDS = {
    "SECTION_PREFIX": "section_param_prefix",
    "SELF_KEYWORD": "self_keyword",
    "CACHE_SIZE": "cache_size",
    "LOG_LEVEL": "log_level",
}


class CompilerSettings(BaseModel):
    """Knobs for the text-expression compiler."""
    section_param_prefix: str = "_arg"
    self_keyword: str = "self"
    cache_size: NonNegativeInt = 0
    log_level: str = "WARNING"

    @field_validator('section_param_prefix', 'self_keyword')
    @classmethod
    def check_identifier(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"'{value}' is not a valid identifier")
        return value

    @field_validator('log_level')
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level '{value}'")
        return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> CompilerSettings:
    """
    Builds CompilerSettings from STRLAMBDA_* variables.

    Args:
        environ: Mapping to read from; defaults to os.environ.

    Returns:
        Validated settings. Unset variables keep their defaults.
    """
    source = os.environ if environ is None else environ
    overrides = {}
    for suffix, field_name in _ENV_FIELDS.items():
        raw = source.get(ENV_PREFIX + suffix)
        if raw is not None and raw != "":
            overrides[field_name] = raw
    if overrides:
        logger.debug(f"Compiler settings overridden from environment: {sorted(overrides)}")
    return CompilerSettings(**overrides)
