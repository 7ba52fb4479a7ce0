"""
Pydantic models shared by the parser and the compiler.
"""

import logging
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)


class LambdaForm(str, Enum):
    """The grammar a text expression was recognized as."""
    ARROW = "arrow"
    UNDERSCORE = "underscore"
    SECTION = "section"
    IMPLICIT = "implicit"
    STATEMENT = "statement"


class LambdaSource(BaseModel):
    """
    Parameter list and body derived from a text expression.

    A chained arrow text ('x -> y -> x + y') is represented as a stage whose
    `inner` holds the next stage; the last stage carries the `body`.
    """
    text: str
    form: LambdaForm
    params: List[str] = Field(default_factory=list)
    body: Optional[str] = None
    inner: Optional['LambdaSource'] = None

    @model_validator(mode='after')
    def check_body_or_inner(self) -> 'LambdaSource':
        if (self.body is None) == (self.inner is None):
            raise ValueError("LambdaSource requires exactly one of 'body' or 'inner'.")
        return self

    @property
    def depth(self) -> int:
        """Number of nested parameter lists (1 unless arrows are chained)."""
        return 1 if self.inner is None else 1 + self.inner.depth

    def final_body(self) -> str:
        """Returns the body text of the innermost stage."""
        stage = self
        while stage.inner is not None:
            stage = stage.inner
        return stage.body
LambdaSource.model_rebuild()
