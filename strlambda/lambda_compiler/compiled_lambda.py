"""
Defines the CompiledLambda class, the callable produced from a text expression.
"""
import logging
from typing import Any, Callable, List, Optional

from strlambda.system.models import LambdaForm, LambdaSource

logger = logging.getLogger(__name__)

class CompiledLambda:
    def __init__(self, source: LambdaSource, function: Callable[..., Any]):
        """
        Represents a function compiled from a text expression.

        Args:
            source: The parsed parameter list and body the function was built from.
            function: The host function. For chained arrows, calling it returns
                      the function of the next parameter list.
        """
        self.source: LambdaSource = source
        self.function: Callable[..., Any] = function
        logger.debug(f"CompiledLambda created: form={source.form.value}, params=({', '.join(source.params)})")

    @property
    def text(self) -> str:
        return self.source.text

    @property
    def form(self) -> LambdaForm:
        return self.source.form

    @property
    def params(self) -> List[str]:
        return list(self.source.params)

    @property
    def body(self) -> Optional[str]:
        return self.source.final_body()

    def __call__(self, *args, **kwargs):
        return self.function(*args, **kwargs)

    def __repr__(self):
        return f"<CompiledLambda form={self.form.value} params=({', '.join(self.params)}) text={self.text!r}>"
