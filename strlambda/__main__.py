"""
Command line entry point: compile a text expression and call it.

    python -m strlambda 'x y -> x + 2*y' 1 2
    python -m strlambda --show-params 'y + 2*x'
"""

import argparse
import ast
import logging
import sys
from typing import Any, List, Optional

from strlambda.config.logging_config import setup_logging
from strlambda.config.settings import load_settings
from strlambda.coercion.coercion import as_callable
from strlambda.lambda_compiler.compiled_lambda import CompiledLambda
from strlambda.system.errors import CoercionTypeError, LambdaSyntaxError

logger = logging.getLogger("strlambda.cli")


def parse_argument(raw: str) -> Any:
    """Reads a command line argument as a Python literal, else keeps the string."""
    try:
        return ast.literal_eval(raw)
    except (ValueError, SyntaxError):
        return raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="strlambda", description="Compile a text expression and apply it to arguments.")
    parser.add_argument("expression", help="Text expression, e.g. 'x -> x + 1' or '/2'.")
    parser.add_argument("args", nargs="*", help="Arguments, read as Python literals.")
    parser.add_argument("--show-params", action="store_true", help="Print the derived parameter list instead of calling.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    setup_logging("DEBUG" if args.debug else settings.log_level)

    try:
        fn = as_callable(args.expression)
        if args.show_params:
            params = fn.params if isinstance(fn, CompiledLambda) else []
            print(", ".join(params))
            return 0
        values = [parse_argument(raw) for raw in args.args]
        logger.debug(f"Calling {fn!r} with {values!r}")
        print(repr(fn(*values)))
    except (LambdaSyntaxError, CoercionTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
