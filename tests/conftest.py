import pytest
from unittest.mock import MagicMock

from strlambda.config.settings import CompilerSettings
from strlambda.lambda_compiler import lambda_compiler
from strlambda.lambda_compiler.lambda_compiler import LambdaCompiler
from strlambda.lambda_parser.lambda_parser import LambdaParser


@pytest.fixture(autouse=True)
def fresh_default_compiler(monkeypatch):
    """Makes every test start with a default compiler built from a clean environment."""
    for suffix in ("SECTION_PREFIX", "SELF_KEYWORD", "CACHE_SIZE", "LOG_LEVEL"):
        monkeypatch.delenv(f"STRLAMBDA_{suffix}", raising=False)
    lambda_compiler.reset_default_compiler()
    yield
    lambda_compiler.reset_default_compiler()


@pytest.fixture
def settings():
    """Provides default compiler settings."""
    return CompilerSettings()


@pytest.fixture
def parser(settings):
    """Provides a LambdaParser instance for tests."""
    return LambdaParser(settings)


@pytest.fixture
def compiler(settings):
    """Provides an uncached LambdaCompiler instance for tests."""
    return LambdaCompiler(settings)


@pytest.fixture
def recorder():
    """A mock callable that returns the tuple of arguments it was called with."""
    mock = MagicMock(name="Recorder")
    mock.side_effect = lambda *args: args
    return mock
