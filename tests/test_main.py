"""
Tests for the command line entry point.
"""

import pytest

from strlambda.__main__ import main, parse_argument


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keeps setup_logging from touching the real root logger."""
    monkeypatch.setattr("strlambda.__main__.setup_logging", lambda *args, **kwargs: None)


def test_parse_argument_literals():
    """Arguments are read as Python literals when possible."""
    assert parse_argument("2") == 2
    assert parse_argument("[1, 2]") == [1, 2]
    assert parse_argument("'x'") == "x"
    assert parse_argument("word") == "word"

def test_call_expression(capsys):
    """The result is printed as its repr."""
    assert main(["x y -> x + 2*y", "1", "2"]) == 0
    assert capsys.readouterr().out.strip() == "5"

def test_section(capsys):
    """Sections work from the command line."""
    assert main(["/2", "4"]) == 0
    assert capsys.readouterr().out.strip() == "2.0"

def test_show_params(capsys):
    """--show-params prints the derived parameters."""
    assert main(["--show-params", "y + 2*x"]) == 0
    assert capsys.readouterr().out.strip() == "y, x"

def test_syntax_error_exit_code(capsys):
    """Compile errors are reported on stderr with exit code 1."""
    assert main(["x -> (x"]) == 1
    assert "Error:" in capsys.readouterr().err
