"""
Shared pytest fixtures for the calc test suite.

This module provides:
- Settings and Interpreter instances isolated from the environment
- Helpers that run the tokenizer/parser/evaluator pipeline directly
"""

import pytest

from calc.core.config import Settings
from calc.interpreter import Interpreter
from calc.parser import Context, EvalVisitor, Parser, Tokenizer


@pytest.fixture
def settings():
    """Settings with defaults only (no environment or .env overrides)."""
    return Settings(_env_file=None)


@pytest.fixture
def interpreter(settings):
    """Interpreter built from default settings."""
    return Interpreter(settings=settings)


@pytest.fixture
def parse_source():
    """Parse a source string with a fresh Tokenizer and Parser."""
    def _parse(source: str, context: Context | None = None, require_eof: bool = True):
        return Parser(Tokenizer(source, context)).parse(require_eof=require_eof)
    return _parse


@pytest.fixture
def eval_source(parse_source):
    """Run the whole pipeline, raising on failure."""
    def _eval(source: str) -> int:
        return EvalVisitor().evaluate(parse_source(source))
    return _eval
