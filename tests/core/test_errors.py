"""Tests for the interpreter error taxonomy."""

import pytest

from calc.core.errors import (
    CalcError,
    DivisionByZeroError,
    ErrorKind,
    EvaluationError,
    InternalConsistencyError,
    LexicalError,
    ParseError,
)
from calc.parser import Token, TokenKind


class TestErrorHierarchy:
    """Test kinds and subclass relationships."""

    @pytest.mark.parametrize(
        "error_class,kind",
        [
            (ParseError, ErrorKind.SYNTAX),
            (LexicalError, ErrorKind.LEXICAL),
            (EvaluationError, ErrorKind.EVALUATION),
            (DivisionByZeroError, ErrorKind.EVALUATION),
            (InternalConsistencyError, ErrorKind.INTERNAL),
        ],
    )
    def test_kinds(self, error_class, kind):
        """Test each error class reports its kind."""
        assert error_class.kind == kind
        assert issubclass(error_class, CalcError)

    def test_lexical_is_parse_error(self):
        """Test lexical errors are caught as syntax errors."""
        assert issubclass(LexicalError, ParseError)


class TestErrorDetails:
    """Test messages and details."""

    def test_parse_error_message(self):
        """Test ParseError includes position and token text."""
        error = ParseError("Expected RPAREN, got EOF", Token(TokenKind.EOF, "", 6))
        assert str(error) == "Expected RPAREN, got EOF at position 6: ''"
        assert error.details == {"pos": 6, "token": "EOF", "text": ""}
        assert error.position == 6

    def test_division_error(self):
        """Test DivisionByZeroError records the dividend."""
        error = DivisionByZeroError(9, pos=2)
        assert error.message == "Division by zero: 9 / 0"
        assert error.details["dividend"] == 9
        assert error.position == 2

    def test_position_optional(self):
        """Test errors without a position report None."""
        assert InternalConsistencyError("bad tree").position is None
