"""
Interpreter exceptions.

Defines the error taxonomy shared by the parser, the evaluator and the
interpreter facade. Every error carries a kind so callers can tell lexical,
syntax and evaluation failures apart without inspecting messages.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from calc.parser.tokenizer import Token


class ErrorKind(str, Enum):
    """Category of a failed parse or evaluation."""

    LEXICAL = "lexical"
    SYNTAX = "syntax"
    EVALUATION = "evaluation"
    INTERNAL = "internal"


class CalcError(Exception):
    """Base exception for interpreter errors"""

    kind: ErrorKind = ErrorKind.SYNTAX

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def position(self) -> Optional[int]:
        """Source offset the error refers to, if known."""
        return self.details.get("pos")


class ParseError(CalcError):
    """Raised when the token stream does not match the grammar"""

    kind = ErrorKind.SYNTAX

    def __init__(self, message: str, token: "Token"):
        self.token = token
        super().__init__(
            f"{message} at position {token.pos}: '{token.text}'",
            details={"pos": token.pos, "token": token.kind.name, "text": token.text},
        )


class LexicalError(ParseError):
    """Raised when the parser reaches a character no token rule matches"""

    kind = ErrorKind.LEXICAL


class EvaluationError(CalcError):
    """Raised when a well-formed tree cannot be evaluated"""

    kind = ErrorKind.EVALUATION


class DivisionByZeroError(EvaluationError):
    """Raised when the right operand of a division evaluates to zero"""

    def __init__(self, left: int, pos: Optional[int] = None):
        super().__init__(
            f"Division by zero: {left} / 0",
            details={"pos": pos, "dividend": left},
        )


class InternalConsistencyError(EvaluationError):
    """Raised when the evaluator meets a tree the parser should never build"""

    kind = ErrorKind.INTERNAL
