"""
Operator context for arithmetic expressions.

A context records how the interpreter treats each operator token:
- Its printed symbol
- Its precedence and associativity
- Which optional token kinds the tokenizer recognizes

The grammar itself fixes precedence (expr over term over factor); the table
here mirrors it so renderers can decide where parentheses are required.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .tokenizer import TokenKind


class Associativity(Enum):
    """Operator associativity."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OperatorConfig:
    """Configuration for a binary operator."""

    symbol: str
    precedence: int
    associativity: Associativity = Associativity.LEFT


@dataclass
class Context:
    """
    Environment shared by the tokenizer and the renderers.

    Attributes:
        name: Context name (e.g., "Default", "Minimal")
        operators: Operator token kind to operator configuration
        flags: Additional context-specific flags
    """

    name: str
    operators: dict[TokenKind, OperatorConfig] = field(default_factory=dict)
    flags: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def default(cls) -> "Context":
        """
        Create the standard arithmetic context.

        Recognizes `=` and `;` as tokens so a statement-aware caller can
        build on the same tokenizer.
        """
        context = cls(name="Default")
        context.operators = {
            TokenKind.PLUS: OperatorConfig("+", precedence=1),
            TokenKind.MINUS: OperatorConfig("-", precedence=1),
            TokenKind.MULTIPLY: OperatorConfig("*", precedence=2),
            TokenKind.DIVIDE: OperatorConfig("/", precedence=2),
        }
        context.flags["allow_statement_tokens"] = True
        return context

    @classmethod
    def minimal(cls) -> "Context":
        """Create a context whose tokenizer treats `=` and `;` as invalid."""
        context = cls.default()
        context.name = "Minimal"
        context.flags["allow_statement_tokens"] = False
        return context

    def get_flag(self, flag_name: str, default: Any = None) -> Any:
        """
        Get a context flag value.

        Args:
            flag_name: Name of the flag
            default: Default value if flag not set

        Returns:
            Flag value or default
        """
        return self.flags.get(flag_name, default)

    def set_flag(self, flag_name: str, value: Any) -> None:
        """Set a context flag."""
        self.flags[flag_name] = value

    def get_operator_precedence(self, kind: TokenKind) -> int:
        """
        Get the precedence of an operator.

        Returns:
            Precedence value (higher = binds tighter), 0 for non-operators
        """
        if kind in self.operators:
            return self.operators[kind].precedence
        return 0

    def get_operator_associativity(self, kind: TokenKind) -> Associativity:
        """Get the associativity of an operator, LEFT when unknown."""
        if kind in self.operators:
            return self.operators[kind].associativity
        return Associativity.LEFT

    def get_operator_symbol(self, kind: TokenKind) -> str:
        """Get the printed symbol of an operator."""
        return self.operators[kind].symbol
