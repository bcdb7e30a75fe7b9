"""
Tokenizer for integer arithmetic expressions.

This module provides regex-based, pull-driven tokenization. Tokens are
produced one at a time by `Tokenizer.next_token()`, so the parser never holds
more than one token of lookahead.

The tokenizer never raises: characters that match no rule come back as
INVALID tokens and are rejected by the parser where a real token is required.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from .context import Context


class TokenKind(Enum):
    """Token kinds for arithmetic expressions."""

    # Literals
    IDENTIFIER = auto()
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()

    # Statement punctuation (lexed, never parsed)
    ASSIGN = auto()  # =
    SEMICOLON = auto()  # ;

    # Parentheses
    LPAREN = auto()  # (
    RPAREN = auto()  # )

    # Special
    EOF = auto()
    INVALID = auto()


@dataclass(frozen=True)
class Token:
    """
    Represents a single token in the expression.

    Attributes:
        kind: The token kind
        text: The exact lexeme matched (empty for EOF)
        pos: Position in the source string (for error reporting)
    """

    kind: TokenKind
    text: str
    pos: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, '{self.text}', pos={self.pos})"


class Tokenizer:
    """
    Tokenizes one arithmetic expression on demand.

    The tokenizer handles:
    - Non-negative integer literals (no sign, no decimal point)
    - Identifiers (letter followed by letters/digits)
    - The operators + - * / and parentheses
    - Optionally = and ; (see Context.minimal())
    """

    # Order matters: whitespace first, the catch-all INVALID last
    PATTERNS = {
        "WHITESPACE": r"\s+",
        "NUMBER": r"\d+",
        "IDENTIFIER": r"[A-Za-z][A-Za-z0-9]*",
        "PLUS": r"\+",
        "MINUS": r"-",
        "MULTIPLY": r"\*",
        "DIVIDE": r"/",
        "LPAREN": r"\(",
        "RPAREN": r"\)",
        "ASSIGN": r"=",
        "SEMICOLON": r";",
        "INVALID": r".",
    }

    STATEMENT_KINDS = frozenset({TokenKind.ASSIGN, TokenKind.SEMICOLON})

    # Shared by all instances; only the cursor is per-instance state
    combined_pattern = re.compile(
        "|".join(f"(?P<{name}>{pattern})" for name, pattern in PATTERNS.items()),
        re.ASCII | re.DOTALL,
    )

    def __init__(self, source: str, context: "Context | None" = None):
        """
        Initialize tokenizer over a source string.

        Args:
            source: The expression to tokenize
            context: Optional context; controls whether = and ; are tokens
        """
        self._source = source
        self._pos = 0
        self.allow_statement_tokens = (
            context.get_flag("allow_statement_tokens", True) if context else True
        )

    @property
    def source(self) -> str:
        return self._source

    @property
    def pos(self) -> int:
        """Cursor position: offset of the next unread character."""
        return self._pos

    def next_token(self) -> Token:
        """
        Advance past the next lexeme and return its token.

        Whitespace is skipped. Once the source is exhausted every call
        returns an EOF token positioned at the end of the source.
        """
        source = self._source

        while self._pos < len(source):
            # Never None: the INVALID rule matches any single character
            match = self.combined_pattern.match(source, self._pos)
            name = match.lastgroup
            text = match.group()
            token_pos = self._pos
            self._pos = match.end()

            if name == "WHITESPACE":
                continue

            kind = TokenKind[name]
            if kind in self.STATEMENT_KINDS and not self.allow_statement_tokens:
                kind = TokenKind.INVALID

            return Token(kind, text, token_pos)

        return Token(TokenKind.EOF, "", len(source))

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenKind.EOF:
                return


def tokenize(source: str, context: "Context | None" = None) -> list[Token]:
    """
    Tokenize a complete expression.

    Args:
        source: The expression to tokenize
        context: Optional context passed to the Tokenizer

    Returns:
        List of tokens, always ending with a single EOF token
    """
    return list(Tokenizer(source, context))
