"""
Recursive descent parser for integer arithmetic.

The parser pulls tokens from a Tokenizer one at a time and builds an
Abstract Syntax Tree for the LL(1) grammar:

    expr   := term   ( ('+' | '-') term   )*
    term   := factor ( ('*' | '/') factor )*
    factor := NUMBER | '(' expr ')'

Both binary levels are left-associative, so `8 - 3 - 2` parses as
`(8 - 3) - 2`. There is no backtracking and no error recovery: the first
mismatch raises.
"""

from calc.core.errors import LexicalError, ParseError
from calc.core.logging import get_context_logger

from .ast import ASTNode, BinaryOp, Number
from .tokenizer import Token, TokenKind, Tokenizer

logger = get_context_logger(__name__)


class Parser:
    """
    Recursive descent parser holding one token of lookahead.

    The first token is fetched when the parser is constructed; `eat()` is
    the only method that consumes it.
    """

    ADDITIVE = (TokenKind.PLUS, TokenKind.MINUS)
    MULTIPLICATIVE = (TokenKind.MULTIPLY, TokenKind.DIVIDE)

    def __init__(self, tokenizer: Tokenizer):
        self.tokenizer = tokenizer
        self._current = tokenizer.next_token()

    @property
    def current(self) -> Token:
        """Current lookahead token (not yet consumed)."""
        return self._current

    def at_end(self) -> bool:
        """Check whether all meaningful input has been consumed."""
        return self._current.kind == TokenKind.EOF

    def parse(self, require_eof: bool = True) -> ASTNode:
        """
        Parse the whole token stream to an AST.

        Args:
            require_eof: Reject tokens left over after the expression

        Returns:
            Root AST node

        Raises:
            ParseError: If the tokens do not form an expression
            LexicalError: If an invalid character is reached
        """
        try:
            root = self.parse_expr()
        except RecursionError:
            raise ParseError("Expression nested too deeply", self._current) from None

        if require_eof and not self.at_end():
            raise self._error("Unexpected token after expression")

        logger.debug(
            "Parsed expression",
            extra_data={"root": type(root).__name__, "consumed_all": self.at_end()},
        )
        return root

    def eat(self, kind: TokenKind) -> Token:
        """
        Consume the current token if it has the expected kind.

        Args:
            kind: Expected token kind

        Returns:
            The consumed token

        Raises:
            ParseError: If current token doesn't match expected kind
        """
        token = self._current
        if token.kind != kind:
            raise self._error(f"Expected {kind.name}, got {token.kind.name}")
        self._current = self.tokenizer.next_token()
        return token

    def parse_expr(self) -> ASTNode:
        """expr := term (('+' | '-') term)*"""
        node = self.parse_term()

        while self._current.kind in self.ADDITIVE:
            op_token = self.eat(self._current.kind)
            node = BinaryOp(op_token, node, self.parse_term())

        return node

    def parse_term(self) -> ASTNode:
        """term := factor (('*' | '/') factor)*"""
        node = self.parse_factor()

        while self._current.kind in self.MULTIPLICATIVE:
            op_token = self.eat(self._current.kind)
            node = BinaryOp(op_token, node, self.parse_factor())

        return node

    def parse_factor(self) -> ASTNode:
        """factor := NUMBER | '(' expr ')'"""
        token = self._current

        if token.kind == TokenKind.NUMBER:
            return Number(self.eat(TokenKind.NUMBER))

        if token.kind == TokenKind.LPAREN:
            self.eat(TokenKind.LPAREN)
            node = self.parse_expr()
            self.eat(TokenKind.RPAREN)
            return node

        if token.kind == TokenKind.EOF:
            raise self._error("Unexpected end of input, expected NUMBER or LPAREN")

        raise self._error(f"Expected NUMBER or LPAREN, got {token.kind.name}")

    def _error(self, message: str) -> ParseError:
        """Build the error for the current token; INVALID tokens are lexical."""
        token = self._current
        if token.kind == TokenKind.INVALID:
            return LexicalError(f"Invalid character: {message}", token)
        return ParseError(message, token)
