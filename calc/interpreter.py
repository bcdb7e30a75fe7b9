"""
Interpreter facade.

Wires the tokenizer, parser and evaluator together and reports the outcome
as a CalcResult value instead of a raised exception:

    >>> evaluate("2 + 3 * 4").value
    14
    >>> evaluate("1 / 0").error.kind
    <ErrorKind.EVALUATION: 'evaluation'>

Use `Interpreter.interpret()` or `CalcResult.unwrap()` when raising is
preferred.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from calc.core.config import Settings, get_settings
from calc.core.errors import CalcError, ErrorKind, ParseError
from calc.core.logging import get_context_logger
from calc.parser.ast import ASTNode
from calc.parser.context import Context
from calc.parser.parser import Parser
from calc.parser.tokenizer import Token, TokenKind, Tokenizer
from calc.parser.visitors import EvalVisitor

logger = get_context_logger(__name__)

T = TypeVar("T")


class ErrorInfo(BaseModel):
    """
    Description of a failed parse or evaluation.

    Attributes:
        kind: lexical, syntax, evaluation or internal
        message: Human-readable description
        position: Source offset the error refers to, if known
    """

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    position: Optional[int] = None

    @classmethod
    def from_exception(cls, exc: CalcError) -> "ErrorInfo":
        return cls(kind=exc.kind, message=exc.message, position=exc.position)


class CalcResult(BaseModel, Generic[T]):
    """
    Outcome of a parse or evaluation: either a value or an error.

    Exactly one of `value` and `error` is meaningful; check `ok` first or
    call `unwrap()`.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    value: Optional[T] = None
    error: Optional[ErrorInfo] = None
    exception: Optional[CalcError] = Field(default=None, exclude=True, repr=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "CalcResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, exc: CalcError) -> "CalcResult[T]":
        return cls(error=ErrorInfo.from_exception(exc), exception=exc)

    def unwrap(self) -> T:
        """Return the value, or re-raise the error that produced this result."""
        if self.exception is not None:
            raise self.exception
        if self.error is not None:
            raise CalcError(self.error.message, details={"pos": self.error.position})
        return self.value


class Interpreter:
    """
    Parses and evaluates integer arithmetic expressions.

    Each call builds a fresh Tokenizer and Parser, so one Interpreter can be
    shared by independent callers.

    Args:
        context: Operator context (defaults from settings)
        settings: Interpreter settings (defaults to get_settings())
    """

    def __init__(
        self,
        context: Context | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.context = context or self._default_context()
        self.evaluator = EvalVisitor()

    def _default_context(self) -> Context:
        if self.settings.ALLOW_STATEMENT_TOKENS:
            return Context.default()
        return Context.minimal()

    def parse_tree(self, source: str) -> ASTNode:
        """
        Parse source to an AST, raising on failure.

        Raises:
            ParseError: If the source is not a valid expression
        """
        limit = self.settings.MAX_SOURCE_LENGTH
        if len(source) > limit:
            raise ParseError(
                f"Source longer than {limit} characters",
                Token(TokenKind.INVALID, source[limit], limit),
            )

        parser = Parser(Tokenizer(source, self.context))
        return parser.parse(require_eof=self.settings.REQUIRE_EOF)

    def interpret(self, source: str) -> int:
        """
        Parse and evaluate source, raising on failure.

        Raises:
            ParseError: If the source is not a valid expression
            EvaluationError: If the expression cannot be evaluated
        """
        return self.evaluator.evaluate(self.parse_tree(source))

    def parse(self, source: str) -> CalcResult[ASTNode]:
        """Parse source to an AST wrapped in a CalcResult."""
        try:
            tree = self.parse_tree(source)
        except CalcError as exc:
            self._log_failure("parse", source, exc)
            return CalcResult.failure(exc)

        logger.debug("Parsed source", extra_data={"source_length": len(source)})
        return CalcResult.success(tree)

    def evaluate(self, source: str | ASTNode) -> CalcResult[int]:
        """
        Evaluate source text or an already-parsed tree.

        Returns:
            CalcResult holding the integer, or the lexical, syntax or
            evaluation error that stopped it
        """
        try:
            if isinstance(source, str):
                value = self.interpret(source)
            else:
                value = self.evaluator.evaluate(source)
        except CalcError as exc:
            self._log_failure("evaluate", source, exc)
            return CalcResult.failure(exc)

        logger.debug("Evaluated expression", extra_data={"result": value})
        return CalcResult.success(value)

    def _log_failure(self, stage: str, source: str | ASTNode, exc: CalcError) -> None:
        logger.warning(
            f"{stage.capitalize()} failed: {exc.message}",
            extra_data={
                "stage": stage,
                "error_kind": exc.kind.value,
                "position": exc.position,
                "source_length": len(source) if isinstance(source, str) else None,
            },
        )


@lru_cache()
def get_interpreter() -> Interpreter:
    """Get cached interpreter built from the default settings"""
    return Interpreter()


def parse(source: str) -> CalcResult[ASTNode]:
    """Parse source with the default interpreter."""
    return get_interpreter().parse(source)


def evaluate(source: str | ASTNode) -> CalcResult[int]:
    """Evaluate source or a tree with the default interpreter."""
    return get_interpreter().evaluate(source)
