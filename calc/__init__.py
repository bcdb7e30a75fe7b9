"""
Calc - integer arithmetic interpreter.

Tokenizes, parses and evaluates expressions built from non-negative integer
literals, `+ - * /` and parentheses.

Quick start:
    from calc import evaluate
    evaluate("(2 + 3) * 4").unwrap()  # 20
"""

from .core.errors import (
    CalcError,
    DivisionByZeroError,
    ErrorKind,
    EvaluationError,
    InternalConsistencyError,
    LexicalError,
    ParseError,
)
from .interpreter import CalcResult, ErrorInfo, Interpreter, evaluate, parse
from .parser import (
    ASTNode,
    BinaryOp,
    Context,
    EvalVisitor,
    Number,
    Parser,
    StringVisitor,
    Token,
    TokenKind,
    Tokenizer,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "CalcError",
    "DivisionByZeroError",
    "ErrorKind",
    "EvaluationError",
    "InternalConsistencyError",
    "LexicalError",
    "ParseError",
    "CalcResult",
    "ErrorInfo",
    "Interpreter",
    "evaluate",
    "parse",
    "ASTNode",
    "BinaryOp",
    "Context",
    "EvalVisitor",
    "Number",
    "Parser",
    "StringVisitor",
    "Token",
    "TokenKind",
    "Tokenizer",
    "tokenize",
]
