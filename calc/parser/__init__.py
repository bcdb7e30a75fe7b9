"""
Calc Parser Package

This package provides integer arithmetic expression parsing.
It includes tokenization, AST construction, evaluation and rendering.
"""

from .ast import ASTNode, Number, BinaryOp
from .tokenizer import Token, TokenKind, Tokenizer, tokenize
from .parser import Parser
from .context import Associativity, Context, OperatorConfig
from .visitors import EvalVisitor, StringVisitor

__all__ = [
    "ASTNode",
    "Number",
    "BinaryOp",
    "Token",
    "TokenKind",
    "Tokenizer",
    "tokenize",
    "Parser",
    "Associativity",
    "Context",
    "OperatorConfig",
    "EvalVisitor",
    "StringVisitor",
]
