"""
Abstract Syntax Tree (AST) node definitions for arithmetic expressions.

The tree has exactly two shapes: Number leaves and BinaryOp internal nodes.
Every node keeps the token that labels it, so evaluators and renderers can
report source positions. It follows the Visitor pattern for extensibility.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol

from .tokenizer import Token, TokenKind


class ASTVisitor(Protocol):
    """
    Visitor protocol for traversing AST nodes.

    Implementations provide evaluation and string rendering.
    """

    def visit_number(self, node: "Number") -> Any:
        ...

    def visit_binary_op(self, node: "BinaryOp") -> Any:
        ...


class ASTNode(ABC):
    """
    Base class for all AST nodes.

    Uses the Visitor pattern to allow multiple operations (eval, string)
    without modifying node classes.
    """

    def __init__(self, token: Token):
        self.token = token

    @property
    def kind(self) -> TokenKind:
        return self.token.kind

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor for traversal."""
        pass

    @abstractmethod
    def __repr__(self) -> str:
        """Return string representation for debugging."""
        pass


class Number(ASTNode):
    """
    Represents an integer literal.

    The literal text is kept verbatim (e.g. "007"); conversion to int
    happens during evaluation.
    """

    @property
    def text(self) -> str:
        return self.token.text

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_number(self)

    def __repr__(self) -> str:
        return f"Number({self.text})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.text == other.text


class BinaryOp(ASTNode):
    """
    Represents a binary operation.

    Examples: 2 + 3, 8 - 3, 4 * 5, 7 / 2
    """

    def __init__(self, token: Token, left: ASTNode, right: ASTNode):
        super().__init__(token)
        self.left = left
        self.right = right

    @property
    def op(self) -> str:
        return self.token.text

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_binary_op(self)

    def __repr__(self) -> str:
        spine, leaf = left_spine(self)
        text = repr(leaf)
        for node in reversed(spine):
            text = f"BinaryOp({text}, '{node.op}', {node.right!r})"
        return text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryOp):
            return False
        spine, leaf = left_spine(self)
        other_spine, other_leaf = left_spine(other)
        return (
            len(spine) == len(other_spine)
            and all(
                node.kind == other_node.kind and node.right == other_node.right
                for node, other_node in zip(spine, other_spine)
            )
            and leaf == other_leaf
        )


def left_spine(node: ASTNode) -> tuple[list[BinaryOp], ASTNode]:
    """
    Split a tree along its left children.

    Returns the BinaryOp nodes from the root downward and the first node
    whose left side is not a BinaryOp. Left-associative chains such as
    `1 + 2 + 3` grow only along this spine, so walking it in a loop keeps
    recursion proportional to parenthesis nesting.
    """
    spine: list[BinaryOp] = []
    while isinstance(node, BinaryOp):
        spine.append(node)
        node = node.left
    return spine, node
