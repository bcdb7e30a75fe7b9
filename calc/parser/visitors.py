"""
AST Visitor implementations.

Visitors implement the Visitor pattern to traverse and operate on AST nodes:
- EvalVisitor: Evaluate AST to an integer
- StringVisitor: Convert AST back to infix text with minimal parentheses
"""

from typing import Any, Callable

from calc.core.errors import (
    DivisionByZeroError,
    EvaluationError,
    InternalConsistencyError,
)

from .ast import ASTNode, BinaryOp, Number, left_spine
from .context import Associativity, Context
from .tokenizer import TokenKind


def truncating_div(left: int, right: int) -> int:
    """
    Integer division rounding toward zero.

    Python's // floors, so -7 // 2 == -4; this returns -3.
    """
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


class EvalVisitor:
    """
    Evaluate AST to an integer.

    Division truncates toward zero. Any node shape the parser cannot produce
    raises InternalConsistencyError instead of yielding a default value.
    """

    OPERATIONS: dict[TokenKind, Callable[[int, int], int]] = {
        TokenKind.PLUS: lambda left, right: left + right,
        TokenKind.MINUS: lambda left, right: left - right,
        TokenKind.MULTIPLY: lambda left, right: left * right,
        TokenKind.DIVIDE: truncating_div,
    }

    def evaluate(self, root: ASTNode) -> int:
        """Evaluate a whole tree."""
        if not isinstance(root, (Number, BinaryOp)):
            raise InternalConsistencyError(
                f"Unknown node type: {type(root).__name__}"
            )
        try:
            return root.accept(self)
        except RecursionError:
            raise EvaluationError(
                "Expression tree too deep to evaluate",
                details={"pos": root.token.pos},
            ) from None

    def visit_number(self, node: Number) -> int:
        text = node.text
        if node.kind != TokenKind.NUMBER or not (text.isascii() and text.isdigit()):
            raise InternalConsistencyError(
                f"Leaf holds {node.kind.name} token '{text}'",
                details={"pos": node.token.pos},
            )
        try:
            return int(text)
        except ValueError:
            # Literals past the interpreter's int string-conversion limit
            raise EvaluationError(
                f"Integer literal too long ({len(text)} digits)",
                details={"pos": node.token.pos},
            ) from None

    def visit_binary_op(self, node: BinaryOp) -> int:
        # Fold the left spine in a loop; only right operands recurse, so depth
        # is bounded by parenthesis nesting rather than chain length.
        spine, leaf = left_spine(node)
        for op_node in spine:
            if op_node.kind not in self.OPERATIONS:
                raise InternalConsistencyError(
                    f"Unknown operator: {op_node.kind.name}",
                    details={"pos": op_node.token.pos},
                )

        value = self._visit_child(leaf)
        for op_node in reversed(spine):
            right = self._visit_child(op_node.right)

            if op_node.kind == TokenKind.DIVIDE and right == 0:
                raise DivisionByZeroError(value, pos=op_node.token.pos)

            value = self.OPERATIONS[op_node.kind](value, right)

        return value

    def _visit_child(self, child: Any) -> int:
        if not isinstance(child, (Number, BinaryOp)):
            raise InternalConsistencyError(
                f"Unknown node type: {type(child).__name__}"
            )
        return child.accept(self)


class StringVisitor:
    """
    Convert AST to infix string representation.

    Examples:
    - BinaryOp(Number(2), '+', Number(3)) → "2 + 3"
    - BinaryOp(BinaryOp(2, '+', 3), '*', 4) → "(2 + 3) * 4"
    - BinaryOp(8, '-', BinaryOp(3, '-', 2)) → "8 - (3 - 2)"
    """

    def __init__(self, context: Context | None = None):
        self.context = context or Context.default()

    def visit(self, node: ASTNode) -> str:
        return node.accept(self)

    def visit_number(self, node: Number) -> str:
        return node.text

    def visit_binary_op(self, node: BinaryOp) -> str:
        spine, leaf = left_spine(node)
        text = leaf.accept(self)
        left: ASTNode = leaf

        for op_node in reversed(spine):
            right_str = op_node.right.accept(self)

            # Add parentheses if needed based on precedence
            left_prec = self._get_precedence(left)
            right_prec = self._get_precedence(op_node.right)
            op_prec = self.context.get_operator_precedence(op_node.kind)
            assoc = self.context.get_operator_associativity(op_node.kind)

            if 0 < left_prec < op_prec:
                text = f"({text})"

            if right_prec > 0 and (
                right_prec < op_prec
                or (right_prec == op_prec and assoc == Associativity.LEFT)
            ):
                right_str = f"({right_str})"

            symbol = self.context.get_operator_symbol(op_node.kind)
            text = f"{text} {symbol} {right_str}"
            left = op_node

        return text

    def _get_precedence(self, node: Any) -> int:
        """Get precedence of a node for parenthesization."""
        if isinstance(node, BinaryOp):
            return self.context.get_operator_precedence(node.kind)
        return 0
