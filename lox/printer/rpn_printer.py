"""
Reverse Polish rendering of expression trees.

``(1 + 2) * (4 - 3)`` prints as ``1 2 + 4 3 - *``. Groupings vanish since
postfix order already encodes them.

Prefix operators are emitted glued to their operand (``-123``), which is
only a valid postfix program when the operand is a literal:
``-(1 + 2)`` comes out as ``-1 2 +``.
"""

from ..parser.ast_nodes import Expr, ExprVisitor, Binary, Grouping, Literal, Unary
from ..lexer.tokens import stringify


class RpnPrinter(ExprVisitor[str]):
    """Renders operands first, then the operator."""

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_binary(self, expr: Binary) -> str:
        left = expr.left.accept(self)
        right = expr.right.accept(self)
        return f"{left} {right} {expr.operator.lexeme}"

    def visit_grouping(self, expr: Grouping) -> str:
        return expr.expression.accept(self)

    def visit_literal(self, expr: Literal) -> str:
        return stringify(expr.value)

    def visit_unary(self, expr: Unary) -> str:
        # TODO: emit a distinct postfix negation operator so unary over a
        # group round-trips through an RPN evaluator
        return f"{expr.operator.lexeme}{expr.right.accept(self)}"
