"""
Fully parenthesized prefix rendering of expression trees.

Used to check the shape the parser produced: ``1 + 2 * 3`` prints as
``(+ 1 (* 2 3))``.
"""

from ..lexer.tokens import stringify
from ..parser.ast_nodes import Expr, ExprVisitor, Binary, Grouping, Literal, Unary


class AstPrinter(ExprVisitor[str]):
    """Renders every operator application in its own parentheses."""

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_binary(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_literal(self, expr: Literal) -> str:
        return stringify(expr.value)

    def visit_unary(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return "(" + " ".join(parts) + ")"
