"""
Abstract Syntax Tree node definitions for Lox expressions.

The node set is closed: Binary, Grouping, Literal and Unary. Nodes are
frozen dataclasses built bottom-up by the parser and never mutated.
Operations over the tree are ``ExprVisitor`` subclasses; because every
``visit_*`` method is abstract, a visitor that forgets a node variant
cannot be instantiated.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, List, TypeVar, Union

from ..lexer.tokens import Token

R = TypeVar("R")

# The closed set of values a Literal may hold; None is Lox's nil
LiteralValue = Union[bool, float, str, None]


class ExprVisitor(ABC, Generic[R]):
    """Visitor interface with one method per expression variant."""

    @abstractmethod
    def visit_binary(self, expr: "Binary") -> R:
        pass

    @abstractmethod
    def visit_grouping(self, expr: "Grouping") -> R:
        pass

    @abstractmethod
    def visit_literal(self, expr: "Literal") -> R:
        pass

    @abstractmethod
    def visit_unary(self, expr: "Unary") -> R:
        pass


class Expr(ABC):
    """Base class for all expression nodes."""

    @abstractmethod
    def accept(self, visitor: ExprVisitor[R]) -> R:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List["Expr"]:
        """Get all child nodes, left to right."""
        pass


@dataclass(frozen=True)
class Binary(Expr):
    """Binary operation: equality, comparison or arithmetic."""
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_binary(self)

    def children(self) -> List[Expr]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Grouping(Expr):
    """Parenthesized expression."""
    expression: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_grouping(self)

    def children(self) -> List[Expr]:
        return [self.expression]


@dataclass(frozen=True)
class Literal(Expr):
    """Literal value: boolean, number, string or nil."""
    value: LiteralValue

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_literal(self)

    def children(self) -> List[Expr]:
        return []


@dataclass(frozen=True)
class Unary(Expr):
    """Prefix operation: ``!`` or ``-``."""
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_unary(self)

    def children(self) -> List[Expr]:
        return [self.right]


def walk(expr: Expr) -> List[Expr]:
    """Return ``expr`` and all of its descendants in pre-order."""
    nodes = [expr]
    for child in expr.children():
        nodes.extend(walk(child))
    return nodes


def depth(expr: Expr) -> int:
    """Height of the tree rooted at ``expr``; a lone literal has depth 0."""
    children = expr.children()
    if not children:
        return 0
    return 1 + max(depth(child) for child in children)
