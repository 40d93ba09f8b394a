"""
Lox Parser Package

Implements a recursive descent parser for Lox expressions. Produces
immutable expression trees that are traversed with visitors.

Key Features:
- Fixed-precedence grammar with left-associative binary operators
- Closed node set (Binary, Grouping, Literal, Unary) with visitor dispatch
- Line-tagged syntax diagnostics and statement-boundary synchronization
"""

from .ast_nodes import (
    Expr, ExprVisitor, Binary, Grouping, Literal, Unary, LiteralValue, walk, depth
)
from .parser import Parser, parse_tokens, parse_string, parse_file
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "parse_tokens",
    "parse_string",
    "parse_file",

    # AST nodes
    "Expr", "ExprVisitor",
    "Binary", "Grouping", "Literal", "Unary",
    "LiteralValue", "walk", "depth",

    # Error handling
    "ParseError",
]
