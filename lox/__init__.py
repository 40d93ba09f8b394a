"""
Lox Front-End Package

Scanner, parser and tree printers for the expression subset of the Lox
language.

Architecture:
    lox/
    ├── lexer/           # Tokens, scanner and the diagnostic sink
    ├── parser/          # Expression trees and the recursive descent parser
    ├── printer/         # Infix and reverse Polish tree printers
    └── cli.py           # File runner and interactive prompt

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, ErrorReporter, Diagnostic
from .parser import Parser, Expr, Binary, Grouping, Literal, Unary, ExprVisitor
from .printer import AstPrinter, RpnPrinter

__all__ = [
    # Core classes
    "Scanner",
    "Parser",
    "AstPrinter",
    "RpnPrinter",
    "ErrorReporter",
    "Diagnostic",
    "Token",
    "TokenType",

    # Expression nodes
    "Expr",
    "ExprVisitor",
    "Binary",
    "Grouping",
    "Literal",
    "Unary",

    # Version info
    "__version__",
    "__license__",
]
