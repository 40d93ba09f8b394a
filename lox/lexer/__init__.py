"""
Lox Lexer Package

Implements the lexical scanner for Lox: source text in, a list of tokens
terminated by EOF out.

Key Features:
- Maximal munch for two-character operators (!=, ==, <=, >=)
- Line and block comments
- String and number literals, identifiers and reserved words
- Line tracking and non-fatal error reporting
"""

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Scanner, scan_string, scan_file
from .errors import Diagnostic, ErrorKind, ErrorReporter, LexerError

__all__ = [
    "Scanner",
    "scan_string",
    "scan_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "ErrorKind",
    "ErrorReporter",
    "LexerError",
]
