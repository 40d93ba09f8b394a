"""
Token definitions for the Lox scanner.

This module defines every token type the scanner can produce:
- Single-character punctuation and operators
- One-or-two character operators (maximal munch: ``!=`` over ``!``)
- Literals (numbers, strings, identifiers)
- Reserved keywords
"""

import math
from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict, Tuple


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # breakfast, _tmp1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 123, 45.67

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token type, lexeme (raw text), literal value and the
    1-based line the token starts on.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Any = None             # float for NUMBER, str for STRING
    line: int = 1

    def __str__(self) -> str:
        literal = "" if self.literal is None else stringify(self.literal)
        return f"{self.type.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORDS.values()

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF


def eof_token(line: int) -> Token:
    """Build the synthetic end-of-input token."""
    return Token(TokenType.EOF, "", None, line)


def stringify(value: Any) -> str:
    """Textual form of a literal value as Lox displays it."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_number(value)
    return str(value)


def _format_number(value: float) -> str:
    """
    Render a Lox number the way Lox prints doubles.

    Integral values print without a fraction (``123``). Everything else uses
    the shortest round-tripping digits, in exponent form (``1e+300``,
    ``1e-7``) only below 1e-6 or from 1e21 up.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    exponent = int(exponent)
    if -7 < exponent < 21:
        # repr goes to exponent form sooner than Lox does
        sign = "-" if mantissa.startswith("-") else ""
        digits = mantissa.lstrip("-").replace(".", "")
        if exponent < 0:
            return f"{sign}0.{'0' * (-exponent - 1)}{digits}"
        return f"{sign}{digits}{'0' * (exponent + 1 - len(digits))}"
    return f"{mantissa}e{exponent:+d}"


# Lookup tables used by the scanner for keyword/operator recognition

KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# First character -> (type without trailing '=', type with trailing '=')
EQUAL_SUFFIX_TOKENS: Dict[str, Tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

WHITESPACE = frozenset(" \t\r")
