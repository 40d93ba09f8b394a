"""
Error handling for the Lox parser.

The parser reports every syntax error to the ``ErrorReporter`` first and
then raises ``ParseError`` to unwind out of the partially built tree.
"""

from typing import Optional

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Raised after a syntax error has been reported.

    Carries the diagnostic that was reported and the offending token.
    ``Parser.parse`` catches it; it never escapes the public API.
    """

    def __init__(self, diagnostic: Diagnostic, token: Optional[Token] = None):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
        self.token = token

    def __str__(self) -> str:
        return str(self.diagnostic)


class SyntaxErrorRecovery:
    """Tables used to resynchronize after a syntax error."""

    # Keywords that begin a statement; synchronization stops in front of them
    STATEMENT_STARTS = frozenset({
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    })

    # Tokens that end a statement; synchronization stops just after them
    STATEMENT_ENDS = frozenset({
        TokenType.SEMICOLON,
    })


EXPECT_EXPRESSION = "Expect expression."
EXPECT_RIGHT_PAREN = "Expect ')' after expression."
TOO_DEEPLY_NESTED = "Expression nested too deeply."

# Error code -> message
PARSER_ERROR_CODES = {
    "P001": EXPECT_EXPRESSION,
    "P002": EXPECT_RIGHT_PAREN,
    "P003": TOO_DEEPLY_NESTED,
}
