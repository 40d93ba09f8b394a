"""
Lox Scanner - turns source text into tokens

Single left-to-right pass with two cursors: ``start`` marks the first
character of the lexeme being scanned, ``current`` the next character to
look at. Bad input never stops the scan; it is reported and skipped.
"""

import logging
from typing import List, Optional

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS,
    WHITESPACE, eof_token
)
from .errors import (
    ErrorReporter, LexerError, create_unexpected_character_error,
    create_unterminated_string_error
)

logger = logging.getLogger(__name__)


class Scanner:
    """
    Lox lexical analyzer.

    Converts source code text into a list of tokens terminated by EOF,
    reporting malformed input to an ``ErrorReporter``.
    """

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Source code string
            reporter: Diagnostic sink; a private one is created if omitted
        """
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with exactly one EOF token
        """
        self.tokens = []
        self.start = 0
        self.current = 0
        self.line = 1

        while not self._is_at_end():
            self.start = self.current
            self.start_line = self.line
            try:
                self._scan_token()
            except LexerError as e:
                # The offending characters are already consumed; carry on
                self.reporter.error(e.line, e.message, code=e.code)

        self.tokens.append(eof_token(self.line))
        logger.debug("scanned %d tokens over %d lines", len(self.tokens), self.line)
        return self.tokens

    def _scan_token(self):
        """Recognize one lexeme starting at ``self.start``."""
        c = self._advance()

        if c in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[c])
        elif c in EQUAL_SUFFIX_TOKENS:
            short_type, long_type = EQUAL_SUFFIX_TOKENS[c]
            self._add_token(long_type if self._match("=") else short_type)
        elif c == "/":
            if self._match("/"):
                self._skip_line_comment()
            elif self._match("*"):
                self._skip_block_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif c in WHITESPACE:
            pass
        elif c == "\n":
            self.line += 1
        elif c == '"':
            self._string()
        elif self._is_digit(c):
            self._number()
        elif self._is_alpha(c):
            self._identifier()
        else:
            raise create_unexpected_character_error(c, self.line)

    def _skip_line_comment(self):
        # Runs to end of line; the newline itself is left for _scan_token
        while self._peek() != "\n" and not self._is_at_end():
            self._advance()

    def _skip_block_comment(self):
        # Block comments do not nest; an unclosed one runs to end of input
        while not self._is_at_end():
            if self._peek() == "*" and self._peek_next() == "/":
                self._advance()
                self._advance()
                return
            if self._advance() == "\n":
                self.line += 1

    def _string(self):
        """Scan a string literal; the opening quote is already consumed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(self.line)

        self._advance()  # Closing quote

        # No escape sequences: the value is the raw text between the quotes
        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self):
        """Scan a number literal: digits with an optional fractional part."""
        while self._is_digit(self._peek()):
            self._advance()

        # A trailing '.' is only part of the number if a digit follows it
        if self._peek() == "." and self._is_digit(self._peek_next()):
            self._advance()
            while self._is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _identifier(self):
        """Scan an identifier or reserved word."""
        while self._is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _add_token(self, token_type: TokenType, literal=None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.start_line))

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    @staticmethod
    def _is_digit(c: str) -> bool:
        return "0" <= c <= "9"

    @staticmethod
    def _is_alpha(c: str) -> bool:
        return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"

    @classmethod
    def _is_alphanumeric(cls, c: str) -> bool:
        return cls._is_alpha(c) or cls._is_digit(c)


def scan_string(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        reporter: Diagnostic sink for lexical errors

    Returns:
        List of tokens, always ending with EOF
    """
    return Scanner(source, reporter).scan_tokens()


def scan_file(filepath: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Convenience function to scan a source file.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, "r", encoding="utf-8") as f:
        source = f.read()

    return scan_string(source, reporter)
