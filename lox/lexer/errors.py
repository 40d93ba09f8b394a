"""
Error handling for the Lox scanner, plus the shared diagnostic sink.

Provides line-tagged diagnostics, the ``ErrorReporter`` the scanner and
parser report into, and the internal exception the scanner uses to escape
a malformed lexeme.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, TextIO

from .tokens import Token

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """The two categories of diagnostic the front-end produces."""
    LEXICAL = "lexical"
    SYNTAX = "syntax"


@dataclass(frozen=True)
class Diagnostic:
    """One reported error."""
    kind: ErrorKind
    line: int
    where: str          # "", " at end" or " at '<lexeme>'"
    message: str
    code: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"


class ErrorReporter:
    """
    Collects diagnostics and tracks whether any error occurred.

    The driver owns one reporter and hands it to every Scanner and Parser
    it creates. Between REPL lines the driver calls ``reset()``.

    Args:
        stream: Optional text stream; each diagnostic is written to it as
            one line when reported (the CLI passes ``sys.stderr``).
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.diagnostics: List[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        return len(self.diagnostics) > 0

    def report(
        self,
        line: int,
        where: str,
        message: str,
        kind: ErrorKind = ErrorKind.SYNTAX,
        code: Optional[str] = None
    ) -> Diagnostic:
        """Record a diagnostic and echo it to the stream, if any."""
        diagnostic = Diagnostic(kind, line, where, message, code)
        self.diagnostics.append(diagnostic)
        logger.debug("%s error reported: %s", kind.value, diagnostic)

        if self.stream is not None:
            self.stream.write(f"{diagnostic}\n")
            self.stream.flush()

        return diagnostic

    def error(self, line: int, message: str, code: Optional[str] = None) -> Diagnostic:
        """Report a lexical error, which has no token to point at."""
        return self.report(line, "", message, ErrorKind.LEXICAL, code)

    def error_at(self, token: Token, message: str, code: Optional[str] = None) -> Diagnostic:
        """Report a syntax error located at ``token``."""
        if token.is_eof:
            where = " at end"
        else:
            where = f" at '{token.lexeme}'"
        return self.report(token.line, where, message, ErrorKind.SYNTAX, code)

    def errors_of(self, kind: ErrorKind) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.kind == kind]

    def reset(self):
        """Forget all diagnostics and clear the error flag."""
        self.diagnostics.clear()


class LexerError(Exception):
    """
    Raised inside the scanner when a lexeme cannot be recognized.

    The scanner's main loop catches it, reports it and keeps scanning, so
    it never escapes ``Scanner.scan_tokens``.
    """

    def __init__(self, message: str, line: int, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.code = code

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


# Error code -> message
ERROR_CODES = {
    "L001": "Unexpected character.",
    "L002": "Unterminated string.",
}


def create_unexpected_character_error(char: str, line: int) -> LexerError:
    """Create an error for a character no token can start with."""
    logger.debug("unexpected character %r on line %d", char, line)
    return LexerError(ERROR_CODES["L001"], line, code="L001")


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal that runs to end of input."""
    return LexerError(ERROR_CODES["L002"], line, code="L002")
