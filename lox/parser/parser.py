"""
Lox Recursive Descent Parser

One method per grammar rule, lowest precedence first:

    expression -> equality
    equality   -> comparison ( ( "!=" | "==" ) comparison )*
    comparison -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       -> factor ( ( "-" | "+" ) factor )*
    factor     -> unary ( ( "/" | "*" ) unary )*
    unary      -> ( "!" | "-" ) unary | primary
    primary    -> NUMBER | STRING | "true" | "false" | "nil"
                | "(" expression ")"

Every binary level is left associative.
"""

import logging
from typing import Callable, List, Optional

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import ErrorReporter
from .ast_nodes import Expr, Binary, Grouping, Literal, Unary
from .errors import ParseError, SyntaxErrorRecovery, PARSER_ERROR_CODES

logger = logging.getLogger(__name__)


class Parser:
    """
    Lox expression parser.

    Consumes a token list (as produced by ``Scanner.scan_tokens``) and
    builds one expression tree, reporting syntax errors to an
    ``ErrorReporter``.
    """

    def __init__(self, tokens: List[Token], reporter: Optional[ErrorReporter] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the scanner; the last one must be EOF
            reporter: Diagnostic sink; a private one is created if omitted

        Raises:
            ValueError: If ``tokens`` is not terminated by an EOF token
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token list must end with an EOF token")

        self.tokens = tokens
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.current = 0

    def parse(self) -> Optional[Expr]:
        """
        Parse the token stream into an expression tree.

        Returns:
            The root expression, or None if a syntax error was reported.
            A partial tree is never returned.
        """
        try:
            expr = self._expression()
        except ParseError as e:
            logger.debug("parse abandoned: %s", e)
            return None
        except RecursionError:
            # Nesting deeper than the interpreter stack allows
            error = self._error(self._peek(), "P003")
            logger.debug("parse abandoned: %s", error)
            return None

        logger.debug("parsed %s using %d of %d tokens",
                     type(expr).__name__, self.current, len(self.tokens))
        return expr

    # Grammar rules

    def _expression(self) -> Expr:
        return self._equality()

    def _equality(self) -> Expr:
        return self._left_associative(
            self._comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL
        )

    def _comparison(self) -> Expr:
        return self._left_associative(
            self._term,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
        )

    def _term(self) -> Expr:
        return self._left_associative(self._factor, TokenType.MINUS, TokenType.PLUS)

    def _factor(self) -> Expr:
        return self._left_associative(self._unary, TokenType.SLASH, TokenType.STAR)

    def _left_associative(self, operand: Callable[[], Expr], *operators: TokenType) -> Expr:
        """Parse ``operand ( op operand )*`` folding to the left."""
        expr = operand()

        while self._match(*operators):
            operator = self._previous()
            right = operand()
            expr = Binary(expr, operator, right)

        return expr

    def _unary(self) -> Expr:
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            right = self._unary()
            return Unary(operator, right)

        return self._primary()

    def _primary(self) -> Expr:
        if self._match(TokenType.FALSE):
            return Literal(False)
        if self._match(TokenType.TRUE):
            return Literal(True)
        if self._match(TokenType.NIL):
            return Literal(None)

        if self._match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self._previous().literal)

        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, "P002")
            return Grouping(expr)

        raise self._error(self._peek(), "P001")

    # Error recovery

    def synchronize(self):
        """
        Discard tokens until the next likely statement boundary.

        Stops just after a statement terminator, in front of a keyword that
        starts a statement, or at EOF.
        """
        self._advance()

        while not self._is_at_end():
            if self._previous().type in SyntaxErrorRecovery.STATEMENT_ENDS:
                return
            if self._peek().type in SyntaxErrorRecovery.STATEMENT_STARTS:
                return
            self._advance()

    # Utility methods

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it has one of ``token_types``."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token; never moves past EOF."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().is_eof

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _consume(self, token_type: TokenType, code: str) -> Token:
        """Consume token of expected type or report error ``code`` and raise."""
        if self._check(token_type):
            return self._advance()
        raise self._error(self._peek(), code)

    def _error(self, token: Token, code: str) -> ParseError:
        diagnostic = self.reporter.error_at(token, PARSER_ERROR_CODES[code], code=code)
        return ParseError(diagnostic, token)


def parse_tokens(tokens: List[Token], reporter: Optional[ErrorReporter] = None) -> Optional[Expr]:
    """Parse an already scanned token list."""
    return Parser(tokens, reporter).parse()


def parse_string(source: str, reporter: Optional[ErrorReporter] = None) -> Optional[Expr]:
    """
    Convenience function to scan and parse a source string.

    Lexical and syntax errors both go to ``reporter``; the returned tree
    may be valid even when the scanner reported errors.

    Returns:
        Expression tree, or None on a syntax error
    """
    from ..lexer import scan_string

    if reporter is None:
        reporter = ErrorReporter()

    tokens = scan_string(source, reporter)
    return Parser(tokens, reporter).parse()


def parse_file(filepath: str, reporter: Optional[ErrorReporter] = None) -> Optional[Expr]:
    """
    Convenience function to scan and parse a source file.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    from ..lexer import scan_file

    if reporter is None:
        reporter = ErrorReporter()

    tokens = scan_file(filepath, reporter)
    return Parser(tokens, reporter).parse()
