"""
Lox expression parser.

Recursive descent over a fixed precedence grammar, lowest binding first:

    expression -> equality
    equality   -> comparison ( ( "!=" | "==" ) comparison )*
    comparison -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       -> factor ( ( "-" | "+" ) factor )*
    factor     -> unary ( ( "/" | "*" ) unary )*
    unary      -> ( "!" | "-" ) unary | primary
    primary    -> NUMBER | STRING | "true" | "false" | "nil"
                | "(" expression ")"

Each binary rule folds to the left, so `a - b - c` parses as
`(a - b) - c`. Unary recursion makes prefix operators nest to the right.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from ..lexer.tokens import Token, TokenType, STATEMENT_KEYWORDS
from ..lexer.lexer import Lexer
from ..lexer.errors import LexerError
from .ast_nodes import Expr, Literal, Grouping, Unary, Binary
from .config import ParserConfig
from .errors import (
    ParseError, NestingTooDeepError, ErrorReporter,
    EXPECT_EXPRESSION, EXPECT_RIGHT_PAREN, NESTING_TOO_DEEP, EXPECT_END
)

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Receives every syntax error the parser finds."""

    def report(self, token: Token, message: str) -> None:
        ...


class Parser:
    """
    Lox expression parser.

    Owns an immutable token sequence and a cursor into it. The first
    syntax error is forwarded to the reporter and abandons the current
    expression; parse() then returns None instead of a tree.
    """

    def __init__(self, tokens: Sequence[Token],
                 reporter: Optional[Reporter] = None,
                 config: Optional[ParserConfig] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the lexer, ending with an EOF token
            reporter: Collaborator receiving syntax errors; an
                ErrorReporter is created when omitted
            config: Parser settings (nesting limit)
        """
        if not tokens:
            raise ValueError("token sequence must not be empty")
        if tokens[-1].type != TokenType.EOF:
            raise ValueError("token sequence must end with an EOF token")

        self.tokens = tuple(tokens)
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.config = config if config is not None else ParserConfig()
        self.current = 0
        self.errors: List[ParseError] = []
        self._depth = 0

    def parse(self) -> Optional[Expr]:
        """
        Parse the whole token sequence as a single expression.

        The cursor is reset first, so calling parse() again on the same
        parser yields an equal tree.

        Returns:
            The root expression, or None if a syntax error was reported
        """
        self.current = 0
        self.errors.clear()
        return self.parse_next()

    def parse_next(self) -> Optional[Expr]:
        """
        Parse one expression starting at the cursor.

        On failure the cursor is left on the offending token; callers
        parsing several independent expressions call synchronize() before
        trying again.
        """
        self._depth = 0
        start = self.current
        try:
            expr = self._expression()
        except ParseError as error:
            self.errors.append(error)
            logger.debug("parse failed at token %d: %s", self.current, error.message)
            return None

        logger.debug("parsed tokens %d..%d into %s", start, self.current, type(expr).__name__)
        return expr

    def synchronize(self):
        """
        Discard tokens until a likely statement boundary.

        Stops just after a ';', just before a statement keyword
        (class, fun, var, for, if, while, print, return), or at EOF.
        """
        start = self.current
        self._advance()

        while not self._is_at_end():
            if self._previous().type == TokenType.SEMICOLON:
                break
            if self._peek().type in STATEMENT_KEYWORDS:
                break
            self._advance()

        logger.debug("synchronize skipped tokens %d..%d", start, self.current)

    def expect_end(self) -> bool:
        """
        Check that the cursor has reached EOF.

        parse() stops after one complete expression; callers that need the
        whole input consumed call this afterwards. Leftover tokens are
        reported at the first of them and recorded in errors.
        """
        if self._is_at_end():
            return True

        self.errors.append(self._error(self._peek(), EXPECT_END))
        return False

    # Grammar rules, lowest precedence first

    def _expression(self) -> Expr:
        return self._equality()

    def _equality(self) -> Expr:
        expr = self._comparison()

        while self._match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            operator = self._previous()
            right = self._comparison()
            expr = Binary(expr, operator, right)

        return expr

    def _comparison(self) -> Expr:
        expr = self._term()

        while self._match(TokenType.GREATER, TokenType.GREATER_EQUAL,
                          TokenType.LESS, TokenType.LESS_EQUAL):
            operator = self._previous()
            right = self._term()
            expr = Binary(expr, operator, right)

        return expr

    def _term(self) -> Expr:
        expr = self._factor()

        while self._match(TokenType.MINUS, TokenType.PLUS):
            operator = self._previous()
            right = self._factor()
            expr = Binary(expr, operator, right)

        return expr

    def _factor(self) -> Expr:
        expr = self._unary()

        while self._match(TokenType.SLASH, TokenType.STAR):
            operator = self._previous()
            right = self._unary()
            expr = Binary(expr, operator, right)

        return expr

    def _unary(self) -> Expr:
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            self._enter_nesting(operator)
            right = self._unary()
            self._depth -= 1
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
            return Literal(self._previous().value)

        if self._match(TokenType.LEFT_PAREN):
            self._enter_nesting(self._previous())
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, EXPECT_RIGHT_PAREN)
            self._depth -= 1
            return Grouping(expr)

        raise self._error(self._peek(), EXPECT_EXPRESSION)

    def _enter_nesting(self, token: Token):
        """Count one more level of nesting, failing past the configured limit."""
        self._depth += 1
        max_depth = self.config.max_depth
        if max_depth is not None and self._depth > max_depth:
            self.reporter.report(token, NESTING_TOO_DEEP)
            raise NestingTooDeepError(token, max_depth)

    # Cursor primitives

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it has one of the given types."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _consume(self, token_type: TokenType, message: str) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()

        raise self._error(self._peek(), message)

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        """Return current token without consuming."""
        return self.tokens[self.current]

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _error(self, token: Token, message: str) -> ParseError:
        """Report a syntax error and return the exception that unwinds the parse."""
        self.reporter.report(token, message)
        return ParseError(message, token)


@dataclass
class ParseResult:
    """Outcome of parse_string: a tree, or the errors that prevented one."""
    expression: Optional[Expr]
    lexer_errors: List[LexerError] = field(default_factory=list)
    parse_errors: List[ParseError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.expression is not None

    @property
    def errors(self) -> List[Exception]:
        return [*self.lexer_errors, *self.parse_errors]


def parse_string(source: str, filename: Optional[str] = None,
                 config: Optional[ParserConfig] = None,
                 require_end: bool = False) -> ParseResult:
    """
    Convenience function to scan and parse a source string.

    Sources with lexer errors are not parsed.

    Args:
        source: Source code string
        filename: Filename for error reporting (defaults to config.filename)
        config: Parser settings
        require_end: Treat tokens left after the expression as an error

    Returns:
        ParseResult holding the tree or the errors
    """
    if config is None:
        config = ParserConfig()
    if filename is None:
        filename = config.filename

    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()
    if lexer.has_errors():
        return ParseResult(None, lexer_errors=list(lexer.errors))

    parser = Parser(tokens, ErrorReporter(), config)
    expression = parser.parse()
    if expression is not None and require_end and not parser.expect_end():
        expression = None
    return ParseResult(expression, parse_errors=list(parser.errors))


def parse_file(filepath: str, config: Optional[ParserConfig] = None,
               require_end: bool = False) -> ParseResult:
    """
    Convenience function to parse a source file.

    Raises:
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse_string(source, filepath, config, require_end)
