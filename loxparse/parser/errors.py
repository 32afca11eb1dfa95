"""
Error handling for the Lox expression parser.

ParseError is the signal the parser raises to unwind out of the grammar
once a syntax error has been reported. The reporter is the collaborator
that receives each error; ErrorReporter is the default one and renders
errors in the classic `[line N] Error at 'x': message` form.
"""

import logging
from typing import Optional, List

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic

logger = logging.getLogger(__name__)


# Messages other Lox tooling matches on verbatim
EXPECT_EXPRESSION = "Expect expression."
EXPECT_RIGHT_PAREN = "Expect ')' after expression."
NESTING_TOO_DEEP = "Expression nesting too deep."
EXPECT_END = "Expect end of expression."

PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "Expected token not found",
    "P003": "Nesting too deep",
    "P004": "Unexpected trailing tokens",
}

_MESSAGE_CODES = {
    EXPECT_EXPRESSION: "P001",
    EXPECT_RIGHT_PAREN: "P002",
    NESTING_TOO_DEEP: "P003",
    EXPECT_END: "P004",
}

_HELP_TEXT = {
    "P001": "An operand (number, string, true, false, nil or '(') was expected here.",
    "P002": "Every '(' must be closed by a matching ')'.",
    "P003": "Split the expression or raise the parser's max_depth setting.",
    "P004": "Only one expression may appear here; join the parts with an operator.",
}


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Carries the offending token and a diagnostic. Raised after the error
    has been reported and caught by Parser.parse(), which turns it into
    an absent result.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.token = token
        if code is None:
            code = _MESSAGE_CODES.get(message)
        if help_text is None and code is not None:
            help_text = _HELP_TEXT.get(code)
        self.diagnostic = Diagnostic(
            message=message,
            location=token.location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return format_error(self.token, self.message)


class NestingTooDeepError(ParseError):
    """Raised when groupings or unary operators nest past the configured limit."""

    def __init__(self, token: Token, max_depth: int):
        super().__init__(
            NESTING_TOO_DEEP,
            token,
            suggestions=[f"Keep nesting at or below {max_depth} levels"]
        )
        self.max_depth = max_depth


def format_error(token: Token, message: str) -> str:
    """Render an error the way the Lox reference tools do."""
    if token.type == TokenType.EOF:
        where = " at end"
    else:
        where = f" at '{token.lexeme}'"
    return f"[line {token.line}] Error{where}: {message}"


class ErrorReporter:
    """
    Default reporter collaborator.

    Anything with a ``report(token, message)`` method can stand in for it.
    This one keeps every error it is given so callers can inspect or print
    them once parsing is over.
    """

    def __init__(self):
        self.errors: List[ParseError] = []

    @property
    def had_error(self) -> bool:
        return len(self.errors) > 0

    def report(self, token: Token, message: str):
        """Record a syntax error at ``token``."""
        self.errors.append(ParseError(message, token))
        logger.info("%s", format_error(token, message))

    def reset(self):
        """Forget every recorded error."""
        self.errors.clear()

    def format_errors(self) -> List[str]:
        return [str(error) for error in self.errors]
