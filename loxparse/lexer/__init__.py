"""
loxparse Lexer Package

Scanner for the Lox token set. Produces the EOF-terminated token
sequence consumed by the expression parser.

Key Features:
- Single and two-character operators
- Number and string literals with parsed values
- Keyword recognition
- Error collection with source locations
"""

from .tokens import Token, TokenType, SourceLocation, STATEMENT_KEYWORDS, make_token
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "STATEMENT_KEYWORDS",
    "make_token",
    "tokenize_string",
    "tokenize_file",
    "Diagnostic",
    "LexerError",
]
