"""
loxparse

Front end for Lox expressions: a scanner and a recursive descent parser
producing expression trees for an evaluator, printer or compiler.

Architecture:
    loxparse/
    ├── lexer/           # Tokenization
    ├── parser/          # Expression grammar, AST, error reporting
    └── cli.py           # Command-line entry point

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType
from .parser import Parser, ParserConfig, AstPrinter, ErrorReporter, parse_string

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "Parser",
    "ParserConfig",
    "AstPrinter",
    "ErrorReporter",
    "parse_string",

    # Version info
    "__version__",
    "__license__",
]
