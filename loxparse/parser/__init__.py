"""
loxparse Parser Package

Recursive descent parser for Lox expressions. Turns an EOF-terminated
token sequence into an expression tree, or reports the first syntax
error and yields no tree.

Key Features:
- Precedence encoded as a chain of grammar rules
- Left-associative binary operators, right-nesting unary operators
- Injected error reporter
- Statement-boundary synchronization for multi-expression callers
- Configurable nesting limit
"""

from .ast_nodes import ASTNodeType, Expr, ExprVisitor, Literal, Grouping, Unary, Binary
from .parser import Parser, Reporter, ParseResult, parse_string, parse_file
from .errors import (
    ParseError, NestingTooDeepError, ErrorReporter, format_error,
    EXPECT_EXPRESSION, EXPECT_RIGHT_PAREN, NESTING_TOO_DEEP, EXPECT_END
)
from .config import ParserConfig
from .printer import AstPrinter

__all__ = [
    # Core parser
    "Parser", "Reporter", "ParseResult", "parse_string", "parse_file",
    "ParserConfig",

    # AST nodes
    "ASTNodeType", "Expr", "ExprVisitor",
    "Literal", "Grouping", "Unary", "Binary",
    "AstPrinter",

    # Error handling
    "ParseError", "NestingTooDeepError", "ErrorReporter", "format_error",
    "EXPECT_EXPRESSION", "EXPECT_RIGHT_PAREN", "NESTING_TOO_DEEP", "EXPECT_END",
]
