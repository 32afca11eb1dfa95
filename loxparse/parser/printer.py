"""
Parenthesized pretty-printer for expression trees.

Renders every operator in prefix form with explicit parentheses, e.g.
`1 + 2 * 3` becomes `(+ 1 (* 2 3))`, which makes precedence and
associativity visible at a glance.
"""

from typing import Any

from .ast_nodes import Expr, ExprVisitor, Literal, Grouping, Unary, Binary


class AstPrinter(ExprVisitor):
    """Visitor producing a Lisp-style rendering of an expression."""

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_literal_expr(self, expr: Literal) -> str:
        return format_literal(expr.value)

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_unary_expr(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def visit_binary_expr(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return "(" + " ".join(parts) + ")"


def format_literal(value: Any) -> str:
    """Render a literal value using Lox spelling (nil, true, 3 rather than 3.0)."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
