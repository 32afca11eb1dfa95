"""
Abstract Syntax Tree node definitions for Lox expressions.

The expression grammar yields a closed set of four node types. Nodes are
frozen dataclasses: they are built bottom-up by the parser, compare
structurally, and are never mutated afterwards. Every node supports the
visitor pattern so evaluators and printers can walk the tree without
isinstance chains.
"""

from abc import ABC, abstractmethod
from typing import Any, List
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all expression node types."""
    LITERAL = "Literal"
    GROUPING = "Grouping"
    UNARY = "Unary"
    BINARY = "Binary"


class ExprVisitor(ABC):
    """Abstract visitor interface for traversing expression trees."""

    @abstractmethod
    def visit_literal_expr(self, expr: 'Literal') -> Any:
        pass

    @abstractmethod
    def visit_grouping_expr(self, expr: 'Grouping') -> Any:
        pass

    @abstractmethod
    def visit_unary_expr(self, expr: 'Unary') -> Any:
        pass

    @abstractmethod
    def visit_binary_expr(self, expr: 'Binary') -> Any:
        pass


class Expr(ABC):
    """Base class for all expression nodes."""

    node_type: ASTNodeType

    @abstractmethod
    def accept(self, visitor: ExprVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List['Expr']:
        """Get all child nodes, left to right."""
        pass

    def walk(self):
        """Yield this node and every descendant in pre-order."""
        yield self
        for child in self.children():
            yield from child.walk()


@dataclass(frozen=True)
class Literal(Expr):
    """Constant value: a number, string, boolean, or None for nil."""
    value: Any

    node_type = ASTNodeType.LITERAL

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_literal_expr(self)

    def children(self) -> List[Expr]:
        return []


@dataclass(frozen=True)
class Grouping(Expr):
    """Parenthesized sub-expression."""
    expression: Expr

    node_type = ASTNodeType.GROUPING

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_grouping_expr(self)

    def children(self) -> List[Expr]:
        return [self.expression]


@dataclass(frozen=True)
class Unary(Expr):
    """Prefix operation (`-` or `!`) applied to a single operand."""
    operator: Token
    right: Expr

    node_type = ASTNodeType.UNARY

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_unary_expr(self)

    def children(self) -> List[Expr]:
        return [self.right]


@dataclass(frozen=True)
class Binary(Expr):
    """Infix operation with two operands."""
    left: Expr
    operator: Token
    right: Expr

    node_type = ASTNodeType.BINARY

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_binary_expr(self)

    def children(self) -> List[Expr]:
        return [self.left, self.right]
