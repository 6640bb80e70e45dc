"""
Abstract Syntax Tree node definitions for Delta.

Nodes are immutable and each one owns its children outright, so a tree
can never share or cycle. Every node remembers the location of the token
it was built from; locations are ignored when comparing trees.

Author: xwest
"""

import math
from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Optional
from dataclasses import dataclass, field
from enum import Enum

from ..lexer.tokens import SourceLocation, TokenType, SYMBOLS


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Statements
    ASSIGNMENT = "Assignment"

    # Expressions
    BINARY_OP = "BinaryOp"
    UNARY_OP = "UnaryOp"

    # Literals
    NUMBER_LITERAL = "NumberLiteral"
    IDENTIFIER = "Identifier"
    BOOLEAN_LITERAL = "BooleanLiteral"
    STRING_LITERAL = "StringLiteral"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    node_type: ClassVar[ASTNodeType]

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    @property
    def is_statement(self) -> bool:
        """Whether this node may be the root of a statement."""
        return False

    @property
    def unary_ready(self) -> bool:
        """
        Whether a '-' that finds only nodes like this one on the operand
        stack should be read as prefix negation.
        """
        return False

    @property
    def label(self) -> str:
        """Short description used when rendering trees."""
        return self.node_type.value

    @abstractmethod
    def _format(self, *operands: str) -> str:
        """Render this node given its children already rendered, in order."""
        pass

    def __str__(self) -> str:
        return format_node(self)


def format_node(root: ASTNode) -> str:
    """
    Render a tree as a parenthesised expression.

    Walks the tree with an explicit stack so long operator chains do not
    hit the interpreter's recursion limit.
    """
    rendered: List[str] = []
    pending = [(root, False)]

    while pending:
        node, children_done = pending.pop()
        if not children_done:
            pending.append((node, True))
            for child in reversed(node.children()):
                pending.append((child, False))
            continue

        count = len(node.children())
        operands = rendered[len(rendered) - count:]
        del rendered[len(rendered) - count:]
        rendered.append(node._format(*operands))

    return rendered[0]


def format_number(value: float) -> str:
    """Print integral floats without a trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


# ============================================================================
# Statements
# ============================================================================

class Statement(ASTNode):
    """Base class for statements."""

    @property
    def is_statement(self) -> bool:
        return True


@dataclass(frozen=True)
class Assignment(Statement):
    """Assignment statement; the target is always a plain name."""
    name: str
    value: ASTNode
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    node_type: ClassVar[ASTNodeType] = ASTNodeType.ASSIGNMENT

    def children(self) -> List[ASTNode]:
        return [self.value]

    @property
    def label(self) -> str:
        return f"Assignment {self.name}"

    def _format(self, *operands: str) -> str:
        value, = operands
        return f"{self.name} = {value}"


# ============================================================================
# Expressions
# ============================================================================

class Expression(ASTNode):
    """Base class for expressions."""
    pass


@dataclass(frozen=True)
class BinaryOp(Expression):
    """Binary operation expression."""
    operator: TokenType
    left: Expression
    right: Expression
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY_OP

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    @property
    def symbol(self) -> str:
        return SYMBOLS[self.operator]

    @property
    def label(self) -> str:
        return f"BinaryOp {self.symbol}"

    def _format(self, *operands: str) -> str:
        left, right = operands
        return f"({left} {self.symbol} {right})"


@dataclass(frozen=True)
class UnaryOp(Expression):
    """Prefix operation expression."""
    operator: TokenType
    operand: Expression
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    node_type: ClassVar[ASTNodeType] = ASTNodeType.UNARY_OP

    def children(self) -> List[ASTNode]:
        return [self.operand]

    @property
    def unary_ready(self) -> bool:
        return True

    @property
    def symbol(self) -> str:
        return SYMBOLS[self.operator]

    @property
    def label(self) -> str:
        return f"UnaryOp {self.symbol}"

    def _format(self, *operands: str) -> str:
        operand, = operands
        return f"({self.symbol}{operand})"


# ============================================================================
# Literals
# ============================================================================

@dataclass(frozen=True)
class NumberLiteral(Expression):
    value: float
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    node_type: ClassVar[ASTNodeType] = ASTNodeType.NUMBER_LITERAL

    def children(self) -> List[ASTNode]:
        return []

    @property
    def label(self) -> str:
        return f"NumberLiteral {self}"

    def _format(self, *operands: str) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class Identifier(Expression):
    name: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    node_type: ClassVar[ASTNodeType] = ASTNodeType.IDENTIFIER

    def children(self) -> List[ASTNode]:
        return []

    @property
    def unary_ready(self) -> bool:
        return True

    @property
    def label(self) -> str:
        return f"Identifier {self.name}"

    def _format(self, *operands: str) -> str:
        return self.name


@dataclass(frozen=True)
class BooleanLiteral(Expression):
    value: bool
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    node_type: ClassVar[ASTNodeType] = ASTNodeType.BOOLEAN_LITERAL

    def children(self) -> List[ASTNode]:
        return []

    @property
    def unary_ready(self) -> bool:
        return True

    @property
    def label(self) -> str:
        return f"BooleanLiteral {self}"

    def _format(self, *operands: str) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class StringLiteral(Expression):
    value: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    node_type: ClassVar[ASTNodeType] = ASTNodeType.STRING_LITERAL

    def children(self) -> List[ASTNode]:
        return []

    @property
    def label(self) -> str:
        return f"StringLiteral {self}"

    def _format(self, *operands: str) -> str:
        return '"' + self.value.replace('"', '\\"') + '"'
