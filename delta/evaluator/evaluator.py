"""
Delta tree evaluator

A thin calculator over statement trees. Numbers add, subtract, multiply,
divide and take remainders; strings concatenate with numbers, booleans
and other strings; booleans negate. Everything else is an EvaluationError.

Assignments bind their value in the evaluator's environment, so later
statements (and later REPL lines) can read the name back.

Author: xwest
"""

import logging
import math
from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..lexer.tokens import TokenType, SYMBOLS
from ..parser import compile_string
from ..parser.ast_nodes import (
    ASTNode, ASTVisitor, Statement, Assignment, BinaryOp, UnaryOp,
    NumberLiteral, Identifier, BooleanLiteral, StringLiteral, format_number
)
from .errors import (
    create_unsupported_operator_error, create_operand_error,
    create_nesting_error, create_unrecognized_node_error
)

logger = logging.getLogger(__name__)


class ValueKind(Enum):
    NUMERIC = "Numeric"
    BOOLEAN = "Boolean"
    STRING = "String"
    UNDEFINED = "Undefined"


@dataclass(frozen=True)
class Value:
    """Result of evaluating a node."""
    kind: ValueKind
    data: Any = None

    @classmethod
    def numeric(cls, number: float) -> 'Value':
        return cls(ValueKind.NUMERIC, float(number))

    @classmethod
    def boolean(cls, flag: bool) -> 'Value':
        return cls(ValueKind.BOOLEAN, bool(flag))

    @classmethod
    def string(cls, text: str) -> 'Value':
        return cls(ValueKind.STRING, text)

    @classmethod
    def undefined(cls) -> 'Value':
        return cls(ValueKind.UNDEFINED)

    def __str__(self) -> str:
        if self.kind == ValueKind.NUMERIC:
            return format_number(self.data)
        if self.kind == ValueKind.BOOLEAN:
            return "true" if self.data else "false"
        if self.kind == ValueKind.STRING:
            return self.data
        return "UNDEFINED"


def _divide(left: float, right: float) -> float:
    # IEEE semantics instead of ZeroDivisionError
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _remainder(left: float, right: float) -> float:
    if right == 0.0:
        return math.nan
    return math.fmod(left, right)


NUMERIC_OPERATIONS = {
    TokenType.MINUS: lambda left, right: left - right,
    TokenType.MULTIPLY: lambda left, right: left * right,
    TokenType.DIVIDE: _divide,
    TokenType.MODULO: _remainder,
}


class Evaluator(ASTVisitor):
    """
    Evaluates statement trees.

    The environment maps names to values and survives between calls to
    evaluate(), which is what the REPL relies on.
    """

    def __init__(self, environment: Optional[Dict[str, Value]] = None):
        self.environment: Dict[str, Value] = environment if environment is not None else {}

    def evaluate(self, statements: Sequence[Statement]) -> List[Value]:
        """
        Evaluate statements in order.

        Returns:
            One value per statement

        Raises:
            EvaluationError: On the first unsupported operation, or a tree
                nested too deeply to walk
        """
        results = []
        for statement in statements:
            try:
                value = statement.accept(self)
            except RecursionError:
                raise create_nesting_error(statement) from None
            logger.debug("%s => %s", statement, value)
            results.append(value)
        return results

    def visit(self, node: ASTNode) -> Value:
        if isinstance(node, Assignment):
            return self._visit_assignment(node)
        elif isinstance(node, BinaryOp):
            return self._visit_binary(node)
        elif isinstance(node, UnaryOp):
            return self._visit_unary(node)
        elif isinstance(node, NumberLiteral):
            return Value.numeric(node.value)
        elif isinstance(node, StringLiteral):
            return Value.string(node.value)
        elif isinstance(node, BooleanLiteral):
            return Value.boolean(node.value)
        elif isinstance(node, Identifier):
            return self.environment.get(node.name, Value.undefined())

        raise create_unrecognized_node_error(node)

    def _visit_assignment(self, node: Assignment) -> Value:
        value = node.value.accept(self)
        self.environment[node.name] = value
        return value

    def _visit_binary(self, node: BinaryOp) -> Value:
        left = node.left.accept(self)
        right = node.right.accept(self)

        if node.operator == TokenType.PLUS:
            return self._add(node, left, right)

        operation = NUMERIC_OPERATIONS.get(node.operator)
        if operation is None:
            raise create_unsupported_operator_error(node, node.symbol)
        if left.kind != ValueKind.NUMERIC or right.kind != ValueKind.NUMERIC:
            raise create_operand_error(node, node.symbol, left, right)
        return Value.numeric(operation(left.data, right.data))

    def _add(self, node: BinaryOp, left: Value, right: Value) -> Value:
        if left.kind == ValueKind.NUMERIC and right.kind == ValueKind.NUMERIC:
            return Value.numeric(left.data + right.data)

        # Concatenation needs a string on at least one side
        text_kinds = (ValueKind.NUMERIC, ValueKind.BOOLEAN, ValueKind.STRING)
        if ValueKind.STRING in (left.kind, right.kind) and \
                left.kind in text_kinds and right.kind in text_kinds:
            return Value.string(f"{left}{right}")

        raise create_operand_error(node, SYMBOLS[TokenType.PLUS], left, right)

    def _visit_unary(self, node: UnaryOp) -> Value:
        operand = node.operand.accept(self)

        if node.operator == TokenType.LOGICAL_NOT:
            if operand.kind != ValueKind.BOOLEAN:
                raise create_operand_error(node, node.symbol, operand)
            return Value.boolean(not operand.data)

        if node.operator == TokenType.MINUS:
            if operand.kind != ValueKind.NUMERIC:
                raise create_operand_error(node, node.symbol, operand)
            return Value.numeric(-operand.data)

        raise create_unsupported_operator_error(node, node.symbol)


def evaluate_string(source: str, filename: str = "<string>") -> List[Value]:
    """
    Convenience function to compile and evaluate a source string.

    Raises:
        ParseError: If the source does not parse
        EvaluationError: If a statement cannot be evaluated
    """
    return Evaluator().evaluate(compile_string(source, filename))
