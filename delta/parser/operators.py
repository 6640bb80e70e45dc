"""
Operator metadata shared by the parser, tree builder and evaluator.

Precedence and associativity are a pure function of the token type and
live only in OPERATOR_TABLE below.

Author: xwest
"""

from enum import Enum, IntEnum
from typing import Dict, NamedTuple

from ..lexer.tokens import TokenType


class Precedence(IntEnum):
    """Operator precedence levels (higher binds tighter)."""
    NONE = 0
    ASSIGNMENT = 1      # =
    LOGICAL_OR = 2      # ||
    LOGICAL_AND = 3     # &&
    BIT_OR = 4          # |
    BIT_XOR = 5         # ^
    BIT_AND = 6         # &
    EQUALITY = 7        # ==, !=
    COMPARISON = 8      # <, >, <=, >=
    TERM = 9            # +, -
    FACTOR = 10         # *, /, %
    UNARY = 11          # !, ~
    GROUPING = 12       # ( )


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


class OperatorInfo(NamedTuple):
    precedence: Precedence
    associativity: Associativity


OPERATOR_TABLE: Dict[TokenType, OperatorInfo] = {
    TokenType.LEFT_PAREN: OperatorInfo(Precedence.GROUPING, Associativity.NONE),
    TokenType.RIGHT_PAREN: OperatorInfo(Precedence.GROUPING, Associativity.NONE),

    TokenType.LOGICAL_NOT: OperatorInfo(Precedence.UNARY, Associativity.RIGHT),
    TokenType.BIT_NOT: OperatorInfo(Precedence.UNARY, Associativity.RIGHT),

    TokenType.MULTIPLY: OperatorInfo(Precedence.FACTOR, Associativity.LEFT),
    TokenType.DIVIDE: OperatorInfo(Precedence.FACTOR, Associativity.LEFT),
    TokenType.MODULO: OperatorInfo(Precedence.FACTOR, Associativity.LEFT),

    TokenType.PLUS: OperatorInfo(Precedence.TERM, Associativity.LEFT),
    TokenType.MINUS: OperatorInfo(Precedence.TERM, Associativity.LEFT),

    TokenType.GREATER_THAN: OperatorInfo(Precedence.COMPARISON, Associativity.LEFT),
    TokenType.GREATER_EQUAL: OperatorInfo(Precedence.COMPARISON, Associativity.LEFT),
    TokenType.LESS_THAN: OperatorInfo(Precedence.COMPARISON, Associativity.LEFT),
    TokenType.LESS_EQUAL: OperatorInfo(Precedence.COMPARISON, Associativity.LEFT),

    TokenType.EQUAL: OperatorInfo(Precedence.EQUALITY, Associativity.LEFT),
    TokenType.NOT_EQUAL: OperatorInfo(Precedence.EQUALITY, Associativity.LEFT),

    TokenType.BIT_AND: OperatorInfo(Precedence.BIT_AND, Associativity.LEFT),
    TokenType.BIT_XOR: OperatorInfo(Precedence.BIT_XOR, Associativity.LEFT),
    TokenType.BIT_OR: OperatorInfo(Precedence.BIT_OR, Associativity.LEFT),
    TokenType.LOGICAL_AND: OperatorInfo(Precedence.LOGICAL_AND, Associativity.LEFT),
    TokenType.LOGICAL_OR: OperatorInfo(Precedence.LOGICAL_OR, Associativity.LEFT),

    TokenType.ASSIGN: OperatorInfo(Precedence.ASSIGNMENT, Associativity.RIGHT),
}

_NOT_AN_OPERATOR = OperatorInfo(Precedence.NONE, Associativity.NONE)

# Always prefix
PREFIX_OPERATORS = {TokenType.LOGICAL_NOT, TokenType.BIT_NOT}

# May be prefix depending on what has been built so far
MAYBE_PREFIX_OPERATORS = PREFIX_OPERATORS | {TokenType.MINUS}

GROUPING = {TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN}


def operator_info(token_type: TokenType) -> OperatorInfo:
    return OPERATOR_TABLE.get(token_type, _NOT_AN_OPERATOR)


def precedence(token_type: TokenType) -> Precedence:
    return operator_info(token_type).precedence


def associativity(token_type: TokenType) -> Associativity:
    return operator_info(token_type).associativity


def is_operator(token_type: TokenType) -> bool:
    """Parentheses count as operators here; they have the highest precedence."""
    return precedence(token_type) > Precedence.NONE


def is_prefix_operator(token_type: TokenType) -> bool:
    return token_type in PREFIX_OPERATORS


def may_be_prefix(token_type: TokenType) -> bool:
    return token_type in MAYBE_PREFIX_OPERATORS


def is_left_associative(token_type: TokenType) -> bool:
    return associativity(token_type) == Associativity.LEFT
