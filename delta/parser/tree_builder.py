"""
Delta Tree Builder

Turns one statement's postfix token sequence into a single statement
tree using an operand stack.

Whether '-' is negation or subtraction is decided from the shape of the
operand stack at the moment the '-' is seen: it is prefix when the stack
is empty or every node on it is unary-ready (a UnaryOp, BooleanLiteral
or Identifier). This is what turns the leading '-z' in 'l = -z + 7' into
negation. It is a heuristic over already-built nodes, not a grammar rule,
so 'x = -3' still reads the '-' as subtraction from x.

Author: xwest
"""

import logging
from typing import List, Sequence

from ..lexer.tokens import Token, TokenType
from ..lexer.lexer import Lexer
from .ast_nodes import (
    ASTNode, Expression, Statement, Assignment, BinaryOp, UnaryOp,
    NumberLiteral, Identifier, BooleanLiteral, StringLiteral
)
from .operators import is_operator, is_prefix_operator, GROUPING
from .parser import Parser
from .errors import (
    create_missing_operand_error, create_invalid_assignment_error,
    create_unrecognized_token_error, create_root_count_error,
    create_not_a_statement_error
)

logger = logging.getLogger(__name__)


class TreeBuilder:
    """
    Builds statement trees from postfix token sequences.

    The builder keeps no state between statements; one instance can be
    reused for a whole program.
    """

    def build(self, postfix: Sequence[Token]) -> Statement:
        """
        Build the tree for one statement.

        Args:
            postfix: The statement's tokens in postfix order

        Returns:
            The statement's root node

        Raises:
            ParseError: If the sequence does not form exactly one statement
        """
        stack: List[ASTNode] = []

        for token in postfix:
            if token.type in GROUPING or not is_operator(token.type):
                stack.append(self._make_leaf(token))
            elif is_prefix_operator(token.type):
                self._apply_prefix(token, stack)
            elif token.type == TokenType.MINUS and all(node.unary_ready for node in stack):
                self._apply_prefix(token, stack)
            else:
                self._apply_binary(token, stack)

        location = postfix[0].location if postfix else None
        if len(stack) != 1:
            raise create_root_count_error(len(stack), location)

        root = stack[0]
        if not root.is_statement:
            raise create_not_a_statement_error(root, location)

        logger.debug("built statement: %s", root)
        return root

    def build_all(self, statements: Sequence[Sequence[Token]]) -> List[Statement]:
        """
        Build every statement of a program, skipping empty ones left by
        blank or comment-only lines. Stops at the first error.
        """
        return [self.build(postfix) for postfix in statements if postfix]

    def _make_leaf(self, token: Token) -> Expression:
        if token.type == TokenType.IDENTIFIER:
            return Identifier(token.value, token.location)
        if token.type == TokenType.NUMBER:
            return NumberLiteral(token.value, token.location)
        if token.type == TokenType.STRING:
            return StringLiteral(token.value, token.location)
        if token.type in (TokenType.TRUE, TokenType.FALSE):
            return BooleanLiteral(token.type == TokenType.TRUE, token.location)

        # Includes parentheses left behind by an unclosed '('
        raise create_unrecognized_token_error(token)

    def _apply_prefix(self, token: Token, stack: List[ASTNode]):
        if not stack:
            raise create_missing_operand_error(token)
        operand = stack.pop()
        stack.append(UnaryOp(token.type, operand, token.location))

    def _apply_binary(self, token: Token, stack: List[ASTNode]):
        if len(stack) < 2:
            raise create_missing_operand_error(token)

        # Postfix order: the right operand is on top
        right = stack.pop()
        left = stack.pop()

        if token.type == TokenType.ASSIGN:
            if not isinstance(left, Identifier):
                raise create_invalid_assignment_error(token, left)
            stack.append(Assignment(left.name, right, token.location))
        else:
            stack.append(BinaryOp(token.type, left, right, token.location))


def build_tree(postfix: Sequence[Token]) -> Statement:
    """Convenience function to build a single statement."""
    return TreeBuilder().build(postfix)


def build_statements(statements: Sequence[Sequence[Token]]) -> List[Statement]:
    """Convenience function to build every non-empty statement."""
    return TreeBuilder().build_all(statements)


def compile_string(source: str, filename: str = "<string>") -> List[Statement]:
    """
    Run the whole front end over a source string.

    Args:
        source: Source code string (already trimmed by the caller)
        filename: Filename for error reporting

    Returns:
        Statement trees in source order

    Raises:
        ParseError: On the first structural error
    """
    statements = Parser(Lexer(source, filename)).parse()
    return build_statements(statements)


def compile_file(filepath: str) -> List[Statement]:
    """
    Run the whole front end over a source file.

    Raises:
        ParseError: On the first structural error
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return compile_string(source.strip(), filepath)
