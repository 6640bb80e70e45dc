"""
Delta Shunting-Yard Parser

Reorders the infix token stream into postfix (reverse-Polish) order, one
sequence per statement. Statements end at DELIMITER tokens. Building the
tree from each postfix sequence is the TreeBuilder's job.

Author: xwest
"""

import logging
from typing import Iterable, List

from ..lexer.tokens import Token, TokenType
from ..lexer.lexer import Lexer
from .operators import is_operator, precedence, is_left_associative
from .errors import create_unmatched_paren_error

logger = logging.getLogger(__name__)


class Parser:
    """
    Delta shunting-yard parser.

    Pulls tokens from any iterable (normally a Lexer) one at a time.
    The operator stack and output queue belong to the statement currently
    being read and are reset at every delimiter.
    """

    def __init__(self, tokens: Iterable[Token]):
        """
        Initialize parser with a token stream.

        Args:
            tokens: Tokens from the lexer, consumed lazily
        """
        self.tokens = tokens
        self.operator_stack: List[Token] = []
        self.output_queue: List[Token] = []
        self.statements: List[List[Token]] = []
        self.comments: List[Token] = []

    def parse(self) -> List[List[Token]]:
        """
        Parse the token stream into postfix statements.

        Returns:
            One postfix token list per statement, in source order

        Raises:
            ParseError: On an unmatched ')'
        """
        self.operator_stack = []
        self.output_queue = []
        self.statements = []
        self.comments = []

        for token in self.tokens:
            # Comments never reach the shunting-yard step
            if token.type == TokenType.COMMENT:
                self.comments.append(token)
            elif token.type == TokenType.DELIMITER:
                self._end_statement()
            elif token.type == TokenType.LEFT_PAREN:
                self.operator_stack.append(token)
            elif token.type == TokenType.RIGHT_PAREN:
                self._close_group(token)
            elif is_operator(token.type):
                self._push_operator(token)
            else:
                self.output_queue.append(token)

        # The last statement may not be followed by a delimiter
        self._flush_operators()
        if self.output_queue:
            self._complete_statement()

        return self.statements

    def _push_operator(self, token: Token):
        """Pop operators that bind at least as tightly, then push token."""
        token_precedence = precedence(token.type)
        left_associative = is_left_associative(token.type)

        while self.operator_stack:
            top = self.operator_stack[-1]
            if top.type == TokenType.LEFT_PAREN:
                break
            top_precedence = precedence(top.type)
            if top_precedence > token_precedence or (
                    top_precedence == token_precedence and left_associative):
                self.output_queue.append(self.operator_stack.pop())
            else:
                break

        self.operator_stack.append(token)

    def _close_group(self, token: Token):
        """Pop operators back to the matching '(' and discard it."""
        while self.operator_stack:
            top = self.operator_stack.pop()
            if top.type == TokenType.LEFT_PAREN:
                return
            self.output_queue.append(top)

        raise create_unmatched_paren_error(token)

    def _flush_operators(self):
        """
        Move every remaining operator to the output. A leftover '(' is
        flushed like any other operator and not reported.
        """
        while self.operator_stack:
            self.output_queue.append(self.operator_stack.pop())

    def _end_statement(self):
        self._flush_operators()
        self._complete_statement()

    def _complete_statement(self):
        logger.debug("statement %d: %s", len(self.statements) + 1,
                     " ".join(str(token) for token in self.output_queue))
        self.statements.append(self.output_queue)
        self.output_queue = []
        self.operator_stack = []


def parse_string(source: str, filename: str = "<string>") -> List[List[Token]]:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        Postfix token lists, one per statement

    Raises:
        ParseError: If parsing fails
    """
    parser = Parser(Lexer(source, filename))
    return parser.parse()


def parse_file(filepath: str) -> List[List[Token]]:
    """
    Convenience function to parse a source file.

    Args:
        filepath: Path to source file

    Returns:
        Postfix token lists, one per statement

    Raises:
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse_string(source.strip(), filepath)
