"""
Delta Lexer - turns source text into a lazy stream of tokens

The lexer is pull based: the parser asks for one token at a time and
nothing is buffered beyond the single character of lookahead needed for
two-character operators and the \\" escape. It never raises on bad input;
unknown characters and malformed numbers come out as UNDEFINED tokens.

Author: xwest
"""

import logging
from typing import Iterator, List, Optional

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS,
    DOUBLE_CHAR_OPERATORS, SINGLE_CHAR_OPERATORS
)
from .errors import (
    LexerWarning, create_unrecognized_character_warning,
    create_unterminated_string_warning, create_invalid_number_warning
)

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
IDENTIFIER_START = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
IDENTIFIER_CONTINUE = IDENTIFIER_START + DIGITS


def _is_digit(char: str) -> bool:
    # '' is "in" every string, so test length explicitly
    return len(char) == 1 and char in DIGITS


class Lexer:
    """
    Delta lexical analyzer.

    Iterating a Lexer scans the source from the beginning; a scan cannot
    be resumed once abandoned, but a new iteration always starts over.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for diagnostics
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 0
        self.warnings: List[LexerWarning] = []

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    def tokens(self) -> Iterator[Token]:
        """
        Yield tokens one at a time, starting from the top of the source.
        """
        self.pos = 0
        self.line = 1
        self.column = 0
        self.warnings.clear()

        while self.pos < len(self.source):
            token = self._next_token()
            if token is not None:
                yield token

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens (there is no EOF token)
        """
        return list(self.tokens())

    def _next_token(self) -> Optional[Token]:
        """Scan one token, or return None after skipping whitespace."""
        start = self._location()
        current_char = self.source[self.pos]
        next_char = self._peek()

        if current_char == '/' and next_char == '/':
            return self._tokenize_comment(start)

        if current_char == '"':
            return self._tokenize_string(start)

        if current_char == '\n':
            return self._tokenize_delimiter(start, newline=True)
        if current_char == ';':
            return self._tokenize_delimiter(start, newline=False)

        if current_char in ' \t':
            self._advance()
            return None

        # Operators and punctuation (two-character forms first)
        pair = current_char + next_char
        if pair in DOUBLE_CHAR_OPERATORS:
            self._advance_by(2)
            return Token(DOUBLE_CHAR_OPERATORS[pair], pair, None, start)
        if current_char in SINGLE_CHAR_OPERATORS:
            self._advance()
            return Token(SINGLE_CHAR_OPERATORS[current_char], current_char, None, start)

        if current_char in IDENTIFIER_START:
            return self._tokenize_identifier_or_keyword(start)

        if _is_digit(current_char):
            return self._tokenize_number(start)

        self._advance()
        self.warnings.append(create_unrecognized_character_warning(current_char, start))
        return Token(TokenType.UNDEFINED, current_char, current_char, start)

    def _tokenize_comment(self, start: SourceLocation) -> Token:
        """Tokenize a // comment; the newline that ends it is left for the next token."""
        self._advance_by(2)
        while self.pos < len(self.source) and self.source[self.pos] != '\n':
            self._advance()

        lexeme = self.source[start.offset:self.pos]
        return Token(TokenType.COMMENT, lexeme, lexeme[2:].strip(), start)

    def _tokenize_string(self, start: SourceLocation) -> Token:
        """Tokenize a string literal. \\" is the only escape sequence."""
        self._advance()  # Skip opening quote

        value_parts = []
        terminated = False

        while self.pos < len(self.source):
            char = self.source[self.pos]
            if char == '\\' and self._peek() == '"':
                value_parts.append('"')
                self._advance_by(2)
            elif char == '"':
                self._advance()
                terminated = True
                break
            else:
                # Raw newlines are kept as-is and do not move to a new line
                value_parts.append(char)
                self._advance()

        if not terminated:
            self.warnings.append(create_unterminated_string_warning(start))

        lexeme = self.source[start.offset:self.pos]
        return Token(TokenType.STRING, lexeme, ''.join(value_parts), start)

    def _tokenize_delimiter(self, start: SourceLocation, newline: bool) -> Token:
        """Tokenize a statement delimiter; only a newline moves to the next line."""
        lexeme = self.source[self.pos]
        self._advance()
        if newline:
            self.line += 1
            self.column = 0
        return Token(TokenType.DELIMITER, lexeme, None, start)

    def _tokenize_identifier_or_keyword(self, start: SourceLocation) -> Token:
        """Tokenize an identifier, or a keyword when the text is reserved."""
        while self.pos < len(self.source) and self.source[self.pos] in IDENTIFIER_CONTINUE:
            self._advance()

        lexeme = self.source[start.offset:self.pos]
        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)

        if token_type == TokenType.IDENTIFIER:
            value = lexeme
        elif token_type in (TokenType.TRUE, TokenType.FALSE):
            value = token_type == TokenType.TRUE
        else:
            value = None

        return Token(token_type, lexeme, value, start)

    def _tokenize_number(self, start: SourceLocation) -> Token:
        """
        Tokenize a number. A '.' is part of the number only when a digit
        follows it, so "1." lexes as NUMBER then DOT.
        """
        while self.pos < len(self.source):
            char = self.source[self.pos]
            if _is_digit(char) or (char == '.' and _is_digit(self._peek())):
                self._advance()
            else:
                break

        lexeme = self.source[start.offset:self.pos]
        try:
            value = float(lexeme)
        except ValueError:
            self.warnings.append(create_invalid_number_warning(lexeme, start))
            return Token(TokenType.UNDEFINED, lexeme, lexeme, start)

        return Token(TokenType.NUMBER, lexeme, value, start)

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def _advance(self):
        """Advance position by one character."""
        self.pos += 1
        self.column += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            if self.pos < len(self.source):
                self._advance()

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing ('' past the end)."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return ''

    def has_warnings(self) -> bool:
        """Check if lexer recorded any warnings."""
        return len(self.warnings) > 0


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for diagnostics

    Returns:
        List of tokens
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    for warning in lexer.warnings:
        logger.debug("lexer warning %s at %s: %s", warning.code, warning.location,
                     warning.diagnostic.message)

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source.strip(), filepath)
