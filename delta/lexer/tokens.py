"""
Token definitions for the Delta lexer.

This module defines every token type Delta knows about, including:
- Operators (arithmetic, comparison, bitwise, logical, assignment)
- Reserved keywords (some of which have no grammar yet)
- Literals (numbers, strings, identifiers)
- Punctuation, comments and the statement delimiter

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token types in Delta.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Infix Operators
    # ========================================================================
    PLUS = auto()                   # +
    MINUS = auto()                  # - (also prefix, decided by the tree builder)
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    MODULO = auto()                 # %
    LESS_EQUAL = auto()             # <=
    GREATER_EQUAL = auto()          # >=
    GREATER_THAN = auto()           # >
    LESS_THAN = auto()              # <
    BIT_AND = auto()                # &
    BIT_OR = auto()                 # |
    BIT_XOR = auto()                # ^
    LOGICAL_AND = auto()            # &&
    LOGICAL_OR = auto()             # ||
    ASSIGN = auto()                 # =
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=

    # ========================================================================
    # Prefix Operators
    # ========================================================================
    BIT_NOT = auto()                # ~
    LOGICAL_NOT = auto()            # !

    # ========================================================================
    # Keywords
    # ========================================================================
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    FUN = auto()                    # fun (reserved)
    MATCH = auto()                  # match (reserved)
    WHILE = auto()                  # while (reserved)
    FOR = auto()                    # for (reserved)
    LET = auto()                    # let (reserved)

    # ========================================================================
    # Punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    LEFT_BRACKET = auto()           # [
    RIGHT_BRACKET = auto()          # ]
    COLON = auto()                  # :
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    ARROW = auto()                  # -> (match arms)

    # ========================================================================
    # Literals and miscellaneous
    # ========================================================================
    STRING = auto()                 # "hello", "say \"hi\""
    NUMBER = auto()                 # 42, 3.14
    IDENTIFIER = auto()             # variable_name
    UNDEFINED = auto()              # anything the lexer could not classify
    COMMENT = auto()                # // to end of line
    DELIMITER = auto()              # newline or ;


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Lines are 1-based, columns are 0-based and the offset counts
    characters from the start of the source.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Delta language.

    Contains the token type, lexeme (raw text), semantic value
    and source location.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # Payload (float for NUMBER, text for STRING, ...)
    location: SourceLocation

    def __str__(self) -> str:
        if self.type in PAYLOAD_TYPES:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def end_offset(self) -> int:
        """Offset just past the last character of this token."""
        return self.location.offset + len(self.lexeme)

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in {
            TokenType.NUMBER, TokenType.STRING, TokenType.TRUE, TokenType.FALSE
        }

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER

    @property
    def is_delimiter(self) -> bool:
        return self.type == TokenType.DELIMITER


# Token types whose value is part of their identity
PAYLOAD_TYPES = {
    TokenType.STRING,
    TokenType.NUMBER,
    TokenType.IDENTIFIER,
    TokenType.UNDEFINED,
    TokenType.COMMENT,
}

KEYWORDS = {
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "match": TokenType.MATCH,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,
    "let": TokenType.LET,
}

# Two-character operators are tried before their one-character prefixes
DOUBLE_CHAR_OPERATORS = {
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "->": TokenType.ARROW,
    "<=": TokenType.LESS_EQUAL,
    ">=": TokenType.GREATER_EQUAL,
    "&&": TokenType.LOGICAL_AND,
    "||": TokenType.LOGICAL_OR,
}

SINGLE_CHAR_OPERATORS = {
    "=": TokenType.ASSIGN,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "%": TokenType.MODULO,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
    "&": TokenType.BIT_AND,
    "|": TokenType.BIT_OR,
    "~": TokenType.BIT_NOT,
    "^": TokenType.BIT_XOR,
    "!": TokenType.LOGICAL_NOT,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
}

# Reverse lookup used when printing trees
SYMBOLS = {
    token_type: text
    for text, token_type in {**SINGLE_CHAR_OPERATORS, **DOUBLE_CHAR_OPERATORS}.items()
}
