"""
Delta Lexer Package

Implements the lexical analyzer (tokenizer) for the Delta language.

Key Features:
- Lazy, pull-based token stream with one character of lookahead
- Line/column tracking for every token
- Never fails: unknown input surfaces as UNDEFINED tokens plus warnings

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerWarning

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerWarning",
    "tokenize_string",
    "tokenize_file",
]
