"""
Error handling for the Delta parser and tree builder.

Every structural problem is fatal: the first one aborts the whole parse
and is raised as a ParseError carrying the offending token and location.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType, SourceLocation, SYMBOLS
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser or tree builder encounters a fatal error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unmatched right parenthesis",
    "P002": "Missing operand",
    "P003": "Invalid assignment target",
    "P004": "Unrecognized token",
    "P005": "Statement does not reduce to a single tree",
    "P006": "Expression is not a statement",
}


def _describe(token: Token) -> str:
    if token.type in SYMBOLS:
        return f"'{SYMBOLS[token.type]}'"
    return str(token)


# Helper functions for creating common parser errors

def create_unmatched_paren_error(token: Token) -> ParseError:
    """Create an error for a ')' with no '(' to close."""
    return ParseError(
        message="Unmatched right parenthesis",
        location=token.location,
        token=token,
        code="P001",
        help_text="This ')' has no matching '(' earlier in the statement.",
        suggestions=["Remove the extra ')'", "Add the missing '('"]
    )


def create_missing_operand_error(token: Token) -> ParseError:
    """Create an error for an operator that runs out of operands."""
    return ParseError(
        message=f"Missing operand for {_describe(token)}",
        location=token.location,
        token=token,
        code="P002",
        help_text="Every operator needs an expression on each side it applies to.",
        suggestions=["Check for a dangling operator"]
    )


def create_invalid_assignment_error(token: Token, target: object) -> ParseError:
    """Create an error for assigning to something that is not a name."""
    return ParseError(
        message="Cannot assign to non-identifier",
        location=token.location,
        token=token,
        code="P003",
        help_text=f"The left side of '=' must be a plain name, found {target}.",
    )


def create_unrecognized_token_error(token: Token) -> ParseError:
    """Create an error for a token the tree builder has no rule for."""
    if token.type == TokenType.UNDEFINED:
        help_text = f"The lexer could not classify {token.lexeme!r}."
    elif token.is_keyword:
        help_text = f"'{token.lexeme}' is reserved but not supported in expressions yet."
    else:
        help_text = f"{_describe(token)} cannot appear in an expression."

    return ParseError(
        message=f"Unrecognized token: {_describe(token)}",
        location=token.location,
        token=token,
        code="P004",
        help_text=help_text,
    )


def create_root_count_error(count: int, location: Optional[SourceLocation]) -> ParseError:
    """Create an error for a statement that reduces to zero or several trees."""
    return ParseError(
        message=f"Expected exactly one statement tree, found {count}",
        location=location,
        code="P005",
        help_text="Each statement must combine into a single expression.",
        suggestions=["Check for missing operators between operands",
                     "Separate statements with ';' or a newline"]
    )


def create_not_a_statement_error(node: object, location: Optional[SourceLocation]) -> ParseError:
    """Create an error for a statement whose root is a bare expression."""
    return ParseError(
        message=f"Expression is not a statement: {node}",
        location=location,
        code="P006",
        help_text="Only assignments are statements, e.g. 'x = 1 + 2'.",
    )
