"""
Diagnostics for the Delta lexer.

The lexer never stops on bad input: anything it cannot classify becomes an
UNDEFINED token and a warning is recorded so tools can still report it.
The Diagnostic class here is shared by the parser and evaluator errors.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop lexing.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common warning codes for categorization
WARNING_CODES = {
    "L001": "Unrecognized character",
    "L002": "Unterminated string literal",
    "L003": "Invalid numeric literal",
}


def create_unrecognized_character_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a character no lexing rule accepts."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Delta source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerWarning(
        message=f"Unrecognized character: '{char}'",
        location=location,
        code="L001",
        help_text=help_text
    )


def create_unterminated_string_warning(location: SourceLocation) -> LexerWarning:
    """Create a warning for a string literal that runs to the end of input."""
    return LexerWarning(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text="String literals must be closed with a matching \" quote.",
        suggestions=["Add a closing \" quote", "Escape embedded quotes as \\\""]
    )


def create_invalid_number_warning(lexeme: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for numeric text that does not convert to a number."""
    return LexerWarning(
        message=f"Invalid numeric literal: '{lexeme}'",
        location=location,
        code="L003",
        help_text="A number may contain at most one decimal point.",
    )
