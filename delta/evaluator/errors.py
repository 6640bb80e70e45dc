"""
Evaluation error handling for Delta.

Raised when an operator is applied to operand kinds it does not define,
e.g. subtracting a string.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import SourceLocation
from ..lexer.errors import Diagnostic
from ..parser.ast_nodes import ASTNode


class EvaluationError(Exception):
    """
    Exception raised when evaluation encounters a fatal error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        node: Optional[ASTNode] = None,
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
        self.node = node

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common evaluation error codes
EVALUATION_ERROR_CODES = {
    "E001": "Unsupported operator",
    "E002": "Invalid operand kinds",
    "E003": "Expression nests too deeply",
    "E004": "Unrecognized node",
}


def create_unsupported_operator_error(node: ASTNode, symbol: str) -> EvaluationError:
    """Create an error for an operator the evaluator does not implement."""
    return EvaluationError(
        message=f"Unsupported operator '{symbol}'",
        location=getattr(node, "location", None),
        node=node,
        code="E001",
        help_text="Only +, -, *, /, % and the prefix operators ! and - can be evaluated.",
    )


def create_operand_error(node: ASTNode, symbol: str, *operands) -> EvaluationError:
    """Create an error for an operator applied to operands it does not accept."""
    kinds = " and ".join(operand.kind.value for operand in operands)
    return EvaluationError(
        message=f"Cannot apply operation '{symbol}' to {kinds}",
        location=getattr(node, "location", None),
        node=node,
        code="E002",
    )


def create_nesting_error(node: ASTNode) -> EvaluationError:
    """Create an error for a tree deeper than the evaluator can walk."""
    return EvaluationError(
        message="Expression nests too deeply",
        location=getattr(node, "location", None),
        node=node,
        code="E003",
        help_text="Split the expression into several assignments.",
    )


def create_unrecognized_node_error(node: ASTNode) -> EvaluationError:
    """Create an error for a node type the evaluator has no rule for."""
    return EvaluationError(
        message=f"Unrecognized node: {type(node).__name__}",
        location=getattr(node, "location", None),
        node=node,
        code="E004",
    )
