"""
Delta Parser Package

Turns the token stream into statement trees in two steps:
a shunting-yard pass that reorders each statement into postfix order,
and a tree builder that folds each postfix sequence into one AST.

Key Features:
- Single operator table shared by every stage
- Explicit comment filtering before the shunting-yard step
- Fail-fast diagnostics with source locations

Author: xwest
"""

from .ast_nodes import *
from .operators import Precedence, Associativity, OPERATOR_TABLE
from .parser import Parser, parse_string, parse_file
from .tree_builder import (
    TreeBuilder, build_tree, build_statements, compile_string, compile_file
)
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "TreeBuilder",
    "parse_string", "parse_file",
    "build_tree", "build_statements", "compile_string", "compile_file",

    # Operator metadata
    "Precedence", "Associativity", "OPERATOR_TABLE",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "Statement", "Expression",
    "Assignment", "BinaryOp", "UnaryOp",
    "NumberLiteral", "Identifier", "BooleanLiteral", "StringLiteral",

    # Error handling
    "ParseError",
]
