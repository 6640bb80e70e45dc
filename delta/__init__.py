"""
Delta Language Package

The front end of Delta, a small expression-oriented scripting language,
plus the thin evaluator and command line surface around it.

Architecture:
    delta/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Shunting-yard parser and tree builder
    ├── evaluator/       # Thin tree evaluator
    ├── repl.py          # Interactive read loop
    └── cli.py           # Command line entry point

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer
from .parser import Parser, TreeBuilder, ParseError
from .evaluator import Evaluator, EvaluationError

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "TreeBuilder",
    "Evaluator",

    # Errors
    "ParseError",
    "EvaluationError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
