"""
Delta command line interface

With no arguments starts the REPL. With file arguments compiles each file
and prints the requested structure: tokens, postfix statements, trees or
evaluated values.

Author: xwest
"""

import logging
from typing import List

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text
from rich.tree import Tree

from . import __version__
from .lexer import Lexer, Token
from .parser import Parser, TreeBuilder, ParseError, ASTNode
from .evaluator import Evaluator, EvaluationError
from .repl import Repl

logger = logging.getLogger(__name__)

EMIT_CHOICES = ["tokens", "postfix", "tree", "eval"]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def render_tree(node: ASTNode) -> Tree:
    """Build a rich Tree mirroring the AST, without recursing."""
    root = Tree(Text(node.label))
    pending = [(child, root) for child in reversed(node.children())]
    while pending:
        child, parent = pending.pop()
        branch = parent.add(Text(child.label))
        pending.extend((grandchild, branch) for grandchild in reversed(child.children()))
    return root


def format_postfix(statement: List[Token]) -> str:
    return "[" + ", ".join(str(token) for token in statement) + "]"


def run_file(path: str, emit: str, console: Console):
    """Compile one file and print the requested structure."""
    with open(path, 'r', encoding='utf-8') as f:
        source = f.read().strip()

    lexer = Lexer(source, path)
    if emit == "tokens":
        for token in lexer:
            console.print(repr(token), markup=False, highlight=False, soft_wrap=True)
        return

    statements = Parser(lexer).parse()
    for warning in lexer.warnings:
        logger.info("%s", str(warning).rstrip())

    if emit == "postfix":
        for statement in statements:
            console.print(format_postfix(statement), markup=False, highlight=False, soft_wrap=True)
        return

    trees = TreeBuilder().build_all(statements)
    if emit == "tree":
        for tree in trees:
            console.print(render_tree(tree))
        return

    for value in Evaluator().evaluate(trees):
        console.print(str(value), markup=False, highlight=False, soft_wrap=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option("--emit", type=click.Choice(EMIT_CHOICES), default="postfix", show_default=True,
              help="What to print for each file.")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default="WARNING", show_default=True, envvar="DELTA_LOG_LEVEL",
              help="Logging threshold (env: DELTA_LOG_LEVEL).")
@click.option("-v", "--verbose", is_flag=True, help="Shortcut for --log-level DEBUG.")
@click.version_option(__version__, prog_name="delta")
@click.pass_context
def main(ctx, files, emit, log_level, verbose):
    """Delta language front end. Starts a REPL when no FILES are given."""
    configure_logging("DEBUG" if verbose else log_level.upper())

    if not files:
        Repl().cmdloop()
        return

    console = Console()
    failed = False
    for path in files:
        try:
            run_file(path, emit, console)
        except (ParseError, EvaluationError) as e:
            click.echo(str(e).rstrip(), err=True)
            failed = True

    if failed:
        ctx.exit(1)


if __name__ == "__main__":
    main()
