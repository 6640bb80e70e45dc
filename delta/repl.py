"""Interactive read loop for Delta. Uses cmd as backend."""

import cmd

import click

from . import __version__
from .parser import ParseError, compile_string
from .evaluator import Evaluator, EvaluationError

REPL_PROMPT = "◭ "
REPL_BANNER = f"Delta v{__version__} REPL\nType `exit` to exit."


class Repl(cmd.Cmd):
    """Delta REPL. Every line except `exit` is Delta source."""
    intro = REPL_BANNER
    prompt = REPL_PROMPT

    def __init__(self, evaluator=None, *args, **kwargs):
        # No tab completion: every line is source, not a command
        kwargs.setdefault("completekey", None)
        super().__init__(*args, **kwargs)

        self.evaluator = evaluator or Evaluator()
        self.line_num = 0

    def onecmd(self, line):
        """Routes everything to default() so names like `help` stay usable as variables."""
        if line == "EOF":
            click.echo()
            return True
        if line.strip() == "exit":
            return True
        return self.default(line)

    def default(self, line):
        """Compiles and evaluates one line, printing one result per statement."""
        source = line.strip()
        if not source:
            return False

        self.line_num += 1
        try:
            statements = compile_string(source, f"<repl:{self.line_num}>")
            for value in self.evaluator.evaluate(statements):
                click.echo(str(value))
        except (ParseError, EvaluationError) as e:
            click.echo(str(e).rstrip(), err=True)
        return False
