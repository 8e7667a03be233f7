"""The interactive read-eval loop."""

import os
import sys

from .builtins import change_directory, echo, has_operator, pwd
from .errors import ShellError
from .executor import ARGUMENTS_ERROR, run_command, run_operator
from .expand import line_split
from .prompt import print_banner, prompt_line

_EXIT = "exit\n"


def dispatch(line, env, stdin, stdout):
    """Run one command line; here-documents are read from ``stdin``.

    Returns the exit status of an external command, or None.
    """
    words = line_split(line, env)
    if words and words[0] == "cd":
        change_directory(words, env, stdout)
    elif has_operator(line):
        return run_operator(words, line, env, stdin, stdout)
    elif words and words[0] == "echo":
        echo(words, stdout)
    elif words and words[0] == "pwd":
        pwd(stdout)
    elif words:
        return run_command(words, env, stdout=stdout)
    return None


def repl(stdin, stdout, env):
    """Show the banner, then prompt and run lines until ``exit`` or end of input."""
    print_banner(stdout)
    while True:
        stdout.write(prompt_line(env))
        stdout.flush()
        line = stdin.readline()
        if _EXIT.startswith(line):
            break
        dispatch(line, env, stdin, stdout)
        stdout.flush()
    return 0


def main(argv=None):
    """Start the interactive shell; no arguments are accepted."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        print(ARGUMENTS_ERROR)
        return 0
    try:
        return repl(sys.stdin, sys.stdout, dict(os.environ))
    except ShellError as exc:
        print(exc, file=sys.stderr)
        return 1