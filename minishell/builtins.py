"""The built-in commands: cd, echo and pwd."""

import os

from .errors import ShellError
from .prompt import current_directory
from .text import split_words, trim

_OPERATORS = ("<", ">", "<<", ">>", "|")
_CHDIR_ERROR = "chdir error"


def last_component(cwd):
    """The name of the last directory of ``cwd``."""
    return cwd.rpartition("/")[2]


def previous_directory(cwd):
    """The parent of ``cwd``; the root is its own parent."""
    if cwd == "/":
        return cwd
    return trim(cwd, last_component(cwd))


def next_directory(cwd, target):
    """The path ``target`` names when taken from ``cwd``."""
    path = target if target.startswith("/") else f"{cwd}/{target}"
    return trim(path, "\n")


def _chdir(path):
    try:
        os.chdir(path)
    except (OSError, TypeError) as exc:
        raise ShellError(_CHDIR_ERROR) from exc


def _change_previous():
    _chdir(previous_directory(current_directory()))


def _change_next(step, target, start, stream):
    """Move to ``step``; on failure go back to ``start`` and report ``target``."""
    try:
        os.chdir(next_directory(current_directory(), step))
    except OSError:
        _chdir(start)
        stream.write(f"-bash: cd: {target}: No such file or directory\n")
        return False
    return True


def _full_directory(target, stream):
    start = current_directory()
    if target.startswith("/"):
        _change_next(target, target, start, stream)
        return
    for step in split_words(target, "/"):
        if step == "..":
            _change_previous()
        elif not _change_next(step, target, start, stream):
            break


def change_directory(args, env, stream):
    """Run ``cd`` with the command words ``args``; messages go to ``stream``."""
    if len(args) > 2:
        stream.write("bash: cd: too many arguments\n")
    elif len(args) > 1 and args[1] != "~":
        _full_directory(args[1], stream)
    else:
        _chdir(env.get("HOME"))


def echo(args, stream):
    """Run ``echo`` with the command words ``args``.

    Leading ``-n`` words suppress the final newline; every word printed is
    followed by a space.
    """
    words = list(args[1:])
    newline = True
    while words and words[0] == "-n":
        newline = False
        words.pop(0)
    stream.write("".join(f"{word} " for word in words))
    if newline:
        stream.write("\n")


def pwd(stream):
    """Print the current working directory."""
    stream.write(f"{current_directory()}\n")


def has_operator(line):
    """Whether ``line`` holds a redirection or pipe operator."""
    return any(op in line for op in _OPERATORS)