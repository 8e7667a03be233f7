"""Running external commands, redirections and pipelines."""

import io
import os
import subprocess
import sys
import tempfile
from contextlib import ExitStack
from dataclasses import dataclass, field

from .errors import ShellError
from .prompt import ENV_ERROR
from .text import clean_line, split_words

FILE_ERROR = "bash: no such file or directory: "
COMMAND_ERROR = "bash: command not found: "
ARGUMENTS_ERROR = "Error: bad number of arguments"


def path_entries(env):
    """The directories listed in the ``PATH`` of ``env``."""
    path = env.get("PATH")
    if path is None:
        raise ShellError(ENV_ERROR)
    return split_words(path, ":")


def first_word(arg):
    """The first space-separated word of ``arg``."""
    words = split_words(arg, " ")
    return words[0] if words else ""


def find_executable(name, env):
    """Locate ``name`` on the ``PATH`` of ``env``; None when it is not found.

    A name holding a ``/`` is taken as a path and returned as is.
    """
    if "/" in name:
        return name
    for directory in path_entries(env):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return None


def _fileno(stream):
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError, io.UnsupportedOperation):
        return None


def _execute(argv, env, stdin, stdout, messages):
    executable = find_executable(argv[0], env)
    if executable is None:
        messages.write(f"-bash: {argv[0]}: command not found\n")
        return None
    options = {"env": dict(env), "check": False}
    if stdin is not None:
        if _fileno(stdin) is None:
            data = stdin.read()
            options["input"] = data.encode() if isinstance(data, str) else data
        else:
            options["stdin"] = stdin
    capture = False
    if stdout is not None:
        if _fileno(stdout) is None:
            options["stdout"] = subprocess.PIPE
            capture = True
        else:
            stdout.flush()
            options["stdout"] = stdout
    messages.flush()
    try:
        completed = subprocess.run(argv, executable=executable, **options)
    except OSError:
        option = argv[1] if len(argv) > 1 else "(null)"
        messages.write(f"{executable}: illegal option -- {option}\n")
        return None
    if capture:
        output = completed.stdout
        if isinstance(stdout, io.TextIOBase):
            output = output.decode(errors="replace")
        stdout.write(output)
    return completed.returncode


def run_command(argv, env, stdin=None, stdout=None):
    """Run ``argv`` found on the ``PATH`` of ``env`` and return its exit status.

    ``stdin`` and ``stdout`` are streams, or None to inherit the shell's own.
    A command that cannot be found is reported on ``stdout`` and gives None.
    """
    messages = stdout if stdout is not None else sys.stdout
    return _execute(argv, env, stdin, stdout, messages)


def strip_redirections(words, operator):
    """Drop the words starting with ``operator`` and the word after each."""
    kept = []
    previous = None
    for word in words:
        if not word.startswith(operator) and (
            previous is None or not previous.startswith(operator)
        ):
            kept.append(word)
        previous = word
    return kept


@dataclass
class Redirections:
    """The input and output streams chosen by a command's redirections."""

    stdin: object = None
    stdout: object = None
    errors: list = field(default_factory=list)
    _opened: list = field(default_factory=list, repr=False)

    def close(self):
        """Close every file opened for the redirections."""
        for stream in self._opened:
            stream.close()
        self._opened.clear()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False


def _read_here_document(delimiter, here_input):
    terminator = f"{delimiter}\n"
    lines = []
    while True:
        line = here_input.readline()
        if not line or terminator.startswith(line):
            break
        lines.append(line)
    document = tempfile.TemporaryFile("w+")
    document.write("".join(lines))
    document.flush()
    document.seek(0)
    return document


def parse_redirections(words, here_input=None):
    """Open the files named by ``<``, ``<<``, ``>`` and ``>>`` in ``words``.

    Here-documents are read from ``here_input`` (the standard input when
    None). A file that cannot be opened is recorded in ``errors`` and the
    standard input is used again.
    """
    if here_input is None:
        here_input = sys.stdin
    redirections = Redirections()
    tokens = iter(words)
    for word in tokens:
        if not word.startswith(("<", ">")):
            continue
        target = next(tokens, None)
        if target is None:
            break
        try:
            if word.startswith("<<"):
                stream = _read_here_document(target, here_input)
                redirections.stdin = stream
            elif word.startswith("<"):
                stream = open(target, "rb")
                redirections.stdin = stream
            elif word.startswith(">>"):
                stream = open(target, "ab")
                redirections.stdout = stream
            else:
                stream = open(target, "wb")
                redirections.stdout = stream
        except OSError:
            redirections.errors.append(
                f"-bash: {target}: No such file or directory\n"
            )
            redirections.stdin = None
            continue
        redirections._opened.append(stream)
    return redirections


def _command_words(words):
    return strip_redirections(strip_redirections(words, "<"), ">")


def run_with_redirections(words, env, here_input=None, stdout=None):
    """Run the command in ``words`` with its redirections applied."""
    messages = stdout if stdout is not None else sys.stdout
    with parse_redirections(words, here_input) as redirections:
        for error in redirections.errors:
            messages.write(error)
        argv = _command_words(words)
        if not argv:
            return None
        target = redirections.stdout if redirections.stdout is not None else stdout
        return _execute(argv, env, redirections.stdin, target, messages)


def run_pipeline(segments, env, here_input=None, stdout=None):
    """Run the command strings of ``segments`` with each output feeding the next.

    Returns the exit status of the last command.
    """
    messages = stdout if stdout is not None else sys.stdout
    previous = None
    status = None
    with ExitStack() as stack:
        for index, segment in enumerate(segments):
            words = split_words(segment, " ")
            redirections = stack.enter_context(parse_redirections(words, here_input))
            for error in redirections.errors:
                messages.write(error)
            last = index == len(segments) - 1
            source = redirections.stdin if redirections.stdin is not None else previous
            pipe = None
            if last:
                sink = redirections.stdout if redirections.stdout is not None else stdout
            else:
                pipe = stack.enter_context(tempfile.TemporaryFile("w+"))
                sink = redirections.stdout if redirections.stdout is not None else pipe
            argv = _command_words(words)
            status = _execute(argv, env, source, sink, messages) if argv else None
            if pipe is not None:
                pipe.seek(0)
                previous = pipe
    return status


def run_operator(words, line, env, here_input=None, stdout=None):
    """Run a line holding operators: a pipeline when it has ``|``, else redirections."""
    cleaned = clean_line(line)
    if "|" in cleaned:
        return run_pipeline(split_words(cleaned, "|"), env, here_input, stdout)
    return run_with_redirections(words, env, here_input, stdout)