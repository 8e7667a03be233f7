"""A pipeline runner: ``infile cmd1 ... cmdN outfile`` or with a here-document."""

import os
import subprocess
import sys
import tempfile
from contextlib import ExitStack
from dataclasses import dataclass, field

from .errors import ShellError
from .executor import (
    ARGUMENTS_ERROR,
    COMMAND_ERROR,
    FILE_ERROR,
    find_executable,
    first_word,
)
from .text import split_words

_HERE_DOC = "here_doc"


@dataclass
class PipexArguments:
    """The parsed command line of a pipeline run."""

    outfile: str
    here_doc: bool = False
    infile: str = None
    delimiter: str = None
    commands: list = field(default_factory=list)
    splits: list = field(default_factory=list)
    texts: list = field(default_factory=list)


def _resolve(text, env):
    if "/" in text:
        return text
    name = first_word(text)
    executable = find_executable(name, env)
    if executable is None:
        raise ShellError(COMMAND_ERROR, name)
    return executable


def parse_arguments(argv, env):
    """Parse ``argv`` (program name first) and check files and commands.

    The input file must be readable; the output file is created or
    truncated straight away.
    """
    if len(argv) < 5:
        raise ShellError(ARGUMENTS_ERROR)
    here_doc = argv[1].startswith(_HERE_DOC)
    infile = None
    delimiter = None
    if here_doc:
        delimiter = argv[2]
    else:
        infile = argv[1]
        try:
            open(infile, "rb").close()
        except OSError as exc:
            raise ShellError(FILE_ERROR, infile) from exc
    outfile = argv[-1]
    try:
        open(outfile, "wb").close()
    except OSError as exc:
        raise ShellError(FILE_ERROR, outfile) from exc
    texts = list(argv[2 + here_doc:-1])
    commands = [_resolve(text, env) for text in texts]
    splits = [split_words(text, " ") for text in texts]
    return PipexArguments(
        outfile=outfile,
        here_doc=here_doc,
        infile=infile,
        delimiter=delimiter,
        commands=commands,
        splits=splits,
        texts=texts,
    )


def read_here_doc(delimiter, stream, prompt_stream):
    """Read lines from ``stream`` until the delimiter line or the end of input."""
    terminator = f"{delimiter}\n"
    lines = []
    while True:
        prompt_stream.write(">")
        prompt_stream.flush()
        line = stream.readline()
        if not line or terminator.startswith(line):
            break
        lines.append(line)
    return "".join(lines)


def _stop(processes):
    for process in processes:
        if process.stdout is not None:
            process.stdout.close()
        process.kill()
        process.wait()


def run_pipex(argv, env, stdin=None):
    """Run the pipeline described by ``argv``; return the last command's status."""
    arguments = parse_arguments(argv, env)
    if stdin is None:
        stdin = sys.stdin
    with ExitStack() as stack:
        if arguments.here_doc:
            source = stack.enter_context(tempfile.TemporaryFile("w+b"))
            text = read_here_doc(arguments.delimiter, stdin, sys.stdout)
            source.write(text.encode())
            source.seek(0)
        else:
            source = stack.enter_context(open(arguments.infile, "rb"))
        sink = stack.enter_context(open(arguments.outfile, "wb"))
        last = len(arguments.commands) - 1
        processes = []
        steps = zip(arguments.commands, arguments.splits, arguments.texts)
        for index, (executable, words, text) in enumerate(steps):
            try:
                process = subprocess.Popen(
                    words,
                    executable=executable,
                    stdin=source,
                    stdout=sink if index == last else subprocess.PIPE,
                    env=dict(env),
                )
            except OSError as exc:
                _stop(processes)
                raise ShellError(COMMAND_ERROR, text) from exc
            if processes:
                processes[-1].stdout.close()
            processes.append(process)
            source = process.stdout
        statuses = [process.wait() for process in processes]
    return statuses[-1]


def main(argv=None):
    """Run a pipeline from the command line; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        run_pipex(["pipex", *argv], dict(os.environ))
    except ShellError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0