# minishell

A small interactive shell. It shows a coloured banner, then a prompt with the
user name and the current directory (with the home directory shown as `~`),
and runs one command line at a time.

## Installing

```
pip install .
```

## Running the shell

```
minishell
```

The shell takes no arguments. If you pass any, it prints
`Error: bad number of arguments` and exits. The environment must define `USER`
and `HOME`; without them the shell stops with `env error`.

At the prompt you can use:

- `cd [dir]` changes directory. With no argument, or with `~`, it goes to
  `$HOME`. An absolute path is used as is; a relative path is followed one part
  at a time, and `..` goes up one level. If a part does not exist, the shell
  goes back to where it started and prints
  `-bash: cd: <dir>: No such file or directory`. More than one argument prints
  `bash: cd: too many arguments`.
- `echo [-n] words...` prints its words, each followed by a space. Leading
  `-n` words leave out the final newline.
- `pwd` prints the current directory.
- `exit`, or the end of input, leaves the shell.
- Any other word is looked up on `PATH` (or used as a path when it holds a `/`)
  and run as a program. If it is not found, the shell prints
  `-bash: <name>: command not found`.

A word holding `$NAME` has the text from the first `$` on replaced by the values
of the named environment variables, joined together. Unknown names expand to
nothing, a trailing `$` is kept, and a word that expands to nothing at all is
dropped.

Redirections and pipes work too:

```
sort < input.txt > sorted.txt
cat >> log.txt
cat << END
ls | wc -l
```

`<<` reads the here-document from standard input until a line equal to the
delimiter. A file that cannot be opened is reported with
`-bash: <file>: No such file or directory`. In a pipeline, each command runs to
completion and its output is handed to the next one.

## Running a pipeline directly

The `pipex` command runs a chain of commands from an input file to an output
file:

```
pipex infile "cmd1 args" "cmd2 args" ... outfile
```

The input can also be a here-document:

```
pipex here_doc LIMITER "cmd1" "cmd2" ... outfile
```

In that form, lines are read from standard input, each after a `>` prompt,
until `LIMITER` is entered. The output file is created or truncated before any
command runs. Missing files, unknown commands or too few arguments are
reported on standard error and the command exits with status 1.

## Using it as a library

The modules can also be imported:

- `minishell.expand.line_split(line, env)` cleans, splits and expands a
  command line.
- `minishell.shell.dispatch(line, env, stdin, stdout)` runs one line against a
  given environment and streams; `minishell.shell.repl(stdin, stdout, env)`
  runs the whole loop.
- `minishell.executor` has `run_command`, `run_with_redirections`,
  `run_pipeline` and `parse_redirections`.
- `minishell.pipex.run_pipex(argv, env, stdin)` runs a pipeline from an
  argument list.

Fatal errors are raised as `minishell.errors.ShellError`.

## What it does not do

- Quotes are not interpreted: they stay part of the words, and spaces inside
  them still split words.
- There is no line editing, history, job control or signal handling.
- There are no `export`, `unset` or `env` builtins and no `$?` exit status.
- Messages from the shell itself (such as "command not found") are written to
  its output stream, not to standard error.