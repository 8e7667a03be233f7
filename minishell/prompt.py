"""The start-up banner and the prompt line."""

import os

from .errors import ShellError
from .text import replace_prefix

_BANNER_ROWS = (
    "\033[38;5;82m=========================================\033[m",
    "\033[38;5;82m=========================================\033[m\n",
    "\033[38;5;82m.___  ___.  __  .__   __.  __       _____\033[m",
    "\033[38;5;82m__. __    __   _______  __       __\033[m\n",
    "\033[38;5;118m|   \\/   | |  | |  \\ |  | |  |     /   \033[m",
    "\033[38;5;118m    ||  |  |  | |   ____||  |     |  |\033[m\n",
    "\033[38;5;154m|  \\  /  | |  | |   \\|  | |  |    |   (\033[m",
    "\033[38;5;154m----`|  |__|  | |  |__   |  |     |  |     \033[m\n",
    "\033[38;5;190m|  |\\/|  | |  | |  . `  | |  |     \\   \033[m",
    "\033[38;5;190m\\    |   __   | |   __|  |  |     |  |\033[m\n",
    "\033[38;5;226m|  |  |  | |  | |  |\\   | |  | .----)   \033[m",
    "\033[38;5;226m|   |  |  |  | |  |____ |  `----.|  `----.\033[m\n",
    "\033[38;5;220m|__|  |__| |__| |__| \\__| |__| |_______/  \033[m",
    "\033[38;5;220m  |__|  |__| |_______||_______||_______|\033[m\n\n",
    "\033[38;5;82m=========================================\033[m",
    "\033[38;5;82m=========================================\033[m\n",
)

ENV_ERROR = "env error"


def banner():
    """The coloured start-up banner."""
    return "".join(_BANNER_ROWS)


def print_banner(stream):
    """Write the banner to ``stream``."""
    stream.write(banner())
    stream.flush()


def current_directory():
    """The current working directory."""
    try:
        return os.getcwd()
    except OSError as exc:
        raise ShellError("getcwd() error") from exc


def prompt_path(cwd, env):
    """``cwd`` with everything up to the home directory replaced by ``~``."""
    if env.get("USER") is None:
        raise ShellError(ENV_ERROR)
    home = env.get("HOME")
    if home is None:
        raise ShellError(ENV_ERROR)
    return replace_prefix(cwd, home, "~")


def prompt_line(env):
    """The coloured ``user@minishell path $`` prompt."""
    user = env.get("USER")
    path = prompt_path(current_directory(), env)
    return (
        f"\033[32m{user}@minishell \033[0m"
        f"\033[34m{path}\033[0m $ "
    )