import io
import os

import pytest

from minishell.errors import ShellError
from minishell.prompt import (
    banner,
    current_directory,
    print_banner,
    prompt_line,
    prompt_path,
)

ENV = {"USER": "me", "HOME": "/home/me"}


def test_banner_starts_and_ends_with_colour_codes():
    text = banner()
    assert text.startswith("\033[38;5;82m")
    assert text.endswith("\033[m\n")


def test_banner_resets_colour_on_every_row():
    text = banner()
    assert text.count("\033[38;5;") == text.count("\033[m")


def test_print_banner_writes_banner():
    stream = io.StringIO()
    print_banner(stream)
    assert stream.getvalue() == banner()


def test_prompt_path_replaces_home():
    assert prompt_path("/home/me/dir", ENV) == "~/dir"


def test_prompt_path_at_home():
    assert prompt_path("/home/me", ENV) == "~"


def test_prompt_path_shorter_than_home_unchanged():
    assert prompt_path("/x", ENV) == "/x"


def test_prompt_path_outside_home_raises():
    with pytest.raises(ShellError):
        prompt_path("/var/lib/something", ENV)


def test_prompt_path_needs_user():
    with pytest.raises(ShellError) as info:
        prompt_path("/home/me", {"HOME": "/home/me"})
    assert str(info.value) == "env error"


def test_prompt_path_needs_home():
    with pytest.raises(ShellError) as info:
        prompt_path("/home/me", {"USER": "me"})
    assert str(info.value) == "env error"


def test_current_directory_follows_chdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert current_directory() == os.getcwd()
    assert os.path.samefile(current_directory(), tmp_path)


def test_prompt_line_at_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    env = {"USER": "me", "HOME": os.getcwd()}
    assert prompt_line(env) == "\033[32mme@minishell \033[0m\033[34m~\033[0m $ "