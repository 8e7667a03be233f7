from minishell.errors import ShellError


def test_message_only():
    error = ShellError("memory error")
    assert str(error) == "memory error"
    assert error.detail is None


def test_message_with_detail_is_concatenated():
    error = ShellError("bash: command not found: ", "ls")
    assert str(error) == "bash: command not found: " + "ls"
    assert error.message == "bash: command not found: "
    assert error.detail == "ls"


def test_empty_detail_is_ignored():
    error = ShellError("pipe error", "")
    assert str(error) == "pipe error"


def test_fields_survive_raising():
    error = ShellError("fork error", "child")
    caught = None
    try:
        raise error
    except ShellError as exc:
        caught = exc
    assert caught is error
    assert caught.message == "fork error"
    assert caught.detail == "child"
    assert str(caught) == "fork errorchild"


def test_is_an_exception():
    error = ShellError("dup error")
    assert isinstance(error, Exception)
    assert error.args == ("dup error", None)