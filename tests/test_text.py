import pytest

from minishell.errors import ShellError
from minishell.text import (
    add_spaces,
    clean_line,
    delete_character,
    find_end,
    prefix_before,
    replace_prefix,
    split_words,
    trim,
)


def test_split_words_drops_empty_pieces():
    assert split_words("      split       this for   me  !", " ") == [
        "split",
        "this",
        "for",
        "me",
        "!",
    ]


def test_split_words_empty_and_only_separators():
    assert split_words("", " ") == []
    assert split_words("::::", ":") == []


@pytest.mark.parametrize(
    "text,sep",
    [("/usr/bin:/bin::/sbin:", ":"), ("a  b c ", " "), ("$HOME$USER", "$")],
)
def test_split_words_invariants(text, sep):
    pieces = split_words(text, sep)
    assert all(pieces)
    assert all(sep not in piece for piece in pieces)
    assert "".join(pieces) == text.replace(sep, "")


def test_trim_removes_both_ends():
    assert trim("  hello world  ", " ") == "hello world"


def test_trim_all_characters_gives_empty():
    assert trim("\n\n\n", "\n") == ""
    assert trim("", " ") == ""


def test_trim_with_empty_set_keeps_text():
    assert trim("  x  ", "") == "  x  "


@pytest.mark.parametrize(
    "text,chars",
    [("lorem ipsum dolor sit amet", "tel"), ("ls -la \n", "\n"), ("xxyxx", "x")],
)
def test_trim_invariants(text, chars):
    result = trim(text, chars)
    assert result in text
    if result:
        assert result[0] not in chars
        assert result[-1] not in chars


def test_find_end_points_at_last_char_of_match():
    haystack = "/home/user/dir"
    needle = "/home/user"
    idx = find_end(haystack, needle)
    assert haystack[idx - len(needle) + 1: idx + 1] == needle


def test_find_end_missing_or_empty_needle():
    assert find_end("abc", "zz") is None
    assert find_end("abc", "") is None


def test_replace_prefix_home():
    assert replace_prefix("/home/user/projects", "/home/user", "~") == "~/projects"


def test_replace_prefix_short_text_unchanged():
    assert replace_prefix("/tmp", "/home/user", "~") == "/tmp"


def test_replace_prefix_missing_needle_raises():
    with pytest.raises(ShellError, match="Error in ft_strstrend"):
        replace_prefix("/var/lib/something", "/home/user", "~")


def test_delete_character():
    text = "it's 'quoted'"
    result = delete_character(text, "'")
    assert "'" not in result
    assert len(result) == len(text) - text.count("'")


def test_delete_character_absent_keeps_text():
    assert delete_character("plain", "$") == "plain"


def test_prefix_before():
    assert prefix_before("abc$HOME", "$") == "abc"


def test_prefix_before_starting_with_char_is_none():
    assert prefix_before("$HOME", "$") is None


def test_add_spaces_single_operator():
    assert add_spaces("a|b") == "a | b"


def test_add_spaces_double_operator():
    assert add_spaces("cat<<EOF") == "cat << EOF"


def test_add_spaces_leaves_quoted_operators():
    line = 'echo "a|b>c"'
    assert add_spaces(line) == line
    line = "echo 'x<<y'"
    assert add_spaces(line) == line


@pytest.mark.parametrize(
    "line",
    ["ls -l|wc -l>out", "cat<in>>out", 'echo "hi"|cat', "a<>b", "grep x<<END"],
)
def test_add_spaces_only_inserts_spaces(line):
    result = add_spaces(line)
    assert result.replace(" ", "") == line.replace(" ", "")
    assert len(result) >= len(line)


def test_clean_line_strips_newline():
    assert clean_line("echo hi\n") == "echo hi"


def test_clean_line_splits_operators():
    assert split_words(clean_line("ls|wc"), " ") == ["ls", "|", "wc"]


def test_clean_line_no_outer_spaces():
    result = clean_line("   cat < file   ")
    assert result == result.strip(" ")
    assert split_words(result, " ") == ["cat", "<", "file"]