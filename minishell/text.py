"""String helpers used to clean and split command lines."""

from .errors import ShellError

_OPERATOR_CHARS = "<>|"
_DOUBLE_OPERATORS = ("<<", ">>")


def split_words(text, sep):
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def trim(text, chars):
    """Remove every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def find_end(haystack, needle):
    """Index of the last character of the first match of ``needle``, or None."""
    if not needle:
        return None
    start = haystack.find(needle)
    if start < 0:
        return None
    return start + len(needle) - 1


def replace_prefix(text, needle, replacement):
    """Replace everything up to the end of ``needle`` in ``text`` with ``replacement``.

    ``text`` is returned unchanged when it is shorter than ``needle``.
    """
    if len(text) < len(needle):
        return text
    end = find_end(text, needle)
    if end is None:
        raise ShellError("Error in ft_strstrend")
    return replacement + text[end + 1:]


def delete_character(text, char):
    """Return ``text`` with every occurrence of ``char`` removed."""
    return text.replace(char, "")


def prefix_before(text, char):
    """Text before the first ``char``; None when ``text`` starts with it."""
    if text.startswith(char):
        return None
    return text.partition(char)[0]


def add_spaces(line):
    """Surround the redirection and pipe operators outside quotes with spaces.

    A quote toggles its quoting state when it is met at the start of a step;
    the character following an operator is copied as is.
    """
    out = []
    pos = 0
    end = len(line)
    in_double = False
    in_single = False
    while pos < end:
        ch = line[pos]
        if ch == '"':
            in_double = not in_double
            out.append(ch)
            pos += 1
        elif ch == "'":
            in_single = not in_single
            out.append(ch)
            pos += 1
        if not in_double and not in_single:
            pair = line[pos:pos + 2]
            if pair in _DOUBLE_OPERATORS:
                out.append(f" {pair} ")
                pos += 2
            elif pos < end and line[pos] in _OPERATOR_CHARS:
                out.append(f" {line[pos]} ")
                pos += 1
        if pos < end:
            out.append(line[pos])
            pos += 1
    return "".join(out)


def clean_line(line):
    """Space out operators, then trim surrounding spaces and newlines."""
    return trim(trim(add_spaces(line), " "), "\n")