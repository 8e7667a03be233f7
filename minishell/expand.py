"""Expansion of ``$NAME`` references in command words."""

from .text import clean_line, split_words


def expand_word(word, env):
    """Expand the ``$NAME`` references of ``word`` using ``env``.

    Text before the first ``$`` is kept, the values of the names that follow
    are joined together and a trailing ``$`` is kept as is. Unknown names
    expand to nothing. None is returned when the word starts with ``$`` and
    expands to nothing at all.
    """
    dollar = word.find("$")
    if dollar < 0:
        return word
    prefix = word[:dollar]
    names = split_words(word[dollar:], "$")
    expansion = "".join(env[name] for name in names if name in env)
    if word.endswith("$"):
        expansion += "$"
    if not expansion:
        return prefix or None
    return prefix + expansion


def expand_words(words, env):
    """Expand every word holding a ``$``, dropping those that expand to nothing."""
    expanded = []
    for word in words:
        if "$" in word and len(word) > 1:
            value = expand_word(word, env)
            if value is None:
                continue
            expanded.append(value)
        else:
            expanded.append(word)
    return expanded


def line_split(line, env):
    """Clean a command line, split it into words and expand them."""
    return expand_words(split_words(clean_line(line), " "), env)