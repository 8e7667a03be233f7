"""Errors raised by the shell."""


class ShellError(Exception):
    """A fatal shell error: a message, optionally followed by a detail such as a file name."""

    def __init__(self, message, detail=None):
        super().__init__(message, detail)
        self.message = message
        self.detail = detail

    def __str__(self):
        if self.detail:
            return f"{self.message}{self.detail}"
        return self.message