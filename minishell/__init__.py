"""A small interactive shell with builtins, $NAME expansion, redirections and pipelines."""

__version__ = "0.1.0"
__all__ = ["__version__"]