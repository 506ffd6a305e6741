"""Base exception for per-line prettify failures."""


class PrettifyError(Exception):
    """A single input line could not be (fully) prettified."""
