"""cee-pretty — prettify @cee: JSON log lines from stdin."""

__version__ = "0.1.0"
