"""Run configuration from CLI args and the output stream's capabilities."""

from dataclasses import dataclass
from typing import TextIO

from ceepretty.colors import is_terminal


@dataclass(frozen=True)
class Config:
    extra: bool = False   # append residual JSON fields
    color: bool = False   # emit ANSI escapes (stdout is a terminal)

    @classmethod
    def from_args(cls, cli_args, stream: TextIO) -> "Config":
        """Build Config from parsed args; color follows whether stream is a tty."""
        return cls(
            extra=bool(getattr(cli_args, "extra", False)),
            color=is_terminal(stream),
        )
