"""Terminal streams and TTY detection."""

from __future__ import annotations

import sys
from typing import TextIO

from ghproj_cli.services.config_service import get_config_service


class IOStreams:
    """Bundle of the standard streams with terminal checks.

    TTY state can be forced with ``set_stdout_tty``/``set_stdin_tty`` so the
    interactive code paths can be exercised under test runners.
    """

    def __init__(
        self,
        out: TextIO | None = None,
        err: TextIO | None = None,
        in_: TextIO | None = None,
        prompt_disabled: bool = False,
    ):
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.in_ = in_ if in_ is not None else sys.stdin
        self.prompt_disabled = prompt_disabled
        self._stdout_tty: bool | None = None
        self._stdin_tty: bool | None = None

    def set_stdout_tty(self, is_tty: bool) -> None:
        self._stdout_tty = is_tty

    def set_stdin_tty(self, is_tty: bool) -> None:
        self._stdin_tty = is_tty

    def is_stdout_tty(self) -> bool:
        if self._stdout_tty is not None:
            return self._stdout_tty
        return _isatty(self.out)

    def is_stdin_tty(self) -> bool:
        if self._stdin_tty is not None:
            return self._stdin_tty
        return _isatty(self.in_)

    def can_prompt(self) -> bool:
        """Return True when an interactive session is available."""
        if self.prompt_disabled:
            return False
        return self.is_stdin_tty() and self.is_stdout_tty()

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes to stdout, going through the text layer if needed."""
        buffer = getattr(self.out, "buffer", None)
        if buffer is not None:
            self.out.flush()
            buffer.write(data)
            buffer.flush()
        else:
            self.out.write(data.decode("utf-8"))


def _isatty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def get_iostreams() -> IOStreams:
    """Build IOStreams for the running process."""
    return IOStreams(prompt_disabled=get_config_service().prompts_disabled())
