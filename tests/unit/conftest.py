"""Shared test helpers for unit tests."""

import io
from collections.abc import Callable

import pytest
from rich.console import Console

from contools.terminal import Terminal


class FakeTerminal(Terminal):
    """Terminal writing to a buffer and reading from canned input."""

    def __init__(self, input_text: str = "") -> None:
        self.buffer = io.StringIO()
        super().__init__(
            console=Console(file=self.buffer, no_color=True, width=200),
            stdin=io.StringIO(input_text),
        )

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def make_terminal() -> Callable[..., FakeTerminal]:
    """Factory for terminals fed with the given input lines.

    Each line gets a trailing newline. Pass ``raw=`` to control the input
    stream exactly.
    """

    def _make(*lines: str, raw: str | None = None) -> FakeTerminal:
        text = raw if raw is not None else "".join(f"{line}\n" for line in lines)
        return FakeTerminal(text)

    return _make
