import io
from datetime import datetime

import pytest

from suit_io.config import ColorSetting, set_settings
from suit_io.server import IOServer
from suit_io.streams import StreamEnvironment

FIXED_TIME = datetime(2026, 1, 27, 14, 30, 5, 123456)


class FakeTerminal:
    """Stands in for the process streams of an interactive session."""

    def __init__(self, text: str = ""):
        self.stdin = io.StringIO(text)
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()

    @property
    def environment(self) -> StreamEnvironment:
        return StreamEnvironment(input=self.stdin, output=self.stdout, error=self.stderr)

    def feed(self, text: str) -> None:
        """Replace what is left to read with text."""
        self.stdin.seek(0)
        self.stdin.truncate()
        self.stdin.write(text)
        self.stdin.seek(0)


@pytest.fixture
def terminal():
    """Fake process streams."""
    return FakeTerminal()


@pytest.fixture
def palette():
    """Default color palette."""
    return ColorSetting()


@pytest.fixture
def server(terminal, palette) -> IOServer:
    """Server bound to the fake terminal with a fixed clock."""
    return IOServer(
        color_setting=palette,
        environment=terminal.environment,
        clock=lambda: FIXED_TIME,
    )


@pytest.fixture
def redirected(server) -> io.StringIO:
    """Rebind the server's output to a separate stream and return it."""
    stream = io.StringIO()
    server.output = stream
    return stream


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop the global settings instance between tests."""
    set_settings(None)
    yield
    set_settings(None)
