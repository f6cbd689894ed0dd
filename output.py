"""Plain-text formatting for redirected output."""

from datetime import datetime
from pathlib import Path
from typing import Callable, NamedTuple, Optional, TextIO

from suit_io.output_type import OutputType, label_for

Clock = Callable[[], datetime]


class Segment(NamedTuple):
    """One run of text in a multi-colored line.

    A segment without a color takes the line's color when written.
    """
    text: str
    color: Optional[str] = None


def timestamp(clock: Clock = datetime.now, timespec: str = "auto") -> str:
    """Local date-time in ISO-8601 form, e.g. '2026-01-27T14:30:00.123456'."""
    return clock().isoformat(timespec=timespec)


def redirect_tag(output_type: OutputType, clock: Clock = datetime.now, timespec: str = "auto") -> str:
    """Return the '[<timestamp>]<label>' tag of a redirected line."""
    return f"[{timestamp(clock, timespec)}]{label_for(output_type)}"


class OutputFile:
    """Opens a text file to be used as a redirected output stream."""

    def __init__(self, output_path: Path, append: bool = False):
        self.output_path = output_path
        self.append = append
        self._file: Optional[TextIO] = None

    def __enter__(self) -> TextIO:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.output_path, 'a' if self.append else 'w', encoding='utf-8')
        return self._file

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._file:
            self._file.close()
            self._file = None
