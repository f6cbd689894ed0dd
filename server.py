"""IOServer: colored, indented console I/O that degrades to plain lines when redirected."""

from datetime import datetime
from typing import IO, Any, Iterable, Optional, Tuple, Union

from suit_io import console
from suit_io.config import ColorSetting, Settings
from suit_io.output import Clock, Segment, redirect_tag
from suit_io.output_type import OutputType, label_for
from suit_io.prefix import PrefixStack
from suit_io.streams import StreamEnvironment, StreamState

SegmentLike = Union[Segment, Tuple[str, Optional[str]]]

# Returned by read() when the input is exhausted
EOF = -1


class IOServer:
    """Serves the input and output of an interactive command-line session.

    While the output stream is the process's own stdout, lines are written
    with ANSI colors and the indentation prefix. Once it is rebound to any
    other object, colors are dropped and lines carry a timestamp and a
    label instead.
    """

    label_for = staticmethod(label_for)

    def __init__(
        self,
        color_setting: Optional[ColorSetting] = None,
        environment: Optional[StreamEnvironment] = None,
        clock: Clock = datetime.now,
        timestamp_timespec: str = "auto",
    ):
        self._color_setting = color_setting if color_setting is not None else ColorSetting()
        self._streams = StreamState(environment or StreamEnvironment.from_process())
        self._prefix = PrefixStack()
        self.clock = clock
        self.timestamp_timespec = timestamp_timespec

    @classmethod
    def from_settings(cls, settings: Settings, environment: Optional[StreamEnvironment] = None) -> "IOServer":
        """Build a server using the palette and timestamp precision from settings."""
        return cls(
            color_setting=settings.colors,
            environment=environment,
            timestamp_timespec=settings.timestamp_timespec,
        )

    # -------------------------------------------------------------------------
    # Streams
    # -------------------------------------------------------------------------

    @property
    def color_setting(self) -> ColorSetting:
        return self._color_setting

    @property
    def environment(self) -> StreamEnvironment:
        return self._streams.environment

    @property
    def input(self) -> IO[Any]:
        """Input stream (stdin by default)."""
        return self._streams.input

    @input.setter
    def input(self, stream: IO[Any]) -> None:
        self._streams.input = stream

    @property
    def output(self) -> IO[Any]:
        """Output stream (stdout by default)."""
        return self._streams.output

    @output.setter
    def output(self, stream: IO[Any]) -> None:
        self._streams.output = stream

    @property
    def error(self) -> IO[Any]:
        """Error stream (stderr by default)."""
        return self._streams.error

    @error.setter
    def error(self, stream: IO[Any]) -> None:
        self._streams.error = stream

    def is_input_redirected(self) -> bool:
        """True unless the input stream is the process's original stdin."""
        return self._streams.is_input_redirected()

    def is_output_redirected(self) -> bool:
        """True unless the output stream is the process's original stdout."""
        return self._streams.is_output_redirected()

    def is_error_redirected(self) -> bool:
        """True unless the error stream is the process's original stderr."""
        return self._streams.is_error_redirected()

    def reset_input(self) -> None:
        self._streams.reset_input()

    def reset_output(self) -> None:
        self._streams.reset_output()

    def reset_error(self) -> None:
        self._streams.reset_error()

    # -------------------------------------------------------------------------
    # Colors and prefix
    # -------------------------------------------------------------------------

    def select_color(self, output_type: OutputType = OutputType.DEFAULT, custom_color: Optional[str] = None) -> str:
        """Resolve the color of a write.

        Args:
            output_type: Category of the content
            custom_color: Overrides the palette when non-empty

        Returns:
            The custom color if given, otherwise the palette entry for the type
        """
        if custom_color:
            return custom_color
        return self._color_setting.color_for(output_type)

    @property
    def prefix(self) -> str:
        """Prefix of write_line() output, usually indentation."""
        return self._prefix.current

    def set_prefix(self, value: str) -> None:
        """Replace the whole prefix with ``value``."""
        self._prefix.set(value)

    def append_prefix(self, value: str = "\t") -> None:
        """Add to the prefix, a tab by default. Increases indentation."""
        self._prefix.append(value)

    def subtract_prefix(self) -> None:
        """Remove the most recently appended piece of the prefix, if any."""
        self._prefix.subtract()

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def _tag(self, output_type: OutputType) -> str:
        return redirect_tag(output_type, self.clock, self.timestamp_timespec)

    def write(self, content: str, output_type: OutputType = OutputType.DEFAULT, custom_color: Optional[str] = None) -> None:
        """Write content to the output stream without a line break.

        The prefix is not written. When redirected, the content is written
        bare, and prompts are not written at all.
        """
        if not self.is_output_redirected():
            color = self.select_color(output_type, custom_color)
            self.output.write(console.style(content, color))
        elif OutputType(output_type) is not OutputType.PROMPT:
            self.output.write(content)

    def write_line(self, content: str = "", output_type: OutputType = OutputType.DEFAULT, custom_color: Optional[str] = None) -> None:
        """Write a line to the output stream.

        Interactive: ``<color><prefix><content><reset>\\n``.
        Redirected: ``[<timestamp>]<label><content>\\n``.
        """
        if not self.is_output_redirected():
            color = self.select_color(output_type, custom_color)
            self.output.write(console.style(self.prefix + content, color) + "\n")
        else:
            self.output.write(f"{self._tag(output_type)}{content}\n")

    def write_colored_line(self, segments: Iterable[SegmentLike], output_type: OutputType = OutputType.DEFAULT) -> None:
        """Write one line made of differently colored segments.

        Each segment is a ``(text, color)`` pair; a segment without a color
        uses the color of ``output_type``. When redirected, the segment texts
        are written back to back followed by the ``[<timestamp>]<label>``
        tag, and no line break is added.
        """
        if not self.is_output_redirected():
            line_color = self.select_color(output_type)
            self.output.write(console.style(self.prefix, line_color))
            for text, color in segments:
                self.output.write(console.style(text, color or line_color))
            self.output.write("\n")
        else:
            for text, _ in segments:
                self.output.write(text)
            self.output.write(self._tag(output_type))

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def read_line(
        self,
        prompt: Optional[str] = None,
        default: Optional[str] = None,
        new_line: bool = False,
        custom_prompt_color: Optional[str] = None,
    ) -> Optional[str]:
        """Read a line from the input stream.

        Args:
            prompt: Prompt shown before reading. Only an empty prompt is
                written, as ``">"``.
            default: Returned instead when the line entered is empty
            new_line: Write the prompt on a line of its own
            custom_prompt_color: Color of the prompt, the palette's prompt
                color otherwise

        Returns:
            The line without its line terminator, ``default`` if it was
            empty, or None at end of input.
        """
        if prompt == "":
            if new_line:
                self.write_line(prompt + ">", OutputType.PROMPT, custom_prompt_color)
            else:
                self.write(prompt + ">", OutputType.PROMPT, custom_prompt_color)

        line = self.input.readline()
        if not line:
            return None
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        if line.endswith("\r\n"):
            line = line[:-2]
        elif line.endswith("\n"):
            line = line[:-1]
        return default if line == "" else line

    def read(self) -> int:
        """Read the next character from the input stream.

        Returns:
            Its code point (byte value for binary streams), or EOF (-1)
        """
        unit = self.input.read(1)
        if not unit:
            return EOF
        if isinstance(unit, str):
            return ord(unit)
        return unit[0]
