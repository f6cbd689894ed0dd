"""
Suit IO - console input/output for interactive command-line applications.

This package provides:
- Colored, prefix-indented output when writing to the terminal
- Plain, timestamped and labelled lines once output is redirected
- Line input with prompt and default-value handling

Usage:
    from suit_io import IOServer, OutputType

    io = IOServer()
    io.write_line("Ready", OutputType.ALL_OK)

    CLI: suit-io demo
"""

from suit_io.config import ColorSetting, Settings
from suit_io.output import Segment
from suit_io.output_type import OutputType
from suit_io.server import EOF, IOServer
from suit_io.streams import StreamEnvironment

__version__ = "1.0.0"

__all__ = [
    "ColorSetting",
    "EOF",
    "IOServer",
    "OutputType",
    "Segment",
    "Settings",
    "StreamEnvironment",
]
