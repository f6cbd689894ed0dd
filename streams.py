"""Active streams of an IOServer and redirection detection."""

import logging
import sys
from dataclasses import dataclass
from typing import IO, Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StreamEnvironment:
    """The original input, output and error streams of the process.

    Redirection is decided by identity against these handles, so tests can
    pass in their own objects instead of the real ``sys`` streams.
    """
    input: IO[Any]
    output: IO[Any]
    error: IO[Any]

    @classmethod
    def from_process(cls) -> "StreamEnvironment":
        """Capture ``sys.stdin``, ``sys.stdout`` and ``sys.stderr`` as they are now."""
        return cls(input=sys.stdin, output=sys.stdout, error=sys.stderr)


class StreamState:
    """Currently bound input, output and error streams."""

    def __init__(self, environment: StreamEnvironment):
        self.environment = environment
        self.input = environment.input
        self.output = environment.output
        self.error = environment.error

    def is_input_redirected(self) -> bool:
        return self.input is not self.environment.input

    def is_output_redirected(self) -> bool:
        return self.output is not self.environment.output

    def is_error_redirected(self) -> bool:
        return self.error is not self.environment.error

    def reset_input(self) -> None:
        if self.is_input_redirected():
            logger.debug("Input stream reset to the process stream")
        self.input = self.environment.input

    def reset_output(self) -> None:
        if self.is_output_redirected():
            logger.debug("Output stream reset to the process stream")
        self.output = self.environment.output

    def reset_error(self) -> None:
        if self.is_error_redirected():
            logger.debug("Error stream reset to the process stream")
        self.error = self.environment.error
