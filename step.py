from contextlib import contextmanager

from suit_io.server import IOServer


@contextmanager
def indented(server: IOServer, text: str = "\t"):
    """Context manager that indents write_line() output for its body.

    Args:
        server: Server whose prefix is extended
        text: Fragment appended to the prefix (default: a tab)

    The fragment is removed again on exit, also when the body raises.
    """
    server.append_prefix(text)
    try:
        yield server
    finally:
        server.subtract_prefix()
