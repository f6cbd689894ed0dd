"""Indentation prefix written in front of interactive lines."""

from typing import List


class PrefixStack:
    """Stack of appended fragments plus the accumulated prefix text.

    Only the length of each fragment is kept; popping removes that many
    characters from the end of the text. The lengths on the stack always
    add up to ``len(self.current)``.
    """

    def __init__(self):
        self._text = ""
        self._lengths: List[int] = []

    @property
    def current(self) -> str:
        """The accumulated prefix."""
        return self._text

    @property
    def depth(self) -> int:
        """Number of fragments on the stack."""
        return len(self._lengths)

    def clear(self) -> None:
        self._text = ""
        self._lengths.clear()

    def set(self, text: str) -> None:
        """Replace the whole prefix with a single fragment."""
        self.clear()
        self.append(text)

    def append(self, text: str = "\t") -> None:
        """Push a fragment, a tab unless told otherwise."""
        self._text += text
        self._lengths.append(len(text))

    def subtract(self) -> None:
        """Pop the most recent fragment. Does nothing on an empty stack."""
        if not self._lengths:
            return
        length = self._lengths.pop()
        self._text = self._text[:len(self._text) - length]

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"PrefixStack({self._text!r}, depth={self.depth})"
