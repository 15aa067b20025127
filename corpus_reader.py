"""
Character-at-a-time access to a training corpus.

"""

from pathlib import Path
from typing import Union


class CorpusExhaustedError(EOFError):
    """Raised when a character is requested from an exhausted corpus."""


class CorpusReader:
    """Reads a corpus one character at a time."""

    def __init__(self, text: str):
        self._text = text
        self._position = 0

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: str = "utf-8") -> "CorpusReader":
        """Load the whole file and return a reader over its contents."""
        return cls(Path(path).read_text(encoding=encoding))

    def __len__(self) -> int:
        return len(self._text)

    @property
    def position(self) -> int:
        return self._position

    def is_empty(self) -> bool:
        return self._position >= len(self._text)

    def read_char(self) -> str:
        if self.is_empty():
            raise CorpusExhaustedError(f"corpus exhausted after {self._position} characters")
        c = self._text[self._position]
        self._position += 1
        return c
