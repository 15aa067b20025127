"""
Ordered per-window character statistics used by the language model.

"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple


@dataclass
class CharacterStat:
    """Statistics of one character following a fixed window."""

    character: str
    count: int = 1
    probability: float = 0.0
    cumulative_probability: float = 0.0

    def __str__(self) -> str:
        return f"({self.character} {self.count} {self.probability} {self.cumulative_probability})"


class FrequencyTable:
    """Ordered table of CharacterStat entries, newest character first."""

    def __init__(self):
        self._entries: List[CharacterStat] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, character: str) -> bool:
        return self.index_of(character) != -1

    def __iter__(self) -> Iterator[CharacterStat]:
        return self.iter_from(0)

    def __str__(self) -> str:
        if not self._entries:
            return "()"
        return "(" + " ".join(str(entry) for entry in self._entries) + ")"

    def first(self) -> CharacterStat:
        """Return the entry at the head of the table."""
        return self.get(0)

    def add_first(self, character: str) -> None:
        """Insert a fresh entry for character at the head of the table."""
        self._entries.insert(0, CharacterStat(character))

    def index_of(self, character: str) -> int:
        """Position of the entry for character, or -1 if there is none."""
        for i, entry in enumerate(self._entries):
            if entry.character == character:
                return i
        return -1

    def update(self, character: str) -> None:
        """Count one more occurrence of character."""
        index = self.index_of(character)
        if index != -1:
            self._entries[index].count += 1
        else:
            self.add_first(character)

    def remove(self, character: str) -> bool:
        """Remove the entry for character; report whether one was removed."""
        index = self.index_of(character)
        if index == -1:
            return False
        del self._entries[index]
        return True

    def get(self, index: int) -> CharacterStat:
        """Return the entry at index, rejecting anything outside [0, size)."""
        if index < 0 or index >= len(self._entries):
            raise IndexError(f"index {index} out of range for table of size {len(self._entries)}")
        return self._entries[index]

    def to_array(self) -> Tuple[CharacterStat, ...]:
        """Snapshot of all entries in table order."""
        return tuple(self._entries)

    def iter_from(self, index: int = 0) -> Iterator[CharacterStat]:
        """Iterate over the entries in table order, starting at index."""
        if index < 0 or index > len(self._entries):
            raise IndexError(f"index {index} out of range for table of size {len(self._entries)}")
        return iter(self._entries[index:])
