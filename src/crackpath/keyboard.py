"""
Keyboard geometry used to detect keyboard sequences.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .errors import LayoutConsistencyError


class Direction(Enum):
    SELF = "SELF"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    UPPER_LEFT = "UPPER_LEFT"
    UPPER_RIGHT = "UPPER_RIGHT"
    LOWER_LEFT = "LOWER_LEFT"
    LOWER_RIGHT = "LOWER_RIGHT"

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @property
    def is_diagonal(self) -> bool:
        return self in DIAGONALS


DIAGONALS = (Direction.UPPER_LEFT, Direction.UPPER_RIGHT,
             Direction.LOWER_LEFT, Direction.LOWER_RIGHT)

# Checked in this order when a new sequence may start
SEQUENCE_DIRECTIONS = (Direction.SELF, Direction.LEFT, Direction.RIGHT) + DIAGONALS


@dataclass(eq=False)
class Key:
    """One physical key: its unshifted and shifted faces and its neighbours."""
    lower: str
    upper: str
    neighbors: Dict[Direction, 'Key'] = field(default_factory=dict, repr=False)

    def has_face(self, char: str) -> bool:
        return char == self.lower or char == self.upper

    def neighbor(self, direction: Direction) -> Optional['Key']:
        if direction is Direction.SELF:
            return self
        return self.neighbors.get(direction)

    def matches(self, direction: Direction, next_char: str) -> bool:
        """True if ``next_char`` is on the key adjacent in ``direction``."""
        key = self.neighbor(direction)
        return key is not None and key.has_face(next_char)

    def is_sequence_start(self, next_char: str) -> Optional[Direction]:
        """Direction in which ``next_char`` follows this key, if any."""
        for direction in SEQUENCE_DIRECTIONS:
            if self.matches(direction, next_char):
                return direction
        return None

    def is_shifted(self, char: str) -> bool:
        """Whether typing ``char`` on this key needs the shift modifier."""
        if char == self.lower:
            return False
        if char == self.upper:
            return True
        raise LayoutConsistencyError(
            f"Character {char!r} is registered on key {self.lower!r}/{self.upper!r} "
            f"but matches neither face")


class KeyboardLayout(ABC):
    """Static geometry and combinatorial counts of one keyboard."""

    @abstractmethod
    def generate_keyboard(self) -> Mapping[str, Key]:
        """Map every character to the key that produces it."""

    @abstractmethod
    def character_key_count(self) -> int:
        """Number of character keys."""

    @abstractmethod
    def diagonal_combo_total(self) -> int:
        """Number of diagonal sequences possible."""

    @abstractmethod
    def horizontal_combo_size(self, length: int) -> int:
        """Number of horizontal sequences of exactly ``length`` keys."""

    @abstractmethod
    def horizontal_combo_total(self) -> int:
        """Number of horizontal sequences of any length from 3 up."""

    @abstractmethod
    def name(self) -> str:
        pass


class RowKeyboardLayout(KeyboardLayout):
    """Layout built from staggered rows of keys.

    Each row is given as ``(lower_faces, upper_faces)``, one character
    per key. Every row sits half a key to the right of the row above it,
    so the key at ``(row, col)`` touches ``(row - 1, col)`` and
    ``(row - 1, col + 1)`` above and ``(row + 1, col - 1)`` and
    ``(row + 1, col)`` below. Rows after the first start one column in.
    """

    def __init__(self, name: str, rows: Sequence[Tuple[str, str]]):
        self._name = name
        self._rows: List[List[Key]] = []
        keyboard: Dict[str, Key] = {}
        for lower_faces, upper_faces in rows:
            if len(lower_faces) != len(upper_faces):
                raise LayoutConsistencyError(
                    f"{name}: row {lower_faces!r} has {len(lower_faces)} lower faces "
                    f"but {len(upper_faces)} upper faces")
            row = []
            for lower, upper in zip(lower_faces, upper_faces):
                key = Key(lower, upper)
                for char in {lower, upper}:
                    if char in keyboard:
                        raise LayoutConsistencyError(f"{name}: character {char!r} is on two keys")
                    keyboard[char] = key
                row.append(key)
            self._rows.append(row)
        self._keyboard = MappingProxyType(keyboard)
        self._link_neighbors()
        self._diagonal_total = sum(
            1 for row in self._rows for key in row for d in DIAGONALS if d in key.neighbors)

    def _key_at(self, row: int, col: int) -> Optional[Key]:
        # Rows after the first carry a one column offset
        if row < 0 or row >= len(self._rows):
            return None
        index = col if row == 0 else col - 1
        if 0 <= index < len(self._rows[row]):
            return self._rows[row][index]
        return None

    def _link_neighbors(self):
        offsets = {
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
            Direction.UPPER_LEFT: (-1, 0),
            Direction.UPPER_RIGHT: (-1, 1),
            Direction.LOWER_LEFT: (1, -1),
            Direction.LOWER_RIGHT: (1, 0),
        }
        for r, row in enumerate(self._rows):
            for i, key in enumerate(row):
                col = i if r == 0 else i + 1
                for direction, (dr, dc) in offsets.items():
                    neighbor = self._key_at(r + dr, col + dc)
                    if neighbor is not None:
                        key.neighbors[direction] = neighbor

    def generate_keyboard(self) -> Mapping[str, Key]:
        return self._keyboard

    def character_key_count(self) -> int:
        return sum(len(row) for row in self._rows)

    def diagonal_combo_total(self) -> int:
        return self._diagonal_total

    def horizontal_combo_size(self, length: int) -> int:
        # Both directions along every row long enough
        return sum(2 * (len(row) - length + 1) for row in self._rows if len(row) >= length)

    def horizontal_combo_total(self) -> int:
        longest = max((len(row) for row in self._rows), default=0)
        return sum(self.horizontal_combo_size(n) for n in range(3, longest + 1))

    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"RowKeyboardLayout({self._name!r}, keys={self.character_key_count()})"


ENGLISH_QWERTY = RowKeyboardLayout("US English", [
    ("`1234567890-=", "~!@#$%^&*()_+"),
    ("qwertyuiop[]\\", "QWERTYUIOP{}|"),
    ("asdfghjkl;'", 'ASDFGHJKL:"'),
    ("zxcvbnm,./", "ZXCVBNM<>?"),
])

RUSSIAN_JCUKEN = RowKeyboardLayout("Russian", [
    ("ё1234567890-=", 'Ё!"№;%:?*()_+'),
    ("йцукенгшщзхъ\\", "ЙЦУКЕНГШЩЗХЪ/"),
    ("фывапролджэ", "ФЫВАПРОЛДЖЭ"),
    ("ячсмитьбю.", "ЯЧСМИТЬБЮ,"),
])

BUILTIN_LAYOUTS = (ENGLISH_QWERTY, RUSSIAN_JCUKEN)
