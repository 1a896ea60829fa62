"""
Per-password accumulation of candidate patterns.
"""

import threading
from typing import List, Tuple

from .errors import FinderError, InvalidPatternError, ResultsFrozenError
from .pattern import PasswordPattern


class PasswordResults:
    """Collects the patterns every finder discovered in one password.

    Patterns are kept in buckets by start index so composition can walk
    the candidates leaving each position. Recording is thread safe;
    once frozen the accumulator is read-only.
    """

    def __init__(self, password: str):
        self._password = password
        self._by_start: List[List[PasswordPattern]] = [[] for _ in password]
        self._failures: List[FinderError] = []
        self._count = 0
        self._frozen = False
        self._lock = threading.Lock()

    def char_sequence(self) -> str:
        return self._password

    def char_at(self, index: int) -> str:
        return self._password[index]

    def __len__(self) -> int:
        return len(self._password)

    def record(self, pattern: PasswordPattern) -> None:
        """Add a candidate pattern found by a finder."""
        if pattern.end_index > len(self._password):
            raise InvalidPatternError(
                f"Pattern [{pattern.start_index}, {pattern.end_index}) runs past "
                f"the end of a {len(self._password)} character password")
        if self._password[pattern.start_index:pattern.end_index] != pattern.matched_text:
            raise InvalidPatternError(
                f"Pattern text does not match the password at index {pattern.start_index}")
        with self._lock:
            if self._frozen:
                raise ResultsFrozenError("Patterns cannot be recorded once composition started")
            self._by_start[pattern.start_index].append(pattern)
            self._count += 1

    def record_failure(self, error: FinderError) -> None:
        with self._lock:
            self._failures.append(error)

    @property
    def failures(self) -> Tuple[FinderError, ...]:
        return tuple(self._failures)

    def freeze(self) -> None:
        """Stop accepting patterns."""
        with self._lock:
            self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def matches(self) -> Tuple[PasswordPattern, ...]:
        """All recorded candidates, ordered by start index."""
        with self._lock:
            return tuple(p for bucket in self._by_start for p in bucket)

    def matches_starting_at(self, index: int) -> Tuple[PasswordPattern, ...]:
        with self._lock:
            return tuple(self._by_start[index])

    @property
    def pattern_count(self) -> int:
        return self._count
