"""
Discovered password patterns.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import InvalidPatternError

if TYPE_CHECKING:
    from .results import PasswordResults

RANDOM = "RANDOM"


@dataclass(frozen=True)
class PasswordPattern:
    """A substring of a password explained by one structural pattern.

    ``search_space`` is the number of strings an attacker must try to
    reproduce exactly this substring with this pattern: its cost.
    """
    start_index: int
    length: int
    matched_text: str
    search_space: int
    description: str
    kind: str
    classification: str = ""

    def __post_init__(self):
        if self.start_index < 0:
            raise InvalidPatternError(f"start_index must not be negative, got {self.start_index}")
        if self.length < 1:
            raise InvalidPatternError(f"length must be at least 1, got {self.length}")
        if len(self.matched_text) != self.length:
            raise InvalidPatternError(
                f"matched_text {self.matched_text!r} does not have length {self.length}")
        if self.search_space < 1:
            raise InvalidPatternError(f"search_space must be at least 1, got {self.search_space}")

    @property
    def end_index(self) -> int:
        """Index just past the last matched character."""
        return self.start_index + self.length


def random_pattern(results: 'PasswordResults', index: int, universe_size: int) -> PasswordPattern:
    """Fallback pattern for one character guessed by brute force."""
    return PasswordPattern(
        start_index=index,
        length=1,
        matched_text=results.char_at(index),
        search_space=universe_size,
        description="Random Character",
        kind=RANDOM,
        classification="Random",
    )
