"""
Keyboard sequence detection.

Finds three kinds of keyboard patterns: diagonal runs, repeated keys and
horizontal runs. Horizontal runs of 3 and 4 keys are priced apart from
runs of 5 or more, which are awkward to type with one hand.
"""

from typing import List, Optional

from .finders import PatternFinder
from .keyboard import Direction, Key, KeyboardLayout
from .pattern import PasswordPattern
from .results import PasswordResults

DIAGONAL = "DIAGONAL"
HORIZONTAL = "HORIZONTAL"
REPEATED = "REPEATED"

MIN_SEQUENCE_LENGTH = 3


def upper_case_factor(length: int, upper_letters: int) -> int:
    """Ways of placing the shifted characters in a sequence.

    Past half the length we assume all caps with a few lower case keys,
    so only the minority is counted. This is a descending product, not a
    binomial coefficient.
    """
    if upper_letters > length // 2:
        chars_to_guess = length - upper_letters
    else:
        chars_to_guess = upper_letters
    factor = 1
    for choices in range(length, length - chars_to_guess, -1):
        factor *= choices
    return factor


class KeySequenceFinder(PatternFinder):
    """Reports every keyboard sequence of 3 or more keys in a password.

    The layout is read once at construction; ``analyze`` keeps all its
    working state local so one finder may serve many threads.
    """

    def __init__(self, layout: KeyboardLayout):
        self.layout = layout
        self._keyboard = layout.generate_keyboard()
        self._key_count = layout.character_key_count()
        self._diagonal_count = layout.diagonal_combo_total()
        self._horiz_3_and_4_count = layout.horizontal_combo_size(3) + layout.horizontal_combo_size(4)
        self._horiz_5_plus_count = layout.horizontal_combo_total() - self._horiz_3_and_4_count

    @property
    def name(self) -> str:
        return f"{type(self).__name__}({self.layout.name()})"

    def analyze(self, results: PasswordResults) -> None:
        password = results.char_sequence()
        if not password:
            return

        # "Upper" means the character needs shift, not just a capital letter
        is_upper: List[bool] = [False] * len(password)
        previous: Optional[Key] = self._keyboard.get(password[0])
        if previous is not None:
            is_upper[0] = previous.is_shifted(password[0])
        direction: Optional[Direction] = None
        start = 0

        for i in range(1, len(password)):
            char = password[i]
            current = self._keyboard.get(char)
            if current is None:
                previous = None
                direction = None
                continue
            is_upper[i] = current.is_shifted(char)
            if previous is None:
                previous = current
                continue

            if direction is not None:
                if previous.matches(direction, char):
                    if i - start >= MIN_SEQUENCE_LENGTH - 1:
                        for window_start in range(start, i - 1):
                            self._report(results, window_start, i - window_start + 1,
                                         direction, is_upper)
                else:
                    direction = None

            if direction is None:
                direction = previous.is_sequence_start(char)
                if direction is not None:
                    start = i - 1
            previous = current

    def _report(self, results: PasswordResults, start: int, length: int,
                direction: Direction, is_upper: List[bool]) -> None:
        if direction.is_horizontal:
            if length > 4:
                size = self._horiz_5_plus_count
            else:
                size = self._horiz_3_and_4_count
            description = f"{length} Keyboard Horizontal Characters"
            kind = HORIZONTAL
        elif direction.is_diagonal:
            size = self._diagonal_count
            description = f"{length} Keyboard Diagonal Characters ({direction.value})"
            kind = DIAGONAL
        else:
            # Repeats of one or two characters are not worth calling a pattern
            size = self._key_count * (len(results) - 2)
            description = f"{length} Keyboard Repeated Character(s)"
            kind = REPEATED

        n_upper = sum(is_upper[start:start + length])
        if 0 < n_upper < length:
            # Each key has two faces
            size *= 2 * upper_case_factor(length, n_upper)
            description += f" with {n_upper} Upper Case letter(s)"
        elif n_upper == length:
            description += ", Upper Case"

        results.record(PasswordPattern(
            start_index=start,
            length=length,
            matched_text=results.char_sequence()[start:start + length],
            search_space=size,
            description=description,
            kind=kind,
            classification=self.layout.name(),
        ))
