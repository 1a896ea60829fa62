"""
Post processing of a computed path: repeats of an earlier pattern cost
nothing extra once the attacker guessed the first one.
"""

from typing import Optional, Sequence

from .logger import analysis_logger
from .path_cost import PathCost
from .pattern import RANDOM, PasswordPattern
from .results import PasswordResults

DUPLICATE = "DUPLICATE"


class DuplicateCollapser:
    """Replaces repeated patterns in a path with a cost of 1."""

    def process(self, cost: PathCost, results: PasswordResults) -> PathCost:
        path = cost.path
        collapsed = []
        for i in range(len(path) - 1, -1, -1):
            pattern = path[i]
            earlier = self._find_earlier(path, i)
            if earlier is None:
                collapsed.append(pattern)
            else:
                collapsed.append(PasswordPattern(
                    start_index=pattern.start_index,
                    length=pattern.length,
                    matched_text=pattern.matched_text,
                    search_space=1,
                    description=f"Duplication of an earlier pattern: {earlier.kind}",
                    kind=DUPLICATE,
                    classification=pattern.classification,
                ))
        collapsed.reverse()

        analysis_logger.log_duplicates_collapsed(
            sum(1 for old, new in zip(path, collapsed) if old is not new))
        return PathCost(results, collapsed)

    @staticmethod
    def _find_earlier(path: Sequence[PasswordPattern], index: int) -> Optional[PasswordPattern]:
        """Nearest earlier pattern that ``path[index]`` repeats, if any."""
        pattern = path[index]
        if pattern.kind in (RANDOM, DUPLICATE):
            return None
        for j in range(index - 1, -1, -1):
            candidate = path[j]
            if candidate.kind == pattern.kind and candidate.matched_text == pattern.matched_text:
                return candidate
        return None
