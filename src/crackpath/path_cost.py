"""
Cheapest covering of a password by its discovered patterns.
"""

import math
from typing import Iterator, List, Optional, Sequence, Tuple

from .config import DEFAULT_RANDOM_UNIVERSE, check_random_universe
from .errors import PathIntegrityError
from .logger import analysis_logger
from .pattern import PasswordPattern, random_pattern
from .results import PasswordResults


class PathCost:
    """Ordered patterns that cover a password with no gap and no overlap.

    The total cost is the product of every pattern's search space.
    """

    def __init__(self, results: PasswordResults, patterns: Sequence[PasswordPattern] = ()):
        self.password_length = len(results)
        self._path: Tuple[PasswordPattern, ...] = tuple(patterns)
        self._check_tiling()

    def _check_tiling(self):
        position = 0
        for pattern in self._path:
            if pattern.start_index != position:
                raise PathIntegrityError(
                    f"Pattern at {pattern.start_index} does not continue the path at {position}")
            position = pattern.end_index
        if position != self.password_length:
            raise PathIntegrityError(
                f"Path covers {position} of {self.password_length} characters")

    @property
    def path(self) -> Tuple[PasswordPattern, ...]:
        return self._path

    @property
    def total_cost(self) -> int:
        return math.prod(p.search_space for p in self._path)

    @property
    def log_cost(self) -> float:
        """Natural logarithm of ``total_cost``."""
        return sum(math.log(p.search_space) for p in self._path)

    def __iter__(self) -> Iterator[PasswordPattern]:
        return iter(self._path)

    def __len__(self) -> int:
        return len(self._path)

    def __getitem__(self, index: int) -> PasswordPattern:
        return self._path[index]

    def __repr__(self) -> str:
        kinds = ", ".join(p.kind for p in self._path)
        return f"PathCost([{kinds}], total_cost={self.total_cost})"


class PathComposer:
    """Picks the cheapest full covering among the recorded patterns.

    Password positions ``0..len`` are the nodes of a DAG and every
    pattern is an edge ``start -> start + length`` weighted by the log of
    its search space. A random pattern is added at every position so the
    end is always reachable. Because nodes are ordered, one forward pass
    gives the shortest path. Costs are compared as exact integer
    products, which orders paths the same way as summed logs without
    rounding. On a tie the longer pattern wins.
    """

    def __init__(self, random_universe_size: int = DEFAULT_RANDOM_UNIVERSE):
        self.random_universe_size = check_random_universe(random_universe_size)

    def best_path(self, results: PasswordResults) -> PathCost:
        results.freeze()
        length = len(results)
        best: List[Optional[int]] = [None] * (length + 1)
        via: List[Optional[PasswordPattern]] = [None] * (length + 1)
        best[0] = 1

        for i in range(length):
            cost_here = best[i]
            if cost_here is None:
                continue
            edges = list(results.matches_starting_at(i))
            edges.append(random_pattern(results, i, self.random_universe_size))
            for pattern in edges:
                j = pattern.end_index
                cost = cost_here * pattern.search_space
                if best[j] is None or cost < best[j]:
                    best[j] = cost
                    via[j] = pattern
                elif cost == best[j] and pattern.length > via[j].length:
                    via[j] = pattern

        patterns = []
        position = length
        while position > 0:
            pattern = via[position]
            if pattern is None:
                raise PathIntegrityError(f"No pattern reaches position {position}")
            patterns.append(pattern)
            position = pattern.start_index
        patterns.reverse()

        path = PathCost(results, patterns)
        analysis_logger.log_path_computed(length, len(path), path.log_cost)
        return path
