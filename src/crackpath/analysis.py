"""
End to end analysis of one password.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .config import AnalysisConfig
from .errors import FinderError
from .finders import CompositeFinder, PatternFinder
from .key_sequence import KeySequenceFinder
from .keyboard import BUILTIN_LAYOUTS
from .logger import analysis_logger
from .path_cost import PathComposer, PathCost
from .repeating import DuplicateCollapser
from .results import PasswordResults


@dataclass(frozen=True)
class AnalysisResult:
    """Everything learned about one password."""
    results: PasswordResults
    best_path: PathCost
    final_path: PathCost

    @property
    def total_cost(self) -> int:
        return self.final_path.total_cost

    @property
    def log_cost(self) -> float:
        return self.final_path.log_cost

    @property
    def failures(self) -> Tuple[FinderError, ...]:
        return self.results.failures


class PasswordAnalyzer:
    """Runs the finders, picks the cheapest path and collapses repeats.

    Without explicit finders one keyboard sequence finder is used per
    built-in layout. The analyzer holds no per-password state.
    """

    def __init__(self, finders: Optional[Sequence[PatternFinder]] = None,
                 config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()
        if finders is None:
            finders = [KeySequenceFinder(layout) for layout in BUILTIN_LAYOUTS]
        self.finder = CompositeFinder(finders, max_workers=self.config.max_workers)
        self.composer = PathComposer(self.config.random_universe_size)
        self.collapser = DuplicateCollapser()
        if self.config.log_file:
            analysis_logger.configure(self.config.log_file)

    def analyze(self, password: str) -> AnalysisResult:
        results = PasswordResults(password)
        self.finder.analyze(results)
        best = self.composer.best_path(results)
        final = self.collapser.process(best, results)
        return AnalysisResult(results, best, final)
