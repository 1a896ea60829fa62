"""
Pattern finder interface and concurrent fan-out.
"""

from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from .errors import FinderError, LayoutConsistencyError
from .logger import analysis_logger
from .results import PasswordResults


class PatternFinder(ABC):
    """Something that discovers patterns in a password."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def analyze(self, results: PasswordResults) -> None:
        """Record every pattern found in ``results.char_sequence()``.

        Finders only ever add to ``results``; they never touch patterns
        recorded by another finder.
        """


class CompositeFinder(PatternFinder):
    """Runs several finders over the same password in parallel.

    ``analyze`` returns only after every child finished, so the results
    are complete when it returns. A failing child is logged and noted on
    ``results.failures``; the other children keep their patterns. A
    corrupt keyboard layout is not recoverable and is re-raised.
    """

    def __init__(self, finders: Sequence[PatternFinder], max_workers: Optional[int] = None):
        self.finders = list(finders)
        self.max_workers = max_workers

    def analyze(self, results: PasswordResults) -> None:
        if not self.finders:
            return
        workers = self.max_workers or len(self.finders)
        fatal: List[LayoutConsistencyError] = []
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="crackpath-finder") as pool:
            futures = [(finder, pool.submit(finder.analyze, results)) for finder in self.finders]
            for finder, future in futures:
                error = future.exception()
                if error is None:
                    continue
                if isinstance(error, LayoutConsistencyError):
                    fatal.append(error)
                    continue
                failure = FinderError(finder.name, str(error))
                failure.__cause__ = error
                analysis_logger.log_finder_failure(finder.name, error)
                results.record_failure(failure)
        if fatal:
            raise fatal[0]
