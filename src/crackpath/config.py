"""
Analysis settings.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

# Printable ASCII, space included
DEFAULT_RANDOM_UNIVERSE = 95


def check_random_universe(size: int) -> int:
    if size < 1:
        raise ConfigurationError(f"random_universe_size must be at least 1, got {size}")
    return size


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings shared by every analysis run."""
    random_universe_size: int = DEFAULT_RANDOM_UNIVERSE
    max_workers: Optional[int] = None
    log_file: Optional[str] = None

    def __post_init__(self):
        check_random_universe(self.random_universe_size)
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be at least 1, got {self.max_workers}")
