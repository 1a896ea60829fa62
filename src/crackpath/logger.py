"""
Analysis logging.
"""

import logging
import os
from typing import Optional


class AnalysisLogger:
    """Log analysis events."""

    def __init__(self, log_file: Optional[str] = None, name: str = 'crackpath'):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

        if log_file is None:
            # Silent unless the application configures handlers
            if not self.logger.handlers:
                self.logger.addHandler(logging.NullHandler())
            return

        self.configure(log_file)

    def configure(self, log_file: str) -> None:
        """Also write events to ``log_file``, once per file."""
        path = os.path.abspath(log_file)
        for handler in self.logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == path:
                return

        # File handler
        fh = logging.FileHandler(path)
        fh.setLevel(logging.INFO)

        # Formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        fh.setFormatter(formatter)

        self.logger.addHandler(fh)

    def log_finder_failure(self, finder: str, error: BaseException):
        """Log a finder whose results were dropped."""
        self.logger.warning(f"Finder {finder} failed, its patterns are ignored - {error}")

    def log_path_computed(self, password_length: int, pattern_count: int, log_cost: float):
        """Log a computed cost path. The password itself is never logged."""
        self.logger.info(
            f"Cost path computed for {password_length} characters: "
            f"{pattern_count} pattern(s), log cost {log_cost:.2f}")

    def log_duplicates_collapsed(self, count: int):
        """Log how many repeated patterns were collapsed."""
        if count:
            self.logger.info(f"Collapsed {count} duplicate pattern(s)")

# Global logger instance
analysis_logger = AnalysisLogger()
