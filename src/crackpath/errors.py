"""
Custom exceptions for crackpath.
"""

class CrackPathError(Exception):
    """Base exception for crackpath."""
    pass

class LayoutConsistencyError(CrackPathError):
    """Keyboard layout table is inconsistent or corrupt."""
    pass

class InvalidPatternError(CrackPathError, ValueError):
    """Pattern violates its own invariants or the password it was found in."""
    pass

class ResultsFrozenError(CrackPathError):
    """Pattern recorded after composition started."""
    pass

class FinderError(CrackPathError):
    """A single pattern finder failed during analysis."""

    def __init__(self, finder_name: str, message: str = ""):
        self.finder_name = finder_name
        super().__init__(f"{finder_name} failed: {message}" if message else f"{finder_name} failed")

class PathIntegrityError(CrackPathError):
    """Cost path does not tile the password."""
    pass

class ConfigurationError(CrackPathError, ValueError):
    """Invalid analysis configuration values."""
    pass
