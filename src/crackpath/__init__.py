"""
crackpath - password guessability by cheapest pattern decomposition.
"""

from .analysis import AnalysisResult, PasswordAnalyzer
from .config import DEFAULT_RANDOM_UNIVERSE, AnalysisConfig
from .errors import (
    ConfigurationError, CrackPathError, FinderError, InvalidPatternError,
    LayoutConsistencyError, PathIntegrityError, ResultsFrozenError,
)
from .finders import CompositeFinder, PatternFinder
from .key_sequence import KeySequenceFinder, upper_case_factor
from .keyboard import (
    BUILTIN_LAYOUTS, ENGLISH_QWERTY, RUSSIAN_JCUKEN, Direction, Key,
    KeyboardLayout, RowKeyboardLayout,
)
from .path_cost import PathComposer, PathCost
from .pattern import RANDOM, PasswordPattern, random_pattern
from .repeating import DUPLICATE, DuplicateCollapser
from .results import PasswordResults

__version__ = "1.0.0"
