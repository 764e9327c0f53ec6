"""Custom exception hierarchy for crossword layout."""


class CrosswordError(Exception):
    """Base exception for layout failures."""


class SlotPlacementError(CrosswordError):
    """Raised when a word cannot be written to the grid without breaking rules."""


class SolutionUnmappableError(CrosswordError):
    """Raised when the hidden solution cannot be spelled from placed letters."""


class ValidationError(CrosswordError):
    """Raised when the layout integrity checks fail."""


class WordListError(CrosswordError):
    """Raised when a candidate provider cannot produce a usable word list."""
