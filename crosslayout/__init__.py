"""Crossword layout engine for greeting-card puzzles.

This package exposes the public API surface via:

- ``crosslayout.engine.generator.CrosswordGenerator``: runs the layout pipeline.
- ``crosslayout.engine.generator.generate_crossword``: functional wrapper.
- ``crosslayout.data.normalization.normalize_word``: word canonicalization.
- ``crosslayout.data.candidates`` helpers: user and Gemini word providers.
"""

from .core.constants import Direction, RejectReason
from .core.models import CrosswordLayout, PlacedWord, SolutionData, WordCandidate
from .data.normalization import normalize_word
from .engine.generator import CrosswordGenerator, GeneratorConfig, generate_crossword

__all__ = [
    "CrosswordGenerator",
    "CrosswordLayout",
    "Direction",
    "GeneratorConfig",
    "PlacedWord",
    "RejectReason",
    "SolutionData",
    "WordCandidate",
    "generate_crossword",
    "normalize_word",
]

__version__ = "0.1.0"
