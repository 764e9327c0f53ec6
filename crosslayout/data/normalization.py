"""Shared helpers for word normalization and candidate filtering."""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable, List, Set, Tuple

from ..core.constants import MAX_GRID_SIZE, MIN_WORD_LENGTH, RejectReason
from ..core.models import NormalizedCandidate, RejectedCandidate, WordCandidate
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

WORD_RE = re.compile(r"[^A-Z]")


def normalize_word(text: str) -> str:
    """Return ``text`` as uppercase ASCII letters only.

    Diacritics are removed through canonical decomposition, so ``"Ñoño"``
    becomes ``"NONO"`` and ``"café"`` becomes ``"CAFE"``.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return WORD_RE.sub("", stripped.upper())


def prepare_candidates(
    candidates: Iterable[WordCandidate],
    max_length: int = MAX_GRID_SIZE,
) -> Tuple[List[NormalizedCandidate], List[RejectedCandidate]]:
    """Normalize candidates and split them into placeable and rejected ones.

    Kept candidates carry the normalized word, keep their input order and
    point back at the raw input through ``source``.
    """

    kept: List[NormalizedCandidate] = []
    rejected: List[RejectedCandidate] = []
    seen: Set[str] = set()
    for candidate in candidates:
        cleaned = normalize_word(candidate.word)
        reason = None
        if len(cleaned) < MIN_WORD_LENGTH:
            reason = RejectReason.TOO_SHORT
        elif len(cleaned) > max_length:
            reason = RejectReason.TOO_LONG
        elif cleaned in seen:
            reason = RejectReason.DUPLICATE
        if reason is not None:
            LOGGER.debug("Filtering candidate %r (%s)", candidate.word, reason.value)
            rejected.append(RejectedCandidate(candidate, cleaned, reason))
            continue
        seen.add(cleaned)
        kept.append(NormalizedCandidate(word=cleaned, clue=candidate.clue, source=candidate))
    return kept, rejected


__all__ = ["normalize_word", "prepare_candidates"]
