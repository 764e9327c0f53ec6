"""Candidate word providers feeding the layout engine."""

from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, List, Optional, Protocol, Sequence

from ..core.exceptions import WordListError
from ..core.models import WordCandidate
from ..io.gemini_client import GeminiClient, GeminiJSONError
from ..utils.logger import get_logger
from .normalization import normalize_word


LOGGER = get_logger(__name__)


class WordListGenerator(Protocol):
    """Protocol implemented by all candidate providers."""

    def generate(
        self, topic: str, limit: int = 10, required_letters: Sequence[str] = (),
    ) -> List[WordCandidate]:
        ...


class UserWordListGenerator:
    """Returns a user-supplied list of ``WORD`` or ``WORD:Clue`` entries."""

    def __init__(self, raw_words: Iterable[str]) -> None:
        self._candidates: List[WordCandidate] = []
        for item in raw_words:
            item = item.strip()
            if not item:
                continue
            word, _, clue = item.partition(":")
            if not word.strip():
                continue
            self._candidates.append(WordCandidate(word.strip(), clue.strip()))

    def generate(
        self, topic: str, limit: int = 10, required_letters: Sequence[str] = (),
    ) -> List[WordCandidate]:
        return list(self._candidates)


class GeminiWordListGenerator:
    """LLM-powered candidate generator using the Gemini API."""

    BASE_PROMPT = (
        "Generate a list of {minimum}-{limit} words with clues for a crossword "
        "in {language} on the topic: \"{topic}\". "
        "{letters_line}"
        "Clues must be written in {language}. "
        'Respond with a JSON object {{"words": [{{"word": "...", "clue": "..."}}]}}.'
    )

    LETTERS_LINE = "IMPORTANT: the words must together contain these letters: {letters}. "

    def __init__(
        self,
        language: str = "Italian",
        temperature: float = 0.8,
        gemini_client: Optional[GeminiClient] = None,
    ) -> None:
        self.language = language
        self.temperature = temperature
        self._client = gemini_client

    def generate(
        self, topic: str, limit: int = 10, required_letters: Sequence[str] = (),
    ) -> List[WordCandidate]:
        prompt = self._render_prompt(topic, limit, required_letters)
        client = self._client or GeminiClient()
        self._client = client
        try:
            data = client.generate_json(prompt, temperature=self.temperature)
        except GeminiJSONError as exc:
            LOGGER.warning("Discarding undecodable Gemini answer for '%s': %s", topic, exc)
            return []
        candidates = self._parse_response(data)
        if not candidates:
            LOGGER.warning("Gemini returned no usable words for '%s'", topic)
            return []
        LOGGER.info("Gemini produced %d candidates for '%s'", len(candidates), topic)
        return candidates[:limit]

    def _render_prompt(self, topic: str, limit: int, required_letters: Sequence[str] = ()) -> str:
        letters_line = ""
        if required_letters:
            letters_line = self.LETTERS_LINE.format(letters=", ".join(required_letters))
        return self.BASE_PROMPT.format(
            minimum=max(2, limit - 2),
            limit=limit,
            language=self.language,
            topic=topic,
            letters_line=letters_line,
        )

    @staticmethod
    def _parse_response(data: Any) -> List[WordCandidate]:
        if isinstance(data, dict):
            entries = data.get("words") or []
        elif isinstance(data, list):
            entries = data
        else:
            LOGGER.warning("Unexpected Gemini payload type %s", type(data).__name__)
            return []
        result: List[WordCandidate] = []
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            word = entry.get("word")
            clue = entry.get("clue", "")
            if isinstance(word, str) and word.strip() and isinstance(clue, str):
                result.append(WordCandidate(word.strip(), clue.strip()))
        return result


def missing_letters(words: Iterable[str], secret: str) -> List[str]:
    """Letters of ``secret`` that the pooled letters of ``words`` cannot cover.

    Repeated letters count: two ``A`` in the secret need two ``A`` in the pool.
    """

    pool = Counter("".join(normalize_word(word) for word in words))
    missing: List[str] = []
    for char in normalize_word(secret):
        if pool[char] > 0:
            pool[char] -= 1
        else:
            missing.append(char)
    return missing


def complete_for_solution(
    candidates: List[WordCandidate],
    secret: str,
    generator: WordListGenerator,
    topic: str,
    extra_words: int = 4,
) -> List[WordCandidate]:
    """Top up ``candidates`` with words carrying the letters the secret still lacks."""

    missing = missing_letters((candidate.word for candidate in candidates), secret)
    if not missing:
        return list(candidates)
    LOGGER.info("Requesting extra words for missing letters: %s", ", ".join(missing))
    try:
        extra = generator.generate(topic, limit=extra_words, required_letters=missing)
    except (WordListError, RuntimeError) as exc:
        LOGGER.warning("Could not fetch words for missing letters: %s", exc)
        return list(candidates)
    return list(candidates) + list(extra)
