"""Domain models for the vocabulary quiz."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import random


@dataclass(slots=True)
class Meaning:
    """One vocabulary concept with its text in every known language.

    Two meanings compare equal when their translation mappings are equal,
    regardless of the order in which translations were added.
    """

    translations: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "Meaning":
        meaning = cls()
        for code, text in pairs:
            meaning.add_translation(code, text)
        return meaning

    def add_translation(self, code: str, text: str) -> None:
        self.translations[code] = text

    def get_translation(self, code: str) -> str | None:
        """Return the text for ``code`` or None; callers supply the placeholder."""
        return self.translations.get(code)

    def languages(self) -> list[str]:
        return list(self.translations)

    def copy(self) -> "Meaning":
        """Return an equal Meaning that shares no state with this one."""
        return Meaning(dict(self.translations))


@dataclass(slots=True)
class Question:
    """A single quiz round: the prompt word and its shuffled answer set."""

    presented_word: str
    correct: Meaning
    choices: list[Meaning]
    language_code: str  # Target language at construction time

    @classmethod
    def create(
        cls,
        presented_word: str,
        correct: Meaning,
        choices: list[Meaning],
        language_code: str,
        rng: random.Random | None = None,
    ) -> "Question":
        # The caller guarantees ``correct`` is among ``choices``.
        (rng or random).shuffle(choices)
        return cls(
            presented_word=presented_word,
            correct=correct,
            choices=choices,
            language_code=language_code,
        )

    @property
    def correct_index(self) -> int:
        return self.choices.index(self.correct)


@dataclass(slots=True)
class AnswerOutcome:
    """Result of submitting an answer, as shown on the result page."""

    is_correct: bool
    chosen_text: str
    correct_text: str
    score_correct: int
    score_wrong: int
