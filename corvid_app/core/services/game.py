"""Service holding the state of one vocabulary quiz session."""

from __future__ import annotations

import logging
import random

from corvid_app.constants.quiz_constants import MISSING_TRANSLATION_TEXT
from corvid_app.core.models import Meaning, Question
from corvid_app.core.services.scoreboard import Scoreboard

logger = logging.getLogger(__name__)


class GameConfigurationError(ValueError):
    """Raised when a game cannot be built from the given pool and settings."""


class Game:
    """Draws quiz rounds from a vocabulary pool and keeps the score.

    ``target_lang`` is the language of the presented word, ``source_lang``
    the language the answer choices are shown in. The choice count is fixed
    for the lifetime of the instance; a different difficulty needs a new
    game.
    """

    def __init__(
        self,
        vocab: list[Meaning],
        source_lang: str,
        target_lang: str,
        num_choices: int,
        rng: random.Random | None = None,
    ) -> None:
        if not vocab:
            raise GameConfigurationError("Vocabulary pool must contain at least one entry.")
        if num_choices < 1:
            raise GameConfigurationError("Choice count must be a positive integer.")
        if num_choices > len(vocab):
            logger.warning(
                "Requested %d choices but the pool only holds %d entries; clamping.",
                num_choices,
                len(vocab),
            )
            num_choices = len(vocab)

        self._vocab: list[Meaning] = [meaning.copy() for meaning in vocab]
        self._source_lang = source_lang
        self._target_lang = target_lang
        self._num_choices = num_choices
        self._current: Question | None = None
        self._scoreboard = Scoreboard()
        self._rng = rng or random.Random()

    @property
    def vocab(self) -> list[Meaning]:
        return list(self._vocab)

    @property
    def source_lang(self) -> str:
        return self._source_lang

    @property
    def target_lang(self) -> str:
        return self._target_lang

    @property
    def num_choices(self) -> int:
        return self._num_choices

    @property
    def current(self) -> Question | None:
        return self._current

    @property
    def score_correct(self) -> int:
        return self._scoreboard.correct_answers

    @property
    def score_wrong(self) -> int:
        return self._scoreboard.wrong_answers

    @property
    def total_answered(self) -> int:
        return self._scoreboard.total_answers

    def accuracy_percentage(self) -> float:
        return self._scoreboard.accuracy_percentage()

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._rng.seed(seed)

    def next_question(self) -> None:
        """Replace the current question with a freshly randomized round."""
        correct = self._rng.choice(self._vocab)

        distractors = _distinct(m for m in self._vocab if m != correct)
        self._rng.shuffle(distractors)
        distractors = distractors[: self._num_choices - 1]
        if len(distractors) < self._num_choices - 1:
            logger.debug(
                "Only %d distinct distractors available; round has %d choices.",
                len(distractors),
                len(distractors) + 1,
            )

        choices = [correct] + distractors
        self._rng.shuffle(choices)

        presented = correct.get_translation(self._target_lang)
        if presented is None:
            presented = MISSING_TRANSLATION_TEXT

        self._current = Question.create(
            presented, correct, choices, self._target_lang, rng=self._rng
        )
        logger.debug("New round: %r with %d choices", presented, len(choices))

    def check_answer(self, choice_index: int) -> bool:
        """Score the choice at ``choice_index`` against the current question.

        Returns False without touching the score when no question is active.
        Raises IndexError for an index outside the current choices.
        """
        question = self._current
        if question is None:
            return False

        if not 0 <= choice_index < len(question.choices):
            raise IndexError(f"Choice index {choice_index} out of range")

        is_correct = question.choices[choice_index] == question.correct
        self._scoreboard.record_answer(is_correct)
        logger.debug("Answer %d checked: %s", choice_index, "correct" if is_correct else "wrong")
        return is_correct

    def choice_texts(self) -> list[str]:
        """Choice labels of the current question in the source language."""
        if self._current is None:
            return []
        return [self.display_text(choice) for choice in self._current.choices]

    def display_text(self, meaning: Meaning) -> str:
        text = meaning.get_translation(self._source_lang)
        return MISSING_TRANSLATION_TEXT if text is None else text


def _distinct(meanings) -> list[Meaning]:
    """Drop repeated meanings, keeping the first occurrence."""
    seen: set[frozenset[tuple[str, str]]] = set()
    result: list[Meaning] = []
    for meaning in meanings:
        key = frozenset(meaning.translations.items())
        if key in seen:
            continue
        seen.add(key)
        result.append(meaning)
    return result
