"""Caller-side facade that owns the current game and the user's settings."""

from __future__ import annotations

from enum import Enum, auto
import logging
import random

from corvid_app.constants.quiz_constants import (
    DEFAULT_KNOWN_LANGUAGE,
    DEFAULT_LEARNING_LANGUAGE,
    EASY_CHOICE_COUNT,
    HARD_CHOICE_COUNT,
    MEDIUM_CHOICE_COUNT,
)
from corvid_app.core.models import AnswerOutcome, Question
from corvid_app.core.services.game import Game
from corvid_app.core.services.vocabulary_repository import Topic, VocabularyRepository

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Which way the known/learning languages map onto the quiz."""

    NORMAL = auto()  # prompt in the learning language, choices in the known one
    REVERSE = auto()


class Difficulty(Enum):
    EASY = EASY_CHOICE_COUNT
    MEDIUM = MEDIUM_CHOICE_COUNT
    HARD = HARD_CHOICE_COUNT

    @property
    def choice_count(self) -> int:
        return self.value


class SessionManager:
    """Facade for the vocabulary repository and the active Game.

    A new Game is built for every start; settings changes never mutate a
    running game. Whether "OK" moves on to a new word after a wrong answer is
    decided here, not by the game.
    """

    def __init__(self, repository: VocabularyRepository) -> None:
        self._repository = repository
        self._game: Game | None = None
        self._last_outcome: AnswerOutcome | None = None

        self.known_language: str = DEFAULT_KNOWN_LANGUAGE
        self.learning_language: str = DEFAULT_LEARNING_LANGUAGE
        self.direction: Direction = Direction.NORMAL
        self.advance_after_wrong: bool = False
        self._topic: Topic = Topic.ANIMALS
        self._shuffle_seed: int | None = None

    # --- Settings ---

    @property
    def topic(self) -> Topic:
        return self._topic

    def select_topic(self, topic: Topic) -> None:
        if not self._repository.has_topic(topic):
            raise KeyError(f"No vocabulary loaded for {topic.title}")
        self._topic = topic

    def set_languages(self, known_language: str, learning_language: str) -> None:
        self.known_language = known_language
        self.learning_language = learning_language

    def set_shuffle_seed(self, seed: int | None) -> None:
        self._shuffle_seed = seed

    def available_topics(self) -> list[Topic]:
        return self._repository.topics()

    def quiz_languages(self) -> tuple[str, str]:
        """Return ``(source_lang, target_lang)`` for the current direction."""
        if self.direction is Direction.REVERSE:
            return self.learning_language, self.known_language
        return self.known_language, self.learning_language

    # --- Game lifecycle ---

    def start_game(self, difficulty: Difficulty | int) -> Question:
        """Replace any running game with a new one and draw its first question."""
        num_choices = difficulty.choice_count if isinstance(difficulty, Difficulty) else difficulty
        source_lang, target_lang = self.quiz_languages()
        self._game = Game(
            self._repository.get_pool(self._topic),
            source_lang,
            target_lang,
            num_choices,
            rng=random.Random(self._shuffle_seed),
        )
        self._last_outcome = None
        logger.info(
            "New session: topic=%s, %s -> %s, %d choices",
            self._topic.title,
            target_lang,
            source_lang,
            self._game.num_choices,
        )
        self._game.next_question()
        return self._game.current

    def end_game(self) -> None:
        self._game = None
        self._last_outcome = None

    def has_game(self) -> bool:
        return self._game is not None

    @property
    def game(self) -> Game | None:
        return self._game

    def submit_answer(self, choice_index: int) -> AnswerOutcome | None:
        game = self._game
        if game is None or game.current is None:
            return None

        question = game.current
        is_correct = game.check_answer(choice_index)
        self._last_outcome = AnswerOutcome(
            is_correct=is_correct,
            chosen_text=game.display_text(question.choices[choice_index]),
            correct_text=game.display_text(question.correct),
            score_correct=game.score_correct,
            score_wrong=game.score_wrong,
        )
        return self._last_outcome

    def acknowledge_result(self) -> Question | None:
        """Handle "OK" on the result page and return the question to show next."""
        game = self._game
        if game is None:
            return None
        outcome = self._last_outcome
        if outcome is not None and (outcome.is_correct or self.advance_after_wrong):
            game.next_question()
        self._last_outcome = None
        return game.current

    # --- Display helpers ---

    def get_presented_word(self) -> str:
        if self._game is None or self._game.current is None:
            return ""
        return self._game.current.presented_word

    def get_display_choices(self) -> list[str]:
        if self._game is None:
            return []
        return self._game.choice_texts()

    def get_scores(self) -> tuple[int, int]:
        if self._game is None:
            return 0, 0
        return self._game.score_correct, self._game.score_wrong

    def get_accuracy_percentage(self) -> float:
        if self._game is None:
            return 0.0
        return self._game.accuracy_percentage()
