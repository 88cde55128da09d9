"""Tests for the caller-side session manager."""
from __future__ import annotations

import pytest

from corvid_app.core.models import Meaning
from corvid_app.core.services.game import GameConfigurationError
from corvid_app.core.services.vocabulary_repository import Topic, VocabularyRepository
from corvid_app.core.session_manager import Difficulty, Direction, SessionManager


def _entry(en: str, es: str, fr: str) -> Meaning:
    return Meaning.from_pairs([("en", en), ("es", es), ("fr", fr)])


@pytest.fixture
def manager() -> SessionManager:
    repo = VocabularyRepository()
    repo.load_pool(
        Topic.ANIMALS,
        [
            _entry("The dog", "El perro", "Le chien"),
            _entry("The cat", "El gato", "Le chat"),
            _entry("The pig", "El cerdo", "Le cochon"),
            _entry("The horse", "El caballo", "Le cheval"),
            _entry("The bird", "El pájaro", "L'oiseau"),
            _entry("The cow", "La vaca", "La vache"),
            _entry("The sheep", "La oveja", "Le mouton"),
        ],
    )
    repo.load_pool(Topic.FOODS, [_entry("The apple", "La manzana", "La pomme")])
    session = SessionManager(repo)
    session.set_shuffle_seed(99)
    return session


def _wrong_index(session: SessionManager) -> int:
    question = session.game.current
    return next(i for i, c in enumerate(question.choices) if c != question.correct)


class TestSettings:
    def test_defaults(self, manager):
        assert manager.known_language == "en"
        assert manager.learning_language == "es"
        assert manager.direction is Direction.NORMAL
        assert manager.topic is Topic.ANIMALS
        assert manager.advance_after_wrong is False
        assert not manager.has_game()

    def test_normal_direction(self, manager):
        assert manager.quiz_languages() == ("en", "es")

    def test_reverse_direction(self, manager):
        manager.direction = Direction.REVERSE
        assert manager.quiz_languages() == ("es", "en")

    def test_select_unloaded_topic(self, manager):
        with pytest.raises(KeyError):
            manager.select_topic(Topic.BASIC_VERBS)
        assert manager.topic is Topic.ANIMALS

    def test_available_topics(self, manager):
        assert manager.available_topics() == [Topic.ANIMALS, Topic.FOODS]

    def test_difficulty_presets(self):
        assert [d.choice_count for d in Difficulty] == [3, 5, 7]


class TestGameLifecycle:
    def test_start_game_draws_first_question(self, manager):
        question = manager.start_game(Difficulty.MEDIUM)
        assert question is manager.game.current
        assert len(question.choices) == 5
        assert manager.get_presented_word().startswith(("El ", "La "))
        assert len(manager.get_display_choices()) == 5
        assert all(text.startswith("The ") for text in manager.get_display_choices())

    def test_reverse_game_presents_known_language(self, manager):
        manager.direction = Direction.REVERSE
        manager.start_game(Difficulty.EASY)
        assert manager.get_presented_word().startswith("The ")
        assert all(not text.startswith("The ") for text in manager.get_display_choices())

    def test_languages_from_preferences(self, manager):
        manager.set_languages("fr", "en")
        manager.start_game(Difficulty.EASY)
        assert manager.game.source_lang == "fr"
        assert manager.game.target_lang == "en"

    def test_restart_replaces_game(self, manager):
        manager.start_game(Difficulty.EASY)
        first = manager.game
        manager.submit_answer(first.current.correct_index)
        manager.start_game(Difficulty.HARD)
        assert manager.game is not first
        assert manager.game.num_choices == 7
        assert manager.get_scores() == (0, 0)

    def test_small_topic_is_clamped(self, manager):
        manager.select_topic(Topic.FOODS)
        manager.start_game(Difficulty.HARD)
        assert manager.game.num_choices == 1
        assert manager.get_display_choices() == ["The apple"]

    def test_invalid_choice_count(self, manager):
        with pytest.raises(GameConfigurationError):
            manager.start_game(0)
        assert not manager.has_game()

    def test_end_game(self, manager):
        manager.start_game(Difficulty.EASY)
        manager.end_game()
        assert not manager.has_game()
        assert manager.get_scores() == (0, 0)
        assert manager.get_presented_word() == ""
        assert manager.get_display_choices() == []
        assert manager.submit_answer(0) is None
        assert manager.acknowledge_result() is None

    def test_seed_makes_sessions_repeatable(self, manager):
        manager.start_game(Difficulty.MEDIUM)
        first = manager.get_presented_word(), manager.get_display_choices()
        manager.start_game(Difficulty.MEDIUM)
        assert (manager.get_presented_word(), manager.get_display_choices()) == first


class TestAnswers:
    def test_correct_answer_outcome(self, manager):
        manager.start_game(Difficulty.EASY)
        question = manager.game.current
        outcome = manager.submit_answer(question.correct_index)
        assert outcome.is_correct is True
        assert outcome.chosen_text == outcome.correct_text
        assert outcome.correct_text == question.correct.get_translation("en")
        assert (outcome.score_correct, outcome.score_wrong) == (1, 0)

    def test_wrong_answer_outcome(self, manager):
        manager.start_game(Difficulty.EASY)
        outcome = manager.submit_answer(_wrong_index(manager))
        assert outcome.is_correct is False
        assert outcome.chosen_text != outcome.correct_text
        assert manager.get_scores() == (0, 1)

    def test_out_of_range_answer(self, manager):
        manager.start_game(Difficulty.EASY)
        with pytest.raises(IndexError):
            manager.submit_answer(5)
        assert manager.get_scores() == (0, 0)

    def test_ok_after_correct_answer_moves_on(self, manager):
        manager.start_game(Difficulty.EASY)
        first = manager.game.current
        manager.submit_answer(first.correct_index)
        assert manager.acknowledge_result() is not first

    def test_ok_after_wrong_answer_repeats_question(self, manager):
        manager.start_game(Difficulty.EASY)
        first = manager.game.current
        manager.submit_answer(_wrong_index(manager))
        assert manager.acknowledge_result() is first

    def test_ok_after_wrong_answer_moves_on_when_enabled(self, manager):
        manager.advance_after_wrong = True
        manager.start_game(Difficulty.EASY)
        first = manager.game.current
        manager.submit_answer(_wrong_index(manager))
        assert manager.acknowledge_result() is not first

    def test_ok_without_answer_keeps_question(self, manager):
        manager.start_game(Difficulty.EASY)
        first = manager.game.current
        assert manager.acknowledge_result() is first

    def test_accuracy(self, manager):
        assert manager.get_accuracy_percentage() == 0.0
        manager.start_game(Difficulty.EASY)
        manager.submit_answer(manager.game.current.correct_index)
        manager.acknowledge_result()
        manager.submit_answer(_wrong_index(manager))
        assert manager.get_accuracy_percentage() == pytest.approx(50.0)
