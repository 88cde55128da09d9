"""Tests for question generation and scoring in Game."""
from __future__ import annotations

import logging
import random

import pytest

from corvid_app.core.models import Meaning
from corvid_app.core.services.game import Game, GameConfigurationError


def _meaning(en: str, es: str) -> Meaning:
    return Meaning.from_pairs([("en", en), ("es", es)])


def _wrong_index(game: Game) -> int:
    question = game.current
    return next(i for i, c in enumerate(question.choices) if c != question.correct)


class TestConstruction:
    def test_initial_state(self, farm_pool):
        game = Game(farm_pool, "en", "es", 3)
        assert game.current is None
        assert game.score_correct == 0
        assert game.score_wrong == 0
        assert game.num_choices == 3
        assert game.source_lang == "en"
        assert game.target_lang == "es"
        assert game.vocab == farm_pool

    def test_empty_pool_is_rejected(self):
        with pytest.raises(GameConfigurationError):
            Game([], "en", "es", 3)

    def test_non_positive_choice_count_is_rejected(self, farm_pool):
        with pytest.raises(GameConfigurationError):
            Game(farm_pool, "en", "es", 0)

    def test_choice_count_is_clamped_to_pool_size(self, farm_pool, caplog):
        with caplog.at_level(logging.WARNING):
            game = Game(farm_pool, "en", "es", 7)
        assert game.num_choices == 3
        assert "clamping" in caplog.text

    def test_vocab_is_copied(self, farm_pool):
        game = Game(farm_pool, "en", "es", 3)
        farm_pool.clear()
        assert len(game.vocab) == 3


class TestNextQuestion:
    def test_farm_scenario(self, farm_pool, rng):
        game = Game(farm_pool, "en", "es", 3, rng=rng)
        game.next_question()
        q = game.current

        assert q.presented_word in {"El perro", "El gato", "El cerdo"}
        assert sorted(c.get_translation("en") for c in q.choices) == [
            "The cat",
            "The dog",
            "The pig",
        ]
        matching = [i for i, c in enumerate(q.choices) if c.get_translation("es") == q.presented_word]
        assert len(matching) == 1
        assert q.language_code == "es"

    def test_choices_contain_correct_exactly_once(self, large_pool):
        game = Game(large_pool, "en", "es", 5, rng=random.Random(42))
        for _ in range(200):
            game.next_question()
            q = game.current
            assert len(q.choices) == 5
            assert sum(1 for c in q.choices if c == q.correct) == 1
            keys = {frozenset(c.translations.items()) for c in q.choices}
            assert len(keys) == 5

    def test_pool_size_equal_to_choice_count(self, farm_pool):
        game = Game(farm_pool, "en", "es", 3, rng=random.Random(5))
        for _ in range(50):
            game.next_question()
            assert len(game.current.choices) == 3
            assert sorted(game.current.choices, key=lambda m: m.translations["en"]) == sorted(
                farm_pool, key=lambda m: m.translations["en"]
            )

    def test_single_entry_pool(self):
        only = _meaning("The dog", "El perro")
        game = Game([only], "en", "es", 1)
        game.next_question()
        assert game.current.choices == [only]
        assert game.check_answer(0) is True

    def test_duplicate_entries_never_appear_as_distractors(self):
        dog = _meaning("The dog", "El perro")
        pool = [dog, _meaning("The dog", "El perro"), _meaning("The cat", "El gato")]
        game = Game(pool, "en", "es", 3, rng=random.Random(9))
        for _ in range(100):
            game.next_question()
            q = game.current
            assert sum(1 for c in q.choices if c == q.correct) == 1
            # Only two distinct meanings exist, so the round is short.
            assert len(q.choices) == 2

    def test_duplicate_distractors_are_collapsed(self):
        pool = [
            _meaning("The dog", "El perro"),
            _meaning("The cucumber", "El pepino"),
            _meaning("The cucumber", "El pepino"),
            _meaning("The cat", "El gato"),
        ]
        game = Game(pool, "en", "es", 4, rng=random.Random(11))
        for _ in range(100):
            game.next_question()
            keys = [frozenset(c.translations.items()) for c in game.current.choices]
            assert len(keys) == len(set(keys))
            assert len(keys) == 3

    def test_missing_target_translation_uses_placeholder(self):
        pool = [Meaning.from_pairs([("en", "The dog")])]
        game = Game(pool, "en", "fr", 1)
        game.next_question()
        assert game.current.presented_word == "???"

    def test_next_question_replaces_current(self, large_pool):
        game = Game(large_pool, "en", "es", 3, rng=random.Random(1))
        game.next_question()
        first = game.current
        game.next_question()
        assert game.current is not first

    def test_every_entry_can_be_drawn(self, large_pool):
        game = Game(large_pool, "en", "es", 3, rng=random.Random(2024))
        drawn = set()
        for _ in range(600):
            game.next_question()
            drawn.add(game.current.correct.get_translation("en"))
        assert drawn == {m.get_translation("en") for m in large_pool}

    def test_same_seed_gives_same_rounds(self, large_pool):
        first = Game(large_pool, "en", "es", 4, rng=random.Random(77))
        second = Game(large_pool, "en", "es", 4, rng=random.Random(77))
        for _ in range(10):
            first.next_question()
            second.next_question()
            assert first.current.presented_word == second.current.presented_word
            assert first.choice_texts() == second.choice_texts()

    def test_set_shuffle_seed_reseeds(self, large_pool):
        game = Game(large_pool, "en", "es", 4)
        game.set_shuffle_seed(3)
        game.next_question()
        words = game.current.presented_word, game.choice_texts()
        game.set_shuffle_seed(3)
        game.next_question()
        assert (game.current.presented_word, game.choice_texts()) == words


class TestCheckAnswer:
    def test_before_any_question(self, farm_pool):
        game = Game(farm_pool, "en", "es", 3)
        assert game.check_answer(0) is False
        assert game.score_correct == 0
        assert game.score_wrong == 0

    def test_correct_choice(self, farm_pool, rng):
        game = Game(farm_pool, "en", "es", 3, rng=rng)
        game.next_question()
        assert game.check_answer(game.current.correct_index) is True
        assert game.score_correct == 1
        assert game.score_wrong == 0

    def test_wrong_choice(self, farm_pool, rng):
        game = Game(farm_pool, "en", "es", 3, rng=rng)
        game.next_question()
        assert game.check_answer(_wrong_index(game)) is False
        assert game.score_correct == 0
        assert game.score_wrong == 1

    def test_every_other_slot_is_wrong(self, large_pool):
        game = Game(large_pool, "en", "es", 7, rng=random.Random(8))
        game.next_question()
        correct_index = game.current.correct_index
        for idx in range(7):
            if idx != correct_index:
                assert game.check_answer(idx) is False
        assert game.score_wrong == 6
        assert game.score_correct == 0

    def test_out_of_range_index_raises_without_scoring(self, farm_pool, rng):
        game = Game(farm_pool, "en", "es", 3, rng=rng)
        game.next_question()
        with pytest.raises(IndexError):
            game.check_answer(3)
        with pytest.raises(IndexError):
            game.check_answer(-1)
        assert game.score_correct == 0
        assert game.score_wrong == 0

    def test_scores_accumulate(self, large_pool):
        game = Game(large_pool, "en", "es", 3, rng=random.Random(6))
        for _ in range(4):
            game.next_question()
            game.check_answer(game.current.correct_index)
        game.next_question()
        game.check_answer(_wrong_index(game))
        assert game.score_correct == 4
        assert game.score_wrong == 1
        assert game.total_answered == 5
        assert game.accuracy_percentage() == pytest.approx(80.0)


class TestChoiceTexts:
    def test_no_question(self, farm_pool):
        assert Game(farm_pool, "en", "es", 3).choice_texts() == []

    def test_texts_are_in_source_language(self, farm_pool, rng):
        game = Game(farm_pool, "en", "es", 3, rng=rng)
        game.next_question()
        assert game.choice_texts() == [c.get_translation("en") for c in game.current.choices]

    def test_missing_source_translation_uses_placeholder(self, farm_pool, rng):
        game = Game(farm_pool, "de", "es", 3, rng=rng)
        game.next_question()
        assert game.choice_texts() == ["???", "???", "???"]
