"""Shared fixtures for the engine tests."""
from __future__ import annotations

import random

import pytest

from corvid_app.core.models import Meaning


def make_meaning(**translations: str) -> Meaning:
    return Meaning.from_pairs(translations.items())


@pytest.fixture
def farm_pool() -> list[Meaning]:
    return [
        make_meaning(en="The dog", es="El perro"),
        make_meaning(en="The cat", es="El gato"),
        make_meaning(en="The pig", es="El cerdo"),
    ]


@pytest.fixture
def large_pool() -> list[Meaning]:
    return [make_meaning(en=f"word {i}", es=f"palabra {i}") for i in range(12)]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
