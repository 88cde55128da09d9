"""Service for managing the bundled vocabulary topics."""

from __future__ import annotations

from enum import Enum
import logging
from pathlib import Path

from corvid_app.constants.quiz_constants import VOCABULARY_DIR, VOCABULARY_FILE_SUFFIX
from corvid_app.core.models import Meaning
from corvid_app.core.vocabulary_importer import VocabularyImportError, load_vocabulary_from_file

logger = logging.getLogger(__name__)


class Topic(Enum):
    """Fixed set of vocabulary topics offered by the application."""

    ANIMALS = "animals"
    FOODS = "foods"
    BASIC_VERBS = "basic_verbs"

    @property
    def title(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def file_name(self) -> str:
        return f"{self.value}{VOCABULARY_FILE_SUFFIX}"


class VocabularyRepository:
    """Holds one immutable pool of meanings per topic."""

    def __init__(self) -> None:
        self._pools: dict[Topic, list[Meaning]] = {}

    def load_default_topics(self, directory: Path = VOCABULARY_DIR) -> None:
        """Load every topic file found in ``directory``; broken files are skipped."""
        for topic in Topic:
            path = directory / topic.file_name
            try:
                imported = load_vocabulary_from_file(path)
            except (OSError, VocabularyImportError) as exc:
                logger.error("Failed to load %s vocabulary from %s: %s", topic.title, path, exc)
                continue
            self.load_pool(topic, imported.meanings)
            logger.info("Loaded %d words for %s", len(imported.meanings), topic.title)

    def load_pool(self, topic: Topic, meanings: list[Meaning]) -> None:
        """Replace the pool of ``topic`` with a copy of ``meanings``."""
        if not meanings:
            raise ValueError(f"Vocabulary pool for {topic.title} must not be empty.")
        self._pools[topic] = [meaning.copy() for meaning in meanings]

    def get_pool(self, topic: Topic) -> list[Meaning]:
        """Return independent copies of the entries pooled for ``topic``."""
        if topic not in self._pools:
            raise KeyError(f"No vocabulary loaded for {topic.title}")
        return [meaning.copy() for meaning in self._pools[topic]]

    def has_topic(self, topic: Topic) -> bool:
        return topic in self._pools

    def topics(self) -> list[Topic]:
        return [topic for topic in Topic if topic in self._pools]

    def pool_size(self, topic: Topic) -> int:
        return len(self._pools.get(topic, []))
