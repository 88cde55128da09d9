"""Utilities for reading vocabulary pools from plain text files.

File format:

    # Animals
    LANGUAGES: es | en | fr | de
    El perro | The dog | Le chien | Der Hund
    El gato  | The cat | Le chat   | Die Katze

The ``LANGUAGES:`` header names the language code of every column. Each
following non-blank line is one vocabulary entry with exactly one cell per
declared language. Lines starting with ``#`` are comments.

Architecture note:
    Word lists are kept as text so new topics can be added without touching
    code. Parsing stays in this module; the rest of the application only
    ever sees ``Meaning`` objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from corvid_app.core.models import Meaning


class VocabularyImportError(Exception):
    """Raised when a vocabulary file cannot be parsed."""


@dataclass(slots=True)
class ImportedVocabulary:
    """Container for an imported word list and its metadata."""

    source_path: Path
    languages: list[str]
    meanings: list[Meaning]


_HEADER_PREFIX = "LANGUAGES:"
_CELL_SEPARATOR = "|"
_COMMENT_PREFIX = "#"


def load_vocabulary_from_file(file_path: Path) -> ImportedVocabulary:
    text = file_path.read_text(encoding="utf-8")
    languages, meanings = parse_vocabulary_text(text)
    if not meanings:
        raise VocabularyImportError(f"{file_path.name} did not contain any entries.")
    return ImportedVocabulary(source_path=file_path, languages=languages, meanings=meanings)


def parse_vocabulary_text(text: str) -> tuple[list[str], list[Meaning]]:
    languages: list[str] | None = None
    meanings: list[Meaning] = []

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(_COMMENT_PREFIX):
            continue

        # Once entries have started, a "Languages:" line is just another row.
        if not meanings and line.upper().startswith(_HEADER_PREFIX):
            if languages is not None:
                raise VocabularyImportError(f"Line {line_number}: duplicate LANGUAGES header.")
            languages = _parse_header(line[len(_HEADER_PREFIX):], line_number)
            continue

        if languages is None:
            raise VocabularyImportError(
                f"Line {line_number}: entry found before the LANGUAGES header."
            )
        meanings.append(_parse_entry(line, languages, line_number))

    if languages is None:
        raise VocabularyImportError("LANGUAGES header missing.")
    return languages, meanings


def _parse_header(raw_codes: str, line_number: int) -> list[str]:
    codes = _split_cells(raw_codes)
    if any(not code for code in codes):
        raise VocabularyImportError(f"Line {line_number}: language code cannot be empty.")
    if len(set(codes)) != len(codes):
        raise VocabularyImportError(f"Line {line_number}: language codes must be unique.")
    return codes


def _parse_entry(line: str, languages: list[str], line_number: int) -> Meaning:
    cells = _split_cells(line)
    if len(cells) != len(languages):
        raise VocabularyImportError(
            f"Line {line_number}: expected {len(languages)} cells, found {len(cells)}."
        )
    if any(not cell for cell in cells):
        raise VocabularyImportError(f"Line {line_number}: translation text cannot be empty.")
    return Meaning.from_pairs(zip(languages, cells))


def _split_cells(line: str) -> list[str]:
    return [cell.strip() for cell in line.split(_CELL_SEPARATOR)]
