"""Tests for the result page widget, run on Qt's offscreen platform."""
from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from corvid_app.core.models import AnswerOutcome  # noqa: E402
from corvid_app.styling import Styles, Theme  # noqa: E402
from corvid_app.ui.components.result_panel import ResultPanel  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def panel(qapp):
    widget = ResultPanel(on_ok=lambda: None)
    yield widget
    widget.deleteLater()


def _outcome(is_correct: bool) -> AnswerOutcome:
    return AnswerOutcome(
        is_correct=is_correct,
        chosen_text="The cat",
        correct_text="The dog",
        score_correct=int(is_correct),
        score_wrong=int(not is_correct),
    )


class TestResultPanel:
    def test_theme_change_restyles_visible_verdict(self, panel):
        panel.show_outcome(_outcome(False))
        panel.apply_theme(Theme.DARK, 18)
        assert panel.result_label.styleSheet() == Styles.get_result_label_style(
            False, 18, Theme.DARK
        )

    def test_theme_change_before_any_answer_leaves_label_unstyled(self, panel):
        panel.apply_theme(Theme.DARK, 18)
        assert panel.result_label.styleSheet() == ""

    def test_answer_revealed_only_when_asked(self, panel):
        panel.show_outcome(_outcome(False))
        assert panel.answer_label.text() == ""
        panel.show_outcome(_outcome(False), reveal_answer=True)
        assert "The dog" in panel.answer_label.text()
