"""Service for tracking right/wrong answers within one quiz session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Scoreboard:
    """Counts checked answers. Counters only grow, one step per answer."""

    correct_answers: int = 0
    wrong_answers: int = 0

    def record_answer(self, is_correct: bool) -> None:
        if is_correct:
            self.correct_answers += 1
        else:
            self.wrong_answers += 1

    @property
    def total_answers(self) -> int:
        return self.correct_answers + self.wrong_answers

    def accuracy_percentage(self) -> float:
        if not self.total_answers:
            return 0.0
        return (self.correct_answers / self.total_answers) * 100

