"""
history.py のテスト: 追加のみの回答履歴。
"""
import pytest

from matika.history import ExerciseHistory
from matika.models import Addition, Subtraction


@pytest.fixture
def history():
    h = ExerciseHistory()
    h.append(Addition(lhs=3, rhs=4, user_input=7))
    h.append(Subtraction(lhs=10, rhs=3, user_input=8))
    h.append(Subtraction(lhs=2, rhs=9, user_input=-7))
    return h


class TestExerciseHistory:
    def test_empty(self):
        h = ExerciseHistory()
        assert len(h) == 0
        assert h.number_of_correct == 0
        assert h.number_of_failed == 0
        assert h.to_rows() == []

    def test_counts(self, history):
        assert history.number_of_correct == 2
        assert history.number_of_failed == 1
        assert history.number_of_correct + history.number_of_failed == len(history)

    def test_order_is_preserved(self, history):
        assert [e.lhs for e in history] == [3, 10, 2]
        assert list(history)[-1] == Subtraction(lhs=2, rhs=9, user_input=-7)

    def test_unanswered_exercise_is_rejected(self):
        h = ExerciseHistory()
        with pytest.raises(ValueError):
            h.append(Addition(lhs=1, rhs=2))
        assert len(h) == 0

    def test_to_rows(self, history):
        rows = history.to_rows()
        assert rows[0] == {"exercise": "3 + 4", "answer": 7, "expected": 7, "correct": True}
        assert rows[1] == {"exercise": "10 - 3", "answer": 8, "expected": 7, "correct": False}
        assert len(rows) == 3
