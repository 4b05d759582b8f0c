"""
history.py
=====================================

回答済みの問題の履歴を管理するモジュール。

- 履歴は追加のみ（削除・書き換えはしない）
- 正解数 / 不正解数は保持せず、毎回履歴から数え直す
  （number_of_correct + number_of_failed == len(history) が常に成り立つ）
- 永続化はしない。アプリを閉じれば消える
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator, List

if TYPE_CHECKING:
    from .models import Exercise


class ExerciseHistory:
    """
    回答済み Exercise のリストを保持するクラス。
    """

    def __init__(self) -> None:
        self._exercises: List["Exercise"] = []

    def __len__(self) -> int:
        return len(self._exercises)

    def __iter__(self) -> Iterator["Exercise"]:
        return iter(self._exercises)

    # ---------------------------------------------------------
    # 履歴を追加
    # ---------------------------------------------------------
    def append(self, exercise: "Exercise") -> None:
        """回答済みの問題を 1 件追加する。"""
        if not exercise.is_answered:
            raise ValueError("Only answered exercises can be recorded.")
        self._exercises.append(exercise)

    # ---------------------------------------------------------
    # カウンタ
    # ---------------------------------------------------------
    @property
    def number_of_correct(self) -> int:
        return sum(1 for e in self._exercises if e.is_success)

    @property
    def number_of_failed(self) -> int:
        return sum(1 for e in self._exercises if e.is_failure)

    # ---------------------------------------------------------
    # 表形式（UI 用）
    # ---------------------------------------------------------
    def to_rows(self) -> List[Dict[str, Any]]:
        """
        統計テーブル用に 1 問 1 行の dict リストを返す。

        例:
            {"exercise": "12 + 30", "answer": 42, "expected": 42, "correct": True}
        """
        return [
            {
                "exercise": f"{e.lhs} {e.symbol} {e.rhs}",
                "answer": e.user_input,
                "expected": e.expected,
                "correct": e.is_success,
            }
            for e in self._exercises
        ]
