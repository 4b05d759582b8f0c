"""
models.py
======================

計算問題（足し算・引き算）の出題と採点を担当するモデル。

要件:
- 問題は Addition / Subtraction の 2 種類のみ（タグ付き共用体）
- 問題は値オブジェクト。回答を入れると「回答済みのコピー」が返る
- ExerciseModel が現在の問題・出題範囲・回答履歴をすべて所有する
- UI 側からは answer() / reconfigure() と読み取り専用のプロパティだけ使えばよい
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from .history import ExerciseHistory

logger = logging.getLogger(__name__)

DEFAULT_MIN = 10
DEFAULT_MAX = 200


# ----------------------------------------------------------------------
#  Exercise（タグ付き共用体）
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class Exercise(ABC):
    """
    1 問分の計算問題。Addition / Subtraction の共通部分で、直接は生成できない。

    lhs / rhs:
        オペランド。生成時点で [min, max] に収まる。
    user_input:
        ユーザーの回答。未回答なら None。
    """

    lhs: int
    rhs: int
    user_input: Optional[int] = None

    symbol: ClassVar[str]

    @property
    @abstractmethod
    def expected(self) -> int:
        """オペランドから計算した正しい答え。"""

    @property
    def text(self) -> str:
        """UI 表示用の文字列（例: "12   +   30 = "）"""
        return f"{self.lhs}   {self.symbol}   {self.rhs} = "

    @property
    def is_answered(self) -> bool:
        return self.user_input is not None

    @property
    def is_success(self) -> bool:
        """回答済みかつ計算結果と一致していれば True。"""
        if not self.is_answered:
            return False
        return self.expected == self.user_input

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def with_input(self, value: int) -> "Exercise":
        """回答 value を入れたコピーを返す（自身は変更しない）。"""
        return replace(self, user_input=value)


@dataclass(frozen=True)
class Addition(Exercise):
    symbol = "+"

    @property
    def expected(self) -> int:
        return self.lhs + self.rhs


@dataclass(frozen=True)
class Subtraction(Exercise):
    symbol = "-"

    @property
    def expected(self) -> int:
        return self.lhs - self.rhs


# ----------------------------------------------------------------------
#  ExerciseModel
# ----------------------------------------------------------------------
class ExerciseModel:
    """
    アプリ全体の状態を持つクラス。

    主な機能:
    - current: 出題中の問題（初回アクセス時に生成）
    - answer(): 回答を採点し、履歴に追加して次の問題へ
    - reconfigure(): 出題範囲を変更し、すぐに問題を作り直す

    min < max のチェックは設定画面側の責務。
    範囲が逆転している場合は lhs = min, rhs = max に固定される。
    """

    def __init__(
        self,
        min: int = DEFAULT_MIN,
        max: int = DEFAULT_MAX,
        rng: Optional[random.Random] = None,
    ):
        self._min = min
        self._max = max
        self._rng = rng or random.Random()
        self._history = ExerciseHistory()
        self._current: Optional[Exercise] = None

        if min > max:
            logger.warning("Exercise range is inverted: min=%d max=%d", min, max)

    # ------------------------------------------------------------
    # 読み取り専用プロパティ
    # ------------------------------------------------------------
    @property
    def min(self) -> int:
        return self._min

    @property
    def max(self) -> int:
        return self._max

    @property
    def current(self) -> Exercise:
        if self._current is None:
            self._current = self._make_exercise()
        return self._current

    @property
    def history(self) -> Tuple[Exercise, ...]:
        return tuple(self._history)

    @property
    def number_of_correct(self) -> int:
        return self._history.number_of_correct

    @property
    def number_of_failed(self) -> int:
        return self._history.number_of_failed

    def history_rows(self) -> List[Dict[str, Any]]:
        """統計表示用に履歴を 1 問 1 行の dict リストで返す（毎回新しいリスト）。"""
        return self._history.to_rows()

    # ------------------------------------------------------------
    # 出題
    # ------------------------------------------------------------
    def _draw(self, fallback: int) -> int:
        # 空の範囲 (min > max) では乱数を引かずに fallback を返す
        if self._min > self._max:
            return fallback
        return self._rng.randint(self._min, self._max)

    def _make_exercise(self) -> Exercise:
        lhs = self._draw(self._min)
        rhs = self._draw(self._max)

        if self._rng.random() < 0.5:
            return Addition(lhs=lhs, rhs=rhs)
        return Subtraction(lhs=lhs, rhs=rhs)

    # ------------------------------------------------------------
    # 公開 API
    # ------------------------------------------------------------
    def answer(self, value: int) -> bool:
        """
        現在の問題に value で回答する。

        回答済みのコピーを履歴に追加し、すぐに次の問題を生成する。
        戻り値は正解かどうか。
        """
        solved = self.current.with_input(value)
        self._current = self._make_exercise()
        self._history.append(solved)

        logger.debug(
            "Answered %s%d (expected %d): %s",
            solved.text,
            value,
            solved.expected,
            "correct" if solved.is_success else "failed",
        )
        return solved.is_success

    def reconfigure(self, min: int, max: int) -> None:
        """
        出題範囲を変更し、現在の問題を新しい範囲で作り直す。
        履歴には影響しない。
        """
        if min > max:
            logger.warning("Exercise range is inverted: min=%d max=%d", min, max)

        self._min = min
        self._max = max
        self._current = self._make_exercise()

        logger.info("Exercise range changed to [%d, %d]", min, max)
