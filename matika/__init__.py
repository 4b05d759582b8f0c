"""
matika パッケージ
======================

このパッケージは、計算練習アプリ Matika の内部ロジックを提供する。

主な役割:
- 出題・採点モデル（models）
- 回答履歴（history）
- 入力欄の文字列処理（inputs）
- 設定管理（config）
- ロギング初期化（log）
- Streamlit のウィンドウ（ui）

app.py は Streamlit の起動だけを担当し、内部ロジックはすべて本パッケージから呼ぶ。
ui は streamlit を import するため、ここでは読み込まない。
"""

from .config import AppConfig
from .history import ExerciseHistory
from .inputs import filter_non_numbers, parse_int, validate_bounds
from .models import Addition, Exercise, ExerciseModel, Subtraction

__all__ = [
    "AppConfig",
    "ExerciseHistory",
    "filter_non_numbers",
    "parse_int",
    "validate_bounds",
    "Addition",
    "Exercise",
    "ExerciseModel",
    "Subtraction",
]
