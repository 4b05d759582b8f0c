"""
app.py
======================

計算練習アプリ Matika（Streamlit）エントリーポイント。

特徴:
- 足し算 / 引き算の問題をランダムに出題
- 回答欄で Enter または Check! で採点
- 正解数 / 不正解数をその場で表示
- Preferences から出題範囲 (min / max) を変更

前提:
- config.toml があれば [exercise] の min / max を初期値に使う
- 起動: streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st

from matika.config import AppConfig
from matika.log import setup_logging
from matika.models import ExerciseModel
from matika.ui import WindowManager

logger = logging.getLogger("matika.app")


# ----------------------------------------------------------------------
#  アプリ設定読み込み
# ----------------------------------------------------------------------
def load_app_config() -> AppConfig:
    """config.toml を読み込み、セッションに保持して返す。"""
    if "app_config" not in st.session_state:
        cfg = AppConfig.load()
        setup_logging(cfg)
        st.session_state["app_config"] = cfg
    return st.session_state["app_config"]


# ----------------------------------------------------------------------
#  WindowManager のラッパー
# ----------------------------------------------------------------------
def get_window_manager() -> WindowManager:
    """
    WindowManager（とそれが持つ ExerciseModel）をセッションに保持して返す。
    ブラウザのセッションごとに 1 つ。
    """
    if "window_manager" not in st.session_state:
        cfg = load_app_config()
        model = ExerciseModel(min=cfg.exercise_min, max=cfg.exercise_max)
        st.session_state["window_manager"] = WindowManager(model, st.session_state)
        logger.info(
            "New session started with range [%d, %d]", cfg.exercise_min, cfg.exercise_max
        )
    return st.session_state["window_manager"]  # type: ignore[return-value]


# ----------------------------------------------------------------------
#  メイン
# ----------------------------------------------------------------------
def main() -> None:
    cfg = load_app_config()

    st.set_page_config(
        page_title=cfg.app_name,
        page_icon="➗",
        layout="centered",
    )
    st.markdown(f"## {cfg.app_name}")

    get_window_manager().render()


if __name__ == "__main__":
    main()
