"""
ui.py
======================

Streamlit ベースの「ウィンドウ」をまとめたモジュール。

ウィンドウの種類:
- RootWindow:     問題・回答欄・正解数/不正解数・設定ボタン
- SettingsWindow: 出題範囲 (min / max) の変更（サイドバーに表示）

どちらも build() / on_open() / on_close() の 3 つのフックを持ち、
WindowManager がそれらを所有して開閉を管理する。

ここでは「見た目」と「ユーザー操作の入力」だけを扱い、
出題・採点は models.ExerciseModel に任せる。
"""

from __future__ import annotations

from typing import Any, Callable, List, MutableMapping, Optional, Protocol

import pandas as pd
import streamlit as st

from .inputs import (
    ANSWER_MAX_CHARS,
    BOUND_MAX_CHARS,
    filter_non_numbers,
    parse_int,
    validate_bounds,
)
from .models import ExerciseModel

ANSWER_KEY = "mt_answer"
MIN_KEY = "mt_min"
MAX_KEY = "mt_max"

State = MutableMapping[str, Any]


# ----------------------------------------------------------------------
#  CSS
# ----------------------------------------------------------------------
_CSS = """
<style>
.mt-exercise {
    font-family: "SF Mono", Menlo, Consolas, monospace;
    font-size: 1.6rem;
    white-space: pre;
    padding-top: 0.35rem;
}
.mt-counter {
    font-size: 0.95rem;
}
</style>
"""


# ----------------------------------------------------------------------
#  ウィンドウのフック
# ----------------------------------------------------------------------
class Window(Protocol):
    def build(self) -> None:
        """ウィジェットを描画する（Streamlit の再実行ごとに呼ばれる）。"""

    def on_open(self) -> None:
        """ウィンドウが開かれる直前に 1 度だけ呼ばれる。"""

    def on_close(self) -> None:
        """ウィンドウが閉じられるときに 1 度だけ呼ばれる。"""


# ----------------------------------------------------------------------
#  RootWindow
# ----------------------------------------------------------------------
class RootWindow:
    """
    メイン画面。

    sensitive が False の間（設定ウィンドウが開いている間）は
    すべての操作を無効にする。
    """

    def __init__(
        self,
        model: ExerciseModel,
        state: State,
        on_preferences: Callable[[], None],
    ):
        self.model = model
        self.state = state
        self.on_preferences = on_preferences
        self.sensitive = True

        self.exercise_text = ""
        self.correct_text = ""
        self.failed_text = ""

    def on_open(self) -> None:
        self.update_state()

    def on_close(self) -> None:
        pass

    def update_state(self) -> None:
        """モデルの状態を表示用テキストに反映する。"""
        self.exercise_text = self.model.current.text
        self.correct_text = f"Correct: {self.model.number_of_correct}"
        self.failed_text = f"Failed: {self.model.number_of_failed}"

    def compute_event(self) -> None:
        """
        Check! ボタン（または回答欄での Enter）のコールバック。

        整数として読めない場合は何もしない。
        """
        text = filter_non_numbers(self.state.get(ANSWER_KEY, ""))
        value = parse_int(text)
        if value is None:
            self.state[ANSWER_KEY] = text
            return

        self.state[ANSWER_KEY] = ""
        self.model.answer(value)
        self.update_state()

    def build(self) -> None:
        st.markdown(_CSS, unsafe_allow_html=True)
        disabled = not self.sensitive

        # 回答欄とボタンを form にまとめると Enter で送信できる
        with st.form("mt_exercise_form", border=False):
            col_label, col_entry, col_button = st.columns([3, 1, 1])
            with col_label:
                st.markdown(
                    f"<div class='mt-exercise'>{self.exercise_text}</div>",
                    unsafe_allow_html=True,
                )
            with col_entry:
                st.text_input(
                    "Answer",
                    key=ANSWER_KEY,
                    max_chars=ANSWER_MAX_CHARS,
                    label_visibility="collapsed",
                    disabled=disabled,
                )
            with col_button:
                st.form_submit_button(
                    "Check!",
                    on_click=self.compute_event,
                    disabled=disabled,
                    use_container_width=True,
                )

        col_correct, col_failed, col_settings = st.columns([2, 2, 1])
        with col_correct:
            st.markdown(
                f"<div class='mt-counter'>{self.correct_text}</div>",
                unsafe_allow_html=True,
            )
        with col_failed:
            st.markdown(
                f"<div class='mt-counter'>{self.failed_text}</div>",
                unsafe_allow_html=True,
            )
        with col_settings:
            st.button(
                "Preferences",
                key="mt_preferences",
                on_click=self.on_preferences,
                disabled=disabled,
                use_container_width=True,
            )

        rows = self.model.history_rows()
        if rows:
            with st.expander("History"):
                df = pd.DataFrame(rows).iloc[::-1]
                st.dataframe(df, use_container_width=True, hide_index=True)


# ----------------------------------------------------------------------
#  SettingsWindow
# ----------------------------------------------------------------------
class SettingsWindow:
    """
    出題範囲の設定画面。

    handler:
        ウィンドウが閉じられたときに呼ばれる。
    model_updated:
        Apply でモデルが変更されたときに呼ばれる。
    """

    def __init__(
        self,
        model: ExerciseModel,
        state: State,
        handler: Callable[[], None],
        model_updated: Optional[Callable[[], None]] = None,
        on_close_request: Optional[Callable[[], None]] = None,
    ):
        self.model = model
        self.state = state
        self.close_handler = handler
        self.model_updated = model_updated
        self.on_close_request = on_close_request

    def on_open(self) -> None:
        """入力欄に現在の min / max を入れておく。"""
        self.state[MIN_KEY] = str(self.model.min)
        self.state[MAX_KEY] = str(self.model.max)

    def on_close(self) -> None:
        self.close_handler()

    def bounds(self) -> Optional[tuple]:
        return validate_bounds(
            filter_non_numbers(self.state.get(MIN_KEY, "")),
            filter_non_numbers(self.state.get(MAX_KEY, "")),
        )

    def check_validity(self) -> bool:
        """Apply ボタンを有効にしてよいかどうか。"""
        return self.bounds() is not None

    def apply_pressed(self) -> None:
        bounds = self.bounds()
        if bounds is None:
            return
        low, high = bounds
        self.model.reconfigure(min=low, max=high)
        if self.model_updated is not None:
            self.model_updated()

    def build(self) -> None:
        with st.sidebar:
            st.markdown("### Preferences")
            st.text_input("Maximal value: ", key=MAX_KEY, max_chars=BOUND_MAX_CHARS)
            st.text_input("Minimal value: ", key=MIN_KEY, max_chars=BOUND_MAX_CHARS)

            col_apply, col_close = st.columns(2)
            with col_apply:
                st.button(
                    "Apply",
                    key="mt_apply",
                    on_click=self.apply_pressed,
                    disabled=not self.check_validity(),
                    use_container_width=True,
                )
            with col_close:
                st.button(
                    "Close",
                    key="mt_close",
                    on_click=self.on_close_request,
                    use_container_width=True,
                )


# ----------------------------------------------------------------------
#  WindowManager
# ----------------------------------------------------------------------
class WindowManager:
    """
    ルートウィンドウと設定ウィンドウを所有するクラス。

    - ルートウィンドウはセッションと同じ寿命
    - 設定ウィンドウは同時に 1 つまで
    - 設定ウィンドウが開いている間はルートウィンドウを無効化する
    """

    def __init__(self, model: ExerciseModel, state: State):
        self.model = model
        self.state = state
        self.root = RootWindow(model, state, on_preferences=self.open_settings)
        self.settings: Optional[SettingsWindow] = None
        self.root.on_open()

    def open_settings(self) -> None:
        if self.settings is not None:
            return
        self.root.sensitive = False
        self.settings = SettingsWindow(
            self.model,
            self.state,
            handler=self._settings_closed,
            model_updated=self.root.update_state,
            on_close_request=self.close_settings,
        )
        self.settings.on_open()

    def close_settings(self) -> None:
        """設定ウィンドウを閉じる（開いていなければ何もしない）。"""
        if self.settings is None:
            return
        self.settings.on_close()

    def _settings_closed(self) -> None:
        self.settings = None
        self.root.update_state()
        self.root.sensitive = True

    def open_windows(self) -> List[Window]:
        windows: List[Window] = [self.root]
        if self.settings is not None:
            windows.append(self.settings)
        return windows

    def render(self) -> None:
        for window in self.open_windows():
            window.build()
