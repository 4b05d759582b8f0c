"""
inputs.py
======================

入力欄の文字列を扱う純粋関数群。

Streamlit の text_input はキー入力ごとのフィルタができないため、
送信された文字列に対して同じ規則（数字と "-" のみ許可）を適用する。
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

ANSWER_MAX_CHARS = 5
BOUND_MAX_CHARS = 4

_ALLOWED = frozenset("0123456789-")
_INTEGER = re.compile(r"-?[0-9]+\Z")


def filter_non_numbers(text: str) -> str:
    """数字と "-" 以外の文字を取り除く。"""
    return "".join(ch for ch in text if ch in _ALLOWED)


def parse_int(text: Optional[str]) -> Optional[int]:
    """
    文字列を整数に変換する。変換できなければ None。

    "-" のみ、"--3"、"3-" などは None になる。
    """
    if text is None:
        return None
    text = text.strip()
    if not _INTEGER.match(text):
        return None
    return int(text)


def validate_bounds(min_text: Optional[str], max_text: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    設定画面の 2 つの入力欄を検証する。

    両方とも整数で、かつ min < max のときだけ (min, max) を返す。
    """
    low = parse_int(min_text)
    high = parse_int(max_text)
    if low is None or high is None:
        return None
    if low >= high:
        return None
    return low, high
