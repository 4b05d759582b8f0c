"""
config.py
=========

アプリ全体で利用する設定値を一元管理する。
出題範囲の初期値・ログ出力先など、すべてこのクラスを通じて取得する。

設定ファイルはリポジトリ直下の config.toml。
ファイルが無ければデフォルト値で動く。
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
import os

import toml

from .models import DEFAULT_MAX, DEFAULT_MIN


# ------------------------------------------------------------
# 基本パス定義
# ------------------------------------------------------------

ROOT_DIR = Path(__file__).resolve().parent.parent
CONFIG_PATH = ROOT_DIR / "config.toml"

CONFIG_ENV = "MATIKA_CONFIG"
LOG_LEVEL_ENV = "MATIKA_LOG_LEVEL"


# ------------------------------------------------------------
# AppConfig
# ------------------------------------------------------------

@dataclass
class AppConfig:
    """
    アプリ設定クラス。

    - [app]      アプリ名
    - [exercise] 出題範囲の初期値 (min / max)
    - [logging]  ログレベルとログファイルの場所
    """

    # ---------- アプリ ----------
    app_name: str = "Matika"

    # ---------- 出題範囲 ----------
    exercise_min: int = DEFAULT_MIN
    exercise_max: int = DEFAULT_MAX

    # ---------- ログ ----------
    log_level: str = "INFO"
    log_dir: Path = ROOT_DIR / "log"
    log_file: str = "matika.log"

    @property
    def log_path(self) -> Path:
        return self.log_dir / self.log_file

    # ============================================================
    # 読み込み
    # ============================================================

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "AppConfig":
        """
        config.toml を読み込んで AppConfig を返す。

        優先順位:
        1. 引数 path
        2. 環境変数 MATIKA_CONFIG
        3. リポジトリ直下の config.toml

        ファイルが存在しなければデフォルト値のまま。
        ログレベルは環境変数 MATIKA_LOG_LEVEL で上書きできる。
        """
        if path is None:
            env_path = os.environ.get(CONFIG_ENV)
            path = Path(env_path) if env_path else CONFIG_PATH

        data: Dict[str, Any] = {}
        if path.exists():
            data = toml.load(path)

        cfg = cls.from_dict(data, base_dir=path.parent)

        level = os.environ.get(LOG_LEVEL_ENV)
        if level:
            cfg.log_level = level.upper()

        return cfg

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Path = ROOT_DIR) -> "AppConfig":
        """toml.load() の戻り値（dict）から AppConfig を組み立てる。"""
        cfg = cls()

        app = data.get("app", {})
        if isinstance(app, dict) and app.get("name"):
            cfg.app_name = str(app["name"])

        exercise = data.get("exercise", {})
        if isinstance(exercise, dict):
            cfg.exercise_min = _read_int(exercise, "min", cfg.exercise_min)
            cfg.exercise_max = _read_int(exercise, "max", cfg.exercise_max)

        logging_cfg = data.get("logging", {})
        if isinstance(logging_cfg, dict):
            if logging_cfg.get("level"):
                cfg.log_level = str(logging_cfg["level"]).upper()
            if logging_cfg.get("dir"):
                log_dir = Path(logging_cfg["dir"])
                # 相対パスは設定ファイルの場所を基準にする
                cfg.log_dir = log_dir if log_dir.is_absolute() else base_dir / log_dir
            if logging_cfg.get("file"):
                cfg.log_file = str(logging_cfg["file"])

        return cfg


# ============================================================
# 内部関数
# ============================================================

def _read_int(section: Dict[str, Any], key: str, default: int) -> int:
    if key not in section:
        return default
    value = section[key]
    # toml の真偽値は int のサブクラスなので弾く
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"[exercise].{key} must be an integer, got {value!r}")
    return value
