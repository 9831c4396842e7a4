"""
ログ設定モジュール
アプリケーション全体の統一ログ設定を提供します。
"""
import logging
import sys

_LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_level = logging.INFO


def set_log_level(level: str) -> None:
    """
    既存・新規すべてのアプリロガーのレベルを変更します。

    Args:
        level: "DEBUG" / "INFO" / "WARNING" などのレベル名
    """
    global _level
    _level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(_level, int):
        _level = logging.INFO

    for name in list(logging.root.manager.loggerDict):
        if name == "src" or name.startswith("src.") or name == "__main__":
            logging.getLogger(name).setLevel(_level)


def get_logger(name: str) -> logging.Logger:
    """
    名前付きロガーを取得します。

    Args:
        name: ロガー名（通常は ``__name__``）

    Returns:
        設定済み logging.Logger インスタンス
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_level)
    return logger
