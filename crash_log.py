"""
처리되지 않은 예외를 오류 로그 파일로 저장하는 전역 예외 훅
"""
from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

from path_utils import get_data_path

logger = logging.getLogger(__name__)

ERROR_LOG_FILENAME = "error_log.txt"


def write_crash_report(exc_type, exc_value, exc_traceback, log_path: Path) -> Path:
    """Write a readable traceback report to `log_path` and return it."""
    with open(log_path, "w", encoding="utf-8") as f:
        f.write("=" * 60 + "\n")
        f.write("오류 발생!\n")
        f.write("=" * 60 + "\n\n")
        f.write(f"오류 타입: {exc_type.__name__}\n")
        f.write(f"오류 메시지: {exc_value}\n\n")
        f.write("전체 트레이스백:\n")
        f.write("-" * 60 + "\n")
        traceback.print_exception(exc_type, exc_value, exc_traceback, file=f)
        f.write("\n" + "=" * 60 + "\n")
    return log_path


def install(log_path: Optional[Path] = None) -> None:
    """Route uncaught exceptions through the crash report before the default hook."""
    target = log_path or get_data_path() / ERROR_LOG_FILENAME

    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        try:
            write_crash_report(exc_type, exc_value, exc_traceback, target)
            logger.error("Unhandled %s, report saved to %s", exc_type.__name__, target)
        except OSError as e:
            logger.error("Could not write crash report to %s: %s", target, e)
        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    sys.excepthook = handle_exception
