"""
PyInstaller 빌드 환경에서도 올바른 경로를 반환하는 유틸리티
"""
import sys
from pathlib import Path


def is_frozen() -> bool:
    return bool(getattr(sys, "frozen", False))


def get_base_path() -> Path:
    """
    읽기 전용 리소스(VERSION 등)의 기본 경로를 반환합니다.
    PyInstaller로 빌드된 경우 sys._MEIPASS를 사용하고,
    그렇지 않으면 이 파일의 부모 디렉토리를 사용합니다.
    """
    if is_frozen():
        return Path(getattr(sys, "_MEIPASS", Path(sys.executable).resolve().parent))
    return Path(__file__).resolve().parent


def get_data_path() -> Path:
    """
    최고 점수, 오류 로그처럼 실행 후에도 남아야 하는 파일의 경로를 반환합니다.
    _MEIPASS는 종료 시 삭제되는 임시 폴더이므로 빌드된 경우 EXE 옆을 사용합니다.
    """
    if is_frozen():
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parent
