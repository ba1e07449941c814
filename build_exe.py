"""
EXE 빌드 스크립트
PyInstaller를 사용하여 snake_game.py를 단일 실행 파일로 빌드합니다.
"""
import importlib.util
import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

APP_NAME = "snake-classic"
ENTRY_SCRIPT = "snake_game.py"


def build_command(script_dir: Path) -> List[str]:
    # Windows에서는 세미콜론(;)을 경로 구분자로 사용
    version_data = f"{script_dir / 'VERSION'}{os.pathsep}."
    return [
        sys.executable,
        "-m",
        "PyInstaller",
        f"--name={APP_NAME}",
        "--onefile",  # 단일 실행 파일로 생성
        "--windowed",  # 콘솔 창 숨기기
        f"--add-data={version_data}",
        "--clean",  # 빌드 전 캐시 정리
        str(script_dir / ENTRY_SCRIPT),
    ]


def pyinstaller_available() -> bool:
    return importlib.util.find_spec("PyInstaller") is not None


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    script_dir = Path(__file__).resolve().parent

    if not pyinstaller_available():
        logger.error("PyInstaller가 설치되어 있지 않습니다: pip install -e .[build]")
        return 1

    cmd = build_command(script_dir)
    logger.info("빌드를 시작합니다: %s", " ".join(cmd))
    try:
        subprocess.check_call(cmd, cwd=script_dir)
    except subprocess.CalledProcessError as e:
        logger.error("빌드 실패: %s", e)
        return 1

    logger.info("빌드 완료! 실행 파일 위치: %s", script_dir / "dist")
    return 0


if __name__ == "__main__":
    sys.exit(main())
