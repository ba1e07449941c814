from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from path_utils import get_data_path

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "snakeHighScore"
BEST_SCORE_FILENAME = ".snake_best_score"


def default_best_score_file() -> Path:
    override = os.getenv("SNAKE_BEST_SCORE_FILE", "").strip()
    if override:
        return Path(override).expanduser()
    return get_data_path() / BEST_SCORE_FILENAME


def load_best_score(path: Path) -> int:
    """Read the stored high score; anything missing or unreadable counts as 0."""
    try:
        if not path.exists():
            return 0
        text = path.read_text(encoding="utf-8").strip()
    except OSError as e:
        logger.warning("Could not read %s from %s: %s", BEST_SCORE_KEY, path, e)
        return 0
    if not text:
        return 0
    try:
        value = int(text)
    except ValueError:
        logger.warning("Ignoring malformed %s in %s: %r", BEST_SCORE_KEY, path, text)
        return 0
    return max(0, value)


def save_best_score(path: Path, score: int) -> bool:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(str(int(score)), encoding="utf-8")
    except OSError as e:
        # 저장 실패는 게임 진행에 치명적이지 않으므로 경고만 남긴다
        logger.warning("Could not write %s to %s: %s", BEST_SCORE_KEY, path, e)
        return False
    return True


class BestScoreStore:
    """Persisted high score that only ever goes up."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path if path is not None else default_best_score_file()
        self.value = load_best_score(self.path)

    def record(self, score: int) -> bool:
        """Store `score` if it beats the current best. Returns True when it did."""
        if score <= self.value:
            return False
        self.value = score
        save_best_score(self.path, score)
        logger.info("New high score %d saved to %s", score, self.path)
        return True
