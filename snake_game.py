from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass
from typing import Callable, Dict, Literal, Optional, Tuple

import pygame

import crash_log
from best_score import BestScoreStore
from path_utils import get_base_path
from snake_model import DOWN, LEFT, RIGHT, UP, CollisionKind, Direction, Point, Snake
from ui_common import Fonts, draw_button, draw_game_over_ui, draw_text_center, load_fonts

logger = logging.getLogger(__name__)

CELL_SIZE = 20
GRID_WIDTH = 20
GRID_HEIGHT = 20
HUD_HEIGHT = 60
SCREEN_WIDTH = GRID_WIDTH * CELL_SIZE
SCREEN_HEIGHT = GRID_HEIGHT * CELL_SIZE + HUD_HEIGHT
PLAYFIELD_OFFSET_Y = HUD_HEIGHT
FPS = 60

FOOD_SCORE = 10
INITIAL_FOOD: Point = (15, 15)

BACKGROUND_COLOR = (44, 62, 80)
GRID_LINE_COLOR = (52, 73, 94)
HUD_COLOR = (34, 49, 63)
SNAKE_COLOR_START = (46, 204, 113)
SNAKE_COLOR_END = (39, 174, 96)
FOOD_COLOR = (231, 76, 60)
TEXT_COLOR = (236, 240, 241)

TICK_EVENT = pygame.USEREVENT + 1

VERSION_FILE = get_base_path() / "VERSION"
DEFAULT_APP_VERSION = "0.0.0-dev"

Phase = Literal["welcome", "running", "gameover"]

KEY_TO_DIRECTION: Dict[int, Direction] = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}

COLLISION_REASONS: Dict[str, str] = {
    "wall": "벽에 부딪혔어요!",
    "self": "내 몸에 부딪혔어요!",
}


def _read_app_version() -> str:
    """프로젝트 루트의 VERSION 파일에서 배포 버전을 읽는다."""
    try:
        text = VERSION_FILE.read_text(encoding="utf-8").strip()
    except OSError:
        return DEFAULT_APP_VERSION
    return text or DEFAULT_APP_VERSION


def lerp_color(c1, c2, t):
    t = max(0.0, min(1.0, t))
    return tuple(int(a + (b - a) * t) for a, b in zip(c1, c2))


@dataclass(frozen=True)
class FrameState:
    """Everything the renderer needs to draw one frame."""

    phase: Phase
    segments: Tuple[Point, ...]
    heading: Direction
    food: Optional[Point]
    score: int
    best_score: int
    interval_ms: int
    collision: Optional[CollisionKind] = None
    has_played: bool = False


class TickTimer:
    """Repeating pygame timer posting TICK_EVENT; at most one schedule is live."""

    def __init__(self, event_type: int = TICK_EVENT) -> None:
        self.event_type = event_type
        self.interval_ms: Optional[int] = None

    @property
    def armed(self) -> bool:
        return self.interval_ms is not None

    def arm(self, interval_ms: int) -> None:
        pygame.time.set_timer(self.event_type, interval_ms)
        self.interval_ms = interval_ms

    def cancel(self) -> None:
        if self.interval_ms is None:
            return
        pygame.time.set_timer(self.event_type, 0)
        self.interval_ms = None


Renderer = Callable[[FrameState], None]


class SnakeGame:
    """Phase machine, food, score and tick timer around a single Snake."""

    def __init__(
        self,
        *,
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT,
        best_score: Optional[BestScoreStore] = None,
        timer: Optional[TickTimer] = None,
        rng: Optional[random.Random] = None,
        render: Optional[Renderer] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.best = best_score if best_score is not None else BestScoreStore()
        self.timer = timer if timer is not None else TickTimer()
        self.rng = rng or random.Random()
        self.render = render or (lambda frame: None)

        self.phase: Phase = "welcome"
        self.snake = Snake()
        self.food: Optional[Point] = INITIAL_FOOD
        self.score = 0
        self.collision: Optional[CollisionKind] = None
        self.has_played = False

    @property
    def best_score(self) -> int:
        return self.best.value

    def frame(self) -> FrameState:
        return FrameState(
            phase=self.phase,
            segments=tuple(self.snake.body),
            heading=self.snake.heading,
            food=self.food,
            score=self.score,
            best_score=self.best.value,
            interval_ms=self.snake.interval_ms,
            collision=self.collision,
            has_played=self.has_played,
        )

    def place_food(self) -> Optional[Point]:
        """Pick a random free cell by rejection sampling; None if the snake fills the grid."""
        if len(set(self.snake.body)) >= self.width * self.height:
            self.food = None
            return None
        while True:
            candidate = (self.rng.randrange(self.width), self.rng.randrange(self.height))
            if not self.snake.occupies(candidate):
                self.food = candidate
                return candidate

    def start(self) -> None:
        self.snake.reset()
        self.score = 0
        self.collision = None
        self.phase = "running"
        self.has_played = True
        self.place_food()
        self._arm_timer()
        logger.info("Game started (best score %d)", self.best.value)
        self.render(self.frame())

    def _arm_timer(self) -> None:
        # 이전 루프를 먼저 해제해 틱이 겹쳐 돌지 않게 한다.
        self.timer.cancel()
        self.timer.arm(self.snake.interval_ms)

    def stop(self) -> None:
        self.timer.cancel()

    def set_heading(self, direction: Direction) -> None:
        if self.phase != "running":
            return
        self.snake.set_heading(direction)

    def handle_key(self, key: int) -> None:
        direction = KEY_TO_DIRECTION.get(key)
        if direction is not None:
            self.set_heading(direction)
            return
        if key == pygame.K_SPACE and self.phase in ("welcome", "gameover"):
            self.start()

    def tick(self) -> None:
        if self.phase != "running":
            return
        head = self.snake.advance()

        if self.food is not None and head == self.food:
            self.snake.grow()
            self.score += FOOD_SCORE
            self.place_food()
            self.best.record(self.score)

        # 먹이 판정 뒤에 충돌을 본다. 충돌은 벽과 몸통만 비교하므로 먹이 칸과 겹치지 않는다.
        self.collision = self.snake.collision_kind(self.width, self.height)
        if self.collision is not None:
            self.game_over()
            return

        if self.timer.interval_ms != self.snake.interval_ms:
            self._arm_timer()
        self.render(self.frame())

    def game_over(self) -> None:
        self.phase = "gameover"
        self.timer.cancel()
        logger.info(
            "Game over (%s): score %d, best %d, length %d",
            self.collision,
            self.score,
            self.best.value,
            len(self.snake.body),
        )
        self.render(self.frame())


def cell_rect(point: Point, padding: int = 0) -> pygame.Rect:
    return pygame.Rect(
        point[0] * CELL_SIZE + padding,
        PLAYFIELD_OFFSET_Y + point[1] * CELL_SIZE + padding,
        CELL_SIZE - padding * 2,
        CELL_SIZE - padding * 2,
    )


def start_button_rect() -> pygame.Rect:
    return pygame.Rect(SCREEN_WIDTH - 124, (HUD_HEIGHT - 36) // 2, 112, 36)


def playfield_rect() -> pygame.Rect:
    return pygame.Rect(0, PLAYFIELD_OFFSET_Y, SCREEN_WIDTH, SCREEN_HEIGHT - PLAYFIELD_OFFSET_Y)


def draw_background(surface: pygame.Surface) -> None:
    surface.fill(BACKGROUND_COLOR)
    for x in range(GRID_WIDTH):
        for y in range(GRID_HEIGHT):
            pygame.draw.rect(surface, GRID_LINE_COLOR, cell_rect((x, y)), width=1)


def draw_snake(surface: pygame.Surface, segments: Tuple[Point, ...]) -> None:
    """Draw segments as inset squares shaded diagonally across the board."""
    span = max(1, GRID_WIDTH + GRID_HEIGHT - 2)
    for segment in segments:
        color = lerp_color(SNAKE_COLOR_START, SNAKE_COLOR_END, (segment[0] + segment[1]) / span)
        pygame.draw.rect(surface, color, cell_rect(segment, padding=1))


def draw_food(surface: pygame.Surface, food: Optional[Point]) -> None:
    if food is None:
        return
    rect = cell_rect(food)
    pygame.draw.circle(surface, FOOD_COLOR, rect.center, CELL_SIZE // 2 - 2)


def draw_hud(surface: pygame.Surface, fonts: Fonts, frame: FrameState) -> None:
    pygame.draw.rect(surface, HUD_COLOR, pygame.Rect(0, 0, SCREEN_WIDTH, HUD_HEIGHT))
    score_text = fonts.body.render(f"점수: {frame.score}", True, TEXT_COLOR)
    surface.blit(score_text, (12, 8))
    detail = fonts.small.render(f"최고: {frame.best_score}   속도: {frame.interval_ms}ms", True, (189, 195, 199))
    surface.blit(detail, (12, 36))
    label = "다시 시작" if frame.has_played else "게임 시작"
    draw_button(surface, start_button_rect(), fonts.small, label)


def draw_welcome(surface: pygame.Surface, fonts: Fonts, best_score: int) -> None:
    field = playfield_rect()
    surface.fill(BACKGROUND_COLOR, field)
    draw_text_center(surface, fonts.body, "시작 버튼이나 스페이스 키를 누르세요", field.centery)
    if best_score > 0:
        draw_text_center(surface, fonts.small, f"최고 점수: {best_score}", field.centery + 30)


def draw_frame(surface: pygame.Surface, fonts: Fonts, frame: FrameState) -> None:
    """Render one complete frame for the given phase."""
    if frame.phase == "welcome":
        draw_welcome(surface, fonts, frame.best_score)
        draw_hud(surface, fonts, frame)
        return

    draw_background(surface)
    draw_snake(surface, frame.segments)
    draw_food(surface, frame.food)
    draw_hud(surface, fonts, frame)

    if frame.phase == "gameover":
        draw_game_over_ui(
            surface,
            fonts=fonts,
            reason=COLLISION_REASONS.get(frame.collision or "", ""),
            score=frame.score,
            best_score=frame.best_score,
            hint="스페이스: 다시 시작  |  ESC: 종료",
            area=playfield_rect(),
        )


def run_game(*, quit_on_exit: bool = True) -> None:
    """Open the window and run the snake game until it is closed."""
    logging.basicConfig(
        level=os.getenv("SNAKE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pygame.init()
    pygame.display.set_caption(f"Snake {_read_app_version()}")
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    clock = pygame.time.Clock()
    fonts = load_fonts()

    def render(frame: FrameState) -> None:
        draw_frame(screen, fonts, frame)

    game = SnakeGame(render=render)
    render(game.frame())

    running = True
    while running:
        clock.tick(FPS)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == TICK_EVENT:
                game.tick()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    game.handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if start_button_rect().collidepoint(event.pos):
                    game.start()
            elif event.type == pygame.WINDOWEXPOSED:
                render(game.frame())
        pygame.display.flip()

    game.stop()
    if quit_on_exit:
        pygame.quit()


def main() -> None:
    crash_log.install()
    run_game()


if __name__ == "__main__":
    main()
