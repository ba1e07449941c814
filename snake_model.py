from __future__ import annotations

from typing import List, Literal, Optional, Sequence, Tuple

Direction = Tuple[int, int]
Point = Tuple[int, int]
CollisionKind = Literal["wall", "self"]

UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
DIRECTIONS: Tuple[Direction, ...] = (UP, DOWN, LEFT, RIGHT)

START_POSITION: Point = (10, 10)
START_DIRECTION: Direction = RIGHT

# 뱀 길이가 5칸 늘어날 때마다 10ms씩 빨라지고, 50ms 아래로는 내려가지 않는다.
INITIAL_INTERVAL_MS = 150
INTERVAL_STEP_MS = 10
MIN_INTERVAL_MS = 50
SPEEDUP_EVERY = 5


def interval_for_length(length: int) -> int:
    """Return the tick interval (ms) for a snake of the given body length."""
    steps = max(0, length) // SPEEDUP_EVERY
    return max(MIN_INTERVAL_MS, INITIAL_INTERVAL_MS - INTERVAL_STEP_MS * steps)


def is_reverse(a: Direction, b: Direction) -> bool:
    return a[0] + b[0] == 0 and a[1] + b[1] == 0


class Snake:
    """
    Grid snake with a head-first body.

    Attributes:
        body: list of (x, y) from head at index 0 to tail at the end
        heading: direction used by the last advance
        pending_heading: direction the next advance will use
        growing: tail is kept on the next advance
        interval_ms: current tick interval, derived from the body length
    """

    def __init__(self, body: Optional[Sequence[Point]] = None, heading: Direction = START_DIRECTION) -> None:
        self.reset()
        if body is not None:
            if not body:
                raise ValueError("snake body needs at least one segment")
            self.body = list(body)
            self.heading = heading
            self.pending_heading = heading
            self.interval_ms = interval_for_length(len(self.body))

    def reset(self) -> None:
        self.body: List[Point] = [START_POSITION]
        self.heading: Direction = START_DIRECTION
        self.pending_heading: Direction = START_DIRECTION
        self.growing = False
        self.interval_ms = interval_for_length(len(self.body))
        self._dropped_tail: Optional[Point] = None

    @property
    def head(self) -> Point:
        return self.body[0]

    @property
    def length(self) -> int:
        """Body length once any pending growth has been applied."""
        return len(self.body) + (1 if self.growing else 0)

    def occupies(self, point: Point) -> bool:
        return point in self.body

    def set_heading(self, direction: Direction) -> None:
        """Queue a heading for the next advance; reversals and non-unit vectors are ignored."""
        direction = (int(direction[0]), int(direction[1]))
        if direction not in DIRECTIONS:
            return
        if is_reverse(self.heading, direction):
            return
        self.pending_heading = direction

    def advance(self) -> Point:
        """Move one cell along the pending heading and return the new head."""
        self.heading = self.pending_heading
        head_x, head_y = self.body[0]
        new_head = (head_x + self.heading[0], head_y + self.heading[1])
        self.body.insert(0, new_head)
        if self.growing:
            self.growing = False
            self._dropped_tail = None
        else:
            self._dropped_tail = self.body.pop()
        return new_head

    def grow(self) -> None:
        """Add one segment and speed up every SPEEDUP_EVERY segments."""
        if self._dropped_tail is not None:
            # 방금 이동에서 잘린 꼬리를 되살려 먹은 틱에 바로 한 칸 늘어난다.
            self.body.append(self._dropped_tail)
            self._dropped_tail = None
        else:
            self.growing = True
        self.interval_ms = interval_for_length(self.length)

    def collision_kind(self, width: int, height: int) -> Optional[CollisionKind]:
        head_x, head_y = self.body[0]
        if head_x < 0 or head_x >= width or head_y < 0 or head_y >= height:
            return "wall"
        if self.body[0] in self.body[1:]:
            return "self"
        return None

    def check_collision(self, width: int, height: int) -> bool:
        return self.collision_kind(width, height) is not None
