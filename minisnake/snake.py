"""The snake: its body, movement, turning and collisions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .apple import APPLE_SIZE, Apple
from .display import SCREEN_HEIGHT, SCREEN_WIDTH, Display

STEP = 3
START_LENGTH = 7
CAPACITY = 100
_HEAD_START = (64, 32)


@dataclass
class Segment:
    x: int
    y: int


class Direction(IntEnum):
    EAST = 0
    SOUTH = 1
    WEST = 2
    NORTH = 3


_MOVES = {
    Direction.EAST: (STEP, 0),
    Direction.SOUTH: (0, STEP),
    Direction.WEST: (-STEP, 0),
    Direction.NORTH: (0, -STEP),
}

# Where the head jumps when the snake turns, keyed by (heading, turning right).
_TURN_SHIFTS = {
    (Direction.EAST, True): (-STEP, STEP),
    (Direction.SOUTH, True): (-STEP, -STEP),
    (Direction.WEST, True): (STEP, -STEP),
    (Direction.NORTH, True): (STEP, STEP),
    (Direction.EAST, False): (-STEP, -STEP),
    (Direction.SOUTH, False): (STEP, -STEP),
    (Direction.WEST, False): (STEP, STEP),
    (Direction.NORTH, False): (-STEP, STEP),
}


def _overlaps(head: int, apple: int) -> bool:
    return (apple <= head <= apple + APPLE_SIZE) or (
        apple <= head + STEP <= apple + APPLE_SIZE
    )


class Snake:
    """A snake of 3x3 segments moving one step per frame."""

    def __init__(self) -> None:
        self._body = [Segment(0, 0) for _ in range(CAPACITY)]
        self._size = START_LENGTH
        self._direction = Direction.EAST
        self.reset()

    @property
    def size(self) -> int:
        return self._size

    @property
    def direction(self) -> Direction:
        return self._direction

    def segment(self, index: int) -> Segment:
        """Return a copy of the segment at ``index``."""
        if not 0 <= index < CAPACITY:
            raise IndexError(f"segment index {index} out of range")
        seg = self._body[index]
        return Segment(seg.x, seg.y)

    def grow(self) -> None:
        if self._size >= CAPACITY:
            raise OverflowError(f"a snake cannot be longer than {CAPACITY}")
        self._size += 1

    def reset(self) -> None:
        """Lay the current body out in a straight line ending at the start spot."""
        head_x, head_y = _HEAD_START
        for i, seg in enumerate(self._body[: self._size]):
            seg.x = head_x - STEP * i
            seg.y = head_y

    def draw(self, display: Display) -> None:
        for seg in self._body[: self._size]:
            display.draw_frame(seg.x, seg.y, STEP, STEP)

    def advance(self) -> None:
        """Move the head one step and let every segment follow the one before it."""
        # The slot just past the tail is updated too; it records where the
        # tail was, which is where a new segment would go.
        last = min(self._size, CAPACITY - 1)
        for i in range(last, 0, -1):
            prev = self._body[i - 1]
            self._body[i] = Segment(prev.x, prev.y)
        dx, dy = _MOVES[self._direction]
        head = self._body[0]
        head.x += dx
        head.y += dy

    def add_segment(self) -> None:
        """Append a segment extending the tail in the direction it points."""
        for axis, sign in (("x", -1), ("x", 1), ("y", -1), ("y", 1)):
            tail = self._body[self._size - 1]
            before = self._body[self._size - 2]
            if (getattr(tail, axis) - getattr(before, axis)) * sign > 0:
                shift = STEP * sign
                if axis == "x":
                    new = Segment(tail.x + shift, tail.y)
                else:
                    new = Segment(tail.x, tail.y + shift)
                self.grow()
                self._body[self._size - 1] = new

    def turn(self, is_right: bool) -> None:
        shift_x, shift_y = _TURN_SHIFTS[(self._direction, bool(is_right))]
        step = 1 if is_right else -1
        self._direction = Direction((self._direction + step) % len(Direction))
        head = self._body[0]
        head.x += shift_x
        head.y += shift_y

    def _restart(self) -> None:
        self._size = START_LENGTH
        self._direction = Direction.EAST
        self.reset()

    def check_collision(self) -> bool:
        """Restart the snake and return True if the head hit a wall or the body."""
        head = self._body[0]
        hit_wall = (
            head.x <= 0
            or head.x >= SCREEN_WIDTH
            or head.y <= 0
            or head.y >= SCREEN_HEIGHT
        )
        hit_self = any(
            seg.x == head.x and seg.y == head.y
            for seg in self._body[1 : self._size]
        )
        if hit_wall or hit_self:
            self._restart()
            return True
        return False

    def check_apple(self, apple: Apple) -> bool:
        """Eat the apple and grow if the head touches it."""
        head = self._body[0]
        if _overlaps(head.x, apple.x) and _overlaps(head.y, apple.y):
            apple.eat()
            self.add_segment()
            return True
        return False