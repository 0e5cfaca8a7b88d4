"""The apple the snake hunts for."""

from __future__ import annotations

import random
from typing import Any

from .display import Display

APPLE_SIZE = 3

_X_RANGE = (5, 123)
_Y_RANGE = (5, 59)
# Apples never appear in the top-left corner.
_KEEP_OUT_X = 20
_KEEP_OUT_Y = 10


class Apple:
    """A 3x3 apple placed at a random spot on the screen."""

    def __init__(self, rng: Any = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.x = 0
        self.y = 0
        self.exists = False
        self.respawn()

    def respawn(self) -> None:
        """Move the apple to a fresh random spot outside the keep-out corner."""
        while True:
            x = self._rng.randrange(*_X_RANGE)
            y = self._rng.randrange(*_Y_RANGE)
            if not (x < _KEEP_OUT_X and y < _KEEP_OUT_Y):
                break
        self.x, self.y = x, y
        self.exists = True

    def draw(self, display: Display) -> None:
        """Draw the apple, or place a new one if it has been eaten."""
        if self.exists:
            display.draw_box(self.x, self.y, APPLE_SIZE, APPLE_SIZE)
        else:
            self.respawn()

    def eat(self) -> None:
        self.exists = False