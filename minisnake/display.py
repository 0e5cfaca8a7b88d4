"""Drawing surface used by the game, plus the console's screen states."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol

SCREEN_WIDTH = 128
SCREEN_HEIGHT = 64

BUTTON_BORDER_2 = 0x02
BUTTON_INVERT = 0x20


class State(Enum):
    """Which screen the console is currently showing."""

    MAIN_MENU = auto()
    HELP_PANEL = auto()
    GAME_PANEL = auto()
    GAME_OVER = auto()


class Display(Protocol):
    """The monochrome drawing operations the game needs."""

    def draw_box(self, x: int, y: int, width: int, height: int) -> None: ...

    def draw_frame(self, x: int, y: int, width: int, height: int) -> None: ...

    def draw_rframe(
        self, x: int, y: int, width: int, height: int, radius: int
    ) -> None: ...

    def draw_button(
        self,
        x: int,
        y: int,
        flags: int,
        width: int,
        padding_h: int,
        padding_v: int,
        text: str,
    ) -> None: ...

    def draw_str(self, x: int, y: int, text: str) -> None: ...

    def set_font(self, font: str) -> None: ...

    def set_bitmap_mode(self, transparent: bool) -> None: ...

    def draw_xbm(
        self, x: int, y: int, width: int, height: int, bitmap: bytes
    ) -> None: ...


class RecordingDisplay:
    """A display that remembers every drawing call as a tuple."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.font: str | None = None
        self.bitmap_transparent = False

    def draw_box(self, x: int, y: int, width: int, height: int) -> None:
        self.calls.append(("draw_box", x, y, width, height))

    def draw_frame(self, x: int, y: int, width: int, height: int) -> None:
        self.calls.append(("draw_frame", x, y, width, height))

    def draw_rframe(
        self, x: int, y: int, width: int, height: int, radius: int
    ) -> None:
        self.calls.append(("draw_rframe", x, y, width, height, radius))

    def draw_button(
        self,
        x: int,
        y: int,
        flags: int,
        width: int,
        padding_h: int,
        padding_v: int,
        text: str,
    ) -> None:
        self.calls.append(
            ("draw_button", x, y, flags, width, padding_h, padding_v, text)
        )

    def draw_str(self, x: int, y: int, text: str) -> None:
        self.calls.append(("draw_str", x, y, text))

    def set_font(self, font: str) -> None:
        self.font = font
        self.calls.append(("set_font", font))

    def set_bitmap_mode(self, transparent: bool) -> None:
        self.bitmap_transparent = bool(transparent)
        self.calls.append(("set_bitmap_mode", self.bitmap_transparent))

    def draw_xbm(
        self, x: int, y: int, width: int, height: int, bitmap: bytes
    ) -> None:
        self.calls.append(("draw_xbm", x, y, width, height, bytes(bitmap)))