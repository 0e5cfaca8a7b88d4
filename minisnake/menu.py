"""Main menu, help screen and game-over panel."""

from __future__ import annotations

from .display import (
    BUTTON_BORDER_2,
    BUTTON_INVERT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Display,
)

TITLE_FONT = "tenfatguys_tf"
HEADING_FONT = "littlemissloudonbold_tr"
SMALL_FONT = "trixel_square_tr"

_SELECTED = BUTTON_INVERT | BUTTON_BORDER_2
_UNSELECTED = BUTTON_BORDER_2

# 128x32 XBM picture of a snake for the main menu.
SNAKE_BITMAP = bytes.fromhex(
    """
    00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 c0 0f 00 00 00 00 00 00
    00 00 00 00 00 c0 00 00 f0 3f 00 00
    00 00 00 00 00 00 00 00 00 fe 1f 00
    18 e0 00 00 00 00 00 00 00 00 00 00
    80 07 38 00 0c 80 01 00 00 00 00 00
    00 00 00 00 c0 81 63 00 04 00 03 00
    00 00 00 00 00 00 00 00 e0 c0 c3 00
    86 01 03 00 00 00 00 00 00 00 00 00
    70 c0 83 01 c2 07 02 00 00 00 00 00
    00 00 00 00 f0 c0 83 01 c2 3f 03 00
    00 00 00 00 00 00 00 00 f8 80 80 01
    c2 73 03 00 00 00 00 00 00 00 00 00
    f8 00 80 01 c2 c1 01 00 00 00 00 00
    00 00 00 00 f8 80 c0 01 82 c1 01 00
    00 00 00 00 00 00 00 00 fc 80 ff 00
    82 01 00 00 00 00 00 00 00 00 00 00
    7c 80 ff 00 82 01 00 00 00 00 00 00
    00 00 00 00 3c 00 66 00 02 01 00 00
    00 00 00 00 00 00 00 00 1c 00 70 00
    06 03 00 00 00 00 00 00 00 00 00 00
    06 00 1c 00 06 03 00 00 00 00 00 00
    00 00 00 00 03 00 0f 00 84 07 00 00
    00 00 00 00 00 00 00 00 03 e0 03 00
    8c 3f 00 00 00 00 00 00 00 00 00 80
    03 78 00 00 8c ff 0f 00 00 fc 07 00
    00 00 00 c0 03 0e 00 00 18 8f 3f 00
    f0 ff 7f 00 00 00 00 e0 03 07 00 00
    18 80 ff 83 ff 1f fe 01 fc ff 01 fc
    03 03 00 00 30 00 3e ff e7 0f fe ff
    ff bf cf ff 81 01 00 00 70 00 00 fe
    c0 0f 3c fc e1 3f fc f9 80 00 00 00
    e0 00 00 fc 80 07 00 fc e1 0f fe 00
    80 00 00 00 c0 01 00 00 00 00 00 f8
    c0 07 7c 00 c0 00 00 00 80 03 00 00
    00 00 00 00 00 00 00 00 c0 00 00 00
    00 0e 00 00 00 00 7e 00 00 00 fc 03
    60 00 00 00 00 fc 00 00 00 fc ff 1f
    00 80 bf ff 3f 00 00 00 00 e0 ff ff
    ff 1f 00 f8 7f f8 00 f8 1f 00 00 00
    00 00 e0 ff 7f 00 00 00 fc 3f 00 00
    00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00
    """
)

# 60x20 XBM picture of a small snake for the help screen.
SMALL_SNAKE_BITMAP = bytes.fromhex(
    """
    00 00 00 00 00 00 f8 00 f8 03 00 00
    00 00 8e 03 0c 06 00 00 00 00 67 06
    06 0c 00 00 00 80 67 04 c2 19 00 00
    00 80 00 04 62 3f 00 00 00 80 e0 07
    32 30 00 00 00 80 01 03 1b 00 00 00
    00 00 c7 01 19 00 00 00 00 00 47 00
    1b 00 00 00 00 00 47 00 12 f0 7f 00
    00 80 41 00 72 38 ef 81 7f e0 40 00
    c6 0f 8f ff de 39 60 00 84 07 00 1e
    1e 0f 20 00 8c 07 00 1e 00 06 30 00
    18 e0 03 e0 03 80 1f 00 70 30 06 38
    0e f8 00 00 c0 18 0c 0c 38 0e 00 00
    80 0f f8 07 e0 03 00 00 00 00 00 00
    00 00 00 00
    """
)

_HELP_TEXT = (
    (65, 10, "That's a classic"),
    (67, 16, "game of SNAKE."),
    (61, 22, "Controll the snake"),
    (63, 28, "with LEFT or RIGHT"),
    (65, 34, "buttons, hunt for"),
    (67, 40, "apples, live for"),
    (61, 47, "as long as you can"),
    (61, 53, "and don't bonk your"),
    (63, 59, "head on anything!"),
)


def _draw_choice(display: Display, left: str, right: str, left_selected: bool) -> None:
    display.draw_button(
        10, 50, _SELECTED if left_selected else _UNSELECTED, 0, 2, 2, left
    )
    display.draw_button(
        75, 50, _UNSELECTED if left_selected else _SELECTED, 0, 2, 2, right
    )


class SnakeMenu:
    """Menu screens with a two-way button selection on each."""

    def __init__(self) -> None:
        self.button_state = True
        self.game_over_button_state = True

    def draw_main_menu(self, display: Display) -> None:
        display.draw_frame(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
        display.set_font(TITLE_FONT)
        _draw_choice(display, "PLAY", "HELP", self.button_state)
        display.draw_str(37, 15, "SNAKE")
        display.set_bitmap_mode(True)
        display.draw_xbm(3, 2, 128, 32, SNAKE_BITMAP)

    def draw_help_menu(self, display: Display) -> None:
        display.draw_frame(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
        display.draw_button(8, 53, _SELECTED, 0, 2, 2, "BACK")
        display.set_bitmap_mode(True)
        display.draw_xbm(0, 17, 60, 20, SMALL_SNAKE_BITMAP)
        display.set_font(HEADING_FONT)
        display.draw_str(4, 15, "MANUAL")
        display.draw_rframe(59, 2, 67, 60, 7)
        display.set_font(SMALL_FONT)
        for x, y, line in _HELP_TEXT:
            display.draw_str(x, y, line)
        display.set_font(TITLE_FONT)

    def draw_game_over_panel(self, display: Display, score: int) -> None:
        display.set_font(TITLE_FONT)
        display.draw_frame(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
        display.draw_str(15, 15, "GAME OVER")
        _draw_choice(display, "RESET", "EXIT", self.game_over_button_state)
        display.set_font(SMALL_FONT)
        display.draw_str(50, 28, f"SCORE: {score}")

    def toggle_button(self) -> None:
        self.button_state = not self.button_state

    def toggle_game_over_button(self) -> None:
        self.game_over_button_state = not self.game_over_button_state