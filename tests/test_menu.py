from minisnake.display import BUTTON_BORDER_2, BUTTON_INVERT, RecordingDisplay
from minisnake.menu import SMALL_FONT, TITLE_FONT, SnakeMenu

SELECTED = BUTTON_INVERT | BUTTON_BORDER_2


def _buttons(display):
    return {c[-1]: c[3] for c in display.calls if c[0] == "draw_button"}


def _xbm_calls(display):
    return [c for c in display.calls if c[0] == "draw_xbm"]


def test_defaults_and_toggles():
    menu = SnakeMenu()
    assert menu.button_state is True
    assert menu.game_over_button_state is True
    menu.toggle_button()
    assert menu.button_state is False
    assert menu.game_over_button_state is True
    menu.toggle_game_over_button()
    assert menu.game_over_button_state is False
    menu.toggle_button()
    assert menu.button_state is True


def test_main_menu_play_selected():
    display = RecordingDisplay()
    SnakeMenu().draw_main_menu(display)
    assert ("draw_button", 10, 50, SELECTED, 0, 2, 2, "PLAY") in display.calls
    assert ("draw_button", 75, 50, BUTTON_BORDER_2, 0, 2, 2, "HELP") in display.calls
    assert ("draw_str", 37, 15, "SNAKE") in display.calls
    assert display.calls[0] == ("draw_frame", 0, 0, 128, 64)


def test_main_menu_help_selected():
    menu = SnakeMenu()
    menu.toggle_button()
    display = RecordingDisplay()
    menu.draw_main_menu(display)
    assert _buttons(display) == {"PLAY": BUTTON_BORDER_2, "HELP": SELECTED}


def test_main_menu_bitmap_matches_its_size():
    display = RecordingDisplay()
    SnakeMenu().draw_main_menu(display)
    [(_, x, y, width, height, bitmap)] = _xbm_calls(display)
    assert (x, y, width, height) == (3, 2, 128, 32)
    assert len(bitmap) == (width // 8) * height
    assert display.bitmap_transparent is True


def test_help_menu():
    display = RecordingDisplay()
    SnakeMenu().draw_help_menu(display)
    assert _buttons(display) == {"BACK": SELECTED}
    assert ("draw_str", 4, 15, "MANUAL") in display.calls
    assert ("draw_rframe", 59, 2, 67, 60, 7) in display.calls
    assert ("set_font", SMALL_FONT) in display.calls
    assert display.font == TITLE_FONT
    [(_, x, y, width, height, bitmap)] = _xbm_calls(display)
    assert len(bitmap) == ((width + 7) // 8) * height


def test_game_over_panel_shows_score():
    display = RecordingDisplay()
    SnakeMenu().draw_game_over_panel(display, 42)
    assert ("draw_str", 50, 28, "SCORE: 42") in display.calls
    assert ("draw_str", 15, 15, "GAME OVER") in display.calls
    assert _buttons(display) == {"RESET": SELECTED, "EXIT": BUTTON_BORDER_2}
    assert display.font == SMALL_FONT


def test_game_over_panel_exit_selected():
    menu = SnakeMenu()
    menu.toggle_game_over_button()
    display = RecordingDisplay()
    menu.draw_game_over_panel(display, 0)
    assert _buttons(display) == {"RESET": BUTTON_BORDER_2, "EXIT": SELECTED}
    assert ("draw_str", 50, 28, "SCORE: 0") in display.calls