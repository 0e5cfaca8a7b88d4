# minisnake

The game logic and screens of a small Snake game for a 128×64 pixel monochrome
display. The package does not draw pixels itself. Each screen is described as a
sequence of calls on a small drawing interface, so any surface that implements
those calls can render it.

There are no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `minisnake.display`

- `State`: an enum of the screens: `MAIN_MENU`, `HELP_PANEL`, `GAME_PANEL`,
  `GAME_OVER`.
- `Display`: a protocol with the drawing operations the game uses:
  `draw_box`, `draw_frame`, `draw_rframe`, `draw_button`, `draw_str`,
  `set_font`, `set_bitmap_mode` and `draw_xbm`.
- `RecordingDisplay`: a `Display` that appends every call to its `calls` list
  as a tuple, such as `("draw_box", x, y, width, height)`. It also keeps the
  last font set in `font` and the bitmap mode in `bitmap_transparent`.
- Constants: `SCREEN_WIDTH` (128), `SCREEN_HEIGHT` (64), and the button flags
  `BUTTON_BORDER_2` and `BUTTON_INVERT`.

### `minisnake.apple`

`Apple(rng=None)` is a 3×3 apple (`APPLE_SIZE`). `rng` is any object with a
`randrange` method. By default it is a new `random.Random()`. The apple gets an
`x` in 5–122 and a `y` in 5–58, and it never lands where both `x < 20` and
`y < 10`.

- `respawn()` picks a new position and sets `exists` to `True`.
- `eat()` sets `exists` to `False`.
- `draw(display)` draws the apple as a box while it exists. If it has been
  eaten, the call respawns it instead of drawing it.

### `minisnake.snake`

- `Segment`: a dataclass with `x` and `y`.
- `Direction`: an `IntEnum` with `EAST`, `SOUTH`, `WEST` and `NORTH`.
- `Snake()`: starts with 7 segments (`START_LENGTH`) heading east. The head is
  at (64, 32) and each segment is 3 pixels (`STEP`) behind the one before it.
  A snake holds at most 100 segments (`CAPACITY`).
  - `size` and `direction`: read-only properties.
  - `segment(index)`: returns a copy of a segment. It raises `IndexError`
    outside `0`–`99`.
  - `advance()`: moves the head one step, and each segment follows the one
    before it.
  - `turn(is_right)`: turns a quarter right or left and shifts the head onto
    the new line.
  - `check_collision()`: returns `True` if the head touches or passes a screen
    edge or sits on a body segment. In that case the snake is also put back to
    its starting length, heading and position.
  - `check_apple(apple)`: returns `True` if the head overlaps the apple. In
    that case it eats the apple and adds a segment at the tail.
  - `add_segment()`, `grow()`: lengthen the snake. `grow` raises
    `OverflowError` past `CAPACITY`.
  - `reset()`: lays the current body out in a straight line from the start
    spot.
  - `draw(display)`: draws each segment as a 3×3 frame.

### `minisnake.menu`

`SnakeMenu` draws three screens. Two of them have a pair of buttons, and the
selected button is drawn inverted.

- `draw_main_menu(display)`: the title, a snake picture, and **PLAY** /
  **HELP**. `button_state` is `True` when PLAY is selected.
- `draw_help_menu(display)`: a **BACK** button, a small snake picture and the
  instructions.
- `draw_game_over_panel(display, score)`: "GAME OVER", the score, and
  **RESET** / **EXIT**. `game_over_button_state` is `True` when RESET is
  selected.
- `toggle_button()` and `toggle_game_over_button()`: flip the selection.

The pictures are available as the XBM byte strings `SNAKE_BITMAP` (128×32) and
`SMALL_SNAKE_BITMAP` (60×20). The font names used are `TITLE_FONT`,
`HEADING_FONT` and `SMALL_FONT`.

## Example

```python
import random

from minisnake.apple import Apple
from minisnake.display import RecordingDisplay, State
from minisnake.menu import SnakeMenu
from minisnake.snake import Snake

display = RecordingDisplay()
menu = SnakeMenu()
snake = Snake()
apple = Apple(random.Random())
state = State.GAME_PANEL
score = 0

# one frame of the game
snake.advance()
if snake.check_collision():
    state = State.GAME_OVER
elif snake.check_apple(apple):
    score += 1
snake.draw(display)
apple.draw(display)

if state is State.GAME_OVER:
    menu.draw_game_over_panel(display, score)

print(display.calls)
```

## What it does not do

The package has no command, no game loop, no timing and no input handling. It
also has no display that puts pixels on a screen or terminal. A program that
uses it must do the following itself:

- implement `Display` for its surface;
- call `advance`, `check_collision`, `check_apple` and the draw methods once
  per frame;
- map its buttons to `Snake.turn` and the menu toggles;
- move between the `State` screens.