# marblerail

Building blocks for a marble-routing puzzle on a 15 × 15 board. Marbles roll along a track. The player switches intersections so that each marble turns off towards the hole of its own colour. The package has no user interface. It provides the geometry of the board on screen, the pre-game countdown, how marbles move and turn, how intersections cycle, and the player's saved data.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install .[test]
```

## Modules

### `marblerail.save`

`SaveGame` is a dataclass with these fields:

- high scores, three slots by default
- the two high-score data values
- the highest level reached and the score of the last game
- master, music, atmosphere and sound-effect volumes
- key, mouse and controller bindings, stored as strings
- the song queue and song cycles
- gamma
- the hard-mode and auto-cursor flags

`save(path)` writes the data as JSON and `SaveGame.load(path)` reads it back. `to_dict()` and `SaveGame.from_dict(data)` convert to and from a plain dictionary. `from_dict` fills in defaults for missing keys and ignores unknown ones. It raises `TypeError` if a value has the wrong shape.

### `marblerail.layout`

Screen geometry for a viewport `(width, height)` that is at least as wide as it is tall. The board is a square of the viewport's height, centred horizontally. Positions are returned as a `Margin` (`left`, `top`, `right`, `bottom`), which is the padding from each edge of the viewport.

- `tile_position(tile, viewport)`: padding for a single tile.
- `large_tile_position(tile, viewport)`: padding for a 3 × 3 tile, given the coordinates of its top-left ninth.
- `shrink_marble(padding, factor, viewport)`: moves every edge inwards. A factor of 1 shrinks a tile-sized marble to nothing.
- `marble_center(position)`: the tile a marble is over. Coordinates round to the nearest integer, and halves round towards zero.
- `score_position`, `time_position` and `countdown_position`: padding for the score text in the left panel, the time text in the right panel, and the countdown over the board.
- `score_font_size(viewport)`: font size for the panel texts.
- `intersection_screen_location(tile_index, viewport)`: the screen point at the centre of a tile, given its flat index.

### `marblerail.countdown`

`Countdown(viewport)` runs the "3, 2, 1, GO" countdown:

- Nothing is shown for the first six seconds.
- After that, a new label appears each second.
- Each label grows and fades in over its first third of a second, holds, and then fades out.
- After ten seconds `started` becomes true.

`update(delta)` moves the countdown forward by `delta` seconds. It returns a `CountdownFrame` with the label's `text`, `opacity`, `font_size` and `margin`, and the `started` flag. Two helper functions, `adjusted_countdown_margin` and `grow_countdown_margin`, compute the box's growth.

### `marblerail.turning`

`Direction` has four values: `UP`, `RIGHT`, `DOWN` and `LEFT`. Each value has a unit `movement` on the board, and y grows downwards.

A `Marble` has a `position` in tile units and a direction of travel.

- `advance(distance)` moves the marble straight on.
- `start_turn(is_intersection, track_value)` starts a quarter-circle bend chosen by the tile's track value.
- `turn_step()` returns the position at which the marble is drawn on the bend.
  - When the arc of about 0.7854 tiles is complete, the marble snaps onto the exit edge.
  - Its direction then changes and `turning` becomes false.

```python
from marblerail.turning import Direction, Marble

marble = Marble(position=(3.0, 5.0), direction=Direction.UP)
marble.advance(0.5)
drawn = marble.start_turn(is_intersection=False, track_value=4)  # up, then right
while marble.turning:
    marble.advance(0.1)
    drawn = marble.turn_step()
print(marble.direction, marble.position)
```

### `marblerail.intersections`

An `Intersection` has a `kind` (0–7) and a `cycle` that runs through four states. `press()` and `release()` each move it one state forward. When the cycle is 2 or 3, `turns` is true and a marble reaching the tile is sent around the bend.

`IntersectionBoard(track, is_intersection, viewport)` collects the intersections of a 225-tile board in board order, up to 17 of them. It raises `ValueError` if the board has the wrong size, if an intersection has an invalid kind, or if there are too many intersections. It also provides:

- `at(tile)`: the intersection on a tile. Raises `KeyError` if the tile has none.
- `nearest(mouse)`: the intersection closest to a screen point.
- Auto-cursor mode, switched by `set_auto_cursor(enabled, mouse)`:
  - The per-intersection buttons are disabled (`buttons_enabled` is false).
  - `update_focus(mouse)` moves the focus to the intersection nearest the mouse.
  - `press_focused()` and `release_focused()` work the focused intersection. The focus stays locked between the press and the release.

```python
from marblerail.intersections import IntersectionBoard

track = [0] * 225
flags = [False] * 225
flags[16] = True  # tile (1, 1)
board = IntersectionBoard(track, flags, (1920, 1080))
board.at((1, 1)).press()
board.at((1, 1)).release()
print(board.at((1, 1)).turns)  # True
```

## What the package does not do

The package has no game loop. Nothing in it:

- spawns marbles over time
- runs a round
- keeps the score
- computes a final score or updates high scores at the end of a game

It does not draw, play sound or read input. The host application turns the margins, frames and positions above into pictures, and passes in the mouse position and button events. `SaveGame` reads and writes the file it is given, but it does not choose where that file is kept.

## Tests

```
pytest
```