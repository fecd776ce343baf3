# splitshot

A small arena shooter drawn in wireframe, with split-screen views for up
to four players, plus a minimal window that shows a background image.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Playing

```
splitshot
```

Opens a 640 x 480 window, grabs and hides the mouse, and puts you in a
box-shaped arena with a grid on its floor.

- Moving the mouse first claims it for your player; after that it turns
  your view left and right and looks up and down (pitch is limited to
  straight up and straight down).
- Pressing a key first claims the keyboard; after that W, A, S, D move and
  Space jumps.
- A mouse button fires along your line of sight. A player who is hit
  reappears at a random spot in the arena.
- Releasing Escape, or closing the window, quits.

Players fall under gravity, slide to a stop under drag and are kept inside
the walls. Other players are drawn as two circles in their own colour, and
each view has a crosshair in its centre. When a font is available, the
frame rate is shown in the top-left corner.

### What the command does not do

The game state can hold up to four players, each with their own mouse and
keyboard, and splits the screen into halves or quarters as they join. The
`splitshot` command, however, sees every mouse as one mouse and every
keyboard as one keyboard, so it only ever plays with a single player.
Several players are only possible by driving `GameState` yourself with
distinct device numbers. There are no scores, rounds or network play.

## Viewing an image

```
splitshot-viewer
```

Opens an 800 x 600 window titled "Background and Icon", sets its icon from
`images/C-logo.png` and draws `images/background.png` stretched to fill it,
both paths relative to the current directory. Pressing Escape or closing
the window exits, and "All Clean!" is printed when the window is torn down.
If the window or an image cannot be set up, the error is printed to
standard error and the command exits with status 1.

Options:

- `--title TEXT` window title
- `--width N`, `--height N` window size
- `--icon PATH` icon image
- `--background PATH` background image

## Using it as a library

The game logic does not need a display:

- `splitshot.world` holds the `Player` dataclass and the functions
  `init_players`, `init_edges`, `whose_mouse`, `whose_keyboard`,
  `aim_direction`, `shoot` (returns the indices of the players hit) and
  `update` (advances motion by a number of nanoseconds).
- `splitshot.projection` holds the camera maths: `camera_matrix`,
  `transform`, `clip_segment` (returns two screen points, or `None` when
  the segment is wholly behind the near plane), `circle_points` and
  `split_viewports`, which returns `Viewport` tuples.
- `splitshot.state` holds `GameState`, which takes input through
  `quit`, `mouse_removed`, `keyboard_removed`, `mouse_motion`,
  `mouse_button_down`, `key_down` and `key_up` and advances with `step`;
  each returns an `Outcome` (`CONTINUE` or `SUCCESS`). Keys are given as
  members of the `Key` enum. `FrameClock.tick` returns the time since the
  previous frame and keeps a frames-per-second label in `text`.
- `splitshot.render.draw_scene` draws a `GameState` onto a pygame surface.
- `splitshot.viewer.Viewer` is a context manager around the image window;
  it raises `ViewerError` when setup fails.