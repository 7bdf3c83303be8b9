# myhunter

A small arcade game. A duck flies across a 1920×1080 window from left to right,
drifting slowly downwards, and you shoot it with the mouse before it leaves the
screen. A shot duck leaves an explosion behind for half a second. Whether it was shot
or flew off the right edge, a new duck appears just off the left edge, at a random
height, two seconds later.

## Installing

```
pip install .
```

The game needs `pygame` and a display.

## Playing

Start the game from the directory that holds the `img/` folder with its images
(`background.png`, `crosshair.png`, `duck.png`, `explosion.png`):

```
my_hunter
```

`duck.png` is a sprite sheet of three 110×110 frames side by side. If the window
cannot be opened or an image cannot be loaded, the command exits with status 84.

Controls:

- move the mouse to aim the crosshair;
- left-click on the duck to shoot it;
- `Escape`, `D` while the left `Ctrl` key is held, or closing the window quits.

Help on usage:

```
my_hunter -h
```

Any other argument is refused with a message on standard error, and the command
exits with status 84.

## Using it from Python

The game can be started from code, with the directory that holds `img/`:

```python
from myhunter.game import run_game

status = run_game("path/to/assets")  # 0 once the window is closed, 84 on failure
```

The game logic does not need a display and can be driven directly:

- `myhunter.entities.Duck` — position, velocity and animation frame of a duck;
  `update(delta_time, window_size, rng)` moves it or counts down to its respawn,
  `shoot(x, y, explosion)` kills it and sets off the explosion when the point hits.
- `myhunter.entities.Explosion` — `trigger(position)` and `update(delta_time)`.
- `myhunter.entities.create_duck(window_height, rng)` — a new duck off the left edge.
- `myhunter.game.Game` — holds the screen, images, duck and explosion;
  `handle_events()`, `step(delta_time)`, `draw()` and `run()`.
- `myhunter.game.is_quit_event(event, ctrl_held)` — whether a pygame event quits.

The package also carries a few text helpers:

- `myhunter.printf.format_printf(fmt, *args)` formats a string with the
  `%c %s %d %i %u %o %x %X %b %p %%` conversions; `print_formatted` writes the result
  to a stream and returns its length; `to_base(number, base, digits)` writes an integer
  in any base.
- `myhunter.textlib.split_words(text, delims)` splits text on a set of delimiter
  characters; `parse_leading_int`, `write_words` and `write_error` go with it.

## What it does not do

The game plays no sound, keeps no score and has no menu: it is one duck, one
crosshair and a window that stays open until you quit.

## Tests

```
pip install .[test]
pytest
```