# SINT-7

A side-scrolling puzzle adventure. You wake up as SINT-7, a discontinued
artificial intelligence left in an abandoned laboratory. Walk through the
complex, collect memory fragments, gather activation blocks and solve the
terminals that stand in your way.

The game rules live in plain Python objects that can be driven and tested
without a window; `sint7.app` puts a small pygame window on top of them.

## Installing

```
pip install .
```

## Running

```
sint7
sint7 --skip-ai
```

On start the game runs the fragment generator (`python3 ia/server.py`,
relative to the current directory), echoes its output and then expects
`include/fragmentos.h` to exist; if either step fails the error is printed
and the game carries on. `--skip-ai` leaves the generator out.

In the window:

- the main menu has two buttons, Jogar (start) and Sair (quit); Jogar opens
  the story screen, which can be skipped with Enter or a click after two
  seconds and ends by itself once it has scrolled past;
- Left / Right arrows walk; the player is held back at x = 1500 until
  phase 2 is unlocked and at x = 4300 until phase 3 is unlocked;
- I interacts with a fragment or a terminal, C starts collecting an
  activation block; hints are shown next to what you touch;
- Tab opens and closes the inventory of collected fragments (Up / Down
  scroll it) and dims the screen behind it;
- Esc pauses and resumes.

## What the window does not do

The window is a bare view of the game state: the player is drawn as a grey
box, and no images, backgrounds or sound are loaded. The puzzle classes
below are not shown or played in the window; opening a terminal only marks
it active. They are meant to be driven from code.

## Using the pieces

```python
from sint7.player import Player
from sint7.puzzle_setup import PuzzleBoard
from sint7.puzzles import KeypadPuzzle

player = Player()
board = PuzzleBoard()
board.init_puzzle(1)

keypad = KeypadPuzzle()
for digit in (2, 3, 5, 7):
    keypad.press(digit, player, board.current)

assert keypad.message == "Aprovado."
assert board.current.solved and player.phase == 2
```

Modules:

- `sint7.player`: `Player` with `update(dt, right, left)`, `hitbox()`,
  `source_rect()` and `unlock_phase(phase)`; `PlayerState`.
- `sint7.camera`: `Camera` with `for_player`, `follow` and `clamped_x`.
- `sint7.geometry`: `Rect` with `collides` and `contains`.
- `sint7.graphics`: `DarkOverlay` (fade in/out), `wrap_text(text, max_width,
  measure)` and `interaction_label_rect`.
- `sint7.fragments`: `Feeling`, `MemoryFragment` and `FragmentStore`, which
  picks a phase's fragments, collects touched ones, keeps the collected list
  and formats it with `describe()`.
- `sint7.puzzle_setup`: `Puzzle`, `Block` and `PuzzleBoard`, which opens
  terminals on contact and tracks the four activation blocks.
- `sint7.phase`: `Phase` and `start_phase(player, fragments, board)`.
- `sint7.game`: `check_collisions(player, board, fragments, keys, now)`
  returning a `CollisionResult`.
- `sint7.puzzles`: the phase puzzles:
  - `KeypadPuzzle`: enter the code 2, 3, 5, 7; unlocks phase 2;
  - `CircuitPuzzle`: toggle connections "a" to "h" until the LEDs read
    off, on, off, on; unlocks phase 2 → 3;
  - `ChoicePuzzle`: after a message, reactivate the analytic or the
    empathic module with "e"; unlocks phase 4;
  - `OrderPuzzle`: type the block order "1, 2, 3, 4" and `submit()`;
    `verdict(blocks_ready)` gives the result.
- `sint7.decode_puzzle`: `TypewriterText`, `DecodeState` and
  `DecodePuzzle`, a timed terminal where two rows of seven symbols are turned
  with "a" / "d" and "j" / "l" and confirmed with "enter".
- `sint7.menu`: `MenuState`, `Button`, `Menu` and `layout_story`.
- `sint7.ai`: `run_ai(command, header_path)`, raising `AIError` when the
  command cannot be started or the header is missing.
- `sint7.app`: `Inventory`, `clamp_scroll` and `main`.

## Running the tests

```
pip install .[test]
pytest
```