# patience

Klondike solitaire for the desktop, played with the mouse. Cards are dragged
between seven working stacks, four suit piles, a draw pile and an overturned
pile. When a card is dropped, it glides to its place.

## Installing

```
pip install .
```

The tests need pytest, which the `test` extra brings in:

```
pip install ".[test]"
pytest
```

## Playing

```
patience
```

This opens a 1000 × 800 window titled "Solitaire" and deals a shuffled game.
Options:

- `--assets DIR` – directory holding the card artwork (default: `assets`,
  relative to where the game is started)
- `--seed N` – seed for the shuffle, so the same deal can be played again
- `--verbose` – log game events, such as picking up and dropping cards

The artwork directory holds:

- `card_back.png`, `card_blank.png`
- `suit_heart.png`, `suit_diamond.png`, `suit_club.png`, `suit_spade.png`
- `num_1-ace.png`, `num_2.png` … `num_9.png`
- `unifont-16.0.04.otf`, the font used to draw 10, J, Q and K

If any of these files is missing, the game stops with `FileNotFoundError`.

### Rules

- Press on a card in a working stack to pick up that card and every card on
  top of it. A run that starts with a face-down card cannot be picked up.
- The top card of a suit pile can also be picked up.
- Drop a run on a working stack when its bottom card is one rank lower than
  the stack's top card and of the opposite colour. Only a king may go on an
  empty working stack.
- Drop a single card on a suit pile when it is one rank higher than the pile's
  top card and of the same suit. Only an ace may start an empty suit pile.
- Press on the draw pile to turn its top card face up and pick it up. If it is
  not dropped anywhere else, it lands on the overturned pile. When the draw
  pile is empty, pressing on it moves the overturned pile back into it, face
  down.
- The top card of the overturned pile can be picked up and played.
- A card dropped where it is not allowed slides back to the stack it came
  from. When cards are moved off a working stack, the card left on top of
  that stack is turned face up.
- Mouse presses are ignored while a card is still gliding.

### Limits

The game does not detect a win, keep a score, offer undo, or deal a new game
without restarting.

## Using the game logic from Python

The rules do not depend on the window. They can be driven directly:

```python
import random

from patience.board import new_board
from patience.geom import Pos

board = new_board(random.Random(7))
board.set_cursor_pos(Pos(20, 20))   # over the draw pile
board.mouse_down()                  # pick up its top card
board.set_cursor_pos(Pos(150, 20))
board.mouse_up()                    # drop it; it animates back or into place
while board.running_animation is not None:
    board.update()
```

Modules:

- `patience.geom` – `Pos`, an immutable point with `translate`, `+`, `-`,
  `almost_eq`, `to_float`, `to_int` and `as_tuple`.
- `patience.cards` – `Suit`, `Rank`, `Card` and `full_deck()`, which returns
  the 52 cards face up, hearts, diamonds, clubs, spades, each from ace to king.
- `patience.card_stack` – `CardStack`, a pile that can be spread or closed,
  split at a card or index, shuffled, reversed and animated to a position.
- `patience.animation` – `Animation`, an eased move toward a target that slows
  as it nears.
- `patience.board` – `Board` and `new_board(rng)`, which deals a game.
- `patience.render` – `load_assets(directory)`, `Assets`, and `draw_card`,
  `draw_stack` and `draw_board` for drawing on a pygame surface.
- `patience.app` – `SolitaireApp`, which runs the window, and `main()`, the
  `patience` command.