# architects

A dots-and-boxes game for the terminal. Players take turns drawing the
edges of a square grid of dots; whoever draws the fourth side of a cell takes
that cell and moves again. When every cell is taken, the player holding more
cells wins.

You can play against the computer at three strengths, or against another
person at the same keyboard. Registered players have their wins, losses and
draws kept in a local JSON file.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Commands

The `architects` command has three subcommands. Messages and prompts are in
Chinese.

```
architects register NAME     # create an account (asks for a password)
architects account NAME      # log in and show the account's tally
architects play [options]    # play a game
```

`--user-file PATH`, given before the subcommand, chooses the account file
(`userinfo.json` in the current directory by default). Passwords are stored
as SHA-256 hashes.

Options of `play`:

- `--mode` — one of `simple`, `medium`, `hard`, `expert`, `two-players`
  (default `simple`). `expert` is the hard computer on a 5 × 5 board;
  the other modes default to 7 × 7.
- `--size N` — dots per side, from 5 to 20.
- `--computer-first` — let the computer open (ignored for `two-players`).
- `--user NAME` — log in first; the result is then added to that account.
- `--seed N` — seed the computer's random choices.

## Playing

The board is printed as text. Dots are `+`; a taken cell shows `B` (blue) or
`O` (orange). The most recent move is drawn with `b` or `o`, older edges with
`-` and `|`.

Enter a move as `row column` (or `row,column`) in the edge grid: even rows
hold the horizontal edges, odd rows the vertical ones, counting from 0.
Enter `q` to leave the game.

Blue always moves first. Against the computer you play orange when the
computer opens and blue otherwise. In two-player games the turn passes only
when a move closes no cell.

## Computer strength

- **simple** tries ten random edges and falls back to the first free one.
- **medium** first completes any cell that has a single free side left.
- **hard** also avoids drawing a cell's third side, so it does not hand cells
  to its opponent, when it can.

## Using it as a library

The rules live in `architects.game`:

```python
import random

from architects.board import Color, Difficulty, InitialState
from architects.game import Game

game = Game(5, 5, InitialState.HUMAN, Difficulty.HARD, random.Random(1))
game.select_edge(0, 0, Color.BLUE)
reply = game.ai_move(Difficulty.HARD)
game.select_edge(reply.x, reply.y, Color.ORANGE)
print(game.count_player_cells(Color.BLUE), game.is_over(), game.outcome())
```

- `architects.session.GameSession` adds turn handling, computer replies,
  mapping of pixel clicks to edges (`edge_at`, `click`) and end-of-game
  settlement (`settle`, `situation`, `message`).
- `architects.users.UserStore` registers accounts, logs in and stores
  results; `UserInformation` holds a player's tally.
- `architects.crop.CropSelection` models a square selection over a picture
  that can be dragged and resized; `make_avatar` turns a picture into a
  round 128 × 128 image with a transparent outside, and `save_avatar` writes
  it as `<uid>.png`.

## What it does not do

There is no graphical window: the game is played only through the terminal
command. Avatars can be made only from Python with `architects.crop`; the
command neither asks for a picture nor shows avatars.