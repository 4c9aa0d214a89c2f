# idvmonopoly

A hot-seat board game for three players, played in the terminal. All
text the game shows is in Simplified Chinese.

## Rules

Each player picks a character: novelist, entomologist, journalist or
explorer. The players start on different cells of a 21-cell ring and
take turns rolling a die (1 to 4).

- Stopping on a numbered cell adds its number to that player's
  decoding progress.
- Stopping on a card cell gives the player an ability card, and so
  does every roll made in an even round.
- A player holds at most four cards. A new card goes into the first
  empty slot. If all slots are full, it replaces the card in the last
  slot.
- A player whose progress is 100 or more and who walks onto a start
  cell leaves the ring for the 10-cell final track. Rolls on the final
  track add no progress and give cards only in even rounds.
- The first player to walk past the door at the end of the final
  track wins.

## Ability cards

After your roll, you may play your cards until the next player rolls.

| Card | Effect |
|------|--------|
| DontMove (封禁) | The chosen player loses their next turn. |
| Decline (失常) | The chosen player loses 15 decoding progress, down to no less than 0. |
| StillMe (还是我) | You take the next turn. |
| PosExchange (换位) | You swap places with the chosen player. Both players must be on the same track. If they are not, the card is spent and nothing happens. |
| Flash (闪现) | You jump to a random cell of the ring and that cell takes effect. |

## Installing

```
pip install .
```

## Playing

```
idvmonopoly
idvmonopoly --seed 42
```

`--seed` fixes the random numbers, so the same choices replay the same
game. Press Enter at the title prompt. Then each player picks a
character by number. After every move the game prints its messages and
one line per player. Each line shows the player's progress, their
position and their four card slots. A `*` marks a card that can be
played now.

Commands:

- Enter, `r` or `roll`: roll the die for the player whose turn it is.
- `use <player> <slot> [target]`: play a card. All three are numbers
  from 1. DontMove, Decline and PosExchange need a target player.
- `q` or `quit`: leave the game.

## Using it as a library

The rules live in `idvmonopoly.engine.Game`, which does no terminal
input or output:

```python
import random

from idvmonopoly.engine import Game
from idvmonopoly.identity import identity_for_choice

identities = [identity_for_choice(i) for i in (0, 1, 2)]
game = Game(identities, random.Random(7))
game.take_turn()            # or game.take_turn(3) to move a given roll
print(game.notice)          # the latest message
for line in game.score_lines():
    print(line)
print(sorted(game.usable_cards))  # (player, slot) pairs playable now
```

- `Game.use_card(player_index, slot, target)` plays a card. Indexes
  start at 0.
- `GameError` is raised for a move that is not allowed. Examples are
  playing a card that is not available, giving no target or a wrong
  one, or rolling after the game has ended.
- `game.winner` holds the winner's name once the game is over.
- `game.notices` lists every message so far.

The other modules are:

- `idvmonopoly.board`: the two tracks.
- `idvmonopoly.cards`: the card kinds.
- `idvmonopoly.identity`: the characters.
- `idvmonopoly.player`: the per-player state.
- `idvmonopoly.state`: turn and round tracking.
- `idvmonopoly.cli`: the terminal front end, `choose_roles`, `render`,
  `run_game` and `main`.

## What it does not do

The game is text only. It draws no board, plays no music or sound and
shows no dice animation. Cells, cards and characters still carry image
resource paths. Examples are `card_icon_path` and
`Identity.walk_frame_paths`. No images ship with the package, and
nothing in it displays them.

## Running the tests

```
pip install .[test]
pytest
```