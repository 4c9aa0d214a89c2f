"""Game rules: rolling, moving around both tracks, scoring and ability cards."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Optional, Protocol

from idvmonopoly.board import Board, CellProperty
from idvmonopoly.cards import CardName
from idvmonopoly.identity import Identity
from idvmonopoly.player import Player
from idvmonopoly.state import PLAYER_COUNT, GameState, Turn

PLAYER_NAMES = ("玩家一", "玩家二", "玩家三")
START_POINTS = (19, 5, 12)
FINAL_THRESHOLD = 100
DECLINE_AMOUNT = 15
DOOR_INDEX = 10
DICE_MIN = 1
DICE_MAX = 4

_STATUS_NOTICES = {
    Turn.A: "玩家三可使用技能！玩家一可掷骰子！",
    Turn.B: "玩家一可使用技能！玩家二可掷骰子！",
    Turn.C: "玩家二可使用技能！玩家三可掷骰子！",
}


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...

    def randrange(self, start: int, stop: int = ..., step: int = ...) -> int: ...


class GameError(Exception):
    """Raised when a move is not allowed in the current state of the game."""


class Game:
    """A three-player game: the shared state, the board and the rules that change them."""

    def __init__(
        self, identities: Sequence[Identity], rng: Optional[RandomSource] = None
    ) -> None:
        self.state = GameState(identities)
        self.board = Board()
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.notices: list[str] = []
        self.winner: Optional[str] = None
        self._usable: set[tuple[int, int]] = set()
        for player, start in zip(self.state.players, START_POINTS):
            player.point = start
        self._say("请玩家一掷骰子！")

    @property
    def players(self) -> list[Player]:
        return self.state.players

    @property
    def notice(self) -> str:
        """The message most recently shown to the players."""
        return self.notices[-1]

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    @property
    def usable_cards(self) -> frozenset[tuple[int, int]]:
        """The (player, slot) pairs whose cards may be played right now."""
        return frozenset(self._usable)

    def roll_dice(self) -> int:
        """A die roll from 1 to 4."""
        return self.rng.randint(DICE_MIN, DICE_MAX)

    def take_turn(self, steps: Optional[int] = None) -> int:
        """Play the current player's turn, rolling the die unless ``steps`` is given.

        Returns the number of steps rolled.
        """
        if self.is_over:
            raise GameError("the game is already over")
        if steps is None:
            steps = self.roll_dice()
        elif not DICE_MIN <= steps <= DICE_MAX:
            raise ValueError(f"a roll must be between {DICE_MIN} and {DICE_MAX}")

        state = self.state
        turn = state.turn
        index = int(turn)
        player = state.players[index]
        name = PLAYER_NAMES[index]
        following = turn.next()

        if turn is Turn.A:
            state.round += 1

        if player.blocked:
            player.blocked = False
            if turn is Turn.A:
                self._say(f"{name}该回合被剥夺行动资格！")
                self._say(f"请{PLAYER_NAMES[following]}掷骰子！")
            else:
                self._say(
                    f"{name}该回合被剥夺行动资格！请{PLAYER_NAMES[following]}掷骰子！"
                )
            state.turn = following
            return steps

        if not player.is_final:
            self._disable_cards(int(following.next()))
            self._say(f"{name}掷出了{steps}")
            self.forward(player, steps)
            cell = self.board.cell(player.point)
            player.score += cell.num
            if state.round % 2 == 0:
                self.grant_card(player)
            if cell.property is CellProperty.CARD:
                self.grant_card(player)
            state.turn = following
            self._update_status()
        else:
            self._say(f"{name}掷出了{steps}")
            self.forward_final(player, steps)
            if state.round % 2 == 0:
                self.grant_card(player)
            state.turn = following
            self._update_status(name if player.point2 >= DOOR_INDEX else None)

        self._enable_cards(index)
        return steps

    def forward(self, player: Player, steps: int) -> list[int]:
        """Walk ``player`` along the outer ring; return the indexes passed through.

        Reaching a start cell with enough score moves the player onto the final
        track and ends the walk there.
        """
        path = []
        for _ in range(steps):
            player.point = self.board.next_index(player.point)
            path.append(player.point)
            cell = self.board.cell(player.point)
            if cell.property is CellProperty.START and player.score >= FINAL_THRESHOLD:
                player.is_final = True
                player.point2 = 0
                break
        return path

    def forward_final(self, player: Player, steps: int) -> list[int]:
        """Walk ``player`` along the final track; return the indexes passed through."""
        path = []
        for _ in range(steps):
            player.point2 += 1
            path.append(player.point2)
            if player.point2 >= DOOR_INDEX:
                break
        return path

    def grant_card(self, player: Player) -> CardName:
        """Give ``player`` a random ability card and return it."""
        card = CardName(self.rng.randint(int(CardName.DONT_MOVE), int(CardName.FLASH)))
        player.add_card(card)
        self._say(f"玩家{self._index_of(player) + 1}获得了能力卡！")
        return card

    def use_card(
        self, player_index: int, slot: int, target: Optional[int] = None
    ) -> CardName:
        """Play the card in ``slot`` of player ``player_index``; return the card played."""
        if (player_index, slot) not in self._usable:
            raise GameError(f"player {player_index + 1} cannot play slot {slot} now")
        player = self.players[player_index]
        card = player.cards[slot]

        if card.needs_target():
            self._check_target(player_index, target)
            player.discard(slot)
            self._usable.discard((player_index, slot))
            self.apply_skill(player_index, target, card)
            return card

        if card is CardName.STILL_ME:
            self.state.turn = Turn(player_index)
            self._say(f"玩家{player_index + 1}获得额外回合！")
            if player_index == 0:
                self.state.round -= 1
            player.discard(slot)
            self._disable_cards(player_index)
            return card

        if card is CardName.FLASH:
            position = self.rng.randrange(0, len(self.board.cells))
            player.point = position
            self.trigger_cell_effect(position, player_index)
            self._say(f"玩家{player_index + 1}闪现了")

        player.cards[slot] = CardName.NONE
        self._usable.discard((player_index, slot))
        self._update_status()
        return card

    def apply_skill(self, user: int, target: int, card: CardName) -> None:
        """Apply a targeted card played by ``user`` against ``target``."""
        self._check_target(user, target)
        card = CardName(card)
        self.state.current_skill_user = user
        self.state.current_skill_type = card
        players = self.players
        victim = players[target]
        caster = players[user]

        if card is CardName.DONT_MOVE:
            victim.blocked = True
            self._say(f"玩家{user + 1}禁止了玩家{target + 1}下一回合移动！")
        elif card is CardName.DECLINE:
            victim.lower_score(DECLINE_AMOUNT)
            self._say(f"玩家{user + 1}降低了玩家{target + 1}的破译进度！")
        elif card is CardName.POS_EXCHANGE:
            if not caster.is_final and not victim.is_final:
                caster.point, victim.point = victim.point, caster.point
                self._say(f"玩家{user + 1}与玩家{target + 1}交换了位置！")
            elif caster.is_final and victim.is_final:
                caster.point2, victim.point2 = victim.point2, caster.point2
                self._say(f"玩家{user + 1}与玩家{target + 1}交换了位置！")
            else:
                self._say("处于不同阶段的玩家不可交换位置！")
        self._update_status()

    def trigger_cell_effect(self, cell_index: int, player_index: int) -> None:
        """Apply what landing on outer-ring cell ``cell_index`` does to a player."""
        cell = self.board.cell(cell_index)
        player = self.players[player_index]
        if cell.property is CellProperty.NORMAL:
            player.score += cell.num
        elif cell.property is CellProperty.CARD:
            self.grant_card(player)
        elif cell.property is CellProperty.START:
            if player.score >= FINAL_THRESHOLD and not player.is_final:
                player.is_final = True
                self._say(f"玩家{player_index + 1}进入最终阶段！")

    def status_notice(self) -> str:
        """Who may play a card and who rolls next."""
        return _STATUS_NOTICES[self.state.turn]

    def score_lines(self) -> list[str]:
        """One progress line per player."""
        return [
            f"{name}破译进度：{player.score}"
            for name, player in zip(PLAYER_NAMES, self.players)
        ]

    def _say(self, text: str) -> None:
        self.notices.append(text)

    def _update_status(self, winner: Optional[str] = None) -> None:
        if winner is not None:
            self.winner = winner
            self._say(f"游戏结束！{winner}获胜！")
            return
        self._say(self.status_notice())

    def _index_of(self, player: Player) -> int:
        for index, candidate in enumerate(self.players):
            if candidate is player:
                return index
        raise GameError("player is not part of this game")

    def _check_target(self, user: int, target: Optional[int]) -> None:
        if target is None:
            raise GameError("this card needs a target player")
        if not 0 <= target < PLAYER_COUNT:
            raise GameError(f"no player {target + 1}")
        if target == user:
            raise GameError("a player cannot target themselves")

    def _enable_cards(self, player_index: int) -> None:
        self._usable.update(
            (player_index, slot) for slot in self.players[player_index].usable_slots()
        )

    def _disable_cards(self, player_index: int) -> None:
        self._usable = {pair for pair in self._usable if pair[0] != player_index}