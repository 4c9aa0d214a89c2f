"""Terminal front end: title screen, character selection and the game loop."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence
from typing import Optional

from idvmonopoly.cards import CardName
from idvmonopoly.engine import PLAYER_NAMES, Game, GameError
from idvmonopoly.identity import Identity, Job, identity_for_choice

Reader = Callable[[str], str]
Writer = Callable[[str], None]

_JOB_NAMES = {
    Job.NOVELIST: "小说家",
    Job.EXPLORER: "探险家",
    Job.ENTOMOLOGIST: "昆虫学者",
    Job.JOURNALIST: "记者",
}

_CARD_NAMES = {
    CardName.NONE: "-",
    CardName.DONT_MOVE: "封禁",
    CardName.DECLINE: "失常",
    CardName.STILL_ME: "还是我",
    CardName.POS_EXCHANGE: "换位",
    CardName.FLASH: "闪现",
}

_CHOICE_COUNT = 4

_HELP = (
    "命令：回车或 r 掷骰子；use <玩家> <卡槽> [目标玩家] 使用能力卡；q 退出"
)


def _choice_menu() -> str:
    entries = (
        f"{number}.{_JOB_NAMES[identity_for_choice(number - 1).role]}"
        for number in range(1, _CHOICE_COUNT + 1)
    )
    return "可选角色：" + " ".join(entries)


def choose_roles(read: Reader, write: Writer) -> list[Identity]:
    """Ask each of the three players to pick a character; return their identities."""
    write(_choice_menu())
    identities = []
    for name in PLAYER_NAMES:
        while True:
            answer = read(f"{name}请选择角色 (1-{_CHOICE_COUNT})：").strip()
            try:
                identity = identity_for_choice(int(answer) - 1)
            except ValueError:
                write(f"无效的选择：{answer}")
                continue
            identities.append(identity)
            write(f"{name}选择了{_JOB_NAMES[identity.role]}")
            break
    return identities


def render(game: Game) -> str:
    """A text picture of every player's progress, position and cards."""
    usable = game.usable_cards
    lines = []
    for index, (score_line, player) in enumerate(zip(game.score_lines(), game.players)):
        if player.is_final:
            where = f"最终阶段第{player.point2 + 1}格"
        else:
            where = f"外圈第{player.point + 1}格"
        cards = " ".join(
            _CARD_NAMES[card] + ("*" if (index, slot) in usable else "")
            for slot, card in enumerate(player.cards)
        )
        role = _JOB_NAMES[player.identity.role]
        lines.append(f"{score_line}（{role}） 位置：{where} 能力卡：[{cards}]")
    return "\n".join(lines)


def _parse_use(words: list[str]) -> tuple[int, int, Optional[int]]:
    if len(words) not in (2, 3):
        raise ValueError("用法：use <玩家> <卡槽> [目标玩家]")
    numbers = [int(word) - 1 for word in words]
    target = numbers[2] if len(numbers) == 3 else None
    return numbers[0], numbers[1], target


def run_game(game: Game, read: Reader, write: Writer) -> Optional[str]:
    """Play ``game`` from commands read one line at a time.

    Returns the winner's name, or None if the players quit or input ran out.
    """
    shown = 0

    def flush() -> None:
        nonlocal shown
        for text in game.notices[shown:]:
            write(text)
        shown = len(game.notices)
        write(render(game))

    write(_HELP)
    flush()
    while not game.is_over:
        try:
            line = read("> ")
        except EOFError:
            return None
        words = line.split()
        command = words[0].lower() if words else "r"
        try:
            if command in ("r", "roll"):
                game.take_turn()
            elif command == "use":
                player_index, slot, target = _parse_use(words[1:])
                game.use_card(player_index, slot, target)
            elif command in ("q", "quit"):
                return None
            else:
                write(_HELP)
                continue
        except (GameError, ValueError) as exc:
            write(str(exc))
            continue
        flush()
    return game.winner


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start a game in the terminal."""
    parser = argparse.ArgumentParser(prog="idvmonopoly", description="三人庄园大富翁")
    parser.add_argument("--seed", type=int, default=None, help="随机数种子")
    args = parser.parse_args(argv)

    try:
        input("按回车键进入游戏")
        identities = choose_roles(input, print)
    except (EOFError, KeyboardInterrupt):
        return 1
    game = Game(identities, random.Random(args.seed))
    try:
        run_game(game, input, print)
    except KeyboardInterrupt:
        return 1
    return 0