import pytest

from idvmonopoly.cards import CardName
from idvmonopoly.cli import choose_roles, main, render, run_game
from idvmonopoly.engine import Game
from idvmonopoly.identity import Job, identity_for_choice


class LowRandom:
    """Always picks the smallest allowed value."""

    def randint(self, a, b):
        return a

    def randrange(self, start, stop=None, step=1):
        return start


def scripted(lines):
    it = iter(lines)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read, prompts


def make_game():
    identities = [identity_for_choice(i) for i in range(3)]
    return Game(identities, LowRandom())


def test_choose_roles_maps_choices_to_jobs():
    read, prompts = scripted(["1", "2", "4"])
    out = []
    identities = choose_roles(read, out.append)
    assert [i.role for i in identities] == [Job.NOVELIST, Job.ENTOMOLOGIST, Job.EXPLORER]
    assert len(prompts) == 3


def test_choose_roles_retries_invalid_input():
    read, prompts = scripted(["9", "abc", "3", "1", "1"])
    out = []
    identities = choose_roles(read, out.append)
    assert identities[0].role is Job.JOURNALIST
    assert len(prompts) == 5
    assert sum(line.startswith("无效的选择") for line in out) == 2


def test_choose_roles_propagates_eof():
    read, _ = scripted(["1"])
    with pytest.raises(EOFError):
        choose_roles(read, lambda text: None)


def test_render_lists_each_player():
    game = make_game()
    lines = render(game).splitlines()
    assert len(lines) == 3
    for line, score_line in zip(lines, game.score_lines()):
        assert line.startswith(score_line)


def test_render_marks_final_phase():
    game = make_game()
    game.players[1].is_final = True
    text = render(game).splitlines()[1]
    assert "最终阶段" in text


def test_run_game_quit_returns_none():
    game = make_game()
    read, _ = scripted(["q"])
    assert run_game(game, read, lambda text: None) is None
    assert game.state.round == 0


def test_run_game_roll_moves_player():
    game = make_game()
    start = game.players[0].point
    read, _ = scripted(["r", "q"])
    out = []
    run_game(game, read, out.append)
    player = game.players[0]
    assert player.point == game.board.next_index(start)
    assert player.score == game.board.cell(player.point).num
    assert game.state.round == 1


def test_run_game_reports_unusable_card():
    game = make_game()
    read, _ = scripted(["use 1 1 2", "q"])
    out = []
    run_game(game, read, out.append)
    assert game.players[1].score == 0
    assert any("cannot play" in line for line in out)


def test_run_game_reports_bad_use_syntax():
    game = make_game()
    read, _ = scripted(["use 1", "q"])
    out = []
    result = run_game(game, read, out.append)
    assert result is None
    assert game.state.round == 0
    assert any(line.startswith("用法") for line in out)


def test_run_game_plays_card():
    game = make_game()
    game.players[0].cards[0] = CardName.DECLINE
    game.players[1].score = 20
    game._usable.add((0, 0))
    read, _ = scripted(["use 1 1 2", "q"])
    run_game(game, read, lambda text: None)
    assert game.players[1].score == 20 - 15
    assert game.players[0].cards[0] is CardName.NONE


def test_run_game_returns_winner():
    game = make_game()
    player = game.players[0]
    player.is_final = True
    player.point2 = 9
    read, _ = scripted(["r"])
    out = []
    winner = run_game(game, read, out.append)
    assert winner == "玩家一"
    assert game.is_over
    assert "游戏结束！玩家一获胜！" in out


def test_run_game_ends_on_eof():
    game = make_game()
    read, _ = scripted([])
    assert run_game(game, read, lambda text: None) is None


def test_main_plays_and_quits(monkeypatch, capsys):
    answers = iter(["", "1", "2", "3", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--seed", "1"]) == 0
    assert "玩家一破译进度：0" in capsys.readouterr().out


def test_main_returns_error_on_eof(monkeypatch):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main([]) == 1