"""
Integration tests for full game flow.
"""

import pytest
from werewolf.core import Severity, Winner
from werewolf.game import WerewolfGame

from main import main, run_auto_game


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_auto_game_reaches_a_winner(game_config, seed):
    """Dummy agents play until one side wins; alive counts only ever shrink."""
    game_config.random_seed = seed
    game = WerewolfGame(game_config)
    alive_history = []
    game.event_emitter.register_listener(
        lambda event_type, data: alive_history.append(data["game_state"]["alive_players"])
        if event_type == "state_changed" else None
    )

    winner = run_auto_game(game)
    state = game.game_state

    assert winner is not None
    assert state.ended
    assert state.winner == winner
    assert alive_history == sorted(alive_history, reverse=True)
    state.check_invariants()

    werewolves = len(state.get_werewolves())
    others = len(state.get_non_werewolves())
    if winner == Winner.VILLAGERS:
        assert werewolves == 0
    else:
        assert werewolves >= others


def test_auto_game_is_reproducible(game_config):
    game_config.random_seed = 11
    first = WerewolfGame(game_config)
    run_auto_game(first, 10)

    second = WerewolfGame(game_config)
    run_auto_game(second, 10)

    assert [e.text for e in first.game_state.log] == [e.text for e in second.game_state.log]


def test_every_round_logs_a_night_and_a_day(game_config):
    game = WerewolfGame(game_config)
    run_auto_game(game, 5)
    texts = [e.text for e in game.game_state.log]

    for round_number in range(1, game.game_state.round + 1):
        assert any(t.startswith(f"🌙 Night {round_number} ") for t in texts)
        assert any(t.startswith(f"☀️ Day {round_number} ") for t in texts)


def test_eliminations_are_logged_as_deaths(game_config):
    game = WerewolfGame(game_config)
    run_auto_game(game)
    state = game.game_state

    deaths = [e for e in state.log if e.severity == Severity.DEATH]
    dead = [p for p in state.players if not p.alive]
    assert len(deaths) == len(dead)
    for player in dead:
        assert any(f"Player #{player.number} ({player.role.display_name})" in e.text for e in deaths)


def test_max_rounds_stops_auto_game(game_config):
    game_config.max_rounds = 0

    assert run_auto_game(WerewolfGame(game_config)) is None


def test_main_auto(capsys):
    exit_code = main(["--auto", "--seed", "3", "--players", "6"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "WIN" in output
    assert "Rounds played:" in output


def test_main_rejects_bad_player_count(capsys):
    assert main(["--players", "4"]) == 2
    assert "between 5 and 20" in capsys.readouterr().err


def test_main_with_yaml_config(tmp_path, capsys):
    path = tmp_path / "party.yaml"
    path.write_text("player_count: 7\nrandom_seed: 8\nuse_narration: false\n")

    assert main(["--auto", "--config", str(path)]) == 0
    assert "Werewolf: 3" in capsys.readouterr().out


@pytest.mark.parametrize("yaml_value", ["'8'", "8.0", "7.5"])
def test_main_rejects_non_integer_config_count(tmp_path, capsys, yaml_value):
    path = tmp_path / "party.yaml"
    path.write_text(f"player_count: {yaml_value}\nuse_narration: false\n")

    assert main(["--auto", "--config", str(path)]) == 2
    assert "whole number" in capsys.readouterr().err
