"""
Tests for game state and invariants.
"""

import pytest
from collections import Counter

from werewolf.core import (
    GameState, GamePhase, RoleKind, Winner, Severity,
    InvalidPlayerCount, InvalidTarget, InvariantViolation, get_role_distribution,
)

from conftest import SEVEN_PLAYER_ROLES


def test_game_setup(game_state):
    """Test that game initializes correctly."""
    assert len(game_state.players) == 8
    assert game_state.phase == GamePhase.NIGHT
    assert game_state.round == 1
    assert not game_state.ended
    assert game_state.winner is None
    assert game_state.current_turn_index == 0
    assert game_state.pending_target is None
    assert game_state.votes == {}
    assert game_state.log.entries[0].text == "The game begins with 8 players!"


def test_player_ids_match_positions(game_state):
    for index, player in enumerate(game_state.players):
        assert player.id == index
        assert player.number == index + 1
        assert player.alive
        assert not player.revealed
        assert player.suspicion == 0


def test_role_distribution(game_state):
    """Test that roles are distributed correctly."""
    counts = Counter(p.role for p in game_state.players)
    assert counts == Counter(get_role_distribution(8))
    assert len(game_state.get_werewolves()) == 3
    assert len(game_state.get_non_werewolves()) == 5


def test_seeded_state_is_reproducible():
    first = GameState(player_count=10, random_seed=5)
    second = GameState(player_count=10, random_seed=5)
    assert [p.role for p in first.players] == [p.role for p in second.players]


def test_invalid_player_count():
    with pytest.raises(InvalidPlayerCount):
        GameState(player_count=4)
    with pytest.raises(InvalidPlayerCount):
        GameState(player_count=21)


def test_from_roles_keeps_seating(seven_player_state):
    assert [p.role for p in seven_player_state.players] == SEVEN_PLAYER_ROLES
    assert seven_player_state.player_count == 7


def test_from_roles_rejects_wrong_distribution():
    roles = [RoleKind.WEREWOLF] * 2 + [RoleKind.VILLAGER] * 5
    with pytest.raises(InvalidPlayerCount):
        GameState.from_roles(roles)


def test_phase_transitions(seven_player_state):
    """Rounds only advance on a night that follows a day."""
    state = seven_player_state

    state.start_night()
    assert state.phase == GamePhase.NIGHT
    assert state.round == 1

    state.start_day()
    assert state.phase == GamePhase.DAY
    assert state.round == 1

    state.start_night()
    assert state.phase == GamePhase.NIGHT
    assert state.round == 2
    assert state.current_turn_index == 0


def test_require_alive_target(seven_player_state):
    state = seven_player_state
    assert state.require_alive_target(3) is state.players[3]

    state.players[3].eliminate()
    with pytest.raises(InvalidTarget):
        state.require_alive_target(3)
    with pytest.raises(InvalidTarget):
        state.require_alive_target(7)
    with pytest.raises(InvalidTarget):
        state.require_alive_target(None)


def test_eliminate_is_permanent(seven_player_state):
    player = seven_player_state.players[1]
    player.eliminate()
    player.eliminate()
    assert not player.alive
    assert player not in seven_player_state.get_alive_players()


def test_check_invariants(seven_player_state):
    seven_player_state.check_invariants()

    seven_player_state.ended = True
    with pytest.raises(InvariantViolation):
        seven_player_state.check_invariants()

    seven_player_state.end_game(Winner.VILLAGERS)
    seven_player_state.check_invariants()


def test_check_invariants_detects_bad_ids(seven_player_state):
    seven_player_state.players[2].id = 5
    with pytest.raises(InvariantViolation):
        seven_player_state.check_invariants()


def test_player_to_dict_hides_role(seven_player_state):
    player = seven_player_state.players[0]
    assert player.to_dict()["role"] is None
    assert player.to_dict(show_role=True)["role"] == "werewolf"

    player.reveal()
    data = player.to_dict()
    assert data["role"] == "werewolf"
    assert data["icon"] == "🐺"


def test_game_summary(seven_player_state):
    seven_player_state.players[0].eliminate()
    summary = seven_player_state.get_game_summary()
    assert summary == {
        "phase": "night",
        "round": 1,
        "ended": False,
        "winner": None,
        "alive_players": 6,
        "alive_werewolves": 2,
        "alive_villagers": 4,
    }


def test_setup_logs_game_start(seven_player_state):
    entry = seven_player_state.log.entries[0]
    assert entry.severity == Severity.INFO
    assert "7 players" in entry.text
