"""
Pytest fixtures for Werewolf game tests.
"""

import pytest
from typing import List

from werewolf.core import GameState, Judge, RoleKind, WinConditionEvaluator
from werewolf.phases import NightPhaseEngine, DayVoteEngine
from werewolf.config.game_config import GameConfig
from werewolf.game import WerewolfGame


W = RoleKind.WEREWOLF
V = RoleKind.VILLAGER
P = RoleKind.PROTECTOR
S = RoleKind.SEER

# 7 players: 3 werewolves, 1 protector, 1 seer, 2 villagers
SEVEN_PLAYER_ROLES: List[RoleKind] = [W, V, P, W, S, V, W]

# 5 players: 2 werewolves, 1 protector, 1 seer, 1 villager
FIVE_PLAYER_ROLES: List[RoleKind] = [V, W, S, W, P]


@pytest.fixture
def game_config():
    """Test game configuration."""
    return GameConfig(
        player_count=8,
        random_seed=42,
        use_narration=False  # Disable for cleaner test output
    )


@pytest.fixture
def game_state():
    """Create a fresh, seeded 8-player game state."""
    return GameState(player_count=8, random_seed=7)


@pytest.fixture
def seven_player_state():
    """Fixed seating: W V P W S V W."""
    return GameState.from_roles(SEVEN_PLAYER_ROLES)


@pytest.fixture
def five_player_state():
    """Fixed seating: V W S W P."""
    return GameState.from_roles(FIVE_PLAYER_ROLES)


@pytest.fixture
def judge(seven_player_state, game_config):
    """Create a judge for the seven-player game."""
    return Judge(seven_player_state, game_config)


@pytest.fixture
def night_engine(seven_player_state, judge):
    """Night engine for the seven-player game (night not started yet)."""
    return NightPhaseEngine(seven_player_state, judge)


@pytest.fixture
def vote_engine(seven_player_state, judge):
    """Day vote engine for the seven-player game, already in the day phase."""
    judge.start_day()
    return DayVoteEngine(seven_player_state, judge, WinConditionEvaluator(judge))


@pytest.fixture
def game(game_config):
    """Game controller with a running seeded game."""
    werewolf_game = WerewolfGame(game_config)
    werewolf_game.new_game()
    return werewolf_game


@pytest.fixture
def seven_player_game(game_config):
    """Game controller running the fixed seven-player seating."""
    werewolf_game = WerewolfGame(game_config)
    werewolf_game.load_state(GameState.from_roles(SEVEN_PLAYER_ROLES))
    return werewolf_game


def cast_votes(engine: DayVoteEngine, ballots):
    """Submit {voter: target} ballots in seat order; returns the last result."""
    result = None
    for voter in sorted(ballots):
        result = engine.submit_vote(voter, ballots[voter])
    return result
