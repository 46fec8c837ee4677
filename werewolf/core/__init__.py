"""
Core game engine components: game state, players, roles, and rule enforcement.
"""

from .exceptions import (
    WerewolfError,
    InvalidPlayerCount,
    InvalidVoter,
    InvalidTarget,
    InvalidAction,
    InvariantViolation,
)
from .roles import (
    RoleKind,
    RoleInfo,
    Winner,
    RoleAssigner,
    ROLE_CONFIG,
    MIN_PLAYERS,
    MAX_PLAYERS,
    get_role_distribution,
)
from .player import Player
from .event_log import EventLog, LogEntry, Severity
from .game_engine import GameState, GamePhase
from .judge import Judge
from .win_condition import WinConditionEvaluator

__all__ = [
    'WerewolfError',
    'InvalidPlayerCount',
    'InvalidVoter',
    'InvalidTarget',
    'InvalidAction',
    'InvariantViolation',
    'RoleKind',
    'RoleInfo',
    'Winner',
    'RoleAssigner',
    'ROLE_CONFIG',
    'MIN_PLAYERS',
    'MAX_PLAYERS',
    'get_role_distribution',
    'Player',
    'EventLog',
    'LogEntry',
    'Severity',
    'GameState',
    'GamePhase',
    'Judge',
    'WinConditionEvaluator',
]
