"""
Authoritative game state and phase transitions.
"""

import random
from collections import Counter
from enum import Enum
from typing import List, Optional, Dict, Any
from dataclasses import dataclass, field, InitVar

from .roles import RoleKind, Winner, RoleAssigner, get_role_distribution
from .player import Player
from .event_log import EventLog, Severity
from .exceptions import InvalidPlayerCount, InvalidTarget, InvariantViolation


class GamePhase(Enum):
    """Current game phase."""
    NIGHT = "night"
    DAY = "day"


@dataclass
class GameState:
    """Complete game state. Owned and mutated by a single WerewolfGame."""
    player_count: int = 8
    random_seed: Optional[int] = None  # Random seed for reproducible role assignment
    players: List[Player] = field(default_factory=list)

    phase: GamePhase = GamePhase.NIGHT
    round: int = 1
    ended: bool = False
    winner: Optional[Winner] = None

    # Turn pointer shared by night actions and day votes
    current_turn_index: int = 0
    pending_target: Optional[int] = None
    votes: Dict[int, int] = field(default_factory=dict)  # {voter_index: target_id}

    log: EventLog = field(default_factory=EventLog)

    # Fixed seating (tests, replays); random assignment when omitted
    roles: InitVar[Optional[List[RoleKind]]] = None

    def __post_init__(self, roles: Optional[List[RoleKind]]):
        """Initialize game state."""
        if not self.players:
            self.setup_game(roles)

    @classmethod
    def from_roles(cls, roles: List[RoleKind], log_view_size: int = 10) -> "GameState":
        """
        Build a game with a fixed seating instead of a random one.

        The roles must still match the standard distribution for their count.
        """
        return cls(player_count=len(roles), roles=roles, log=EventLog(view_size=log_view_size))

    def setup_game(self, roles: Optional[List[RoleKind]] = None) -> None:
        """Seat players, assign roles and reset every per-game field."""
        if roles is None:
            rng = random.Random(self.random_seed) if self.random_seed is not None else random.Random()
            roles = RoleAssigner(rng).assign(self.player_count)
        else:
            expected = get_role_distribution(len(roles))
            counts = Counter(roles)
            if any(counts.get(role, 0) != count for role, count in expected.items()):
                raise InvalidPlayerCount(
                    len(roles),
                    f"Role counts {dict((r.value, c) for r, c in counts.items())} do not match the distribution for {len(roles)} players",
                )
            self.player_count = len(roles)

        self.players = [Player(id=i, role=role) for i, role in enumerate(roles)]
        self.phase = GamePhase.NIGHT
        self.round = 1
        self.ended = False
        self.winner = None
        self.current_turn_index = 0
        self.pending_target = None
        self.votes = {}
        self.log.append(f"The game begins with {self.player_count} players!", Severity.INFO)

    def get_alive_players(self) -> List[Player]:
        """Get all alive players."""
        return [p for p in self.players if p.alive]

    def get_player(self, player_id: int) -> Optional[Player]:
        """Get player by id."""
        if isinstance(player_id, int) and 0 <= player_id < len(self.players):
            return self.players[player_id]
        return None

    def require_alive_target(self, target_id: Optional[int]) -> Player:
        """Resolve a target id to an alive player or raise InvalidTarget."""
        if target_id is None:
            raise InvalidTarget(target_id, "No target selected")
        player = self.get_player(target_id)
        if player is None:
            raise InvalidTarget(target_id, f"There is no player with id {target_id}")
        if not player.alive:
            raise InvalidTarget(target_id, f"Player #{player.number} is no longer alive")
        return player

    def get_werewolves(self) -> List[Player]:
        """Get all alive werewolves."""
        return [p for p in self.get_alive_players() if p.is_werewolf]

    def get_non_werewolves(self) -> List[Player]:
        """Get all alive players who are not werewolves."""
        return [p for p in self.get_alive_players() if not p.is_werewolf]

    @property
    def current_player(self) -> Optional[Player]:
        return self.get_player(self.current_turn_index)

    def start_night(self) -> None:
        """Transition to night phase. A night that follows a day opens a new round."""
        if self.phase == GamePhase.DAY:
            self.round += 1
        self.phase = GamePhase.NIGHT
        self.current_turn_index = 0
        self.pending_target = None

    def start_day(self) -> None:
        """Transition to day phase."""
        self.phase = GamePhase.DAY
        self.current_turn_index = 0
        self.pending_target = None

    def end_game(self, winner: Winner) -> None:
        """End the game with a winner."""
        self.ended = True
        self.winner = winner
        self.pending_target = None

    def check_invariants(self) -> None:
        """
        Verify the structural invariants of the state.

        Raises:
            InvariantViolation: If any invariant does not hold
        """
        for index, player in enumerate(self.players):
            if player.id != index:
                raise InvariantViolation(f"Player at position {index} has id {player.id}")
        if len(self.players) != self.player_count:
            raise InvariantViolation(
                f"Expected {self.player_count} players, found {len(self.players)}"
            )
        if self.round < 1:
            raise InvariantViolation(f"Round must be at least 1, got {self.round}")
        if (self.winner is not None) != self.ended:
            raise InvariantViolation("Winner must be set exactly when the game has ended")

    def get_game_summary(self) -> Dict[str, Any]:
        """Get a summary of the current game state."""
        return {
            "phase": self.phase.value,
            "round": self.round,
            "ended": self.ended,
            "winner": self.winner.value if self.winner else None,
            "alive_players": len(self.get_alive_players()),
            "alive_werewolves": len(self.get_werewolves()),
            "alive_villagers": len(self.get_non_werewolves()),
        }
