"""
Role definitions and role assignment for the Werewolf game.
"""

import math
import random
from enum import Enum
from typing import List, Dict, Optional
from dataclasses import dataclass

from .exceptions import InvalidPlayerCount


MIN_PLAYERS = 5
MAX_PLAYERS = 20


class Winner(Enum):
    """Winning side."""
    WEREWOLVES = "werewolves"
    VILLAGERS = "villagers"


class RoleKind(Enum):
    """Player role types."""
    WEREWOLF = "werewolf"
    VILLAGER = "villager"
    PROTECTOR = "protector"
    SEER = "seer"

    @property
    def info(self) -> "RoleInfo":
        return ROLE_CONFIG[self]

    @property
    def icon(self) -> str:
        return ROLE_CONFIG[self].icon

    @property
    def display_name(self) -> str:
        return ROLE_CONFIG[self].name

    @property
    def is_werewolf(self) -> bool:
        """Check if role belongs to the werewolf side."""
        return self == RoleKind.WEREWOLF

    @property
    def has_night_action(self) -> bool:
        """Check if role is prompted during the night."""
        return self in [RoleKind.WEREWOLF, RoleKind.PROTECTOR, RoleKind.SEER]


@dataclass(frozen=True)
class RoleInfo:
    """Display metadata for a role."""
    icon: str
    name: str
    description: str


ROLE_CONFIG: Dict[RoleKind, RoleInfo] = {
    RoleKind.WEREWOLF: RoleInfo(
        icon="🐺",
        name="Werewolf",
        description="At night, choose one villager to hunt. During the day, keep your identity secret.",
    ),
    RoleKind.VILLAGER: RoleInfo(
        icon="👨‍🌾",
        name="Villager",
        description="During the day, vote to eliminate the werewolves. At night you have no action.",
    ),
    RoleKind.PROTECTOR: RoleInfo(
        icon="🛡️",
        name="Protector",
        description="Each night, choose one player to guard.",
    ),
    RoleKind.SEER: RoleInfo(
        icon="🔮",
        name="Seer",
        description="Each night, choose one player to check. You learn whether they are a werewolf.",
    ),
}


def get_role_distribution(player_count: int) -> Dict[RoleKind, int]:
    """
    Get the role counts for a game of the given size.

    Werewolves are ceil(N/3); there is always one protector and one seer,
    and the rest are villagers.

    Raises:
        InvalidPlayerCount: If the count is not an int, is outside [5, 20],
            or leaves no room for villagers
    """
    if not isinstance(player_count, int) or isinstance(player_count, bool):
        raise InvalidPlayerCount(
            player_count,
            f"Player count must be a whole number between {MIN_PLAYERS} and {MAX_PLAYERS}, got {player_count!r}",
        )
    if player_count < MIN_PLAYERS or player_count > MAX_PLAYERS:
        raise InvalidPlayerCount(player_count)

    werewolves = math.ceil(player_count / 3)
    protectors = 1
    seers = 1
    villagers = player_count - werewolves - protectors - seers
    if villagers < 0:
        raise InvalidPlayerCount(
            player_count,
            f"{player_count} players leaves a negative villager count ({villagers})",
        )

    return {
        RoleKind.WEREWOLF: werewolves,
        RoleKind.PROTECTOR: protectors,
        RoleKind.SEER: seers,
        RoleKind.VILLAGER: villagers,
    }


class RoleAssigner:
    """Builds a shuffled role sequence for a new game."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def assign(self, player_count: int) -> List[RoleKind]:
        """
        Produce one role per player, uniformly permuted.

        Args:
            player_count: Number of players (5-20)

        Returns:
            List of roles where index i is the role of player i
        """
        distribution = get_role_distribution(player_count)
        roles: List[RoleKind] = []
        for role, count in distribution.items():
            roles.extend([role] * count)

        return self.shuffle(roles)

    def shuffle(self, roles: List[RoleKind]) -> List[RoleKind]:
        """Fisher-Yates shuffle, returns a new list."""
        shuffled = list(roles)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self.rng.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled
