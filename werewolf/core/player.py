"""
Player class representing a seat at the shared screen.
"""

from dataclasses import dataclass
from typing import Dict, Any

from .roles import RoleKind


@dataclass
class Player:
    """Represents a player in the game."""
    id: int  # Stable 0-based index into GameState.players
    role: RoleKind
    alive: bool = True
    revealed: bool = False
    suspicion: int = 0  # Tracked but not used by any rule yet

    def __str__(self) -> str:
        return f"Player #{self.number} ({self.role.value})"

    @property
    def number(self) -> int:
        """1-based number shown to players."""
        return self.id + 1

    @property
    def is_werewolf(self) -> bool:
        return self.role.is_werewolf

    def eliminate(self) -> None:
        """Mark player as eliminated. There is no way back."""
        self.alive = False

    def reveal(self) -> None:
        """Make the player's role visible to everyone."""
        self.revealed = True

    def to_dict(self, show_role: bool = False) -> Dict[str, Any]:
        """Serialise for presentation; the role is hidden unless asked for."""
        visible = show_role or self.revealed
        return {
            "id": self.id,
            "number": self.number,
            "alive": self.alive,
            "revealed": self.revealed,
            "role": self.role.value if visible else None,
            "icon": self.role.icon if visible else None,
        }
