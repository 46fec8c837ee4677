"""
Exceptions for game rule violations.
"""

from typing import Optional


class WerewolfError(Exception):
    """Base class for recoverable game errors."""

    kind = "werewolf_error"

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(self.message)


class InvalidPlayerCount(WerewolfError):
    """Raised when the player count is outside the supported range."""

    kind = "invalid_player_count"

    def __init__(self, player_count: int, message: str = ""):
        self.player_count = player_count
        super().__init__(message or f"Player count must be between 5 and 20, got {player_count}")


class InvalidVoter(WerewolfError):
    """Raised when a ballot comes from a dead, out-of-turn or already-voted player."""

    kind = "invalid_voter"

    def __init__(self, voter_index: int, message: str = ""):
        self.voter_index = voter_index
        super().__init__(message or f"Player index {voter_index} cannot vote now")


class InvalidTarget(WerewolfError):
    """Raised when a selected target does not exist or is not alive."""

    kind = "invalid_target"

    def __init__(self, target_id: Optional[int], message: str = ""):
        self.target_id = target_id
        super().__init__(message or f"Player id {target_id} is not a valid target")


class InvalidAction(WerewolfError):
    """Raised when a night action is submitted out of turn or by the wrong role."""

    kind = "invalid_action"

    def __init__(self, actor_index: Optional[int], message: str = ""):
        self.actor_index = actor_index
        super().__init__(message or f"Player index {actor_index} cannot act now")


class InvariantViolation(WerewolfError):
    """Raised when the game state breaks one of its structural invariants."""

    kind = "invariant_violation"
