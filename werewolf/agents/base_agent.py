"""
Interface for seats played by code instead of a person at the screen.
"""

from typing import List, Optional
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..core import Player, GameState, GamePhase
from ..config.game_config import GameConfig, default_config


@dataclass
class AgentContext:
    """What an agent may look at when it is prompted."""
    player: Player
    game_state: GameState
    current_phase: GamePhase
    options: List[int]  # Target ids offered by the prompt


class BaseAgent(ABC):
    """
    A player that answers prompts on its own.

    Subclasses pick night targets and ballots; ``decide`` routes a prompt to
    the right one for the current phase.
    """

    def __init__(self, player: Player, config: GameConfig = default_config):
        self.player = player
        self.config = config

    @abstractmethod
    def choose_night_target(self, context: AgentContext) -> Optional[int]:
        """Target id for this seat's night action, or None to skip."""

    @abstractmethod
    def choose_vote(self, context: AgentContext) -> int:
        """Target id to vote against; must be one of context.options."""

    def decide(self, context: AgentContext) -> Optional[int]:
        if context.current_phase == GamePhase.NIGHT:
            return self.choose_night_target(context)
        return self.choose_vote(context)

    def build_context(self, game_state: GameState, options: List[int]) -> AgentContext:
        return AgentContext(
            player=self.player,
            game_state=game_state,
            current_phase=game_state.phase,
            options=list(options),
        )
