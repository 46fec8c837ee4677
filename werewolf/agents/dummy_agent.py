"""
Dummy Agent implementation with seeded random behavior.
"""

import random
from typing import Optional

from .base_agent import BaseAgent, AgentContext
from ..core import Player, RoleKind
from ..config.game_config import GameConfig, default_config


class DummyAgent(BaseAgent):
    """
    Simple dummy agent:
    - Werewolf: Hunt a random alive non-werewolf
    - Protector: Guard a random alive player
    - Seer: Check a random alive player (not itself) who hasn't been checked before
    - Everyone: Vote for a random alive player other than itself
    """

    def __init__(self, player: Player, config: GameConfig = default_config):
        super().__init__(player, config)
        # Use seed from config if provided, otherwise use None (non-deterministic)
        seed = config.random_seed
        if seed is not None:
            # Combine seed with player number to ensure each player has different but reproducible randomness
            self.random = random.Random(seed + player.number)
        else:
            self.random = random.Random()
        # Seer memory
        self.checked_players: set[int] = set()

    def choose_night_target(self, context: AgentContext) -> Optional[int]:
        """
        Pick a night target based on role.

        Args:
            context: Current game context

        Returns:
            Target player id, or None if there is nobody to pick
        """
        state = context.game_state
        options = set(context.options)
        role = self.player.role

        if role == RoleKind.WEREWOLF:
            targets = [p.id for p in state.get_non_werewolves() if p.id in options]
        elif role == RoleKind.SEER:
            targets = [
                pid for pid in context.options
                if pid != self.player.id and pid not in self.checked_players
            ]
            if not targets:
                # Everyone has been checked, start over
                targets = [pid for pid in context.options if pid != self.player.id]
        else:
            targets = list(context.options)

        if not targets:
            return None

        target = self.random.choice(sorted(targets))
        if role == RoleKind.SEER:
            self.checked_players.add(target)
        return target

    def choose_vote(self, context: AgentContext) -> int:
        """
        Vote for a random alive player other than ourselves.

        Args:
            context: Current game context

        Returns:
            Target player id
        """
        targets = [pid for pid in context.options if pid != self.player.id]
        return self.random.choice(sorted(targets))
