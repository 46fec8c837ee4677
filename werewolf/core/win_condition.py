"""
Win detection, run once after every vote resolution.
"""

from typing import Optional, TYPE_CHECKING

from .game_engine import GameState
from .event_log import Severity
from .roles import Winner

if TYPE_CHECKING:
    from .judge import Judge


class WinConditionEvaluator:
    """Decides whether the game is over and who won."""

    def __init__(self, judge: Optional['Judge'] = None):
        self.judge = judge

    @staticmethod
    def evaluate(state: GameState) -> Optional[Winner]:
        """
        Check if game has ended and return winning side.
        Returns None if game continues.

        Werewolves win as soon as they are at least as many as everyone else,
        not only once every villager is gone.
        """
        alive_werewolves = len(state.get_werewolves())
        alive_others = len(state.get_non_werewolves())

        # Villagers win: all werewolves eliminated
        if alive_werewolves == 0:
            return Winner.VILLAGERS

        # Werewolves win: parity or majority
        if alive_werewolves >= alive_others:
            return Winner.WEREWOLVES

        return None

    def apply(self, state: GameState) -> Optional[Winner]:
        """Evaluate and, on a result, end the game and narrate it."""
        winner = self.evaluate(state)
        if winner is None:
            return None

        state.end_game(winner)
        for player in state.players:
            player.reveal()

        if self.judge:
            if winner == Winner.VILLAGERS:
                self.judge.announce("🎉 THE VILLAGERS WIN! Every werewolf has been eliminated!", Severity.INFO)
            else:
                self.judge.announce("🎉 THE WEREWOLVES WIN! They are as many as the villagers!", Severity.WARNING)
        return winner
