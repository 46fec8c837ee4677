"""
Judge/Narrator: announces events and counts ballots.
"""

from typing import List, Optional, Dict, TYPE_CHECKING

from .game_engine import GameState
from .event_log import LogEntry, Severity
from ..config.game_config import GameConfig, default_config

if TYPE_CHECKING:
    from ..web.event_emitter import EventEmitter


class Judge:
    """Narrates the game into the event log and enforces the counting rules."""

    def __init__(self, game_state: GameState, config: GameConfig = default_config, event_emitter: Optional['EventEmitter'] = None):
        self.game_state = game_state
        self.config = config
        self.event_emitter = event_emitter

    def announce(self, message: str, severity: Severity = Severity.INFO) -> LogEntry:
        """Make a judge announcement."""
        entry = self.game_state.log.append(message, severity)
        if self.config.use_narration:
            print(f"[NARRATOR] {message}")
        if self.event_emitter:
            self.event_emitter.emit_announcement(
                entry,
                self.game_state.phase.value,
                self.game_state.round
            )
        return entry

    def start_night(self) -> None:
        """Announce night phase start."""
        self.game_state.start_night()
        self.announce(f"🌙 Night {self.game_state.round} falls. Werewolves, Protector and Seer, take your actions...")

    def start_day(self) -> None:
        """Announce day phase start."""
        self.game_state.start_day()
        alive_players = [p.number for p in self.game_state.get_alive_players()]
        self.announce(f"☀️ Day {self.game_state.round} breaks. Everyone votes to eliminate one player. Alive: {alive_players}")

    def get_vote_counts(self, votes: Optional[Dict[int, int]] = None) -> Dict[int, int]:
        """Get vote counts per target id."""
        if votes is None:
            votes = self.game_state.votes

        counts: Dict[int, int] = {}
        for target in votes.values():
            counts[target] = counts.get(target, 0) + 1
        return counts

    def get_elimination_candidates(self, votes: Optional[Dict[int, int]] = None) -> List[int]:
        """Get every target sharing the highest tally, in ascending id order."""
        counts = self.get_vote_counts(votes)
        if not counts:
            return []

        max_votes = max(counts.values())
        return sorted(target for target, count in counts.items() if count == max_votes)

    def get_elimination_target(self, votes: Optional[Dict[int, int]] = None) -> Optional[int]:
        """
        Determine who should be eliminated based on votes.
        Returns player id or None on a tie or empty ballot box.
        """
        candidates = self.get_elimination_candidates(votes)
        if len(candidates) == 1:
            return candidates[0]
        return None

    def check_tie(self, votes: Optional[Dict[int, int]] = None) -> bool:
        """Check if there's a tie in voting."""
        return len(self.get_elimination_candidates(votes)) > 1
