"""
Event emitter that fans game events out to presentation listeners.
"""

import logging
from typing import Dict, Any, Optional, List, Callable
from threading import Lock

from ..core.event_log import LogEntry


logger = logging.getLogger(__name__)

Listener = Callable[[str, Dict[str, Any]], None]


class EventEmitter:
    """Event emitter that forwards game events to registered listeners."""

    def __init__(self):
        self._listeners: List[Listener] = []
        self._lock = Lock()
        self.event_count = 0

    def register_listener(self, listener: Listener) -> None:
        """Subscribe to every event as (event_type, data)."""
        with self._lock:
            self._listeners.append(listener)

    def unregister_listener(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _emit(self, event_type: str, data: Dict[str, Any]) -> None:
        """Emit an event to all listeners."""
        with self._lock:
            listeners = list(self._listeners)
            self.event_count += 1
        for listener in listeners:
            try:
                listener(event_type, data)
            except Exception:
                # Don't let a broken screen break the game
                logger.exception("Listener failed on %s event", event_type)

    def emit_game_start(self, player_count: int, role_counts: Dict[str, int]) -> None:
        """Emit game start event."""
        self._emit("game_start", {
            "player_count": player_count,
            "role_counts": role_counts
        })

    def emit_phase_change(self, phase: str, round_number: int) -> None:
        """Emit phase change event."""
        self._emit("phase_change", {
            "phase": phase,
            "round": round_number
        })

    def emit_announcement(self, entry: LogEntry, phase: str, round_number: int) -> None:
        """Emit narrator announcement event."""
        self._emit("announcement", {
            "text": entry.text,
            "severity": entry.severity.value,
            "phase": phase,
            "round": round_number
        })

    def emit_night_action(self, actor: int, role: str, target: int, round_number: int) -> None:
        """Emit a submitted night action."""
        self._emit("night_action", {
            "actor": actor,
            "role": role,
            "target": target,
            "round": round_number
        })

    def emit_vote(self, voter: int, target: int, round_number: int) -> None:
        """Emit individual vote event."""
        self._emit("vote", {
            "voter": voter,
            "target": target,
            "round": round_number
        })

    def emit_vote_results(self, vote_counts: Dict[int, int], round_number: int) -> None:
        """Emit voting results event."""
        self._emit("vote_results", {
            "vote_counts": vote_counts,
            "round": round_number
        })

    def emit_tie(self, tied_players: List[int], round_number: int) -> None:
        """Emit tie detection event."""
        self._emit("tie", {
            "tied_players": tied_players,
            "round": round_number
        })

    def emit_elimination(self, player_id: int, role: str, round_number: int) -> None:
        """Emit player elimination event."""
        self._emit("elimination", {
            "player_id": player_id,
            "role": role,
            "round": round_number
        })

    def emit_game_over(self, winner: Optional[str], round_number: int) -> None:
        """Emit game over event."""
        self._emit("game_over", {
            "winner": winner,
            "round": round_number
        })

    def emit_state_changed(self, snapshot: Dict[str, Any]) -> None:
        """Emit the read-only snapshot taken after a mutating call."""
        self._emit("state_changed", {
            "game_state": snapshot
        })
