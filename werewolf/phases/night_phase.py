"""
Night phase engine: werewolf hunts, protector guards and seer checks, one seat at a time.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Callable, TYPE_CHECKING

from ..core import (
    GameState, GamePhase, Judge, Player, RoleKind, Severity, InvalidAction,
)

if TYPE_CHECKING:
    from ..web.event_emitter import EventEmitter


logger = logging.getLogger(__name__)


@dataclass
class ActionResult:
    """Result of a night action submission."""
    success: bool
    actor: Optional[int] = None
    target: Optional[int] = None
    message: str = ""
    incomplete: bool = False  # Confirmed with nothing selected; caller should re-prompt
    is_werewolf: Optional[bool] = None  # Seer checks only


class NightPhaseEngine:
    """
    Walks the turn index from seat 0 to the last seat.

    Dead players and villagers are passed over without a prompt. Alive
    werewolves, the protector and the seer stop the walk until their action
    is submitted or skipped. Night actions are narrated only: nothing a
    player does at night changes who is alive.
    """

    def __init__(self, game_state: GameState, judge: Judge, event_emitter: Optional['EventEmitter'] = None):
        self.game_state = game_state
        self.judge = judge
        self.event_emitter = event_emitter
        self.visited_indices: List[int] = []
        # Called once the last seat has been passed and the day has started
        self.on_night_end: Optional[Callable[[], None]] = None

    def start_night(self) -> None:
        """Begin a night at seat 0 and walk to the first player who must act."""
        self.visited_indices = []
        self.judge.start_night()
        if self.event_emitter:
            self.event_emitter.emit_phase_change(GamePhase.NIGHT.value, self.game_state.round)
        self._run_sequence()

    def current_actor(self) -> Optional[Player]:
        """Player being prompted, or None when nobody is."""
        if self.pending_action() is None:
            return None
        return self.game_state.current_player

    def pending_action(self) -> Optional[RoleKind]:
        """Role whose action is awaited, or None outside a night prompt."""
        state = self.game_state
        if state.ended or state.phase != GamePhase.NIGHT:
            return None
        player = state.current_player
        if player is None or not player.alive or not player.role.has_night_action:
            return None
        return player.role

    def select_target(self, target_id: int) -> None:
        """Highlight a target for the current actor."""
        if self.pending_action() is None:
            raise InvalidAction(None, "Nobody is choosing a night target")
        self.game_state.require_alive_target(target_id)
        self.game_state.pending_target = target_id

    def submit_werewolf_target(self, actor_index: int, target_id: Optional[int]) -> ActionResult:
        """Record a werewolf's intended victim. The victim is not killed."""
        actor = self._check_actor(actor_index, RoleKind.WEREWOLF)
        if target_id is None:
            return self._incomplete(actor_index)
        target = self.game_state.require_alive_target(target_id)

        message = f"🐺 Werewolf #{actor.number} wants to hunt #{target.number}"
        self.judge.announce(message, Severity.WARNING)
        return self._finish_action(actor, target, message)

    def submit_protector_target(self, actor_index: int, target_id: Optional[int]) -> ActionResult:
        """Record who the protector guards."""
        actor = self._check_actor(actor_index, RoleKind.PROTECTOR)
        if target_id is None:
            return self._incomplete(actor_index)
        target = self.game_state.require_alive_target(target_id)

        message = f"🛡️ Protector #{actor.number} guards #{target.number}"
        self.judge.announce(message, Severity.INFO)
        return self._finish_action(actor, target, message)

    def submit_seer_target(self, actor_index: int, target_id: Optional[int]) -> ActionResult:
        """Check whether the target is a werewolf and narrate the answer."""
        actor = self._check_actor(actor_index, RoleKind.SEER)
        if target_id is None:
            return self._incomplete(actor_index)
        target = self.game_state.require_alive_target(target_id)

        is_werewolf = target.is_werewolf
        verdict = "IS" if is_werewolf else "is NOT"
        message = f"🔮 Seer #{actor.number} checks #{target.number}: {verdict} a werewolf"
        self.judge.announce(message, Severity.INFO)
        return self._finish_action(actor, target, message, is_werewolf=is_werewolf)

    def confirm(self, actor_index: int) -> ActionResult:
        """Submit the current actor's action with whatever target is selected."""
        role = self.pending_action()
        target_id = self.game_state.pending_target
        if role == RoleKind.WEREWOLF:
            return self.submit_werewolf_target(actor_index, target_id)
        if role == RoleKind.PROTECTOR:
            return self.submit_protector_target(actor_index, target_id)
        if role == RoleKind.SEER:
            return self.submit_seer_target(actor_index, target_id)
        raise InvalidAction(actor_index, "There is no night action to confirm")

    def skip_turn(self, actor_index: int) -> None:
        """Pass the current actor's turn without an action."""
        self._check_actor(actor_index, None)
        logger.debug("Player #%d skips their night action", actor_index + 1)
        self._advance()

    def _check_actor(self, actor_index: int, role: Optional[RoleKind]) -> Player:
        """Make sure actor_index is the seat being prompted (and holds role, if given)."""
        pending = self.pending_action()
        if pending is None:
            raise InvalidAction(actor_index, "No night action is awaited")
        if actor_index != self.game_state.current_turn_index:
            current = self.game_state.current_turn_index + 1
            raise InvalidAction(actor_index, f"It is Player #{current}'s turn to act")
        if role is not None and pending != role:
            raise InvalidAction(
                actor_index,
                f"Player #{actor_index + 1} cannot act as {role.display_name}",
            )
        return self.game_state.players[actor_index]

    def _incomplete(self, actor_index: int) -> ActionResult:
        return ActionResult(
            success=False,
            actor=actor_index,
            message="Select a target first",
            incomplete=True,
        )

    def _finish_action(self, actor: Player, target: Player, message: str,
                       is_werewolf: Optional[bool] = None) -> ActionResult:
        if self.event_emitter:
            self.event_emitter.emit_night_action(
                actor.id,
                actor.role.value,
                target.id,
                self.game_state.round,
            )
        self._advance()
        return ActionResult(
            success=True,
            actor=actor.id,
            target=target.id,
            message=message,
            is_werewolf=is_werewolf,
        )

    def _advance(self) -> None:
        self.game_state.current_turn_index += 1
        self._run_sequence()

    def _run_sequence(self) -> None:
        """Move past players with nothing to do until someone must act or the night ends."""
        state = self.game_state
        while state.current_turn_index < len(state.players):
            index = state.current_turn_index
            self.visited_indices.append(index)
            player = state.players[index]
            if player.alive and player.role.has_night_action:
                state.pending_target = None
                logger.debug("Waiting for %s (%s)", player, player.role.display_name)
                return
            state.current_turn_index += 1

        self._end_night()

    def _end_night(self) -> None:
        self.judge.start_day()
        if self.event_emitter:
            self.event_emitter.emit_phase_change(GamePhase.DAY.value, self.game_state.round)
        if self.on_night_end:
            self.on_night_end()
