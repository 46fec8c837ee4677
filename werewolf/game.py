"""
Game controller tying state, narration and phase engines together.
"""

import random
from typing import Dict, Any, Optional, Union

from .core import (
    GameState, GamePhase, Judge, WinConditionEvaluator, EventLog, RoleKind,
    InvalidAction, get_role_distribution,
)
from .phases import NightPhaseEngine, DayVoteEngine, ActionResult, VoteResult
from .config.game_config import GameConfig, default_config
from .web.event_emitter import EventEmitter


class WerewolfGame:
    """
    Main game controller.

    Owns the single live GameState. Presentation code calls the entry points
    below and redraws from snapshot(); every successful mutating call also
    emits a ``state_changed`` event carrying that snapshot.
    """

    def __init__(self, config: Optional[GameConfig] = None, event_emitter: Optional[EventEmitter] = None):
        self.config = config or default_config
        self.event_emitter = event_emitter or EventEmitter()
        # Seeds each new game so a whole session is reproducible from one seed
        self.rng = random.Random(self.config.random_seed)

        self.game_state: Optional[GameState] = None
        self.judge: Optional[Judge] = None
        self.evaluator: Optional[WinConditionEvaluator] = None
        self.night_engine: Optional[NightPhaseEngine] = None
        self.vote_engine: Optional[DayVoteEngine] = None

    def new_game(self, player_count: Optional[int] = None) -> GameState:
        """
        Start a fresh game and open the first night.

        Raises:
            InvalidPlayerCount: If player_count is outside 5-20
        """
        if player_count is None:
            player_count = self.config.player_count
        get_role_distribution(player_count)  # validate before building anything

        self.game_state = GameState(
            player_count=player_count,
            random_seed=self.rng.randrange(2**31),
            log=EventLog(view_size=self.config.log_view_size),
        )
        self._wire_engines()

        counts = {role.value: count for role, count in get_role_distribution(player_count).items()}
        self.event_emitter.emit_game_start(player_count, counts)
        self.night_engine.start_night()
        self._notify()
        return self.game_state

    def load_state(self, game_state: GameState) -> None:
        """Take over an already built state (fixed seatings) and open its first night."""
        self.game_state = game_state
        self._wire_engines()
        self.night_engine.start_night()
        self._notify()

    def play_again(self, player_count: Optional[int] = None) -> GameState:
        """Throw away the current game and start a new one (same size unless given)."""
        if player_count is None and self.game_state is not None:
            player_count = self.game_state.player_count
        return self.new_game(player_count)

    def _wire_engines(self) -> None:
        self.judge = Judge(self.game_state, self.config, event_emitter=self.event_emitter)
        self.evaluator = WinConditionEvaluator(self.judge)
        self.night_engine = NightPhaseEngine(self.game_state, self.judge, event_emitter=self.event_emitter)
        self.vote_engine = DayVoteEngine(
            self.game_state, self.judge, self.evaluator, event_emitter=self.event_emitter
        )
        self.night_engine.on_night_end = self.vote_engine.start_voting
        self.vote_engine.on_round_end = self.night_engine.start_night

    def _require_game(self) -> GameState:
        if self.game_state is None:
            raise InvalidAction(None, "No game is running")
        return self.game_state

    def _notify(self) -> None:
        self.game_state.check_invariants()
        self.event_emitter.emit_state_changed(self.snapshot())

    # Entry points

    def select_target(self, target_id: int) -> None:
        """Highlight a target for whoever is being prompted."""
        state = self._require_game()
        if state.phase == GamePhase.NIGHT:
            self.night_engine.select_target(target_id)
        else:
            self.vote_engine.select_target(target_id)
        self._notify()

    def confirm(self) -> Union[ActionResult, VoteResult]:
        """Submit the prompted player's action or ballot with the selected target."""
        state = self._require_game()
        if state.phase == GamePhase.NIGHT:
            result = self.night_engine.confirm(state.current_turn_index)
        else:
            result = self.vote_engine.submit_vote(state.current_turn_index, state.pending_target)
        if result.success:
            self._notify()
        return result

    def skip(self) -> None:
        """Skip the prompted player's night action. Ballots cannot be skipped."""
        state = self._require_game()
        if state.phase != GamePhase.NIGHT:
            raise InvalidAction(state.current_turn_index, "Votes cannot be skipped")
        self.night_engine.skip_turn(state.current_turn_index)
        self._notify()

    def submit_night_action(self, actor_index: int, target_id: Optional[int]) -> ActionResult:
        """Submit a night action for actor_index according to their role."""
        state = self._require_game()
        actor = state.get_player(actor_index)
        role = actor.role if actor else None
        if role == RoleKind.WEREWOLF:
            result = self.night_engine.submit_werewolf_target(actor_index, target_id)
        elif role == RoleKind.PROTECTOR:
            result = self.night_engine.submit_protector_target(actor_index, target_id)
        elif role == RoleKind.SEER:
            result = self.night_engine.submit_seer_target(actor_index, target_id)
        else:
            raise InvalidAction(actor_index, f"Player index {actor_index} has no night action")
        if result.success:
            self._notify()
        return result

    def vote(self, voter_index: int, target_id: Optional[int]) -> VoteResult:
        """Cast a ballot."""
        self._require_game()
        result = self.vote_engine.submit_vote(voter_index, target_id)
        if result.success:
            self._notify()
        return result

    # Read-only views

    def prompt(self) -> Optional[Dict[str, Any]]:
        """Describe who the screen should prompt next, or None when the game is over."""
        state = self._require_game()
        if state.ended:
            return None
        if state.phase == GamePhase.NIGHT:
            actor = self.night_engine.current_actor()
            if actor is None:
                return None
            return {
                "kind": "night_action",
                "actor": actor.id,
                "number": actor.number,
                "role": actor.role.value,
                "options": [p.id for p in state.get_alive_players()],
            }
        voter = self.vote_engine.current_voter()
        if voter is None:
            return None
        return {
            "kind": "vote",
            "actor": voter.id,
            "number": voter.number,
            "options": [p.id for p in self.vote_engine.vote_options()],
        }

    def role_card(self, player_index: int) -> Dict[str, Any]:
        """Private role reveal for one seat."""
        state = self._require_game()
        player = state.get_player(player_index)
        if player is None:
            raise InvalidAction(player_index, f"There is no seat {player_index + 1}")
        info = player.role.info
        return {
            "id": player.id,
            "number": player.number,
            "role": player.role.value,
            "icon": info.icon,
            "name": info.name,
            "description": info.description,
        }

    @staticmethod
    def role_preview(player_count: int) -> Dict[str, int]:
        """Role counts for a prospective game size."""
        return {role.value: count for role, count in get_role_distribution(player_count).items()}

    def snapshot(self) -> Dict[str, Any]:
        """Read-only picture of the game for rendering."""
        state = self._require_game()
        summary = state.get_game_summary()
        last_vote = self.vote_engine.last_resolution
        summary.update({
            "player_count": state.player_count,
            "current_turn_index": state.current_turn_index,
            "pending_target": state.pending_target,
            "prompt": self.prompt(),
            "votes": dict(state.votes),
            "last_vote": last_vote.to_dict() if last_vote else None,
            "players": [p.to_dict(show_role=state.ended) for p in state.players],
            "log": [entry.to_dict() for entry in state.log.recent()],
        })
        return summary
