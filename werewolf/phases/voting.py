"""
Day voting: one ballot per alive player, then a single resolution.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Dict, Optional, Callable, TYPE_CHECKING

from ..core import (
    GameState, GamePhase, Judge, Player, Severity, Winner,
    WinConditionEvaluator, InvalidVoter, InvalidTarget, InvalidAction,
)

if TYPE_CHECKING:
    from ..web.event_emitter import EventEmitter


logger = logging.getLogger(__name__)


@dataclass
class VoteResolution:
    """Outcome of counting the day's ballots."""
    counts: Dict[int, int] = field(default_factory=dict)  # {target_id: votes}
    candidates: List[int] = field(default_factory=list)  # Targets sharing the top tally
    eliminated: Optional[int] = None
    winner: Optional[Winner] = None

    @property
    def tie(self) -> bool:
        return self.eliminated is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "counts": dict(self.counts),
            "candidates": list(self.candidates),
            "eliminated": self.eliminated,
            "tie": self.tie,
            "winner": self.winner.value if self.winner else None,
        }


@dataclass
class VoteResult:
    """Result of a ballot submission."""
    success: bool
    voter: Optional[int] = None
    target: Optional[int] = None
    message: str = ""
    incomplete: bool = False  # Confirmed with nothing selected; caller should re-prompt
    resolution: Optional[VoteResolution] = None  # Set when this ballot was the last one


class DayVoteEngine:
    """Handles the voting phase and its resolution."""

    def __init__(self, game_state: GameState, judge: Judge,
                 evaluator: Optional[WinConditionEvaluator] = None,
                 event_emitter: Optional['EventEmitter'] = None):
        self.game_state = game_state
        self.judge = judge
        self.evaluator = evaluator or WinConditionEvaluator(judge)
        self.event_emitter = event_emitter
        self.last_resolution: Optional[VoteResolution] = None
        # Called after a resolution that did not end the game; starts the next night
        self.on_round_end: Optional[Callable[[], None]] = None

    def start_voting(self) -> Optional[VoteResolution]:
        """
        Open the ballot box and prompt the first alive voter.

        Returns the resolution if nobody is left to prompt.
        """
        state = self.game_state
        if state.ended or state.phase != GamePhase.DAY:
            raise InvalidAction(None, "Voting only happens during the day")
        state.votes = {}
        state.current_turn_index = 0
        return self._prompt_next_voter()

    def current_voter(self) -> Optional[Player]:
        """Player whose ballot is awaited, or None."""
        state = self.game_state
        if state.ended or state.phase != GamePhase.DAY:
            return None
        player = state.current_player
        if player is None or not player.alive or player.id in state.votes:
            return None
        return player

    def vote_options(self) -> List[Player]:
        """Alive players the current voter may choose (everyone but themselves)."""
        voter = self.current_voter()
        if voter is None:
            return []
        return [p for p in self.game_state.get_alive_players() if p.id != voter.id]

    def select_target(self, target_id: int) -> None:
        """Highlight a ballot choice for the current voter."""
        voter = self.current_voter()
        if voter is None:
            raise InvalidAction(None, "Nobody is voting right now")
        self._check_target(voter, target_id)
        self.game_state.pending_target = target_id

    def submit_vote(self, voter_index: int, target_id: Optional[int]) -> VoteResult:
        """
        Record a ballot and move on to the next alive voter.

        A voter who has already been advanced past cannot vote again; their
        first ballot stands.

        Raises:
            InvalidVoter: If the voter is dead, has already voted, or it is not their turn
            InvalidTarget: If the target is unknown, dead, or the voter themselves
        """
        state = self.game_state
        if state.ended or state.phase != GamePhase.DAY:
            raise InvalidVoter(voter_index, "Voting is not open")

        voter = state.get_player(voter_index)
        if voter is None:
            raise InvalidVoter(voter_index, f"There is no player with index {voter_index}")
        if not voter.alive:
            raise InvalidVoter(voter_index, f"Player #{voter.number} is not alive and cannot vote")
        if voter_index in state.votes:
            raise InvalidVoter(voter_index, f"Player #{voter.number} has already voted")
        if voter_index != state.current_turn_index:
            raise InvalidVoter(
                voter_index,
                f"It is Player #{state.current_turn_index + 1}'s turn to vote, not Player #{voter.number}'s",
            )

        if target_id is None:
            return VoteResult(
                success=False,
                voter=voter_index,
                message="Select a player to vote for first",
                incomplete=True,
            )
        target = self._check_target(voter, target_id)

        state.votes[voter_index] = target.id
        logger.debug("Player #%d votes for Player #%d", voter.number, target.number)
        if self.event_emitter:
            self.event_emitter.emit_vote(voter.id, target.id, state.round)

        state.current_turn_index += 1
        resolution = self._prompt_next_voter()
        return VoteResult(
            success=True,
            voter=voter.id,
            target=target.id,
            message=f"Player #{voter.number} has voted",
            resolution=resolution,
        )

    def resolve_votes(self) -> VoteResolution:
        """
        Count ballots and eliminate the single top candidate, if there is one.

        A tie at the top eliminates nobody. The win condition is checked once
        afterwards; if the game goes on, the next night starts.
        """
        state = self.game_state
        if state.ended or state.phase != GamePhase.DAY:
            raise InvalidAction(None, "There is no vote to resolve")

        counts = self.judge.get_vote_counts()
        candidates = self.judge.get_elimination_candidates()
        resolution = VoteResolution(counts=counts, candidates=candidates)

        if self.event_emitter:
            self.event_emitter.emit_vote_results(counts, state.round)

        target_id = self.judge.get_elimination_target()
        if target_id is not None:
            target = state.players[target_id]
            self._eliminate(target)
            resolution.eliminated = target.id
        elif self.judge.check_tie():
            tied = [state.players[c].number for c in candidates]
            self.judge.announce(f"Tie vote between {tied}: nobody is eliminated!", Severity.WARNING)
            if self.event_emitter:
                self.event_emitter.emit_tie(candidates, state.round)
        else:
            self.judge.announce("No ballots were cast: nobody is eliminated!", Severity.WARNING)

        self.last_resolution = resolution
        resolution.winner = self.evaluator.apply(state)

        if resolution.winner is not None:
            if self.event_emitter:
                self.event_emitter.emit_game_over(resolution.winner.value, state.round)
        elif self.on_round_end:
            self.on_round_end()
        else:
            self.judge.start_night()

        return resolution

    def _eliminate(self, player: Player) -> None:
        player.eliminate()
        player.reveal()
        self.judge.announce(
            f"{player.role.icon} Player #{player.number} ({player.role.display_name}) has been eliminated!",
            Severity.DEATH,
        )
        if self.event_emitter:
            self.event_emitter.emit_elimination(player.id, player.role.value, self.game_state.round)

    def _check_target(self, voter: Player, target_id: Optional[int]) -> Player:
        target = self.game_state.require_alive_target(target_id)
        if target.id == voter.id:
            raise InvalidTarget(target_id, "You cannot vote for yourself")
        return target

    def _prompt_next_voter(self) -> Optional[VoteResolution]:
        """Skip dead seats until an alive voter is found; resolve when none are left."""
        state = self.game_state
        if len(state.votes) >= len(state.get_alive_players()):
            return self.resolve_votes()

        while state.current_turn_index < len(state.players):
            player = state.players[state.current_turn_index]
            if player.alive and player.id not in state.votes:
                state.pending_target = None
                return None
            state.current_turn_index += 1

        return self.resolve_votes()
