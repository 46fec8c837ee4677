"""
Phase engines for night actions and day voting.
"""

from .night_phase import NightPhaseEngine, ActionResult
from .voting import DayVoteEngine, VoteResult, VoteResolution

__all__ = ['NightPhaseEngine', 'ActionResult', 'DayVoteEngine', 'VoteResult', 'VoteResolution']
