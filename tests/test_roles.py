"""
Tests for role distribution and role assignment.
"""

import math
import random
from collections import Counter

import pytest
from werewolf.core import (
    RoleAssigner, RoleKind, InvalidPlayerCount, get_role_distribution, ROLE_CONFIG,
)


@pytest.mark.parametrize("player_count", range(5, 21))
def test_distribution_for_every_valid_count(player_count):
    """Test that every supported game size gets the fixed distribution."""
    distribution = get_role_distribution(player_count)

    werewolves = math.ceil(player_count / 3)
    assert distribution[RoleKind.WEREWOLF] == werewolves
    assert distribution[RoleKind.PROTECTOR] == 1
    assert distribution[RoleKind.SEER] == 1
    assert distribution[RoleKind.VILLAGER] == player_count - werewolves - 2
    assert distribution[RoleKind.VILLAGER] >= 0
    assert sum(distribution.values()) == player_count


@pytest.mark.parametrize("player_count", range(5, 21))
def test_assign_matches_distribution(player_count):
    """Test that assigned roles are exactly the distribution, one per player."""
    roles = RoleAssigner(random.Random(player_count)).assign(player_count)

    assert len(roles) == player_count
    assert Counter(roles) == Counter(get_role_distribution(player_count))


@pytest.mark.parametrize("player_count", [-1, 0, 3, 4, 21, 100])
def test_invalid_player_count(player_count):
    """Test that out-of-range counts are rejected, not clamped."""
    with pytest.raises(InvalidPlayerCount) as exc_info:
        RoleAssigner().assign(player_count)
    assert exc_info.value.player_count == player_count
    assert exc_info.value.kind == "invalid_player_count"


def test_seeded_assignment_is_reproducible():
    """Test that the same seed gives the same seating."""
    first = RoleAssigner(random.Random(99)).assign(12)
    second = RoleAssigner(random.Random(99)).assign(12)
    assert first == second


def test_shuffle_does_not_mutate_input():
    roles = [RoleKind.WEREWOLF, RoleKind.VILLAGER, RoleKind.SEER, RoleKind.PROTECTOR]
    original = list(roles)

    shuffled = RoleAssigner(random.Random(3)).shuffle(roles)

    assert roles == original
    assert sorted(shuffled, key=lambda r: r.value) == sorted(original, key=lambda r: r.value)


def test_shuffle_is_unbiased():
    """Each role lands in each seat about as often as its share of the deck."""
    player_count = 7
    trials = 7000
    assigner = RoleAssigner(random.Random(1234))
    werewolf_share = get_role_distribution(player_count)[RoleKind.WEREWOLF] / player_count
    seer_share = 1 / player_count

    werewolf_hits = [0] * player_count
    seer_hits = [0] * player_count
    for _ in range(trials):
        for seat, role in enumerate(assigner.assign(player_count)):
            if role == RoleKind.WEREWOLF:
                werewolf_hits[seat] += 1
            elif role == RoleKind.SEER:
                seer_hits[seat] += 1

    for seat in range(player_count):
        assert abs(werewolf_hits[seat] / trials - werewolf_share) < 0.04
        assert abs(seer_hits[seat] / trials - seer_share) < 0.03


def test_role_metadata():
    """Test that every role has display metadata."""
    assert set(ROLE_CONFIG) == set(RoleKind)
    assert RoleKind.WEREWOLF.icon == "🐺"
    assert RoleKind.SEER.display_name == "Seer"
    assert RoleKind.WEREWOLF.has_night_action
    assert RoleKind.PROTECTOR.has_night_action
    assert RoleKind.SEER.has_night_action
    assert not RoleKind.VILLAGER.has_night_action
    assert RoleKind.WEREWOLF.is_werewolf
    assert not RoleKind.PROTECTOR.is_werewolf


@pytest.mark.parametrize("player_count", ["8", 8.0, 7.5, True, None])
def test_non_integer_player_count_rejected(player_count):
    """Test that counts that are not plain ints are rejected, never coerced."""
    with pytest.raises(InvalidPlayerCount) as exc_info:
        get_role_distribution(player_count)
    assert "whole number" in exc_info.value.message

    with pytest.raises(InvalidPlayerCount):
        RoleAssigner().assign(player_count)
