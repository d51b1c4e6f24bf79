"""
Tests for milestone proximity, award selection and the winning test.

Run with: python -m pytest tests/test_milestones.py -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from tmai.milestones import (
    count_claimed_milestones, get_winning_award, is_close_to_milestone, is_player_winning,
)
from tmai.strategy_config import reset_config
from tests.state_builders import make_award, make_milestone, make_state


@pytest.fixture(autouse=True)
def default_strategy(monkeypatch):
    monkeypatch.delenv('TMAI_STRATEGY_CONFIG', raising=False)
    reset_config()
    yield
    reset_config()


class TestIsCloseToMilestone:
    """Progress as a percentage of the milestone minimum"""

    def test_unknown_milestone_is_not_close(self):
        """A name that matches no milestone returns False"""
        state = make_state(milestones=[make_milestone("Mayor", 3, {0: 3})])
        assert is_close_to_milestone(state, "gardener", 0) is False

    def test_name_match_is_case_insensitive(self):
        """'GARDENER' finds the 'Gardener' milestone"""
        state = make_state(milestones=[make_milestone("Gardener", 3, {0: 2})])
        assert is_close_to_milestone(state, "GARDENER", 66) is True

    def test_threshold_boundary(self):
        """2 of 3 is 66.7%: close at 66, not at 67"""
        state = make_state(milestones=[make_milestone("Gardener", 3, {0: 2})])
        assert is_close_to_milestone(state, "gardener", 66) is True
        assert is_close_to_milestone(state, "gardener", 67) is False

    def test_claimed_milestone_is_not_close(self):
        """Claimed milestones are never close, whatever the progress"""
        state = make_state(milestones=[make_milestone("Gardener", 3, {0: 3}, claimed=True)])
        assert is_close_to_milestone(state, "gardener", 0) is False

    def test_three_claimed_milestones_block_all(self):
        """Once three milestones are claimed nothing is close"""
        milestones = [
            make_milestone("Terraformer", 35, {}, claimed=True),
            make_milestone("Builder", 8, {}, claimed=True),
            make_milestone("Planner", 16, {}, claimed=True),
            make_milestone("Gardener", 3, {0: 3}),
        ]
        state = make_state(milestones=milestones)
        assert count_claimed_milestones(state) == 3
        assert is_close_to_milestone(state, "gardener", 0) is False

    def test_zero_minimum_needs_some_progress(self):
        """A milestone with minimum 0 never divides by zero; any progress is close"""
        started = make_state(milestones=[make_milestone("Gardener", 0, {0: 1})])
        assert is_close_to_milestone(started, "gardener", 100) is True

        untouched = make_state(milestones=[make_milestone("Gardener", 0, {0: 0})])
        assert is_close_to_milestone(untouched, "gardener", 0) is False

    def test_uses_given_player(self):
        """Progress is read for the requested player, not the current one"""
        state = make_state(milestones=[make_milestone("Mayor", 3, {0: 0, 1: 3})])
        assert is_close_to_milestone(state, "mayor", 66) is False
        assert is_close_to_milestone(state, "mayor", 66, player_id=1) is True


class TestGetWinningAward:
    """Smallest lead within the cap, strict lead over every opponent"""

    def test_no_awards(self):
        """No awards means no winning award"""
        assert get_winning_award(make_state()) is None

    def test_tie_is_not_winning(self):
        """An opponent with equal progress blocks the award"""
        award = make_award("Landlord", {0: 4, 1: 4})
        assert get_winning_award(make_state(awards=[award])) is None

    def test_lead_above_cap_is_ignored(self):
        """A lead of 6 is more than the cap of 5"""
        award = make_award("Banker", {0: 10, 1: 4})
        assert get_winning_award(make_state(awards=[award])) is None

    def test_lead_of_exactly_cap_qualifies(self):
        """A lead of 5 is within the cap"""
        award = make_award("Banker", {0: 9, 1: 4})
        assert get_winning_award(make_state(awards=[award])) is award

    def test_smallest_lead_wins(self):
        """Of two qualifying awards, the one with the smaller lead is returned"""
        big = make_award("Banker", {0: 5, 1: 1}, component_id=601)
        small = make_award("Miner", {0: 3, 1: 2}, component_id=602)
        state = make_state(awards=[big, small])
        assert get_winning_award(state) is small

    def test_first_award_wins_ties(self):
        """Equal leads keep the first award seen"""
        first = make_award("Banker", {0: 3, 1: 1}, component_id=601)
        second = make_award("Miner", {0: 4, 1: 2}, component_id=602)
        state = make_state(awards=[first, second])
        assert get_winning_award(state) is first

    def test_claimed_and_unfundable_awards_skipped(self):
        """Already funded or unfundable awards never qualify"""
        funded = make_award("Banker", {0: 3, 1: 1}, component_id=601, claimed=True)
        blocked = make_award("Miner", {0: 3, 1: 1}, component_id=602, fundable=False)
        assert get_winning_award(make_state(awards=[funded, blocked])) is None

    def test_must_lead_every_opponent(self):
        """Leading one of two opponents is not enough"""
        award = make_award("Banker", {0: 3, 1: 1, 2: 3})
        state = make_state(n_players=3, awards=[award])
        assert get_winning_award(state) is None


class TestIsPlayerWinning:
    """Strictly more points than every opponent"""

    def test_strict_lead(self):
        state = make_state(points=[30, 25])
        assert is_player_winning(state, 0) is True
        assert is_player_winning(state, 1) is False

    def test_tie_is_not_winning(self):
        """Equal points are not a lead"""
        assert is_player_winning(make_state(points=[30, 30]), 0) is False

    def test_solo_game_is_never_winning(self):
        """With no opponents there is nobody to beat"""
        state = make_state(n_players=1, points=[40])
        assert is_player_winning(state, 0) is False
