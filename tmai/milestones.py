"""
Milestone and award proximity.

Helpers that tell the evaluators how close the acting player is to claiming a
milestone, which award they could fund and expect to win, and whether they
currently lead on points.
"""

import logging
from typing import Optional

from .models import Award, GameState, Milestone
from .strategy_config import get_config

logger = logging.getLogger(__name__)

# Milestones stop being claimable once this many have been claimed
MAX_CLAIMED_MILESTONES = 3
# Only fund awards we lead by at most this much
AWARD_LEAD_CAP = 5

# Milestone names (matched case-insensitively) and the progress percentage
# at which we start steering towards them
GARDENER = "gardener"
BUILDER = "builder"
MAYOR = "mayor"
TERRAFORMER = "terraformer"

GARDENER_THRESHOLD = 66
BUILDER_THRESHOLD = 75
MAYOR_THRESHOLD = 66
TERRAFORMER_THRESHOLD = 75


def count_claimed_milestones(state: GameState) -> int:
    return sum(1 for m in state.milestones if m.claimed)


def find_milestone(state: GameState, name: str) -> Optional[Milestone]:
    name_lower = name.lower()
    found = None
    for milestone in state.milestones:
        if milestone.name.lower() == name_lower:
            found = milestone
    return found


def is_close_to_milestone(state: GameState, milestone_name: str, threshold_percentage: float,
                          player_id: Optional[int] = None) -> bool:
    """
    Check if the player is close to claiming a milestone.

    Args:
        state: Current game state
        milestone_name: Milestone name, case-insensitive
        threshold_percentage: Progress (as % of the milestone minimum) that counts as close
        player_id: Player to check, defaults to the current player

    Returns:
        False if the milestone is unknown, already claimed, or the claim limit
        is reached; otherwise whether progress >= threshold_percentage.
    """
    if player_id is None:
        player_id = state.current_player

    milestone = find_milestone(state, milestone_name)
    if milestone is None:
        return False

    if milestone.claimed:
        return False

    max_claimed = get_config().get('milestones', 'max_claimed', MAX_CLAIMED_MILESTONES)
    if count_claimed_milestones(state) >= max_claimed:
        return False

    count = milestone.check_progress(state, player_id)
    if milestone.minimum <= 0:
        return count > 0
    progress_percentage = count / milestone.minimum * 100

    return progress_percentage >= threshold_percentage


def get_winning_award(state: GameState, player_id: Optional[int] = None) -> Optional[Award]:
    """
    Find the award most worth funding right now.

    Only unclaimed, fundable awards where the player strictly beats every
    opponent are candidates. Of those, the one with the smallest lead that is
    still within the lead cap wins; ties keep the first award seen.

    Returns:
        The award, or None if no award qualifies
    """
    if player_id is None:
        player_id = state.current_player

    lead_cap = get_config().get('awards', 'lead_cap', AWARD_LEAD_CAP)
    winning_award = None
    smallest_lead = None

    for award in state.awards:
        if award.claimed or not award.can_claim(state, player_id):
            continue

        my_progress = award.check_progress(state, player_id)
        max_opponent_progress = 0
        is_leading = True

        for opponent in range(state.n_players):
            if opponent == player_id:
                continue
            opponent_progress = award.check_progress(state, opponent)
            max_opponent_progress = max(max_opponent_progress, opponent_progress)
            if opponent_progress >= my_progress:
                is_leading = False
                break

        if not is_leading:
            continue

        lead = my_progress - max_opponent_progress
        if lead <= lead_cap and (smallest_lead is None or lead < smallest_lead):
            smallest_lead = lead
            winning_award = award

    if winning_award is not None:
        logger.debug(f"Winning award for player {player_id}: {winning_award.name} (lead {smallest_lead})")
    return winning_award


def is_player_winning(state: GameState, player_id: int) -> bool:
    """True if the player has strictly more points than every opponent"""
    my_points = state.count_points(player_id)
    is_winning = False

    for opponent in range(state.n_players):
        if opponent == player_id:
            continue
        if state.count_points(opponent) >= my_points:
            return False
        is_winning = True

    return is_winning
