"""
Card Scorer

Values a project card for the acting player. Used when playing a card, when
deciding which research cards to keep, and by BuyCard/DiscardCard scoring.

Decision factors:
- Can we afford it now (unaffordable = -inf)
- Cheap cards early in the game
- Money left over after paying
- Immediate effects, scored like actions and weighted up early
- Tags, weighted by game stage and milestone proximity
- Play requirements (stop at the first one that fails)
"""

import logging
from typing import Dict, Optional

from ..game_stage import GameStage, get_game_stage
from ..milestones import (
    BUILDER, BUILDER_THRESHOLD, GARDENER, GARDENER_THRESHOLD, MAYOR, MAYOR_THRESHOLD,
    is_close_to_milestone,
)
from ..models import Card, GameState, Resource, Tag
from .base import NEGATIVE_INFINITY

logger = logging.getLogger(__name__)

CHEAP_CARD_COST = 13
CHEAP_CARD_BONUS_EARLY = 5.0
CHEAP_CARD_BONUS = 2.0
# Penalty when next generation's income still can't pay for the card
CANT_AFFORD_NEXT_GEN_PENALTY = -1.0
AFFORDABILITY_WEIGHT = 2.0
ECONOMY_WEIGHT_EARLY = 1.5
ECONOMY_WEIGHT = 1.0

REQUIREMENT_MET_BONUS = 50.0
REQUIREMENT_FAILED_PENALTY = -20.0
# Extra penalty for a failed requirement in generations 1-3
EARLY_REQUIREMENT_FAILED_PENALTY = -500.0

# Tag weights per stage
TAG_WEIGHTS: Dict[Tag, Dict[GameStage, float]] = {
    Tag.PLANT: {GameStage.EARLY: 1, GameStage.MID: 8, GameStage.LATE: 8},
    Tag.SPACE: {GameStage.EARLY: 1, GameStage.MID: 1, GameStage.LATE: 10},
    Tag.SCIENCE: {GameStage.EARLY: 1, GameStage.MID: 5, GameStage.LATE: 5},
    Tag.BUILDING: {GameStage.EARLY: 3, GameStage.MID: 6, GameStage.LATE: 3},
    Tag.POWER: {GameStage.EARLY: 1, GameStage.MID: 2, GameStage.LATE: 1},
    Tag.CITY: {GameStage.EARLY: 4, GameStage.MID: 8, GameStage.LATE: 4},
    Tag.EARTH: {GameStage.EARLY: 2, GameStage.MID: 1, GameStage.LATE: 2},
    Tag.JOVIAN: {GameStage.EARLY: 1, GameStage.MID: 2, GameStage.LATE: 1},
    Tag.EVENT: {GameStage.EARLY: 4, GameStage.MID: 9, GameStage.LATE: 4},
    Tag.MICROBE: {GameStage.EARLY: 1, GameStage.MID: 2, GameStage.LATE: 1},
    Tag.ANIMAL: {GameStage.EARLY: 2, GameStage.MID: 6, GameStage.LATE: 2},
}

# Tags that push us towards a milestone during MID game:
# tag -> (milestone name, progress threshold %, bonus)
TAG_MILESTONES = {
    Tag.PLANT: (GARDENER, GARDENER_THRESHOLD, 100.0),
    Tag.BUILDING: (BUILDER, BUILDER_THRESHOLD, 1000.0),
    Tag.CITY: (MAYOR, MAYOR_THRESHOLD, 1000.0),
}


class CardScorer:
    """
    Scores cards for the acting player.

    Immediate effects are scored through the action scorer that owns this
    card scorer, so a card is worth what its effects are worth plus the
    card-level terms above.
    """

    def __init__(self, action_scorer):
        self.action_scorer = action_scorer

    def evaluate_card(self, card: Card, state: GameState, player_id: Optional[int] = None) -> float:
        if player_id is None:
            player_id = state.current_player

        mega_credits = state.get_resource(player_id, Resource.MEGA_CREDIT)
        balance = mega_credits.amount
        stage = get_game_stage(state.generation, state.n_players)

        if card.cost > balance:
            return NEGATIVE_INFINITY

        score = 0.0

        if card.cost < CHEAP_CARD_COST:
            score += CHEAP_CARD_BONUS_EARLY if stage == GameStage.EARLY else CHEAP_CARD_BONUS

        if balance + mega_credits.production < card.cost:
            score += CANT_AFFORD_NEXT_GEN_PENALTY

        score += AFFORDABILITY_WEIGHT * affordability(balance, card.cost)

        economy_weight = ECONOMY_WEIGHT_EARLY if stage == GameStage.EARLY else ECONOMY_WEIGHT
        for effect in card.immediate_effects:
            score += self.action_scorer.evaluate_action(effect, state, player_id) * economy_weight

        score += self._score_tags(card, state, stage, player_id)
        score += self._score_requirements(card, state, player_id)

        logger.debug(f"Card {card.name} (cost {card.cost}, {stage.value}): {score:.1f}")
        return score

    def _score_tags(self, card: Card, state: GameState, stage: GameStage, player_id: int) -> float:
        score = 0.0
        for tag in card.tags:
            weights = TAG_WEIGHTS.get(tag)
            if weights is None:
                continue
            score += weights[stage]

            if stage == GameStage.MID and tag in TAG_MILESTONES:
                milestone_name, threshold, bonus = TAG_MILESTONES[tag]
                if is_close_to_milestone(state, milestone_name, threshold, player_id):
                    score += bonus
        return score

    def _score_requirements(self, card: Card, state: GameState, player_id: int) -> float:
        score = 0.0
        for requirement in card.requirements:
            if requirement.test_condition(state, player_id):
                score += REQUIREMENT_MET_BONUS
                continue

            if 0 < state.generation < 4:
                score += EARLY_REQUIREMENT_FAILED_PENALTY
            score += REQUIREMENT_FAILED_PENALTY
            logger.debug(f"Card {card.name}: requirement not met ({requirement.description})")
            break
        return score


def affordability(balance: int, cost: int) -> float:
    """Share of our money left after paying; 0 when we have no money at all"""
    if balance == 0:
        return 0.0
    return (balance - cost) / balance
