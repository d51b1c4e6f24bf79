"""
Action Scorer

Assigns a single comparable score to any Terraforming Mars action. Wrapper
actions are unwrapped recursively: Choice and Compound actions score as the
sum of their children, a PayFor action scores as the action it pays for.
Everything else dispatches on the action's kind.

Scores are finite floats, or -inf for actions we must never take
(unaffordable cards, a fifth city, the broken top-card decision).
"""

import logging
from typing import Callable, Dict, Optional

from ..actions import (
    ActionKind, AddResourceOnCard, BuyCard, ClaimAwardMilestone, DiscardCard,
    ModifyGlobalParameter, ModifyPlayerResource, PlaceTile, PlayCard, action_kind,
)
from ..game_stage import GameStage, get_game_stage
from ..milestones import (
    GARDENER, GARDENER_THRESHOLD, MAYOR, MAYOR_THRESHOLD, TERRAFORMER,
    TERRAFORMER_THRESHOLD, get_winning_award, is_close_to_milestone, is_player_winning,
)
from ..models import (
    Award, Card, ClaimType, GameState, GlobalParameterType, Resource, Tile,
)
from .base import NEGATIVE_INFINITY
from .card_scorer import CardScorer
from .placement_scorer import (
    evaluate_place_city, evaluate_place_greenery, evaluate_place_ocean, resolve_map_tile,
)

logger = logging.getLogger(__name__)

PLAY_CARD_BONUS = 1000.0

# Global parameters
GLOBAL_PARAMETER_WINNING_LATE = 400.0
GLOBAL_PARAMETER_MANY_PLAYERS = 100.0
GLOBAL_PARAMETER_PLAYER_BONUS = 150.0
GLOBAL_PARAMETER_TERRAFORMER_BONUS = 100.0
GLOBAL_PARAMETER_MAXED_PENALTY = -1500.0
# Only these parameters have a rule; ocean and Venus steps score 0
WEIGHTED_GLOBAL_PARAMETERS = (GlobalParameterType.TEMPERATURE, GlobalParameterType.OXYGEN)

# Milestones and awards
CLAIM_MILESTONE_SCORE = 80_000_000.0
FUND_AWARD_SCORE = 1500.0

# Pass: claim a milestone instead when we can but are nearly broke
PASS_SCORE = -10.0
PASS_CLAIMABLE_MILESTONE_SCORE = 1_000_000.0
PASS_LOW_MEGA_CREDITS = 8

# Buy/discard outside the research phase
BUY_GOOD_CARD = 50.0
BUY_BAD_CARD = -50.0

# Resources on cards
CARD_RESOURCE_SCORES = {
    Resource.ANIMAL: 20.0,
    Resource.MICROBE: 10.0,
    Resource.SCIENCE: 15.0,
}
REMOVE_CARD_RESOURCE_EARLY = -100.0

DRAW_CARD_SCORE = 10_000.0
CARD_RESOURCE_CHANGE_SCORE = 1200.0

# Tile placement
TILE_PLACEMENT_BASE = 80.0
CITY_PLACEMENT_BASE = 20.0
PLACEMENT_MILESTONE_BONUS = 10_000.0


class ActionScorer:
    """
    Scores actions for the acting player.

    Stateless apart from the card scorer it owns; the stage and every other
    derived quantity are recomputed from the state on each call.
    """

    def __init__(self):
        self.card_scorer = CardScorer(self)
        self._dispatch: Dict[ActionKind, Callable] = {
            ActionKind.CHOICE: self._score_children,
            ActionKind.COMPOUND: self._score_children,
            ActionKind.PAY_FOR: self._score_pay_for,
            ActionKind.PLAY_CARD: self._score_play_card,
            ActionKind.MODIFY_GLOBAL_PARAMETER: self._score_global_parameter,
            ActionKind.MODIFY_PLAYER_RESOURCE: self._score_player_resource,
            ActionKind.PLACE_TILE: self._score_place_tile,
            ActionKind.CLAIM_AWARD_MILESTONE: self._score_claim,
            ActionKind.PASS: self._score_pass,
            ActionKind.TOP_CARD_DECISION: self._score_top_card_decision,
            ActionKind.BUY_CARD: self._score_buy_card,
            ActionKind.DISCARD_CARD: self._score_discard_card,
            ActionKind.ADD_RESOURCE_ON_CARD: self._score_add_resource_on_card,
            ActionKind.DRAW_CARD: self._score_draw_card,
        }

    def evaluate_action(self, action, state: GameState, player_id: Optional[int] = None) -> float:
        """
        Score an action.

        Args:
            action: Any action offered by the engine
            state: Current game state
            player_id: Acting player, defaults to the current player

        Returns:
            Score (higher = better); 0 for kinds without a rule
        """
        if player_id is None:
            player_id = state.current_player

        handler = self._dispatch.get(action_kind(action))
        if handler is None:
            return 0.0
        return handler(action, state, player_id)

    def evaluate_card(self, card: Card, state: GameState, player_id: Optional[int] = None) -> float:
        return self.card_scorer.evaluate_card(card, state, player_id)

    # ========== Wrappers ==========

    def _score_children(self, action, state: GameState, player_id: int) -> float:
        total = 0.0
        for child in action.actions:
            total += self.evaluate_action(child, state, player_id)
        return total

    def _score_pay_for(self, action, state: GameState, player_id: int) -> float:
        if action.action is None:
            return 0.0
        return self.evaluate_action(action.action, state, player_id)

    # ========== Cards ==========

    def _resolve_card(self, card_id: int, state: GameState) -> Optional[Card]:
        component = state.get_component_by_id(card_id)
        if isinstance(component, Card):
            return component
        logger.warning(f"Card id {card_id} does not resolve to a card")
        return None

    def _score_play_card(self, action: PlayCard, state: GameState, player_id: int) -> float:
        card = self._resolve_card(action.card_id, state)
        if card is None:
            return NEGATIVE_INFINITY

        card_score = self.card_scorer.evaluate_card(card, state, player_id)
        if card_score > 0:
            return card_score + PLAY_CARD_BONUS
        return NEGATIVE_INFINITY

    def _score_buy_card(self, action: BuyCard, state: GameState, player_id: int) -> float:
        card = self._resolve_card(action.card_id, state)
        if card is None:
            return 0.0

        mega_credits = state.get_resource(player_id, Resource.MEGA_CREDIT).amount
        if card.cost > mega_credits:
            return 0.0
        if self.card_scorer.evaluate_card(card, state, player_id) > 0:
            return BUY_GOOD_CARD
        return BUY_BAD_CARD

    def _score_discard_card(self, action: DiscardCard, state: GameState, player_id: int) -> float:
        card = self._resolve_card(action.card_id, state)
        if card is None:
            return 0.0

        mega_credits = state.get_resource(player_id, Resource.MEGA_CREDIT).amount
        if card.cost > mega_credits:
            return 0.0
        if self.card_scorer.evaluate_card(card, state, player_id) > 0:
            return BUY_BAD_CARD
        return BUY_GOOD_CARD

    def _score_draw_card(self, action, state: GameState, player_id: int) -> float:
        return DRAW_CARD_SCORE

    def _score_top_card_decision(self, action, state: GameState, player_id: int) -> float:
        # The engine mishandles this decision for every player; never pick it
        return NEGATIVE_INFINITY

    def _score_add_resource_on_card(self, action: AddResourceOnCard, state: GameState,
                                    player_id: int) -> float:
        score = CARD_RESOURCE_SCORES.get(action.resource)
        if score is None:
            return 0.0

        stage = get_game_stage(state.generation, state.n_players)
        if stage == GameStage.EARLY and action.amount < 0:
            return REMOVE_CARD_RESOURCE_EARLY
        return score

    # ========== Global parameters ==========

    def _score_global_parameter(self, action: ModifyGlobalParameter, state: GameState,
                                player_id: int) -> float:
        if action.param not in WEIGHTED_GLOBAL_PARAMETERS:
            return 0.0

        n_players = state.n_players
        stage = get_game_stage(state.generation, n_players)

        if n_players < 4:
            winning_late = stage == GameStage.LATE and is_player_winning(state, player_id)
            weight = GLOBAL_PARAMETER_WINNING_LATE if winning_late else 0.0
        else:
            weight = GLOBAL_PARAMETER_MANY_PLAYERS

        player_weight = GLOBAL_PARAMETER_PLAYER_BONUS if n_players > 3 else 0.0

        milestone = 0.0
        if stage == GameStage.MID and is_close_to_milestone(state, TERRAFORMER, TERRAFORMER_THRESHOLD,
                                                            player_id):
            milestone = GLOBAL_PARAMETER_TERRAFORMER_BONUS

        parameter = state.get_global_parameter(action.param)
        max_check = GLOBAL_PARAMETER_MAXED_PENALTY if parameter is not None and parameter.is_maxed() else 0.0

        return weight + player_weight + milestone + max_check

    # ========== Player resources ==========

    def _score_player_resource(self, action: ModifyPlayerResource, state: GameState,
                               player_id: int) -> float:
        resource = action.resource
        production = action.production
        change = action.change
        stage = get_game_stage(state.generation, state.n_players)
        gaining = change > 0

        if resource == Resource.MEGA_CREDIT:
            if stage != GameStage.LATE:
                base = (1000 if gaining else -50) if production else (300 if gaining else 150)
                return base + change
            base = (50 if gaining else 100) if production else (300 if gaining else 450)
            return base - change

        if resource == Resource.HEAT:
            if not self._temperature_maxed(state):
                base = (15 if gaining else 0) if production else (0 if gaining else 150)
            else:
                base = (15 if change > -1500 else 0) if production else (-500 if gaining else 0)
            return base - change

        if resource == Resource.ENERGY:
            if not self._temperature_maxed(state):
                base = (5 if gaining else 0) if production else (0 if gaining else 40)
            else:
                base = (-1000 if gaining else 0) if production else (-300 if gaining else 0)
            return base - change

        if resource == Resource.PLANT:
            milestone = 0.0
            if stage == GameStage.MID and is_close_to_milestone(state, GARDENER, GARDENER_THRESHOLD, player_id):
                milestone = 100.0
            base = (200 if gaining else 0) if production else (150 if gaining else 300)
            return base + milestone + change

        if resource == Resource.TR:
            base = (600 if gaining else 0) if state.n_players > 3 else 100
            return base + change

        if resource == Resource.TITANIUM:
            if stage != GameStage.LATE:
                base = (500 if gaining else 0) if production else (400 if gaining else 0)
                return base + change
            base = (20 if gaining else 100) if production else (25 if gaining else 300)
            return base - change

        if resource == Resource.STEEL:
            if stage != GameStage.LATE:
                base = (600 if gaining else 0) if production else (400 if gaining else 0)
                return base + change
            base = (20 if gaining else 110) if production else (25 if gaining else 300)
            return base - change

        if resource == Resource.CARD:
            # Flat, whichever way the change goes
            return CARD_RESOURCE_CHANGE_SCORE

        return 0.0

    @staticmethod
    def _temperature_maxed(state: GameState) -> bool:
        temperature = state.get_global_parameter(GlobalParameterType.TEMPERATURE)
        return temperature is not None and temperature.is_maxed()

    # ========== Tiles ==========

    def _score_place_tile(self, action: PlaceTile, state: GameState, player_id: int) -> float:
        n_players = state.n_players
        stage = get_game_stage(state.generation, n_players)
        non_early = stage != GameStage.EARLY
        milestone_threshold = 0 if n_players > 3 else 66
        target = resolve_map_tile(action, state)

        if action.tile == Tile.GREENERY:
            milestone = 0.0
            if non_early and is_close_to_milestone(state, GARDENER, milestone_threshold, player_id):
                milestone = PLACEMENT_MILESTONE_BONUS
            if n_players > 3:
                weight = 200.0 if non_early else 0.0
            else:
                weight = 500.0 if non_early else 0.0
            if target is None:
                return weight + milestone
            return TILE_PLACEMENT_BASE + weight + milestone + evaluate_place_greenery(action, state, player_id)

        if action.tile == Tile.OCEAN:
            weight = 150.0 if non_early else 50.0
            if target is None:
                return weight
            return TILE_PLACEMENT_BASE + weight + evaluate_place_ocean(action, state, player_id)

        if action.tile == Tile.CITY:
            if n_players > 3:
                weight = 100.0 if non_early else 0.0
            else:
                weight = 200.0 if non_early else 0.0
            milestone = 0.0
            if non_early and is_close_to_milestone(state, MAYOR, milestone_threshold, player_id):
                milestone = PLACEMENT_MILESTONE_BONUS
            if target is None:
                return weight + milestone
            return CITY_PLACEMENT_BASE + milestone + evaluate_place_city(action, state, player_id)

        return 0.0

    # ========== Milestones, awards, pass ==========

    def _score_claim(self, action: ClaimAwardMilestone, state: GameState, player_id: int) -> float:
        if action.action_type == ClaimType.CLAIM_MILESTONE:
            return CLAIM_MILESTONE_SCORE

        if action.action_type == ClaimType.FUND_AWARD:
            award = state.get_component_by_id(action.to_claim_id)
            if not isinstance(award, Award):
                return 0.0
            stage = get_game_stage(state.generation, state.n_players)
            if stage == GameStage.LATE and award == get_winning_award(state, player_id):
                return FUND_AWARD_SCORE
        return 0.0

    def _score_pass(self, action, state: GameState, player_id: int) -> float:
        mega_credits = state.get_resource(player_id, Resource.MEGA_CREDIT).amount
        if mega_credits < PASS_LOW_MEGA_CREDITS:
            for milestone in state.milestones:
                if milestone.can_claim(state, player_id):
                    logger.debug(f"Pass: milestone {milestone.name} claimable with {mega_credits} MC")
                    return PASS_CLAIMABLE_MILESTONE_SCORE
        return PASS_SCORE

