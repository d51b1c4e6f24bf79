"""
Research Evaluator

Handles the research phase: the engine offers one card at a time from the
player's draft pool as a BuyCard/DiscardCard pair.

Every card in the pool is scored and ranked. The offered card is kept only if
it scores above zero and a simulated budget (half our MegaCredits, a flat
price per card) still covers every card ranked above it.
"""

import logging
from typing import List, Optional

from ..actions import ActionKind, action_kind
from ..models import Card, Phase, Resource
from ..strategy_config import get_config
from .base import ActionEvaluator, DecisionContext, EvaluatedAction

logger = logging.getLogger(__name__)

BUDGET_RATIO = 0.5
RESEARCH_CARD_COST = 3


class ResearchEvaluator(ActionEvaluator):
    """Decides between buying and discarding the offered research card"""

    def __init__(self, action_scorer):
        super().__init__("Research")
        self.action_scorer = action_scorer

    def can_evaluate(self, context: DecisionContext) -> bool:
        return context.phase == Phase.RESEARCH

    def evaluate(self, context: DecisionContext) -> List[EvaluatedAction]:
        state = context.state
        player_id = context.player_id
        card_scorer = self.action_scorer.card_scorer

        buy_index: Optional[int] = None
        discard_index: Optional[int] = None
        for index, action in enumerate(context.legal_actions):
            kind = action_kind(action)
            if kind == ActionKind.BUY_CARD:
                buy_index = index
            elif kind == ActionKind.DISCARD_CARD:
                discard_index = index

        if buy_index is None:
            logger.debug("Research: no BuyCard offered")
            return []

        buy_action = context.legal_actions[buy_index]
        current_card = state.get_component_by_id(buy_action.card_id)
        if not isinstance(current_card, Card):
            logger.warning(f"Research card id {buy_action.card_id} does not resolve to a card")
            return []

        choices = list(state.get_card_choices(player_id))
        scores = {card.component_id: card_scorer.evaluate_card(card, state, player_id) for card in choices}
        ranked = sorted(choices, key=lambda c: scores[c.component_id], reverse=True)

        if current_card.component_id in scores:
            score = scores[current_card.component_id]
            cards_ahead = [c.component_id for c in ranked].index(current_card.component_id)
        else:
            logger.warning(f"Research: {current_card.name} is not in the card choice pool")
            score = card_scorer.evaluate_card(current_card, state, player_id)
            cards_ahead = sum(1 for s in scores.values() if s > score)

        can_afford_ahead = self._budget_covers(state.get_resource(player_id, Resource.MEGA_CREDIT).amount,
                                               cards_ahead)

        if score > 0 and can_afford_ahead:
            evaluated = EvaluatedAction(action=buy_action, index=buy_index, score=score,
                                        display_text=f"Buy {current_card.name}")
            evaluated.add_reasoning(f"Card score {score:.1f}, rank {cards_ahead + 1}/{len(ranked)}, within budget")
            return [evaluated]

        if discard_index is None:
            logger.debug(f"Research: want to discard {current_card.name} but no DiscardCard offered")
            return []

        evaluated = EvaluatedAction(action=context.legal_actions[discard_index], index=discard_index,
                                    score=score, display_text=f"Discard {current_card.name}")
        if score > 0:
            evaluated.add_reasoning(f"Budget spent on {cards_ahead} better cards")
        else:
            evaluated.add_reasoning(f"Card score {score:.1f} not worth buying")
        return [evaluated]

    @staticmethod
    def _budget_covers(mega_credits: int, cards_ahead: int) -> bool:
        """Can half our money still pay for this card after every card ranked above it?"""
        config = get_config()
        budget_ratio = config.get('research', 'budget_ratio', BUDGET_RATIO)
        card_cost = config.get('research', 'card_cost', RESEARCH_CARD_COST)

        remaining_budget = mega_credits * budget_ratio - card_cost
        for _ in range(cards_ahead):
            if card_cost > remaining_budget:
                return False
            remaining_budget -= card_cost
        return True
