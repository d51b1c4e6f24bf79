"""
Corporation Evaluator

Picks a corporation at the start of the game from a fixed preference order.
Corporations missing from the order are never picked; if none of the offered
corporations is listed, the evaluator returns nothing and the brain falls back
to a random choice.
"""

import logging
from typing import List

from ..actions import ActionKind, action_kind
from ..models import Card, Phase
from ..strategy_config import get_config
from .base import ActionEvaluator, DecisionContext, EvaluatedAction

logger = logging.getLogger(__name__)

# Best first
CORPORATION_PRIORITY = [
    "ecoline",
    "tharsis republic",
    "helion",
    "mining guild",
    "thorgate",
    "phoblog",
    "inventrix",
    "credicor",
    "united nations mars initiative",
    "interplanetary cinematrics",
    "teractor",
    "saturn systems",
]


class CorporationEvaluator(ActionEvaluator):
    """Ranks corporation BuyCard actions by the preference order"""

    def __init__(self):
        super().__init__("Corporation")

    def can_evaluate(self, context: DecisionContext) -> bool:
        return context.phase == Phase.CORPORATION_SELECT

    def _priority_list(self) -> List[str]:
        priority = get_config().get('corporation_select', 'priority', CORPORATION_PRIORITY)
        return [name.lower() for name in priority]

    def evaluate(self, context: DecisionContext) -> List[EvaluatedAction]:
        priority = self._priority_list()
        actions = []

        for index, action in enumerate(context.legal_actions):
            if action_kind(action) != ActionKind.BUY_CARD:
                continue

            card = context.state.get_component_by_id(action.card_id)
            if not isinstance(card, Card):
                logger.warning(f"Corporation id {action.card_id} does not resolve to a card")
                continue

            name = card.name.lower()
            if name not in priority:
                logger.debug(f"Corporation {card.name} is not in the preference list")
                continue

            rank = priority.index(name)
            evaluated = EvaluatedAction(action=action, index=index, score=0.0,
                                        display_text=f"Corporation {card.name}")
            evaluated.add_reasoning(f"Preference #{rank + 1}", -float(rank))
            actions.append(evaluated)

        return actions
