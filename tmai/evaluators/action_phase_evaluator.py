"""
Action Phase Evaluator

Scores every legal action in the main action phase with the action scorer.
The combined evaluator then takes the highest score (first one on ties).
"""

import logging
import math
from typing import List

from ..models import Phase
from .base import ActionEvaluator, DecisionContext, EvaluatedAction

logger = logging.getLogger(__name__)


class ActionPhaseEvaluator(ActionEvaluator):
    """One-ply greedy scoring of every legal action"""

    def __init__(self, action_scorer):
        super().__init__("ActionPhase")
        self.action_scorer = action_scorer

    def can_evaluate(self, context: DecisionContext) -> bool:
        return context.phase == Phase.ACTIONS

    def evaluate(self, context: DecisionContext) -> List[EvaluatedAction]:
        actions = []
        for index, action in enumerate(context.legal_actions):
            score = self.action_scorer.evaluate_action(action, context.state, context.player_id)
            evaluated = EvaluatedAction(action=action, index=index, score=score)
            if math.isinf(score):
                evaluated.add_reasoning("Never take this action")
            else:
                evaluated.add_reasoning(f"Action score {score:.1f}")
            actions.append(evaluated)
        return actions
