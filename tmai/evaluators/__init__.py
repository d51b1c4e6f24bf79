"""
Evaluator System for Decision Making

This package contains the evaluator framework for making decisions.
The scorers value individual cards, tile placements and actions; the phase
evaluators turn those values into a choice for each kind of decision.
"""

from .base import (
    ActionEvaluator, CombinedEvaluator, DecisionContext, EvaluatedAction, NEGATIVE_INFINITY, pick_best,
)
from .action_scorer import ActionScorer
from .card_scorer import CardScorer
from .corporation_evaluator import CorporationEvaluator
from .research_evaluator import ResearchEvaluator
from .action_phase_evaluator import ActionPhaseEvaluator
from .placement_scorer import evaluate_place_city, evaluate_place_greenery, evaluate_place_ocean

__all__ = [
    'ActionEvaluator',
    'CombinedEvaluator',
    'DecisionContext',
    'EvaluatedAction',
    'NEGATIVE_INFINITY',
    'pick_best',
    'ActionScorer',
    'CardScorer',
    'CorporationEvaluator',
    'ResearchEvaluator',
    'ActionPhaseEvaluator',
    'evaluate_place_city',
    'evaluate_place_greenery',
    'evaluate_place_ocean',
]
