"""
Base Classes for Evaluator System

Defines the core architecture for evaluating actions and making decisions.
Each phase evaluator turns the legal actions of one decision into scored
EvaluatedActions; CombinedEvaluator runs the applicable evaluators and picks
the best one.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence
import logging
import math

from ..actions import describe_action
from ..models import GameState, Phase

logger = logging.getLogger(__name__)

NEGATIVE_INFINITY = float("-inf")


@dataclass
class DecisionContext:
    """
    Context information for evaluating a decision.

    Contains all information an evaluator needs to score actions:
    - Current game state snapshot
    - The phase the host is asking about
    - Which player we are
    - The legal actions, in the order the host offered them
    """
    state: GameState
    phase: Phase
    player_id: int
    legal_actions: Sequence[Any] = field(default_factory=list)


@dataclass
class EvaluatedAction:
    """
    An action that has been scored by evaluators.

    Represents a possible decision with:
    - The action to take (and its position in the legal action list)
    - Score (higher = better)
    - Reasoning (for debugging/logging)
    """
    action: Any
    index: int  # Position in DecisionContext.legal_actions
    score: float = 0.0  # Higher = better
    reasoning: List[str] = field(default_factory=list)  # Why this score?
    display_text: str = ""

    def __post_init__(self):
        if not self.display_text:
            self.display_text = describe_action(self.action)

    def add_reasoning(self, reason: str, score_delta: float = 0.0):
        """Add reasoning with optional score adjustment"""
        if score_delta != 0:
            self.reasoning.append(f"{reason} ({score_delta:+.1f})")
            self.score += score_delta
        else:
            self.reasoning.append(reason)

    def __repr__(self):
        return f"EvaluatedAction(index={self.index}, score={self.score:.1f}, {self.display_text})"


class ActionEvaluator(ABC):
    """
    Base class for phase evaluators.

    Each evaluator implements the policy for one kind of decision
    (corporation pick, research buy/discard, main action phase).
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(f"{__name__}.{name}")

    @abstractmethod
    def can_evaluate(self, context: DecisionContext) -> bool:
        """
        Check if this evaluator applies to the given context.

        Returns:
            True if this evaluator should score actions for this decision
        """
        pass

    @abstractmethod
    def evaluate(self, context: DecisionContext) -> List[EvaluatedAction]:
        """
        Evaluate the legal actions and return the scored candidates.

        An empty list means this evaluator has no opinion and the caller
        should fall back to a random pick.
        """
        pass

    def log_evaluation(self, action: EvaluatedAction):
        """Log evaluation for debugging"""
        reasons = " | ".join(action.reasoning)
        self.logger.debug(f"  [{self.name}] {action.display_text}: {action.score:.1f} - {reasons}")


class CombinedEvaluator:
    """
    Combines multiple evaluators to make a final decision.

    Each applicable evaluator scores the actions, then we pick the best.
    The pick is deterministic: strict maximum, first candidate wins ties,
    so even a list where every score is -inf yields its first entry.
    """

    def __init__(self, evaluators: List[ActionEvaluator]):
        self.evaluators = evaluators
        self.logger = logging.getLogger(__name__)

    def rank(self, context: DecisionContext) -> List[EvaluatedAction]:
        """Run every applicable evaluator and collect their candidates in order"""
        all_actions: List[EvaluatedAction] = []

        for evaluator in self.evaluators:
            if evaluator.can_evaluate(context):
                self.logger.debug(f"🔍 Running evaluator: {evaluator.name}")
                actions = evaluator.evaluate(context)
                all_actions.extend(actions)

                for action in actions:
                    evaluator.log_evaluation(action)

        return all_actions

    def evaluate_decision(self, context: DecisionContext,
                          all_actions: Optional[List[EvaluatedAction]] = None) -> Optional[EvaluatedAction]:
        """
        Run all applicable evaluators and return the best action.

        Pass all_actions to choose among candidates already produced by rank().

        Returns:
            Best evaluated action, or None if no evaluator produced a candidate
        """
        if all_actions is None:
            all_actions = self.rank(context)

        if not all_actions:
            self.logger.warning(f"⚠️  No evaluators produced actions for phase {context.phase.value}")
            return None

        best_action = pick_best(all_actions)

        if math.isinf(best_action.score) and best_action.score < 0:
            self.logger.info(f"⚠️  All actions scored -inf, taking first: {best_action.display_text}")
        else:
            self.logger.info(f"✅ Best action: {best_action.display_text} (score: {best_action.score:.1f})")
        if best_action.reasoning:
            self.logger.debug(f"   Reasoning: {' | '.join(best_action.reasoning)}")

        return best_action


def pick_best(actions: Sequence[EvaluatedAction]) -> EvaluatedAction:
    """Strict maximum by score; earlier candidates win ties"""
    best = actions[0]
    for candidate in actions[1:]:
        if candidate.score > best.score:
            best = candidate
    return best
