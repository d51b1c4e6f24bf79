"""
Rule-Based Brain Implementation

Uses the evaluator system to pick an action at every decision point:
corporation preference list, research buy/discard budget, and greedy
one-ply scoring of the action phase.

This is the default brain. Whenever no rule applies (unknown phase, no
matching corporation, nothing to buy or discard) it picks uniformly at
random from the legal actions with its own seeded random stream.
"""

import logging
import random
from typing import Any, List, Optional, Sequence

from .interface import Brain, BrainDecision
from tmai.config import load_config
from tmai.evaluators import (
    ActionPhaseEvaluator, ActionScorer, CombinedEvaluator, CorporationEvaluator, ResearchEvaluator,
)
from tmai.evaluators.base import DecisionContext, EvaluatedAction, pick_best
from tmai.models import GameState, Phase

logger = logging.getLogger(__name__)


class RuleBasedBrain(Brain):
    """
    Static rule-based brain using the evaluator system.

    One instance serves one game at a time: the random stream is the only
    mutable state and is not shared between instances.
    """

    def __init__(self, player_id: Optional[int] = None, seed: Optional[int] = None):
        """Initialize brain with evaluators"""
        if seed is None:
            seed = load_config().RANDOM_SEED
        self.seed = seed
        self.random = random.Random(seed)
        self.player_id = player_id

        self.action_scorer = ActionScorer()
        self.evaluators = [
            CorporationEvaluator(),                     # CORPORATION_SELECT
            ResearchEvaluator(self.action_scorer),      # RESEARCH buy/discard
            ActionPhaseEvaluator(self.action_scorer),   # ACTIONS
        ]
        self.combined_evaluator = CombinedEvaluator(self.evaluators)

        # Game tracking
        self.n_players = 0
        self.decisions_made = []

    def _context(self, phase: Phase, state: GameState, legal_actions: Sequence[Any]) -> DecisionContext:
        player_id = self.player_id if self.player_id is not None else state.current_player
        return DecisionContext(state=state, phase=phase, player_id=player_id,
                               legal_actions=list(legal_actions))

    def rank_actions(self, phase: Phase, state: GameState, legal_actions: Sequence[Any]) -> List[EvaluatedAction]:
        """
        Score the legal actions without choosing one.

        Returns every candidate the applicable evaluators produced, in
        legal-action order. Empty when no rule applies to this decision.
        """
        context = self._context(phase, state, legal_actions)
        return sorted(self.combined_evaluator.rank(context), key=lambda a: a.index)

    def make_decision(self, phase: Phase, state: GameState, legal_actions: Sequence[Any]) -> BrainDecision:
        """
        Make a decision using the evaluator system.

        Raises:
            ValueError: if legal_actions is empty
        """
        if not legal_actions:
            raise ValueError(f"No legal actions offered in phase {phase.value}")

        context = self._context(phase, state, legal_actions)
        candidates = self.combined_evaluator.rank(context)
        best_action = self.combined_evaluator.evaluate_decision(context, candidates)

        if best_action is None:
            index = self.random.randrange(len(context.legal_actions))
            action = context.legal_actions[index]
            logger.debug(f"🎲 RuleBasedBrain: no rule for {phase.value}, random pick #{index}")
            decision = BrainDecision(
                action=action,
                index=index,
                score=0.0,
                reasoning=f"Fallback: random pick in phase {phase.value}",
                random_fallback=True,
            )
        else:
            runner_up = None
            others = [c for c in candidates if c.index != best_action.index]
            if others:
                runner_up = pick_best(others).action

            reasoning = best_action.display_text
            if best_action.reasoning:
                reasoning += " | " + " | ".join(best_action.reasoning)

            decision = BrainDecision(
                action=best_action.action,
                index=best_action.index,
                score=best_action.score,
                reasoning=reasoning,
                alternative_considered=runner_up,
                scores=[c.score for c in sorted(candidates, key=lambda a: a.index)],
            )

        self.decisions_made.append((phase.value, decision.index, decision.score))
        return decision

    def copy(self) -> 'RuleBasedBrain':
        """The brain has no per-game state besides its random stream, so share it"""
        return self

    def on_game_start(self, player_id: int, n_players: int):
        """Called when game starts - initialize tracking"""
        self.player_id = player_id
        self.n_players = n_players
        self.decisions_made = []
        logger.info(f"🤖 RuleBasedBrain: Game started as player {player_id} of {n_players}")

    def on_game_end(self, final_state: GameState, won: bool):
        """Called when game ends - log statistics"""
        logger.info(f"🤖 RuleBasedBrain: Game ended - {'Won' if won else 'Lost'}")
        logger.info(f"📊 Decisions made: {len(self.decisions_made)}")

    def get_personality_name(self) -> str:
        """Return personality name"""
        return load_config().BOT_NAME
