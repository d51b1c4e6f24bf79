"""
Brain Interface - The contract between the game engine and decision-making AI.

This interface allows for swappable "brains". The host game loop calls
select_action() once per decision point with the phase, a read-only state
snapshot and the legal actions, and gets one of those actions back.

Key principle: The brain should be a pure function of the state.
Given context, return decision. No side effects on the game.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from tmai.actions import describe_action
from tmai.models import GameState, Phase


@dataclass
class BrainDecision:
    """
    The brain's decision output.

    Simple structure: what to do and why.
    """
    action: Any  # One of the legal actions
    index: int  # Its position in the legal action list
    score: float  # Score of the chosen action (-inf allowed)
    reasoning: str  # Human-readable explanation for logging/debugging
    random_fallback: bool = False  # True if no rule applied and we picked at random
    alternative_considered: Optional[Any] = None  # Runner-up action (for logging)
    scores: List[float] = field(default_factory=list)  # Score of every ranked candidate

    def to_dict(self) -> dict:
        """Convert to dictionary for logging"""
        return {
            'action': describe_action(self.action),
            'index': self.index,
            'score': self.score,
            'reasoning': self.reasoning,
            'random_fallback': self.random_fallback,
            'alternative': describe_action(self.alternative_considered)
            if self.alternative_considered is not None else None,
        }


class Brain(ABC):
    """
    Abstract base class for all decision-making implementations.

    The engine only calls these methods - it doesn't care how the
    brain makes decisions internally.
    """

    @abstractmethod
    def make_decision(self, phase: Phase, state: GameState, legal_actions: Sequence[Any]) -> BrainDecision:
        """
        Given game context, return a decision with its reasoning.

        Args:
            phase: Current game phase
            state: Read-only game state snapshot
            legal_actions: Non-empty list of legal actions

        Returns:
            BrainDecision naming one of legal_actions
        """
        pass

    def select_action(self, phase: Phase, state: GameState, legal_actions: Sequence[Any]) -> Any:
        """
        Pick one of legal_actions.

        This is the ONLY method the engine needs to call during gameplay.
        """
        return self.make_decision(phase, state, legal_actions).action

    @abstractmethod
    def copy(self) -> 'Brain':
        """Return a brain the host can hand to a duplicated game"""
        pass

    @abstractmethod
    def get_personality_name(self) -> str:
        """
        Return brain personality name.

        Examples: 'RuleBasedBrain', 'Random', etc.
        """
        pass

    def on_game_start(self, player_id: int, n_players: int):
        """
        Called when a game begins (optional to override).

        Use this to initialize any per-game state.
        """
        pass

    def on_game_end(self, final_state: GameState, won: bool):
        """Called when a game ends (optional to override)."""
        pass

    def __str__(self) -> str:
        return self.get_personality_name()
