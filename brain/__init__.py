"""
Brain Package

The brain is responsible for decision-making logic separate from the game engine.
This allows for swappable AI implementations and testing.
"""

from .interface import (
    Brain,
    BrainDecision,
)

from .rule_based_brain import RuleBasedBrain

__all__ = [
    'Brain',
    'BrainDecision',
    'RuleBasedBrain',
]
