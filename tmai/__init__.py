"""
Rule-based decision engine for Terraforming Mars.

Scores the legal actions offered at each decision point with stage-dependent
heuristics and picks the best one. No search: every decision is one-ply.
"""

from .actions import (
    ActionKind, AddResourceOnCard, BuyCard, ChoiceAction, ClaimAwardMilestone, CompoundAction,
    DiscardCard, DrawCard, ModifyGlobalParameter, ModifyPlayerResource, PassAction, PayForAction,
    PlaceTile, PlayCard, TMAction, TopCardDecision, UnknownAction,
)
from .game_stage import GameStage, get_game_stage
from .milestones import get_winning_award, is_close_to_milestone, is_player_winning
from .models import (
    Award, Card, ClaimType, GameState, GlobalParameter, GlobalParameterType, GridBoard, MapTile,
    MapTileType, Milestone, Phase, Requirement, Resource, ResourceCounter, Tag, Tile,
)

__all__ = [
    'ActionKind', 'AddResourceOnCard', 'BuyCard', 'ChoiceAction', 'ClaimAwardMilestone',
    'CompoundAction', 'DiscardCard', 'DrawCard', 'ModifyGlobalParameter', 'ModifyPlayerResource',
    'PassAction', 'PayForAction', 'PlaceTile', 'PlayCard', 'TMAction', 'TopCardDecision',
    'UnknownAction',
    'GameStage', 'get_game_stage',
    'get_winning_award', 'is_close_to_milestone', 'is_player_winning',
    'Award', 'Card', 'ClaimType', 'GameState', 'GlobalParameter', 'GlobalParameterType',
    'GridBoard', 'MapTile', 'MapTileType', 'Milestone', 'Phase', 'Requirement', 'Resource',
    'ResourceCounter', 'Tag', 'Tile',
]
