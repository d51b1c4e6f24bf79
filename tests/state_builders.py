"""
Builders for test game states.

Square boards with 4-neighbour adjacency, map tile ids starting at
TILE_ID_BASE, and helpers for cards, milestones and awards with fixed
progress tables.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from typing import Dict, List, Optional

from tmai.models import (
    Award, Card, GameState, GlobalParameter, GlobalParameterType, GridBoard, MapTile,
    MapTileType, Milestone, Resource, ResourceCounter, Tile,
)

TILE_ID_BASE = 1000
BOARD_SIZE = 5


def orthogonal_neighbours(position):
    x, y = position
    return [(x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)]


def tile_id(x: int, y: int, width: int = BOARD_SIZE) -> int:
    return TILE_ID_BASE + y * width + x


def make_board(width: int = BOARD_SIZE, height: int = BOARD_SIZE) -> GridBoard:
    tiles = {}
    for y in range(height):
        for x in range(width):
            tiles[(x, y)] = MapTile(component_id=tile_id(x, y, width), x=x, y=y)
    return GridBoard(width=width, height=height, neighbour_fn=orthogonal_neighbours, tiles=tiles)


def place(board: GridBoard, x: int, y: int, tile: Tile, owner_id: int = -1) -> MapTile:
    """Put a tile on the board (mutates the test board)"""
    map_tile = board.get_element(x, y)
    map_tile.tile_placed = tile
    map_tile.owner_id = owner_id
    return map_tile


def default_global_parameters() -> Dict[GlobalParameterType, GlobalParameter]:
    return {
        GlobalParameterType.TEMPERATURE: GlobalParameter(value=-30, minimum=-30, maximum=8),
        GlobalParameterType.OXYGEN: GlobalParameter(value=0, minimum=0, maximum=14),
        GlobalParameterType.OCEAN_TILES: GlobalParameter(value=0, minimum=0, maximum=9),
    }


def make_state(generation: int = 1, n_players: int = 2, current_player: int = 0,
               mega_credits: Optional[List[int]] = None, mc_production: Optional[List[int]] = None,
               board: Optional[GridBoard] = None, milestones=None, awards=None,
               card_choices=None, points=None, cards=None,
               global_parameters=None) -> GameState:
    """
    Build a game state with every map tile, card and award registered as a component.

    mega_credits / mc_production are per player (default 20 MC, 0 production).
    """
    if mega_credits is None:
        mega_credits = [20] * n_players
    if mc_production is None:
        mc_production = [0] * n_players
    if board is None:
        board = make_board()

    player_resources = []
    for player in range(n_players):
        player_resources.append({
            Resource.MEGA_CREDIT: ResourceCounter(amount=mega_credits[player], production=mc_production[player]),
        })

    components = {}
    for map_tile in board.get_components():
        components[map_tile.component_id] = map_tile
    for card in (cards or []):
        components[card.component_id] = card
    for award in (awards or []):
        components[award.component_id] = award
    for choices in (card_choices or []):
        for card in choices:
            components[card.component_id] = card

    return GameState(
        generation=generation,
        n_players=n_players,
        current_player=current_player,
        player_resources=player_resources,
        global_parameters=global_parameters or default_global_parameters(),
        board=board,
        milestones=list(milestones or []),
        awards=list(awards or []),
        player_card_choice=list(card_choices or []),
        points=list(points or []),
        components=components,
    )


def make_card(component_id: int, name: str = "", cost: int = 0, **kwargs) -> Card:
    return Card(component_id=component_id, name=name or f"Card {component_id}", cost=cost, **kwargs)


def make_milestone(name: str, minimum: int, progress: Dict[int, int], claimed: bool = False,
                   component_id: int = 500) -> Milestone:
    """Milestone whose progress for each player comes from a fixed table"""
    return Milestone(component_id=component_id, name=name, minimum=minimum,
                     progress_fn=lambda state, player: progress.get(player, 0), claimed=claimed)


def make_award(name: str, progress: Dict[int, int], component_id: int = 600,
               claimed: bool = False, fundable: bool = True) -> Award:
    """Award whose progress for each player comes from a fixed table"""
    return Award(component_id=component_id, name=name,
                 progress_fn=lambda state, player: progress.get(player, 0),
                 claimed=claimed, fundable=fundable)


def set_tile_type(board: GridBoard, x: int, y: int, tile_type: MapTileType):
    board.get_element(x, y).tile_type = tile_type
