"""
Tile Placement Scoring

Scores a PlaceTile action by looking at the map cell it targets and the
cells around it. Neighbour positions always come from the host board's own
topology (GridBoard.get_neighbours).

- Greenery: next to our cities, away from opponent cities, near oceans
- City: away from the board edge, next to ground and greeneries, max 4 cities
- Ocean: next to our own tiles; every other placed tile counts against it
"""

import logging
from typing import List, Optional

from ..actions import PlaceTile
from ..models import GameState, MapTile, MapTileType, Resource, Tile
from .base import NEGATIVE_INFINITY

logger = logging.getLogger(__name__)

# Greenery
OWN_CITY_NEIGHBOUR_BONUS = 800.0
OPPONENT_CITY_NEIGHBOUR_PENALTY = -500.0
OCEAN_NEIGHBOUR_BONUS = 1.0
PLANT_PLACEMENT_BONUS = 10.0

# City
CORNER_PENALTY = -200.0
EDGE_PENALTY = -150.0
GROUND_NEIGHBOUR_BONUS = 2.0
GREENERY_NEIGHBOUR_BONUS = 20.0
MAX_CITIES = 4


def resolve_map_tile(action: PlaceTile, state: GameState) -> Optional[MapTile]:
    """The MapTile a PlaceTile targets, or None if the id does not resolve to one"""
    component = state.get_component_by_id(action.map_tile_id)
    if isinstance(component, MapTile):
        return component
    if component is not None:
        logger.warning(f"PlaceTile target {action.map_tile_id} is not a map tile: {component!r}")
    return None


def neighbour_tiles(tile: MapTile, state: GameState) -> List[MapTile]:
    """Map tiles adjacent to `tile`; positions off the board are skipped"""
    neighbours = []
    for x, y in state.board.get_neighbours(tile.position):
        neighbour = state.board.get_element(x, y)
        if neighbour is not None:
            neighbours.append(neighbour)
    return neighbours


def count_player_cities(state: GameState, player_id: int) -> int:
    return sum(
        1 for map_tile in state.board.get_components()
        if map_tile is not None and map_tile.tile_placed == Tile.CITY and map_tile.owner_id == player_id
    )


def evaluate_place_greenery(action: PlaceTile, state: GameState, player_id: int) -> float:
    tile = resolve_map_tile(action, state)
    if tile is None or tile.tile_type != MapTileType.GROUND:
        return NEGATIVE_INFINITY

    score = 0.0
    for neighbour in neighbour_tiles(tile, state):
        if neighbour.tile_placed == Tile.CITY:
            if neighbour.owner_id == player_id:
                score += OWN_CITY_NEIGHBOUR_BONUS
            elif neighbour.owner_id >= 0:
                score += OPPONENT_CITY_NEIGHBOUR_PENALTY
        elif neighbour.tile_placed == Tile.OCEAN:
            score += OCEAN_NEIGHBOUR_BONUS

    if Resource.PLANT in tile.resources:
        score += PLANT_PLACEMENT_BONUS

    return score


def evaluate_place_city(action: PlaceTile, state: GameState, player_id: int) -> float:
    tile = resolve_map_tile(action, state)
    if tile is None or tile.tile_type != MapTileType.GROUND:
        return NEGATIVE_INFINITY

    if count_player_cities(state, player_id) >= MAX_CITIES:
        logger.debug(f"Player {player_id} already has {MAX_CITIES} cities")
        return NEGATIVE_INFINITY

    score = 0.0
    board = state.board
    is_x_edge = tile.x == 0 or tile.x == board.width - 1
    is_y_edge = tile.y == 0 or tile.y == board.height - 1

    if is_x_edge and is_y_edge:
        score += CORNER_PENALTY
    elif is_x_edge or is_y_edge:
        score += EDGE_PENALTY

    adjacent_ground = 0
    adjacent_greenery = 0
    for neighbour in neighbour_tiles(tile, state):
        if neighbour.tile_placed == Tile.GREENERY:
            adjacent_greenery += 1
        if neighbour.tile_type == MapTileType.GROUND:
            adjacent_ground += 1

    score += adjacent_ground * GROUND_NEIGHBOUR_BONUS
    score += adjacent_greenery * GREENERY_NEIGHBOUR_BONUS

    return score


def evaluate_place_ocean(action: PlaceTile, state: GameState, player_id: int) -> float:
    tile = resolve_map_tile(action, state)
    if tile is None:
        return NEGATIVE_INFINITY

    own_tiles = 0
    opponent_tiles = 0
    for neighbour in neighbour_tiles(tile, state):
        if neighbour.tile_placed is None:
            continue
        if neighbour.owner_id == player_id:
            own_tiles += 1
        else:
            opponent_tiles += 1

    return 2.0 * own_tiles - opponent_tiles
