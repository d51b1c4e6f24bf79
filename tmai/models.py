"""
Data models for the Terraforming Mars game state.

These are the read-only structures the host engine hands to the bot at each
decision point. The bot never mutates them; everything it needs to score an
action is reachable from a GameState snapshot.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

Position = Tuple[int, int]


class Resource(Enum):
    """Player resources (counters on the player board) and card resources"""
    MEGA_CREDIT = "megacredit"
    STEEL = "steel"
    TITANIUM = "titanium"
    PLANT = "plant"
    ENERGY = "energy"
    HEAT = "heat"
    CARD = "card"
    TR = "tr"
    # Resources that live on cards
    MICROBE = "microbe"
    ANIMAL = "animal"
    SCIENCE = "science"
    FIGHTER = "fighter"
    FLOATER = "floater"


class Tag(Enum):
    """Card tags"""
    PLANT = "plant"
    SPACE = "space"
    SCIENCE = "science"
    BUILDING = "building"
    POWER = "power"
    CITY = "city"
    EARTH = "earth"
    JOVIAN = "jovian"
    EVENT = "event"
    MICROBE = "microbe"
    ANIMAL = "animal"
    VENUS = "venus"
    WILD = "wild"


class Tile(Enum):
    """Tiles a player can place on the map"""
    GREENERY = "greenery"
    OCEAN = "ocean"
    CITY = "city"


class MapTileType(Enum):
    """Terrain of a map cell"""
    GROUND = "ground"
    OCEAN = "ocean"
    CITY = "city"      # Reserved city spots (Noctis City etc.)
    VOLCANIC = "volcanic"


class GlobalParameterType(Enum):
    TEMPERATURE = "temperature"
    OXYGEN = "oxygen"
    OCEAN_TILES = "ocean_tiles"
    VENUS = "venus"


class Phase(Enum):
    """Game phases the host asks us to decide in"""
    CORPORATION_SELECT = "corporation_select"
    RESEARCH = "research"
    ACTIONS = "actions"
    PRODUCTION = "production"


class ClaimType(Enum):
    CLAIM_MILESTONE = "claim_milestone"
    FUND_AWARD = "fund_award"


@dataclass
class ResourceCounter:
    """A player's stock of one resource plus its production rate"""
    amount: int = 0
    production: int = 0


@dataclass
class GlobalParameter:
    value: int
    minimum: int
    maximum: int

    def is_maxed(self) -> bool:
        return self.value == self.maximum


@dataclass
class MapTile:
    """A single cell of the Mars board"""
    component_id: int
    x: int
    y: int
    tile_type: MapTileType = MapTileType.GROUND
    tile_placed: Optional[Tile] = None
    owner_id: int = -1  # -1 = nobody (e.g. neutral oceans)
    resources: Tuple[Resource, ...] = ()  # Placement bonuses printed on the cell

    @property
    def position(self) -> Position:
        return (self.x, self.y)


@dataclass
class GridBoard:
    """
    The Mars board as a width x height grid of MapTiles.

    Adjacency is a property of the host engine's topology (the real board is
    hexagonal, test boards are often square), so the engine supplies the
    neighbour function and the bot only ever asks for it.
    """
    width: int
    height: int
    neighbour_fn: Callable[[Position], Iterable[Position]]
    tiles: Dict[Position, MapTile] = field(default_factory=dict)

    def get_element(self, x: int, y: int) -> Optional[MapTile]:
        return self.tiles.get((x, y))

    def get_neighbours(self, position: Position) -> List[Position]:
        return list(self.neighbour_fn(position))

    def get_components(self) -> List[MapTile]:
        return list(self.tiles.values())


@dataclass(frozen=True)
class Requirement:
    """A play requirement printed on a card, e.g. 'oxygen >= 5%'"""
    description: str
    predicate: Callable[['GameState', int], bool]

    def test_condition(self, state: 'GameState', player_id: int) -> bool:
        return bool(self.predicate(state, player_id))


@dataclass
class Card:
    """A project card or corporation card"""
    component_id: int
    name: str
    cost: int = 0
    tags: Tuple[Tag, ...] = ()
    immediate_effects: Tuple[Any, ...] = ()  # Actions from tmai.actions
    requirements: Tuple[Requirement, ...] = ()


@dataclass
class Milestone:
    """Claimable achievement; `minimum` is the progress needed to claim it"""
    component_id: int
    name: str
    minimum: int
    progress_fn: Callable[['GameState', int], int]
    claimed: bool = False

    def check_progress(self, state: 'GameState', player_id: int) -> int:
        return int(self.progress_fn(state, player_id))

    def can_claim(self, state: 'GameState', player_id: int) -> bool:
        return not self.claimed and self.check_progress(state, player_id) >= self.minimum


@dataclass
class Award:
    """End-game award; players compare progress once it has been funded"""
    component_id: int
    name: str
    progress_fn: Callable[['GameState', int], int]
    claimed: bool = False  # Funded
    fundable: bool = True  # Host-side funding limit (max funded awards, cost)

    def check_progress(self, state: 'GameState', player_id: int) -> int:
        return int(self.progress_fn(state, player_id))

    def can_claim(self, state: 'GameState', player_id: int) -> bool:
        return not self.claimed and self.fundable


@dataclass
class GameState:
    """
    Read-only snapshot of a Terraforming Mars game.

    player_resources is indexed by player id and maps each Resource to its
    counter (amount + production). components resolves the ids carried by
    actions (cards, map tiles, awards) to objects.
    """
    generation: int
    n_players: int
    current_player: int
    player_resources: List[Dict[Resource, ResourceCounter]]
    global_parameters: Dict[GlobalParameterType, GlobalParameter]
    board: GridBoard
    milestones: List[Milestone] = field(default_factory=list)
    awards: List[Award] = field(default_factory=list)
    player_card_choice: List[List[Card]] = field(default_factory=list)
    points: List[int] = field(default_factory=list)
    components: Dict[int, Any] = field(default_factory=dict)

    def get_component_by_id(self, component_id: int) -> Optional[Any]:
        return self.components.get(component_id)

    def get_resource(self, player_id: int, resource: Resource) -> ResourceCounter:
        return self.player_resources[player_id].get(resource, ResourceCounter())

    def get_global_parameter(self, param: GlobalParameterType) -> Optional[GlobalParameter]:
        return self.global_parameters.get(param)

    def count_points(self, player_id: int) -> int:
        if player_id < len(self.points):
            return self.points[player_id]
        return 0

    def get_card_choices(self, player_id: int) -> Sequence[Card]:
        if player_id < len(self.player_card_choice):
            return self.player_card_choice[player_id]
        return []
