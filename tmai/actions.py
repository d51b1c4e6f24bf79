"""
Action types offered by the Terraforming Mars engine.

Every legal action the host hands us is one of the classes below. Each class
carries a `kind` tag so scorers can dispatch on a closed set of kinds instead
of walking an open class hierarchy. Wrapper actions (Choice, Compound, PayFor)
hold inner actions and form a tree that scoring folds over.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple

from .models import ClaimType, GlobalParameterType, Resource, Tile


class ActionKind(Enum):
    """Closed set of action kinds the bot knows how to score"""
    CHOICE = "choice"
    COMPOUND = "compound"
    PAY_FOR = "pay_for"
    PLAY_CARD = "play_card"
    BUY_CARD = "buy_card"
    DISCARD_CARD = "discard_card"
    MODIFY_GLOBAL_PARAMETER = "modify_global_parameter"
    MODIFY_PLAYER_RESOURCE = "modify_player_resource"
    PLACE_TILE = "place_tile"
    CLAIM_AWARD_MILESTONE = "claim_award_milestone"
    ADD_RESOURCE_ON_CARD = "add_resource_on_card"
    DRAW_CARD = "draw_card"
    PASS = "pass"
    TOP_CARD_DECISION = "top_card_decision"

    # Anything the engine offers that we have no rule for
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TMAction:
    """Base class for all actions"""
    kind: ClassVar[ActionKind] = ActionKind.UNKNOWN

    def describe(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class ChoiceAction(TMAction):
    """The player picks one of `actions`"""
    kind: ClassVar[ActionKind] = ActionKind.CHOICE
    actions: Tuple[TMAction, ...] = ()

    def describe(self) -> str:
        return "Choice[" + " | ".join(a.describe() for a in self.actions) + "]"


@dataclass(frozen=True)
class CompoundAction(TMAction):
    """All of `actions` happen together"""
    kind: ClassVar[ActionKind] = ActionKind.COMPOUND
    actions: Tuple[TMAction, ...] = ()

    def describe(self) -> str:
        return "Compound[" + " + ".join(a.describe() for a in self.actions) + "]"


@dataclass(frozen=True)
class PayForAction(TMAction):
    """Pay `cost` of `resource` to perform `action`"""
    kind: ClassVar[ActionKind] = ActionKind.PAY_FOR
    action: TMAction = None
    cost: int = 0
    resource: Resource = Resource.MEGA_CREDIT

    def describe(self) -> str:
        inner = self.action.describe() if self.action is not None else "?"
        return f"Pay {self.cost} {self.resource.value} for {inner}"


@dataclass(frozen=True)
class PlayCard(TMAction):
    kind: ClassVar[ActionKind] = ActionKind.PLAY_CARD
    card_id: int = -1

    def describe(self) -> str:
        return f"PlayCard({self.card_id})"


@dataclass(frozen=True)
class BuyCard(TMAction):
    """Keep a card (research) or pick a corporation (setup)"""
    kind: ClassVar[ActionKind] = ActionKind.BUY_CARD
    card_id: int = -1

    def describe(self) -> str:
        return f"BuyCard({self.card_id})"


@dataclass(frozen=True)
class DiscardCard(TMAction):
    kind: ClassVar[ActionKind] = ActionKind.DISCARD_CARD
    card_id: int = -1

    def describe(self) -> str:
        return f"DiscardCard({self.card_id})"


@dataclass(frozen=True)
class ModifyGlobalParameter(TMAction):
    kind: ClassVar[ActionKind] = ActionKind.MODIFY_GLOBAL_PARAMETER
    param: GlobalParameterType = GlobalParameterType.TEMPERATURE
    change: int = 1

    def describe(self) -> str:
        return f"Raise {self.param.value} by {self.change}"


@dataclass(frozen=True)
class ModifyPlayerResource(TMAction):
    kind: ClassVar[ActionKind] = ActionKind.MODIFY_PLAYER_RESOURCE
    resource: Resource = Resource.MEGA_CREDIT
    change: float = 0
    production: bool = False

    def describe(self) -> str:
        what = "production" if self.production else "amount"
        return f"{self.resource.value} {what} {self.change:+g}"


@dataclass(frozen=True)
class PlaceTile(TMAction):
    kind: ClassVar[ActionKind] = ActionKind.PLACE_TILE
    tile: Tile = Tile.GREENERY
    map_tile_id: int = -1  # -1 = location not chosen yet

    def describe(self) -> str:
        return f"Place {self.tile.value} on {self.map_tile_id}"


@dataclass(frozen=True)
class ClaimAwardMilestone(TMAction):
    kind: ClassVar[ActionKind] = ActionKind.CLAIM_AWARD_MILESTONE
    action_type: ClaimType = ClaimType.CLAIM_MILESTONE
    to_claim_id: int = -1

    def describe(self) -> str:
        return f"{self.action_type.value}({self.to_claim_id})"


@dataclass(frozen=True)
class AddResourceOnCard(TMAction):
    kind: ClassVar[ActionKind] = ActionKind.ADD_RESOURCE_ON_CARD
    resource: Resource = Resource.MICROBE
    amount: int = 1
    card_id: int = -1

    def describe(self) -> str:
        return f"{self.amount:+d} {self.resource.value} on card {self.card_id}"


@dataclass(frozen=True)
class DrawCard(TMAction):
    kind: ClassVar[ActionKind] = ActionKind.DRAW_CARD
    count: int = 1


@dataclass(frozen=True)
class PassAction(TMAction):
    """Pass for the rest of the generation"""
    kind: ClassVar[ActionKind] = ActionKind.PASS

    def describe(self) -> str:
        return "Pass"


@dataclass(frozen=True)
class TopCardDecision(TMAction):
    """Look at the top cards of the deck and keep some (engine-side bug, never chosen)"""
    kind: ClassVar[ActionKind] = ActionKind.TOP_CARD_DECISION
    n_cards: int = 1


@dataclass(frozen=True)
class UnknownAction(TMAction):
    """Placeholder for engine actions without a scoring rule"""
    kind: ClassVar[ActionKind] = ActionKind.UNKNOWN
    label: str = ""

    def describe(self) -> str:
        return self.label or "UnknownAction"


def action_kind(action) -> ActionKind:
    """Kind tag of any object offered as an action; untagged objects are UNKNOWN"""
    kind = getattr(action, "kind", ActionKind.UNKNOWN)
    return kind if isinstance(kind, ActionKind) else ActionKind.UNKNOWN


def describe_action(action) -> str:
    if isinstance(action, TMAction):
        return action.describe()
    return repr(action)
