"""
Tests for the MID-stage scoring terms.

No generation maps to MID, so these tests force the stage in the scorer
modules and pin the MID weights and milestone bonuses.

Run with: python -m pytest tests/test_mid_stage.py -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from tmai.actions import AddResourceOnCard, ModifyGlobalParameter, ModifyPlayerResource, PlaceTile
from tmai.evaluators import action_scorer as action_scorer_module
from tmai.evaluators import card_scorer as card_scorer_module
from tmai.evaluators.action_scorer import ActionScorer
from tmai.game_stage import GameStage
from tmai.models import GlobalParameterType, Resource, Tag, Tile
from tmai.strategy_config import reset_config
from tests.state_builders import make_card, make_milestone, make_state


@pytest.fixture(autouse=True)
def mid_stage(monkeypatch):
    monkeypatch.delenv('TMAI_STRATEGY_CONFIG', raising=False)
    reset_config()
    monkeypatch.setattr(action_scorer_module, 'get_game_stage', lambda generation, n_players=2: GameStage.MID)
    monkeypatch.setattr(card_scorer_module, 'get_game_stage', lambda generation, n_players=2: GameStage.MID)
    yield
    reset_config()


@pytest.fixture
def scorer():
    return ActionScorer()


class TestMidGlobalParameter:
    """Terraformer bonus"""

    def test_close_to_terraformer(self, scorer):
        """27 of 35 TR is 77%, past the 75% threshold: +100"""
        terraformer = make_milestone("Terraformer", 35, {0: 27})
        state = make_state(milestones=[terraformer], points=[30, 20])
        action = ModifyGlobalParameter(param=GlobalParameterType.TEMPERATURE)
        assert scorer.evaluate_action(action, state, 0) == 100.0

    def test_far_from_terraformer(self, scorer):
        """MID is not LATE, so even a points lead adds nothing"""
        terraformer = make_milestone("Terraformer", 35, {0: 20})
        state = make_state(milestones=[terraformer], points=[30, 20])
        action = ModifyGlobalParameter(param=GlobalParameterType.OXYGEN)
        assert scorer.evaluate_action(action, state, 0) == 0.0

    def test_terraformer_with_many_players(self, scorer):
        terraformer = make_milestone("Terraformer", 35, {0: 35})
        state = make_state(n_players=4, milestones=[terraformer])
        action = ModifyGlobalParameter(param=GlobalParameterType.TEMPERATURE)
        assert scorer.evaluate_action(action, state, 0) == 100.0 + 150.0 + 100.0


class TestMidPlantResource:
    """Gardener bonus on plant changes"""

    def test_plant_close_to_gardener(self, scorer):
        gardener = make_milestone("Gardener", 3, {0: 2})
        state = make_state(milestones=[gardener])
        gain = ModifyPlayerResource(resource=Resource.PLANT, change=2)
        production = ModifyPlayerResource(resource=Resource.PLANT, change=1, production=True)
        assert scorer.evaluate_action(gain, state, 0) == 252.0
        assert scorer.evaluate_action(production, state, 0) == 301.0

    def test_plant_far_from_gardener(self, scorer):
        gardener = make_milestone("Gardener", 3, {0: 1})
        state = make_state(milestones=[gardener])
        gain = ModifyPlayerResource(resource=Resource.PLANT, change=2)
        assert scorer.evaluate_action(gain, state, 0) == 152.0

    def test_mega_credits_use_non_late_table(self, scorer):
        action = ModifyPlayerResource(resource=Resource.MEGA_CREDIT, change=2, production=True)
        assert scorer.evaluate_action(action, make_state(), 0) == 1002.0


class TestMidOtherActions:
    """Non-EARLY rules also apply in MID"""

    def test_greenery_weight(self, scorer):
        assert scorer.evaluate_action(PlaceTile(tile=Tile.GREENERY), make_state(), 0) == 500.0

    def test_card_resource_removal_not_penalised(self, scorer):
        action = AddResourceOnCard(resource=Resource.ANIMAL, amount=-1, card_id=7)
        assert scorer.evaluate_action(action, make_state(), 0) == 20.0


class TestMidCardScoring:
    """MID tag weights and milestone bonuses; base card is 2 cheap + 1 affordability"""

    @pytest.mark.parametrize("tag,weight", [
        (Tag.PLANT, 8.0),
        (Tag.SPACE, 1.0),
        (Tag.SCIENCE, 5.0),
        (Tag.BUILDING, 6.0),
        (Tag.POWER, 2.0),
        (Tag.CITY, 8.0),
        (Tag.EARTH, 1.0),
        (Tag.JOVIAN, 2.0),
        (Tag.EVENT, 9.0),
        (Tag.MICROBE, 2.0),
        (Tag.ANIMAL, 6.0),
    ])
    def test_tag_weight(self, scorer, tag, weight):
        state = make_state(mega_credits=[20, 20])
        card = make_card(1, cost=10, tags=(tag,))
        assert scorer.evaluate_card(card, state, 0) == 3.0 + weight

    @pytest.mark.parametrize("tag,milestone,minimum,progress,expected", [
        (Tag.PLANT, "Gardener", 3, 2, 3.0 + 8.0 + 100.0),
        (Tag.BUILDING, "Builder", 8, 6, 3.0 + 6.0 + 1000.0),
        (Tag.CITY, "Mayor", 3, 2, 3.0 + 8.0 + 1000.0),
    ])
    def test_milestone_bonus(self, scorer, tag, milestone, minimum, progress, expected):
        state = make_state(mega_credits=[20, 20],
                           milestones=[make_milestone(milestone, minimum, {0: progress})])
        card = make_card(1, cost=10, tags=(tag,))
        assert scorer.evaluate_card(card, state, 0) == expected

    def test_builder_below_threshold(self, scorer):
        """5 of 8 is 62.5%, short of 75%"""
        state = make_state(mega_credits=[20, 20], milestones=[make_milestone("Builder", 8, {0: 5})])
        card = make_card(1, cost=10, tags=(Tag.BUILDING,))
        assert scorer.evaluate_card(card, state, 0) == 3.0 + 6.0

    def test_effects_unweighted(self, scorer):
        """Economy weight is 1 outside EARLY"""
        state = make_state(mega_credits=[20, 20])
        effect = ModifyPlayerResource(resource=Resource.TR, change=1)
        card = make_card(1, cost=10, immediate_effects=(effect,))
        assert scorer.evaluate_card(card, state, 0) == 3.0 + 101.0
