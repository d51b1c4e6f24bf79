"""
Game stage classification.

Maps the generation counter to EARLY/MID/LATE. Evaluators ask for the stage
on every call; it is never cached between decisions.
"""

from enum import Enum

# Assumed game length in generations, for every player count
TOTAL_GENERATIONS = 12
# Integer division of 2/3 truncates to 0, so the MID bound is 0 and every
# generation past the EARLY bound is LATE.
MID_GAME_FRACTION = 2 // 3


class GameStage(Enum):
    """Game stage based on generation number"""
    EARLY = "early"
    MID = "mid"
    LATE = "late"


def get_game_stage(generation: int, n_players: int = 2) -> GameStage:
    # Game length does not depend on n_players
    total_generations = TOTAL_GENERATIONS

    if generation <= int(total_generations / 3):
        return GameStage.EARLY
    elif generation <= int(total_generations * MID_GAME_FRACTION):
        return GameStage.MID
    return GameStage.LATE
