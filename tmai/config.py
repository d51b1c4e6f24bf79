import os
from dataclasses import dataclass
from typing import Optional


def _env_int(name: str) -> Optional[int]:
    value = os.environ.get(name, '').strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass
class Config:
    """Process-level configuration for the Terraforming Mars bot"""

    # Seed for brains constructed without an explicit seed (None = OS entropy)
    RANDOM_SEED: Optional[int] = None

    # Path to a JSON strategy override file (see tmai.strategy_config)
    STRATEGY_CONFIG: Optional[str] = None

    # Display name reported to the host harness
    BOT_NAME: str = 'RuleBasedBrain'


def load_config() -> Config:
    """Build a Config from the current environment"""
    return Config(
        RANDOM_SEED=_env_int('TMAI_RANDOM_SEED'),
        STRATEGY_CONFIG=os.environ.get('TMAI_STRATEGY_CONFIG') or None,
        BOT_NAME=os.environ.get('TMAI_BOT_NAME', 'RuleBasedBrain'),
    )

