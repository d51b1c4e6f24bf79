"""
Strategy Configuration

Loads optional strategy overrides from a JSON file so the bot can be tuned
without code changes. Every knob has a built-in default; with no file the bot
plays with its stock weights.

Usage:
    from tmai.strategy_config import get_config

    lead_cap = get_config().get('awards', 'lead_cap', default=5)

Environment:
    TMAI_STRATEGY_CONFIG - Path to JSON config file (optional)

File format:
    {
        "name": "baseline",
        "version": "1.0.0",
        "corporation_select": {"priority": ["ecoline", "helion"]},
        "research": {"budget_ratio": 0.5, "card_cost": 3},
        "awards": {"lead_cap": 5},
        "milestones": {"max_claimed": 3}
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .config import load_config

logger = logging.getLogger(__name__)


class StrategyConfig:
    """
    Loads and provides access to strategy overrides from JSON.

    Missing files and bad JSON are logged and fall back to an empty config,
    so every lookup returns the caller's default.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the strategy config.

        Args:
            config_path: Path to JSON config file. If not provided, uses
                        TMAI_STRATEGY_CONFIG (via tmai.config). None = defaults only.
        """
        path = config_path or load_config().STRATEGY_CONFIG
        self.path: Optional[Path] = Path(path) if path else None

        self._config: Dict[str, Any] = {}
        self._loaded = False
        self._load()

    def _load(self):
        """Load configuration from JSON file."""
        self._config = {}
        self._loaded = False

        if self.path is None:
            logger.debug("No strategy config file set, using built-in weights")
            return

        try:
            if self.path.exists():
                with open(self.path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    logger.error(f"Strategy config {self.path} is not a JSON object, using defaults")
                    return
                self._config = data
                self._loaded = True
                logger.info(f"Loaded strategy config from: {self.path}")
                logger.info(f"  Config name: {self._config.get('name', 'unknown')}")
                logger.info(f"  Config version: {self._config.get('version', 'unknown')}")
            else:
                logger.warning(f"Strategy config not found: {self.path}, using defaults")
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in strategy config {self.path}: {e}")
            self._config = {}
        except OSError as e:
            logger.error(f"Error reading strategy config {self.path}: {e}")
            self._config = {}

    def reload(self):
        """Reload configuration from file."""
        self._load()

    @property
    def name(self) -> str:
        return self._config.get('name', 'default')

    @property
    def version(self) -> str:
        return self._config.get('version', '0.0.0')

    @property
    def is_loaded(self) -> bool:
        """Check if a config file was successfully loaded."""
        return self._loaded

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            section: Config section (e.g., 'research', 'awards')
            key: Key within section (e.g., 'budget_ratio')
            default: Default value if not found

        Returns:
            The config value or default
        """
        section_data = self._config.get(section, {})
        if not isinstance(section_data, dict):
            return default
        return section_data.get(key, default)

    def get_global(self, key: str, default: Any = None) -> Any:
        return self.get('global', key, default)

    def get_section(self, section: str) -> Dict[str, Any]:
        return self._config.get(section, {})

    def as_dict(self) -> Dict[str, Any]:
        return self._config.copy()


# Global singleton instance
_config: Optional[StrategyConfig] = None


def get_config() -> StrategyConfig:
    """
    Get the global strategy config singleton.

    Returns:
        The StrategyConfig instance
    """
    global _config
    if _config is None:
        _config = StrategyConfig()
    return _config


def set_config_path(path: str):
    """
    Set the config path and reload.

    Used for testing or switching between configs at runtime.
    """
    global _config
    _config = StrategyConfig(path)


def reload_config():
    """Reload the current configuration from file."""
    global _config
    if _config:
        _config.reload()


def reset_config():
    """Drop the singleton so the next get_config() re-reads the environment."""
    global _config
    _config = None
