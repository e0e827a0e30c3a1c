"""Settings loading for dealt rounds."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import json
import logging
import os

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "POKER_HANDS_SEED"
DEFAULT_PLAYERS = ["Player 1", "Player 2"]
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
KNOWN_FIELDS = {"players", "seed", "logLevel"}


def _seed_from_env() -> Optional[int]:
    raw = os.environ.get(SEED_ENV_VAR)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{SEED_ENV_VAR} must be an integer, got {raw!r}")


@dataclass
class RoundSettings:
    """
    Settings for dealing a Hold'em round.

    Attributes:
        players: Player names in seat order
        seed: Seed for the shuffle; None deals a different round every time
        log_level: Name of the logging level used by the command line
    """
    players: List[str] = field(default_factory=lambda: list(DEFAULT_PLAYERS))
    seed: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_file(cls, filepath: Path,
                  overrides: Optional[Dict[str, Any]] = None) -> 'RoundSettings':
        """
        Load RoundSettings from a JSON file.

        Args:
            filepath: Path to JSON configuration file
            overrides: Fields that replace the file's values before validation

        Returns:
            RoundSettings instance
        """
        with open(filepath, 'r') as f:
            return cls.from_json(f.read(), overrides)

    @classmethod
    def from_json(cls, json_str: str,
                  overrides: Optional[Dict[str, Any]] = None) -> 'RoundSettings':
        """
        Create RoundSettings from JSON string.

        Raises:
            ValueError: If JSON is invalid or a field has the wrong type
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")
        if not isinstance(data, dict):
            raise ValueError("Settings must be a JSON object")
        if overrides:
            data.update(overrides)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RoundSettings':
        unknown = set(data) - KNOWN_FIELDS
        if unknown:
            logger.warning(f"Ignoring unknown settings: {sorted(unknown)}")

        players = data.get('players', list(DEFAULT_PLAYERS))
        if (not isinstance(players, list) or not players
                or not all(isinstance(p, str) and p for p in players)):
            raise ValueError("'players' must be a non-empty list of names")
        if len(set(players)) != len(players):
            raise ValueError(f"Duplicate player names: {players}")

        # An explicit seed, even null, wins over the environment
        seed = data['seed'] if 'seed' in data else _seed_from_env()
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ValueError(f"'seed' must be an integer, got {seed!r}")

        log_level = str(data.get('logLevel', "WARNING")).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid logLevel: {log_level}")

        return cls(players=players, seed=seed, log_level=log_level)
