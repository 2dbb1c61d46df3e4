"""Config — load the Hive piece set from YAML.

The number of each bug a player starts with is the only tunable of the
board layer.  The standard set is the default; expansions and variants
override it from a YAML file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from hexhive.hive.pieces import Bug

logger = logging.getLogger(__name__)


@dataclass
class HiveConfig:
    """Per-player piece counts.

    Attributes:
        queen_bee: Queen Bees per player.
        spider: Spiders per player.
        beetle: Beetles per player.
        grasshopper: Grasshoppers per player.
        ant: Soldier Ants per player.
    """

    queen_bee: int = 1
    spider: int = 2
    beetle: int = 2
    grasshopper: int = 3
    ant: int = 3

    def __post_init__(self) -> None:
        for bug in Bug:
            if self.count(bug) < 0:
                msg = f"piece count for {bug.name} must be >= 0"
                raise ValueError(msg)

    def count(self, bug: Bug) -> int:
        """Return how many of ``bug`` each player starts with."""
        return int(getattr(self, bug.name.lower()))

    @property
    def pieces_per_player(self) -> int:
        return sum(self.count(bug) for bug in Bug)

    @classmethod
    def from_yaml(cls, path: str | Path) -> HiveConfig:
        """Load piece counts from a YAML file.

        Keys mirror the attribute names; missing keys keep their defaults.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated HiveConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If any count is negative.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        logger.debug("Loaded piece set from %s", path)
        return cls(
            queen_bee=data.get("queen_bee", cls.queen_bee),
            spider=data.get("spider", cls.spider),
            beetle=data.get("beetle", cls.beetle),
            grasshopper=data.get("grasshopper", cls.grasshopper),
            ant=data.get("ant", cls.ant),
        )

