"""Tests for hexhive.hive.config — piece-set loading."""

from pathlib import Path

import pytest

from hexhive.hive.config import HiveConfig
from hexhive.hive.pieces import Bug

_DEFAULT_YAML = Path(__file__).resolve().parent.parent / "config" / "default.yaml"


class TestHiveConfig:
    """Tests for YAML config loading."""

    def test_defaults(self, default_config: HiveConfig) -> None:
        assert default_config.count(Bug.QUEEN_BEE) == 1
        assert default_config.count(Bug.BEETLE) == 2
        assert default_config.count(Bug.ANT) == 3
        assert default_config.pieces_per_player == 11

    def test_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "variant.yaml"
        yaml_file.write_text("beetle: 4\nant: 0\n")
        cfg = HiveConfig.from_yaml(yaml_file)
        assert cfg.beetle == 4
        assert cfg.ant == 0
        assert cfg.spider == 2

    def test_from_empty_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert HiveConfig.from_yaml(yaml_file) == HiveConfig()

    def test_shipped_default_matches(self) -> None:
        assert HiveConfig.from_yaml(_DEFAULT_YAML) == HiveConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            HiveConfig.from_yaml(tmp_path / "nope.yaml")

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="SPIDER"):
            HiveConfig(spider=-1)

