"""Tests for configuration loading."""

import os

import yaml

from roundrect.config import RoundRectConfig, load_config, save_default_config


class TestConfig:
    """Tests for YAML configuration."""

    def test_defaults(self):
        config = RoundRectConfig()

        assert config.arc.n_points == 20
        assert config.correction.strategy == "global"
        assert config.canvas.units == "npc"
        assert config.bars.fill == "grey35"
        assert config.style.stroke_color == "black"

    def test_missing_file_gives_defaults(self, temp_dir):
        config = load_config(os.path.join(temp_dir, "nope.yaml"))

        assert config == RoundRectConfig()

    def test_partial_override(self, temp_dir):
        path = os.path.join(temp_dir, "config.yaml")
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump({
                "arc": {"n_points": 8},
                "correction": {"strategy": "relax", "unknown_key": 1},
                "canvas": {"units": "snpc"},
                "not_a_section": {"x": 1},
            }, f)

        config = load_config(path)

        assert config.arc.n_points == 8
        assert config.correction.strategy == "relax"
        assert config.correction.max_passes == 64
        assert not hasattr(config.correction, "unknown_key")
        assert config.canvas.units == "snpc"
        assert config.canvas.width_px == 400

    def test_save_and_reload(self, temp_dir):
        path = os.path.join(temp_dir, "default.yaml")

        save_default_config(path)

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        assert data["arc"]["n_points"] == 20
        assert load_config(path) == RoundRectConfig()
