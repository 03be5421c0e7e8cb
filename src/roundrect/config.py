"""
Configuration management for roundrect.

Loads YAML configuration with defaults for every section.
"""

import os
from dataclasses import asdict, dataclass, field, fields

import yaml


@dataclass
class ArcConfig:
    """Arc sampling density."""
    n_points: int = 20  # samples per rounded corner


@dataclass
class CorrectionConfig:
    """Radius feasibility correction."""
    strategy: str = "global"  # "global" or "relax"
    tolerance: float = 1e-9
    max_passes: int = 64


@dataclass
class StyleConfig:
    """Default paint style for draw_rounded_rect."""
    fill: str = None
    stroke_color: str = "black"
    stroke_width: float = 1.0
    stroke_style: str = "solid"
    stroke_cap: str = "round"
    opacity: float = 1.0
    gradient_type: str = "linear"


@dataclass
class CanvasConfig:
    """Drawing surface used when no canvas is passed explicitly."""
    width_px: int = 400
    height_px: int = 400
    units: str = "npc"  # "npc", "snpc" or "px"
    background: str = None


@dataclass
class BarsConfig:
    """Defaults for the rounded bar adapter."""
    radius: float = 0.1
    width_fraction: float = 0.9
    fill: str = "grey35"
    linewidth: float = 0.5


@dataclass
class ExportConfig:
    """File export settings."""
    png_dpi: int = 150


@dataclass
class TracingConfig:
    """Runtime tracing."""
    enabled: bool = False
    level: str = "INFO"
    file_path: str = None
    json_output: bool = False


@dataclass
class RoundRectConfig:
    """Complete configuration."""
    arc: ArcConfig = field(default_factory=ArcConfig)
    correction: CorrectionConfig = field(default_factory=CorrectionConfig)
    style: StyleConfig = field(default_factory=StyleConfig)
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    bars: BarsConfig = field(default_factory=BarsConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)


def load_config(config_path=None):
    """
    Load configuration from a YAML file.

    Missing sections and keys keep their defaults; unknown keys are ignored.
    """
    config = RoundRectConfig()

    if config_path and os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

        config = _merge_config(config, yaml_data)

    return config


def _merge_config(config, yaml_data):
    """Merge YAML sections into the config dataclasses."""
    for section in fields(config):
        values = yaml_data.get(section.name)
        if not isinstance(values, dict):
            continue
        target = getattr(config, section.name)
        for key, value in values.items():
            if hasattr(target, key):
                setattr(target, key, value)

    return config


def save_default_config(path):
    """Write the default configuration to a YAML file for reference."""
    yaml_data = asdict(RoundRectConfig())

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False)
