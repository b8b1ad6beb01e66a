"""
Canvas configuration for the drawing interpreter.
Simple, clean configuration system for different drawing area presets.
"""
import json
import logging
from dataclasses import dataclass, asdict

logger = logging.getLogger(__name__)


@dataclass
class CanvasConfig:
    """Configuration for a drawing canvas."""
    name: str

    # Drawing area size in pixels
    width: int
    height: int

    background: str = "#ffffff"
    marker_size: int = 2  # Pen position dot


class ConfigManager:
    """Manages canvas configurations with simple presets."""

    @staticmethod
    def default() -> CanvasConfig:
        """Wide drawing area."""
        return CanvasConfig(
            name="Default",
            width=1060,
            height=489
        )

    @staticmethod
    def square() -> CanvasConfig:
        return CanvasConfig(
            name="Square",
            width=600,
            height=600
        )

    @staticmethod
    def hd() -> CanvasConfig:
        """720p drawing area with a slightly larger pen marker."""
        config = ConfigManager.default()
        config.name = "HD"
        config.width = 1280
        config.height = 720
        config.marker_size = 4
        return config

    @staticmethod
    def preset_names():
        return ["default", "square", "hd"]

    @staticmethod
    def get_config(preset: str) -> CanvasConfig:
        """Get configuration by preset name."""
        configs = {
            "default": ConfigManager.default(),
            "square": ConfigManager.square(),
            "hd": ConfigManager.hd()
        }
        return configs.get(preset.lower(), ConfigManager.default())

    @staticmethod
    def save_config(config: CanvasConfig, filepath: str):
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(asdict(config), f, indent=2)

    @staticmethod
    def load_config(filepath: str) -> CanvasConfig:
        """Load configuration from JSON file."""
        try:
            with open(filepath, 'r') as f:
                data = json.load(f)

            config = CanvasConfig(**data)

        except (OSError, ValueError, TypeError) as e:
            logger.warning("Could not load canvas config %s (%s), using default", filepath, e)
            return ConfigManager.default()

        if not ConfigManager.validate_size(config):
            logger.warning("Canvas config %s has invalid size %dx%d, using default",
                           filepath, config.width, config.height)
            return ConfigManager.default()

        return config

    @staticmethod
    def validate_size(config: CanvasConfig) -> bool:
        """Check that the canvas has a usable size."""
        return (isinstance(config.width, int) and isinstance(config.height, int)
                and config.width > 0 and config.height > 0)
