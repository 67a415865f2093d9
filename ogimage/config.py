"""
Configuration loader for og-image-generator.

Loads typographic and canvas settings from config.json with sensible defaults.
"""

import copy
import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional


# Default configuration
DEFAULT_CONFIG = {
    "canvas": {
        "width": 1200,
        "height": 628,
        "background": "#1a1a2e"
    },
    "typography": {
        "title_font_size": 72.0,
        "url_font_size": 40.0,
        "url_min_font_size": 16.0,
        "url_font_step": 2.0,
        "top_margin": 135.0,
        "side_margin": 60.0,
        "bottom_margin": None,
        "line_spacing": 1.5,
        "shadow_offset": 2.0
    },
    "background": {
        "margin": 20.0,
        "corner_radius": 20.0,
        "overlay_alpha": 100
    },
    "fonts": {
        "title": None,
        "url": None
    }
}


@dataclass(frozen=True)
class Typography:
    """
    Typographic settings for one card.

    Attributes:
        title_font_size: Title size in points (also sizes the baseline grid)
        url_font_size: Largest URL caption size
        url_min_font_size: Smallest URL caption size
        url_font_step: Decrement while fitting the URL
        top_margin: Space above the first grid line
        side_margin: Left/right text inset
        bottom_margin: Space kept free below the caption (None: top_margin)
        line_spacing: Grid spacing multiplier
        shadow_offset: Title drop shadow offset
        background_margin: Inset of the dark overlay panel
        corner_radius: Radius of the panel's top corners
        overlay_alpha: Opacity of the panel (0-255)
    """
    title_font_size: float = 72.0
    url_font_size: float = 40.0
    url_min_font_size: float = 16.0
    url_font_step: float = 2.0
    top_margin: float = 135.0
    side_margin: float = 60.0
    bottom_margin: Optional[float] = None
    line_spacing: float = 1.5
    shadow_offset: float = 2.0
    background_margin: float = 20.0
    corner_radius: float = 20.0
    overlay_alpha: int = 100

    @property
    def bottom_margin_or_default(self) -> float:
        """Bottom margin, mirroring the top margin when unset"""
        if self.bottom_margin is None:
            return self.top_margin
        return self.bottom_margin

    def max_text_width(self, canvas_width: float) -> float:
        """Width available to text between the side margins."""
        return canvas_width - 2 * self.side_margin


class Config:
    """
    Configuration manager for og-image-generator.

    Loads config.json from the current directory, falling back to defaults.
    """

    def __init__(self, config_path: str = "config.json"):
        """
        Initialize configuration.

        Args:
            config_path: Path to config file (default: config.json in current directory)
        """
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from file or use defaults.

        Returns:
            Configuration dictionary
        """
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r') as f:
                    return json.load(f)
            except (json.JSONDecodeError, IOError) as e:
                print(f"[Config] Warning: Could not load {self.config_path}: {e}")
                print("[Config] Using default configuration")
                return copy.deepcopy(DEFAULT_CONFIG)
        else:
            return copy.deepcopy(DEFAULT_CONFIG)

    def get(self, *keys: str, default: Any = None) -> Any:
        """
        Get nested config value.

        Args:
            *keys: Nested keys to traverse (e.g., "typography", "top_margin")
            default: Default value if key not found

        Returns:
            Config value or default

        Example:
            config.get("canvas", "width")
            # Returns: 1200
        """
        value = self.config
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    def _section(self, name: str) -> Dict[str, Any]:
        """Config section merged over its defaults."""
        section = dict(DEFAULT_CONFIG[name])
        section.update(self.get(name, default={}) or {})
        return section

    def get_canvas_config(self) -> Dict[str, Any]:
        """
        Get canvas configuration.

        Returns:
            Dictionary with width, height, background
        """
        return self._section("canvas")

    def get_font_config(self) -> Dict[str, Any]:
        """
        Get font configuration.

        Returns:
            Dictionary with title and url font paths (None: auto-detect)
        """
        return self._section("fonts")

    def get_typography(self) -> Typography:
        """
        Get typographic settings.

        Returns:
            Typography built from the typography and background sections
        """
        typography = self._section("typography")
        background = self._section("background")
        bottom_margin = typography["bottom_margin"]

        return Typography(
            title_font_size=float(typography["title_font_size"]),
            url_font_size=float(typography["url_font_size"]),
            url_min_font_size=float(typography["url_min_font_size"]),
            url_font_step=float(typography["url_font_step"]),
            top_margin=float(typography["top_margin"]),
            side_margin=float(typography["side_margin"]),
            bottom_margin=None if bottom_margin is None else float(bottom_margin),
            line_spacing=float(typography["line_spacing"]),
            shadow_offset=float(typography["shadow_offset"]),
            background_margin=float(background["margin"]),
            corner_radius=float(background["corner_radius"]),
            overlay_alpha=int(background["overlay_alpha"]),
        )


# Global config instance
_config = None


def get_config(config_path: Optional[str] = None) -> Config:
    """
    Get global configuration instance.

    Lazy-loads configuration on first access. Passing a path reloads
    from that file.

    Args:
        config_path: Config file to load (default: config.json)

    Returns:
        Config instance
    """
    global _config
    if config_path is not None:
        _config = Config(config_path)
    elif _config is None:
        _config = Config()
    return _config
