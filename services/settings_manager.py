"""
Settings Manager.

Handles application settings with JSON file storage.
"""

import base64
import json
import logging
import os
import platform
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Optional

from models.coordinates import CoordinateTransform, DEFAULT_CELL_SIZE
from models.graph import GraphModel, Operation

logger = logging.getLogger(__name__)


@dataclass
class GraphSettings:
    """Grid extent and starting modes for a new graph."""
    cell_size: float = DEFAULT_CELL_SIZE
    num_x_ticks: int = 60
    num_y_ticks: int = 40
    lock_to_grid: bool = True
    default_operation: str = Operation.ADDITION.label

    def create_graph(self) -> GraphModel:
        """Build an empty graph from these settings."""
        try:
            operation = Operation.from_label(self.default_operation)
        except (ValueError, AttributeError):
            logger.warning(f"Unknown default operation {self.default_operation!r}, using Addition")
            operation = Operation.ADDITION

        return GraphModel(
            transform=CoordinateTransform(
                num_x_ticks=self.num_x_ticks,
                num_y_ticks=self.num_y_ticks,
                cell_size=self.cell_size,
            ),
            lock_to_grid=self.lock_to_grid,
            selected_operation=operation,
        )


@dataclass
class UISettings:
    """User interface settings."""
    label_precision: int = 2
    field_precision: int = 2
    show_minor_grid: bool = True
    project_url: str = "https://github.com/peterbucci/VectorMathReact"


@dataclass
class AppSettings:
    """Complete application settings."""
    graph: GraphSettings = field(default_factory=GraphSettings)
    ui: UISettings = field(default_factory=UISettings)
    window_geometry: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "graph": asdict(self.graph),
            "ui": asdict(self.ui),
            "window_geometry": self.window_geometry,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Create from dictionary, ignoring unknown keys."""
        settings = cls()

        if "graph" in data:
            settings.graph = GraphSettings(**_known_keys(GraphSettings, data["graph"]))
        if "ui" in data:
            settings.ui = UISettings(**_known_keys(UISettings, data["ui"]))
        if "window_geometry" in data:
            settings.window_geometry = data["window_geometry"]

        return settings


def _known_keys(cls, data: dict) -> dict:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


class SettingsManager:
    """
    Manages application settings with JSON file storage.

    Settings file location:
    - Windows: %APPDATA%/VectorMath/settings.json
    - Linux: ~/.config/VectorMath/settings.json
    - macOS: ~/Library/Application Support/VectorMath/settings.json
    """

    APP_NAME = "VectorMath"
    SETTINGS_FILE = "settings.json"

    def __init__(self, config_override: Optional[str] = None):
        """
        Initialize settings manager.

        Args:
            config_override: Optional path to override config file location.
                            Useful for testing.
        """
        self._settings = AppSettings()
        self._config_override = config_override
        self._settings_path = self._get_settings_path()
        self.load()

    @property
    def settings(self) -> AppSettings:
        """Get current settings."""
        return self._settings

    @property
    def settings_path(self) -> str:
        """Get the settings file path."""
        return str(self._settings_path)

    @property
    def graph(self) -> GraphSettings:
        return self._settings.graph

    @property
    def ui(self) -> UISettings:
        return self._settings.ui

    @property
    def lock_to_grid(self) -> bool:
        return self._settings.graph.lock_to_grid

    @lock_to_grid.setter
    def lock_to_grid(self, value: bool):
        self._settings.graph.lock_to_grid = value
        self.save()

    @property
    def default_operation(self) -> str:
        return self._settings.graph.default_operation

    @default_operation.setter
    def default_operation(self, value: str):
        self._settings.graph.default_operation = value
        self.save()

    def _get_settings_path(self) -> Path:
        """Get platform-specific settings directory."""
        if self._config_override:
            return Path(self._config_override)

        system = platform.system()

        if system == "Windows":
            base = os.environ.get("APPDATA", os.path.expanduser("~"))
            config_dir = Path(base) / self.APP_NAME
        elif system == "Darwin":  # macOS
            config_dir = Path.home() / "Library" / "Application Support" / self.APP_NAME
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
            config_dir = Path(xdg_config) / self.APP_NAME

        return config_dir / self.SETTINGS_FILE

    def _ensure_settings_dir(self):
        """Create settings directory if it doesn't exist."""
        self._settings_path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> bool:
        """Load settings from file."""
        if not self._settings_path.exists():
            return False

        try:
            with open(self._settings_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._settings = AppSettings.from_dict(data)
            return True
        except Exception as e:
            logger.warning(f"Error loading settings from {self._settings_path}: {e}")
            self._settings = AppSettings()
            return False

    def save(self) -> bool:
        """Save settings to file."""
        try:
            self._ensure_settings_dir()
            with open(self._settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.warning(f"Error saving settings to {self._settings_path}: {e}")
            return False

    def reset(self):
        """Reset settings to defaults."""
        self._settings = AppSettings()
        self.save()

    def save_window_geometry(self, geometry: bytes, state: bytes):
        """Save window geometry and state."""
        self._settings.window_geometry = {
            "geometry": base64.b64encode(geometry).decode("ascii"),
            "state": base64.b64encode(state).decode("ascii"),
        }
        self.save()

    def get_window_geometry(self) -> tuple:
        """Get saved window geometry and state."""
        geo = self._settings.window_geometry
        if not geo:
            return None, None

        try:
            geometry = base64.b64decode(geo.get("geometry", ""))
            state = base64.b64decode(geo.get("state", ""))
            return geometry, state
        except (ValueError, TypeError):
            return None, None


# Global settings instance
_settings_manager: Optional[SettingsManager] = None


def get_settings(config_override: Optional[str] = None) -> SettingsManager:
    """
    Get the global settings manager instance.

    Args:
        config_override: Optional path to override config location.
                        Only used on first call to initialize.
    """
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager(config_override)
    return _settings_manager


def reset_settings_manager():
    """Reset the global settings manager (useful for testing)."""
    global _settings_manager
    _settings_manager = None
