"""Services package."""

from .renderer import VectorRenderer, NullRenderer
from .resultant_engine import ResultantEngine, fold_displacements
from .vector_manager import VectorCollectionManager, DEFAULT_START, DEFAULT_END
from .detail_sync import (
    DetailSynchronizer,
    COMPONENT_PRECISION,
    fix_float,
    polar_to_components,
    components_to_polar,
)
from .vector_session import VectorSession
from .settings_manager import (
    SettingsManager,
    AppSettings,
    GraphSettings,
    UISettings,
    get_settings,
    reset_settings_manager,
)

__all__ = [
    "VectorRenderer",
    "NullRenderer",
    "ResultantEngine",
    "fold_displacements",
    "VectorCollectionManager",
    "DEFAULT_START",
    "DEFAULT_END",
    "DetailSynchronizer",
    "COMPONENT_PRECISION",
    "fix_float",
    "polar_to_components",
    "components_to_polar",
    "VectorSession",
    "SettingsManager",
    "AppSettings",
    "GraphSettings",
    "UISettings",
    "get_settings",
    "reset_settings_manager",
]
