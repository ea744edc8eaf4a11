"""Configuration management for textmesh.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TextMeshStyle: Depth, subdivision, justification and anchor of a layout pass
- TextAnchor / CustomAnchor: Bounding box anchors
- LoggingConfig: Logging settings
- TextMeshSettings: Main application settings
"""

from textmesh.config.settings import (
    AnchorSpec,
    CustomAnchor,
    JustifyText,
    LoggingConfig,
    TextAnchor,
    TextMeshSettings,
    TextMeshStyle,
    get_default_settings,
    parse_anchor,
)

__all__ = [
    "AnchorSpec",
    "CustomAnchor",
    "JustifyText",
    "LoggingConfig",
    "TextAnchor",
    "TextMeshSettings",
    "TextMeshStyle",
    "get_default_settings",
    "parse_anchor",
]
