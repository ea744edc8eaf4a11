"""Configuration settings for textmesh."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class JustifyText(str, Enum):
    """Horizontal alignment of each text line relative to the origin."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TextAnchor(str, Enum):
    """Named point of the text bounding box that is moved to the origin."""

    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    CENTER_LEFT = "center_left"
    CENTER = "center"
    CENTER_RIGHT = "center_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"


class CustomAnchor(BaseModel):
    """Anchor at a fractional position of the bounding box.

    The pivot is measured from the minimum corner as a fraction of the box
    size. Values outside [0, 1] are allowed and place the anchor outside
    the visible box.
    """

    model_config = ConfigDict(frozen=True)

    pivot: tuple[float, float] = Field(
        default=(0.5, 0.5),
        description="Pivot as (x, y) fractions of the bounding box size",
    )


AnchorSpec = TextAnchor | CustomAnchor


class TextMeshStyle(BaseModel):
    """Style of a text layout pass."""

    model_config = ConfigDict(frozen=True)

    depth: float = Field(
        default=0.1,
        gt=0.0,
        description="Extrusion depth in em units",
    )
    subdivision: int = Field(
        default=20,
        ge=0,
        le=255,
        description="Straight segments used to approximate each curve segment",
    )
    justify: JustifyText = Field(
        default=JustifyText.LEFT,
        description="Per-line horizontal alignment",
    )
    anchor: AnchorSpec = Field(
        default=TextAnchor.CENTER,
        description="Bounding box point moved to the origin (combined mesh only)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class TextMeshSettings(BaseModel):
    """Main application settings."""

    style: TextMeshStyle = Field(default_factory=TextMeshStyle)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def parse_anchor(value: str) -> AnchorSpec:
    """Parse an anchor from its command-line form.

    Accepts a named anchor ("top-left", "top_left", "center") or a custom
    pivot written as "px,py".

    Args:
        value: Anchor text

    Returns:
        TextAnchor or CustomAnchor

    Raises:
        ValueError: If the value is neither a known anchor nor a pivot pair
    """
    text = value.strip().lower()
    if "," in text:
        parts = text.split(",")
        if len(parts) != 2:
            raise ValueError(f"Custom anchor must be 'px,py', got {value!r}")
        return CustomAnchor(pivot=(float(parts[0]), float(parts[1])))
    return TextAnchor(text.replace("-", "_"))


def get_default_settings() -> TextMeshSettings:
    """Get default application settings."""
    return TextMeshSettings()
