"""Layout results.

This module defines the types produced by the line layout engine and the
per-glyph placement planner.
"""

from dataclasses import dataclass, field
from typing import Any

from textmesh.domain.mesh import LocalGlyphMesh, Vec3


@dataclass(frozen=True)
class LayoutCursor:
    """Pen position of one character before its advance is applied.

    Attributes:
        character: The character
        line_index: 0-based source line number
        char_index: Running index over all characters, including whitespace
            and one extra step per line separator
        x: Horizontal pen position
        y: Baseline of the line
    """

    character: str
    line_index: int
    char_index: int
    x: float
    y: float

    def is_whitespace(self) -> bool:
        """Check if the character is whitespace."""
        return self.character.isspace()


@dataclass
class LineLayout:
    """Layout of one source line.

    Attributes:
        line_index: 0-based source line number
        text: Line text without the separator
        width: Sum of character advances
        x_start: Pen position of the first character
        y: Baseline of the line
        cursors: One cursor per character of the line
    """

    line_index: int
    text: str
    width: float
    x_start: float
    y: float
    cursors: list[LayoutCursor] = field(default_factory=list)


@dataclass
class GlyphPlacement:
    """A glyph mesh positioned as an independent object.

    Attributes:
        character: The character
        line_index: 0-based source line number
        char_index: Running character index (see LayoutCursor)
        local_mesh: Glyph mesh in its local space
        position: Translation to apply to the local mesh
        appearance: Caller-supplied appearance (material handle, color, ...)
    """

    character: str
    line_index: int
    char_index: int
    local_mesh: LocalGlyphMesh
    position: Vec3
    appearance: Any = None
