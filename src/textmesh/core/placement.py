"""Per-glyph placement planning.

Instead of merging geometry, the planner returns one placement per visible
character: the glyph's untranslated local mesh plus the position at which
the host should spawn it. No bounding box or anchor is applied in this
mode.
"""

from typing import Any

import structlog

from textmesh.config import TextMeshStyle
from textmesh.core.layout import layout_text
from textmesh.core.tessellator import GlyphMeshGenerator, generate_glyph_mesh
from textmesh.domain import GlyphPlacement
from textmesh.exceptions import GlyphError
from textmesh.io.reader import Font

logger = structlog.get_logger(__name__)


def layout_placements(
    font: Font,
    text: str,
    style: TextMeshStyle,
    default_appearance: Any = None,
    generator: GlyphMeshGenerator = generate_glyph_mesh,
) -> list[GlyphPlacement]:
    """Lay out text and plan one independently positioned mesh per glyph.

    Whitespace and characters whose glyph cannot be generated produce no
    placement, but their advance still moves the pen for the following
    characters. style.anchor is ignored.

    Args:
        font: Parsed font
        text: Text, lines separated by "\\n"
        style: Depth, subdivision and justification
        default_appearance: Appearance attached to every placement
        generator: Glyph mesh generator

    Returns:
        Placements in reading order
    """
    placements: list[GlyphPlacement] = []

    for cursor in layout_text(font, text, style.justify):
        if cursor.is_whitespace():
            continue
        try:
            mesh = generator(font, cursor.character, style.depth, style.subdivision)
        except GlyphError as e:
            logger.debug(
                "Glyph skipped",
                character=cursor.character,
                char_index=cursor.char_index,
                reason=str(e),
            )
            continue

        placements.append(
            GlyphPlacement(
                character=cursor.character,
                line_index=cursor.line_index,
                char_index=cursor.char_index,
                local_mesh=mesh,
                position=(cursor.x, cursor.y, 0.0),
                appearance=default_appearance,
            )
        )

    return placements
