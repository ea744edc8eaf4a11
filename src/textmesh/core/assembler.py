"""Combined mesh assembly.

Merges the per-glyph meshes of a laid-out text into one indexed triangle
mesh and moves the chosen anchor of its bounding box to the origin.
"""

import structlog

from textmesh.config import AnchorSpec, CustomAnchor, TextAnchor, TextMeshStyle
from textmesh.core.layout import layout_text
from textmesh.core.tessellator import GlyphMeshGenerator, generate_glyph_mesh
from textmesh.domain import BoundingBox, CombinedMesh, LocalGlyphMesh, Vec3
from textmesh.exceptions import GlyphError
from textmesh.io.reader import Font

logger = structlog.get_logger(__name__)


def anchor_offset(bbox: BoundingBox, anchor: AnchorSpec) -> Vec3:
    """Translation that moves the anchor point of bbox to the origin.

    Only x and y are adjusted; depth is left as generated.

    Args:
        bbox: Bounds of the merged text
        anchor: Named anchor or custom pivot

    Returns:
        Offset to add to every vertex
    """
    min_x, min_y, _ = bbox.min
    max_x, max_y, _ = bbox.max
    size_x, size_y, _ = bbox.size
    center_x, center_y, _ = bbox.center

    if isinstance(anchor, CustomAnchor):
        px, py = anchor.pivot
        return (-(min_x + size_x * px), -(min_y + size_y * py), 0.0)

    x = {
        TextAnchor.TOP_LEFT: min_x,
        TextAnchor.CENTER_LEFT: min_x,
        TextAnchor.BOTTOM_LEFT: min_x,
        TextAnchor.TOP_CENTER: center_x,
        TextAnchor.CENTER: center_x,
        TextAnchor.BOTTOM_CENTER: center_x,
        TextAnchor.TOP_RIGHT: max_x,
        TextAnchor.CENTER_RIGHT: max_x,
        TextAnchor.BOTTOM_RIGHT: max_x,
    }[anchor]
    y = {
        TextAnchor.TOP_LEFT: max_y,
        TextAnchor.TOP_CENTER: max_y,
        TextAnchor.TOP_RIGHT: max_y,
        TextAnchor.CENTER_LEFT: center_y,
        TextAnchor.CENTER: center_y,
        TextAnchor.CENTER_RIGHT: center_y,
        TextAnchor.BOTTOM_LEFT: min_y,
        TextAnchor.BOTTOM_CENTER: min_y,
        TextAnchor.BOTTOM_RIGHT: min_y,
    }[anchor]
    return (-x, -y, 0.0)


class MeshAssembler:
    """Accumulates glyph meshes into one indexed buffer.

    Each added glyph is translated to its pen position, its indices are
    shifted by the number of vertices already merged, and the running
    bounding box is extended with the translated vertices.

    Example:
        assembler = MeshAssembler()
        assembler.add_glyph(mesh, x=0.0, y=0.0)
        combined = assembler.finish(TextAnchor.CENTER)
    """

    def __init__(self) -> None:
        self._vertices: list[Vec3] = []
        self._normals: list[Vec3] = []
        self._indices: list[int] = []
        self._index_offset = 0
        self._min = [float("inf")] * 3
        self._max = [float("-inf")] * 3
        self.glyph_count = 0

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def bounding_box(self) -> BoundingBox | None:
        """Bounds of all merged vertices, or None if nothing was merged."""
        if not self._vertices:
            return None
        return BoundingBox(min=tuple(self._min), max=tuple(self._max))  # type: ignore[arg-type]

    def add_glyph(self, mesh: LocalGlyphMesh, x: float, y: float) -> None:
        """Merge one glyph placed with its origin at (x, y, 0).

        Args:
            mesh: Glyph mesh in local space
            x: Pen x position
            y: Baseline y position
        """
        lo, hi = self._min, self._max
        for vx, vy, vz in mesh.vertices:
            pos = (vx + x, vy + y, vz)
            self._vertices.append(pos)
            for axis in range(3):
                if pos[axis] < lo[axis]:
                    lo[axis] = pos[axis]
                if pos[axis] > hi[axis]:
                    hi[axis] = pos[axis]

        self._normals.extend(mesh.normals)
        self._indices.extend(i + self._index_offset for i in mesh.indices)
        self._index_offset += len(mesh.vertices)
        self.glyph_count += 1

    def finish(self, anchor: AnchorSpec) -> CombinedMesh:
        """Apply the anchor translation and return the merged mesh.

        With no merged vertices the anchor pass is skipped and an empty
        mesh is returned.
        """
        bbox = self.bounding_box
        if bbox is None:
            return CombinedMesh()

        ox, oy, oz = anchor_offset(bbox, anchor)
        vertices = [(x + ox, y + oy, z + oz) for x, y, z in self._vertices]
        return CombinedMesh(
            vertices=vertices,
            normals=list(self._normals),
            indices=list(self._indices),
        )


def layout_combined(
    font: Font,
    text: str,
    style: TextMeshStyle,
    generator: GlyphMeshGenerator = generate_glyph_mesh,
) -> CombinedMesh:
    """Lay out text and merge all glyphs into one anchored mesh.

    Whitespace never requests geometry. Characters whose glyph cannot be
    generated are skipped; their advance has already moved the pen.

    Args:
        font: Parsed font
        text: Text, lines separated by "\\n"
        style: Depth, subdivision, justification and anchor
        generator: Glyph mesh generator

    Returns:
        CombinedMesh, empty if no glyph produced geometry
    """
    assembler = MeshAssembler()

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
        assembler.add_glyph(mesh, cursor.x, cursor.y)

    return assembler.finish(style.anchor)
