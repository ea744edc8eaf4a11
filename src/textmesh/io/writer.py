"""Mesh writer for Wavefront OBJ output.

This module writes combined meshes and per-glyph placements as OBJ files
so results can be inspected in any 3D viewer.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from textmesh.domain.layout import GlyphPlacement
from textmesh.domain.mesh import CombinedMesh, Vec3
from textmesh.exceptions import MeshSaveError


def _write_block(
    out: TextIO,
    vertices: list[Vec3],
    normals: list[Vec3],
    indices: list[int],
    base: int,
    offset: Vec3 = (0.0, 0.0, 0.0),
) -> None:
    """Write one vertex/normal/face block.

    OBJ indices are 1-based and global to the file, so faces are shifted
    by base, the number of vertices written before this block.
    """
    ox, oy, oz = offset
    for x, y, z in vertices:
        out.write(f"v {x + ox:.6f} {y + oy:.6f} {z + oz:.6f}\n")
    for x, y, z in normals:
        out.write(f"vn {x:.6f} {y:.6f} {z:.6f}\n")
    for i in range(0, len(indices) - 2, 3):
        a, b, c = (indices[i] + base + 1, indices[i + 1] + base + 1, indices[i + 2] + base + 1)
        out.write(f"f {a}//{a} {b}//{b} {c}//{c}\n")


def write_obj(mesh: CombinedMesh, path: Path) -> None:
    """Write a combined mesh as a Wavefront OBJ file.

    Args:
        mesh: Mesh to write
        path: Output file path

    Raises:
        MeshSaveError: If the file cannot be written
    """
    try:
        with path.open("w", encoding="utf-8") as out:
            out.write("# textmesh combined mesh\n")
            out.write("o text\n")
            _write_block(out, mesh.vertices, mesh.normals, mesh.indices, base=0)
    except OSError as e:
        raise MeshSaveError(str(path), str(e)) from e


def write_placements_obj(placements: Iterable[GlyphPlacement], path: Path) -> None:
    """Write per-glyph placements as one OBJ object per glyph.

    Each glyph's vertices are translated by its placement position.

    Args:
        placements: Placements to write
        path: Output file path

    Raises:
        MeshSaveError: If the file cannot be written
    """
    try:
        with path.open("w", encoding="utf-8") as out:
            out.write("# textmesh glyph placements\n")
            base = 0
            for placement in placements:
                mesh = placement.local_mesh
                out.write(f"o glyph_{placement.char_index}_U{ord(placement.character):04X}\n")
                _write_block(
                    out,
                    mesh.vertices,
                    mesh.normals,
                    mesh.indices,
                    base=base,
                    offset=placement.position,
                )
                base += len(mesh.vertices)
    except OSError as e:
        raise MeshSaveError(str(path), str(e)) from e
