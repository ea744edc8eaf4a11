"""textmesh - Turn text into extruded 3D meshes.

textmesh lays out a string with a TrueType/OpenType font and produces either
one combined, anchored triangle mesh or a list of per-character meshes with
their placement positions, ready to hand to a rendering host.

Example:
    $ textmesh build FiraMono-Medium.ttf "Hello\\nWorld" --output hello.obj

This will lay out both lines, extrude every glyph and write the merged
mesh as a Wavefront OBJ file.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
