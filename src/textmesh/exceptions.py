"""Exception hierarchy for textmesh."""


class TextMeshError(Exception):
    """Base exception for all textmesh errors."""

    pass


class FontError(TextMeshError):
    """Errors related to font loading or parsing."""

    pass


class FontLoadError(FontError):
    """Error reading font bytes from disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontParseError(FontError):
    """Font bytes are present but cannot be parsed."""

    def __init__(self, handle: str, reason: str) -> None:
        self.handle = handle
        self.reason = reason
        super().__init__(f"Failed to parse font '{handle}': {reason}")


class GlyphError(TextMeshError):
    """Errors related to generating geometry for one character."""

    def __init__(self, character: str, message: str) -> None:
        self.character = character
        super().__init__(message)


class NoOutlineError(GlyphError):
    """Character has no outline (whitespace, unmapped or empty glyph)."""

    def __init__(self, character: str) -> None:
        super().__init__(character, f"No outline for character {character!r}")


class MalformedOutlineError(GlyphError):
    """Character outline could not be tessellated."""

    def __init__(self, character: str, reason: str) -> None:
        self.reason = reason
        super().__init__(
            character, f"Malformed outline for character {character!r}: {reason}"
        )


class MeshError(TextMeshError):
    """Errors related to mesh output."""

    pass


class MeshSaveError(MeshError):
    """Error writing a mesh file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save mesh '{path}': {reason}")
