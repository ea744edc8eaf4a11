"""Font data source.

FontAssets maps opaque handles to raw font bytes. A handle with no bytes
yet is "not loaded"; callers treat that as a reason to skip a layout pass,
not as an error.
"""

from collections.abc import Hashable
from dataclasses import dataclass
from pathlib import Path

from textmesh.exceptions import FontLoadError
from textmesh.io.reader import Font


@dataclass(frozen=True)
class FontAsset:
    """Raw bytes of one font file.

    Attributes:
        data: Complete TTF/OTF file contents
    """

    data: bytes

    def parse(self, name: str = "<memory>") -> Font:
        """Parse the bytes into a Font.

        Raises:
            FontParseError: If the bytes are not a usable font
        """
        return Font.from_bytes(self.data, name=name)


class FontAssets:
    """Store of font bytes keyed by handle.

    Example:
        assets = FontAssets()
        handle = assets.load(Path("fonts/FiraMono-Medium.ttf"))
        asset = assets.get(handle)
    """

    def __init__(self) -> None:
        self._assets: dict[Hashable, FontAsset] = {}

    def insert(self, handle: Hashable, data: bytes) -> None:
        """Store (or replace) the bytes for a handle."""
        self._assets[handle] = FontAsset(data=data)

    def load(self, path: Path, handle: Hashable | None = None) -> Hashable:
        """Read a font file and store its bytes.

        Args:
            path: Font file to read
            handle: Key to store under (defaults to the path as a string)

        Returns:
            The handle the bytes were stored under

        Raises:
            FontLoadError: If the file cannot be read
        """
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FontLoadError(str(path), str(e)) from e

        key = str(path) if handle is None else handle
        self.insert(key, data)
        return key

    def get(self, handle: Hashable) -> FontAsset | None:
        """Get the bytes for a handle, or None if not loaded yet."""
        return self._assets.get(handle)

    def remove(self, handle: Hashable) -> None:
        """Forget a handle. Unknown handles are ignored."""
        self._assets.pop(handle, None)

    def __contains__(self, handle: object) -> bool:
        return handle in self._assets

    def __len__(self) -> int:
        return len(self._assets)
