"""Change-driven layout system.

A host registers text sources and calls TextMeshSystem.update() from its own
update or render loop. Every update recomputes the sources whose text,
font or style changed since their last successful pass, plus sources never
computed before:

- font bytes not loaded yet: skipped quietly, retried on the next update
- font bytes unparseable: one warning per source and revision, previous
  output left untouched
- otherwise the source's output is replaced wholesale
"""

import time
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any

import structlog

from textmesh.config import TextMeshStyle
from textmesh.core.assembler import layout_combined
from textmesh.core.placement import layout_placements
from textmesh.core.tessellator import GlyphMeshGenerator, generate_glyph_mesh
from textmesh.domain import CombinedMesh, GlyphPlacement
from textmesh.exceptions import FontParseError
from textmesh.io.assets import FontAssets
from textmesh.io.reader import Font
from textmesh.utils import LayoutLogger, LayoutStats

_TRACKED_FIELDS = frozenset({"text", "font", "style", "appearance"})


@dataclass(eq=False)
class TextMeshSource:
    """Text rendered as one combined mesh.

    Assigning text, font or style bumps revision, which marks the source
    for recomputation on the next update.

    Attributes:
        text: Text, lines separated by "\\n"
        font: Handle of the font in FontAssets
        style: Layout style
        revision: Change counter
    """

    text: str
    font: Hashable
    style: TextMeshStyle = field(default_factory=TextMeshStyle)
    revision: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        super().__setattr__("revision", 0)

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name in _TRACKED_FIELDS:
            super().__setattr__("revision", getattr(self, "revision", 0) + 1)


@dataclass(eq=False)
class TextMeshGlyphsSource(TextMeshSource):
    """Text rendered as one independent mesh per character.

    Attributes:
        appearance: Appearance attached to every glyph placement
    """

    appearance: Any = None


@dataclass
class _SourceState:
    source: TextMeshSource
    computed_revision: int | None = None
    warned_revision: int | None = None
    mesh: CombinedMesh | None = None
    placements: list[GlyphPlacement] = field(default_factory=list)


class TextMeshSystem:
    """Keeps the layout output of registered text sources up to date.

    Example:
        assets = FontAssets()
        system = TextMeshSystem(assets)
        source_id = system.add(TextMeshSource(text="Hi", font="fira"))
        system.update()          # font not loaded: nothing happens
        assets.load(Path("FiraMono-Medium.ttf"), handle="fira")
        system.update()          # mesh computed
        mesh = system.mesh(source_id)
    """

    def __init__(
        self,
        assets: FontAssets,
        logger: Any = None,
        generator: GlyphMeshGenerator = generate_glyph_mesh,
    ) -> None:
        """Initialize the system.

        Args:
            assets: Font data source
            logger: structlog logger (module logger if None)
            generator: Glyph mesh generator used by every pass
        """
        self._assets = assets
        self._generator = generator
        self._states: dict[int, _SourceState] = {}
        self._next_id = 0
        self.logger = logger if logger is not None else structlog.get_logger(__name__)
        self.layout_logger = LayoutLogger(self.logger)

    def add(self, source: TextMeshSource) -> int:
        """Register a source and return its id."""
        source_id = self._next_id
        self._next_id += 1
        self._states[source_id] = _SourceState(source=source)
        return source_id

    def remove(self, source_id: int) -> None:
        """Unregister a source and drop its output.

        Raises:
            KeyError: If the id is unknown
        """
        del self._states[source_id]

    def source(self, source_id: int) -> TextMeshSource:
        return self._states[source_id].source

    def is_computed(self, source_id: int) -> bool:
        """True if the source's current revision has been laid out."""
        state = self._states[source_id]
        return state.computed_revision == state.source.revision

    def mesh(self, source_id: int) -> CombinedMesh | None:
        """Latest combined mesh of a source, or None before its first pass."""
        return self._states[source_id].mesh

    def placements(self, source_id: int) -> list[GlyphPlacement]:
        """Latest glyph placements of a source."""
        return list(self._states[source_id].placements)

    def update(self) -> LayoutStats:
        """Recompute every changed or never computed source.

        Returns:
            Statistics of this update
        """
        stats = self.layout_logger.reset()
        stats.start_time = time.time()

        fonts: dict[Hashable, Font | FontParseError] = {}
        try:
            for source_id, state in self._states.items():
                source = state.source
                revision = source.revision
                if state.computed_revision == revision:
                    continue

                asset = self._assets.get(source.font)
                if asset is None:
                    self.layout_logger.log_source_not_ready(source_id)
                    continue

                if source.font not in fonts:
                    try:
                        fonts[source.font] = asset.parse(name=str(source.font))
                    except FontParseError as e:
                        fonts[source.font] = e

                font = fonts[source.font]
                if isinstance(font, FontParseError):
                    if state.warned_revision != revision:
                        self.layout_logger.log_font_error(source_id, font)
                        state.warned_revision = revision
                    continue

                self._compute(source_id, state, font)
                state.computed_revision = revision
        finally:
            for font in fonts.values():
                if isinstance(font, Font):
                    font.close()

        stats.end_time = time.time()
        return stats

    def _compute(self, source_id: int, state: _SourceState, font: Font) -> None:
        """Run one layout pass and replace the source's output."""
        start_time = time.time()
        source = state.source

        if isinstance(source, TextMeshGlyphsSource):
            # Previous glyphs are discarded before new ones are planned
            state.placements = []
            state.placements = layout_placements(
                font,
                source.text,
                source.style,
                default_appearance=source.appearance,
                generator=self._generator,
            )
            triangles = sum(p.local_mesh.triangle_count for p in state.placements)
            placements = len(state.placements)
        else:
            state.mesh = layout_combined(
                font, source.text, source.style, generator=self._generator
            )
            triangles = state.mesh.triangle_count
            placements = 0

        self.layout_logger.log_source_computed(
            source_id,
            triangles=triangles,
            placements=placements,
            duration_ms=(time.time() - start_time) * 1000,
        )
