"""Unit tests for per-glyph placement planning."""

from unittest.mock import Mock

import pytest

from textmesh.config import JustifyText, TextAnchor, TextMeshStyle
from textmesh.core.placement import layout_placements
from textmesh.core.tessellator import generate_glyph_mesh
from textmesh.exceptions import MalformedOutlineError


class TestLayoutPlacements:
    """Tests for layout_placements."""

    def test_empty_text(self, font):
        """Test empty text has no placements."""
        assert layout_placements(font, "", TextMeshStyle()) == []

    def test_zero_width_character_is_skipped(self, font):
        """Test a zero-width character gets no placement."""
        placements = layout_placements(font, "A\u200bB", TextMeshStyle())

        assert [p.character for p in placements] == ["A", "B"]
        assert [p.char_index for p in placements] == [0, 2]
        assert placements[1].position[0] == pytest.approx(
            placements[0].position[0] + font.advance("A")
        )

    def test_composite_character_is_placed(self, font):
        """Test composite glyphs get a placement like simple ones."""
        placements = layout_placements(font, "AÅ", TextMeshStyle())

        assert [p.character for p in placements] == ["A", "Å"]
        assert placements[1].position[0] == pytest.approx(placements[0].position[0] + 0.6)
        assert placements[1].local_mesh.triangle_count > 0

    def test_positions_follow_cursors(self, font):
        """Test placements sit at their layout cursors."""
        placements = layout_placements(font, "Hi\nYou", TextMeshStyle())

        assert [p.position for p in placements] == [
            pytest.approx((0.0, 0.0, 0.0)),
            pytest.approx((0.7, 0.0, 0.0)),
            pytest.approx((0.0, -1.0, 0.0)),
            pytest.approx((0.6, -1.0, 0.0)),
            pytest.approx((1.2, -1.0, 0.0)),
        ]
        assert [p.line_index for p in placements] == [0, 0, 1, 1, 1]
        assert [p.char_index for p in placements] == [0, 1, 3, 4, 5]

    def test_local_mesh_untranslated(self, font):
        """Test placement meshes stay in glyph-local space."""
        (placement,) = layout_placements(
            font, " A", TextMeshStyle(justify=JustifyText.RIGHT, anchor=TextAnchor.TOP_LEFT)
        )
        direct = generate_glyph_mesh(font, "A", 0.1, 20)

        assert placement.local_mesh.vertices == direct.vertices
        assert placement.position == pytest.approx((-0.6, 0.0, 0.0))

    def test_whitespace_omitted(self, font):
        """Test whitespace gets no placement."""
        placements = layout_placements(font, "A B", TextMeshStyle())
        assert [p.character for p in placements] == ["A", "B"]

    def test_default_appearance_attached(self, font):
        """Test the default appearance is attached to every placement."""
        material = object()
        placements = layout_placements(font, "AB", TextMeshStyle(), default_appearance=material)
        assert all(p.appearance is material for p in placements)

    def test_appearance_defaults_to_none(self, font):
        """Test placements have no appearance by default."""
        (placement,) = layout_placements(font, "A", TextMeshStyle())
        assert placement.appearance is None

    def test_failed_glyph_omitted_but_advances(self, font):
        """Test a failing glyph is omitted and still advances the pen."""
        mesh = generate_glyph_mesh(font, "A", 0.1, 1)
        generator = Mock(side_effect=[mesh, MalformedOutlineError("B", "broken"), mesh])

        placements = layout_placements(font, "ABH", TextMeshStyle(), generator=generator)

        assert [p.char_index for p in placements] == [0, 2]
        assert placements[1].position[0] == pytest.approx(1.1)
