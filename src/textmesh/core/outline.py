"""Outline analysis for grouping flattened contours into filled regions.

This module analyzes a glyph's flattened contours to identify:
- Containment relationships between contours
- Nesting depth of every contour
- Filled regions (even depth) and the holes (odd depth) cut into them

Classification uses nesting depth instead of winding direction, so TrueType
and CFF outlines are handled the same way.
"""

from dataclasses import dataclass, field

from textmesh.core.geometry import point_in_polygon
from textmesh.domain import Contour


@dataclass
class ContourNode:
    """A node in the contour nesting tree.

    Attributes:
        index: Index of this contour in the contour list
        parent: Index of parent contour (None if root)
        children: Indices of child contours
        depth: Nesting depth (0 for top-level)
    """

    index: int
    parent: int | None
    children: list[int]
    depth: int

    @property
    def is_filled(self) -> bool:
        """True for contours at even depth, which bound solid material."""
        return self.depth % 2 == 0


@dataclass
class FilledRegion:
    """One solid area of a glyph.

    Attributes:
        outer: Index of the contour bounding the area
        holes: Indices of contours cut out of the area
    """

    outer: int
    holes: list[int] = field(default_factory=list)


@dataclass
class OutlineHierarchy:
    """Hierarchical classification of a glyph's contours.

    Attributes:
        nesting_tree: Node for every non-degenerate contour
        regions: Filled regions, each with its direct holes
    """

    nesting_tree: dict[int, ContourNode]
    regions: list[FilledRegion]

    def hole_indices(self) -> list[int]:
        """Indices of all contours that are holes."""
        return [idx for idx, node in self.nesting_tree.items() if not node.is_filled]


class OutlineAnalyzer:
    """Analyzes flattened contours to build their nesting hierarchy.

    The analyzer is stateless; one instance can be shared between glyphs.
    """

    def analyze(self, contours: list[Contour]) -> OutlineHierarchy:
        """Analyze contours to determine filled regions and holes.

        Process:
        1. Drop degenerate contours (zero area)
        2. Build complete nesting tree of the remaining contours
        3. Pair every even-depth contour with its odd-depth children

        Args:
            contours: Flattened contours of one glyph

        Returns:
            OutlineHierarchy with nesting tree and regions
        """
        valid = [
            idx for idx, contour in enumerate(contours)
            if len(contour.points) >= 3 and contour.signed_area() != 0.0
        ]
        if not valid:
            return OutlineHierarchy(nesting_tree={}, regions=[])

        nesting_tree = self._build_nesting_tree(contours, valid)

        regions: list[FilledRegion] = []
        for idx in valid:
            node = nesting_tree[idx]
            if not node.is_filled:
                continue
            regions.append(FilledRegion(outer=idx, holes=list(node.children)))

        return OutlineHierarchy(nesting_tree=nesting_tree, regions=regions)

    def _build_nesting_tree(
        self,
        contours: list[Contour],
        indices: list[int],
    ) -> dict[int, ContourNode]:
        """Build complete nesting tree of contours.

        For each contour, finds its immediate parent (smallest contour that
        contains it), regardless of winding direction.

        Args:
            contours: All contours of the glyph
            indices: Indices of the contours to place in the tree

        Returns:
            Dict mapping contour index to ContourNode
        """
        # Calculate absolute areas for each contour (used to pick the parent)
        areas = {idx: abs(contours[idx].signed_area()) for idx in indices}

        # For each contour, find its immediate parent (smallest containing contour)
        parent_map: dict[int, int | None] = {}

        for idx in indices:
            test_point = contours[idx].points[0]

            candidates: list[int] = []
            for other_idx in indices:
                if other_idx == idx or areas[other_idx] <= areas[idx]:
                    continue
                if point_in_polygon(test_point, contours[other_idx].points):
                    candidates.append(other_idx)

            if not candidates:
                parent_map[idx] = None
            else:
                parent_map[idx] = min(candidates, key=lambda i: areas[i])

        def get_depth(idx: int, memo: dict[int, int]) -> int:
            if idx in memo:
                return memo[idx]
            parent = parent_map.get(idx)
            if parent is None:
                memo[idx] = 0
            else:
                memo[idx] = get_depth(parent, memo) + 1
            return memo[idx]

        depth_memo: dict[int, int] = {}
        nesting_tree: dict[int, ContourNode] = {}

        for idx in indices:
            nesting_tree[idx] = ContourNode(
                index=idx,
                parent=parent_map.get(idx),
                children=[],
                depth=get_depth(idx, depth_memo),
            )

        # Populate children lists
        for idx, node in nesting_tree.items():
            if node.parent is not None:
                nesting_tree[node.parent].children.append(idx)

        return nesting_tree
