"""Collaborator interfaces consumed by the layout core.

The core never inspects a Region; it only folds Regions through a
RegionEngine. Fonts are reached through a GlyphSource.
"""

from collections.abc import Iterable, Sequence
from typing import Any, Protocol, runtime_checkable

from textshape.domain.glyph import GlyphOutline

Region = Any


@runtime_checkable
class GlyphSource(Protocol):
    """Font metrics and outlines, addressed by glyph index."""

    @property
    def units_per_em(self) -> int: ...

    def glyph_index(self, char: str) -> int: ...

    def advance_width(self, glyph_index: int) -> float: ...

    def advance_height(self) -> float: ...

    def kerning(self, previous: int | None, current: int) -> float: ...

    def load_outline(self, glyph_index: int) -> GlyphOutline: ...


@runtime_checkable
class RegionEngine(Protocol):
    """Boolean and affine operations over an opaque planar region type."""

    def empty(self) -> Region: ...

    def is_empty(self, region: Region) -> bool: ...

    def polygon_to_region(self, vertices: Sequence[tuple[float, float]]) -> Region: ...

    def union(self, a: Region, b: Region) -> Region: ...

    def union_all(self, regions: Iterable[Region]) -> Region: ...

    def difference(self, a: Region, b: Region) -> Region: ...

    def translate(self, region: Region, dx: float, dy: float) -> Region: ...

    def center_and_scale(self, region: Region, factor: float) -> Region: ...

    def bounds(self, region: Region) -> tuple[float, float, float, float]: ...
