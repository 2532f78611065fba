"""Sprite batching: quads are collected, sorted and grouped by texture."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from blockengine.color import Color
from blockengine.vectors import Vector2, Vector4


class GlyphSortType(Enum):
    """How glyphs are ordered before batching."""

    NONE = "none"
    FRONT_TO_BACK = "front_to_back"
    BACK_TO_FRONT = "back_to_front"
    TEXTURE = "texture"


@dataclass(frozen=True)
class Vertex2D:
    """A sprite vertex: position, colour and texture coordinates."""

    position: Vector2 = Vector2()
    color: Color = Color()
    uv: Vector2 = Vector2()


def rotate_point(pos: Vector2, angle: float) -> Vector2:
    """Rotate ``pos`` about the origin by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Vector2(pos.x * c - pos.y * s, pos.x * s + pos.y * c)


@dataclass(frozen=True)
class Glyph:
    """A single textured quad."""

    texture: int
    depth: float
    top_left: Vertex2D
    bottom_left: Vertex2D
    bottom_right: Vertex2D
    top_right: Vertex2D

    @staticmethod
    def from_rect(
        dest_rect: Vector4,
        uv_rect: Vector4,
        texture: int,
        depth: float,
        color: Color,
        angle: Optional[float] = None,
    ) -> Glyph:
        """Build a quad from a rectangle (x, y, width, height), optionally rotated."""
        x, y, width, height = dest_rect
        if angle is None:
            tl = Vector2(x, y + height)
            bl = Vector2(x, y)
            br = Vector2(x + width, y)
            tr = Vector2(x + width, y + height)
        else:
            half = Vector2(width / 2.0, height / 2.0)
            origin = Vector2(x, y)
            corners = (
                Vector2(-half.x, half.y),
                Vector2(-half.x, -half.y),
                Vector2(half.x, -half.y),
                Vector2(half.x, half.y),
            )
            tl, bl, br, tr = (
                origin + rotate_point(corner, angle) + half for corner in corners
            )
        u, v, uw, vh = uv_rect
        return Glyph(
            texture=texture,
            depth=depth,
            top_left=Vertex2D(tl, color, Vector2(u, v + vh)),
            bottom_left=Vertex2D(bl, color, Vector2(u, v)),
            bottom_right=Vertex2D(br, color, Vector2(u + uw, v)),
            top_right=Vertex2D(tr, color, Vector2(u + uw, v + vh)),
        )

    def vertices(self) -> Tuple[Vertex2D, ...]:
        """The six vertices of the two triangles making up the quad."""
        return (
            self.top_left,
            self.bottom_left,
            self.bottom_right,
            self.bottom_right,
            self.top_right,
            self.top_left,
        )


@dataclass
class RenderBatch:
    """A run of consecutive vertices sharing one texture: one draw call."""

    offset: int
    num_vertices: int
    texture: int


@dataclass
class SpriteBatch:
    """Collects glyphs between begin() and end() and groups them into batches."""

    sort_type: GlyphSortType = GlyphSortType.TEXTURE
    glyphs: List[Glyph] = field(default_factory=list)
    render_batches: List[RenderBatch] = field(default_factory=list)
    vertices: List[Vertex2D] = field(default_factory=list)

    def begin(self, sort_type: GlyphSortType = GlyphSortType.TEXTURE) -> None:
        """Start a new batch, discarding glyphs and batches from the last one."""
        self.sort_type = sort_type
        self.render_batches.clear()
        self.glyphs.clear()

    def draw(
        self,
        dest_rect: Vector4,
        uv_rect: Vector4,
        texture: int,
        depth: float,
        color: Color,
        angle: Optional[float] = None,
    ) -> None:
        """Queue a quad, optionally rotated by ``angle`` radians."""
        self.glyphs.append(
            Glyph.from_rect(dest_rect, uv_rect, texture, depth, color, angle)
        )

    def draw_towards(
        self,
        dest_rect: Vector4,
        uv_rect: Vector4,
        texture: int,
        depth: float,
        color: Color,
        direction: Vector2,
    ) -> None:
        """Queue a quad rotated to face the (normalized) ``direction``."""
        angle = math.acos(Vector2.dot(Vector2(1.0, 0.0), direction))
        if direction.y < 0.0:
            angle = -angle
        self.draw(dest_rect, uv_rect, texture, depth, color, angle)

    def _sorted_glyphs(self) -> List[Glyph]:
        if self.sort_type is GlyphSortType.FRONT_TO_BACK:
            return sorted(self.glyphs, key=lambda glyph: glyph.depth)
        if self.sort_type is GlyphSortType.BACK_TO_FRONT:
            return sorted(self.glyphs, key=lambda glyph: -glyph.depth)
        if self.sort_type is GlyphSortType.TEXTURE:
            return sorted(self.glyphs, key=lambda glyph: glyph.texture)
        return list(self.glyphs)

    def end(self) -> List[RenderBatch]:
        """Sort the glyphs, build the vertex list and the render batches."""
        self.vertices = []
        previous: Optional[Glyph] = None
        for glyph in self._sorted_glyphs():
            if previous is not None and glyph.texture == previous.texture:
                self.render_batches[-1].num_vertices += 6
            else:
                self.render_batches.append(
                    RenderBatch(len(self.vertices), 6, glyph.texture)
                )
            self.vertices.extend(glyph.vertices())
            previous = glyph
        return self.render_batches