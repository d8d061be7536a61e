"""Node representations used by the pipeline.

``RawNode`` is the typed form of one entry of a UI dump's node tree, with
defaults already filled in. ``NormalizedNode`` is the flattened record the
inference stages work on, carrying absolute form-space coordinates.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in integer pixels."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h

    @property
    def area(self) -> int:
        return self.w * self.h

    @classmethod
    def union(cls, rects: Iterable[Rect]) -> Rect:
        """Smallest rectangle covering every given rectangle.

        Raises:
            ValueError: If no rectangles are given
        """
        rects = list(rects)
        if not rects:
            raise ValueError("union() requires at least one rectangle")

        min_x = min(r.x for r in rects)
        min_y = min(r.y for r in rects)
        max_x = max(r.right for r in rects)
        max_y = max(r.bottom for r in rects)
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)


@dataclass(frozen=True)
class RawNode:
    """One node of a captured control tree, parent-relative.

    ``id`` is None when the capture did not provide one.
    """

    id: str | None
    type: str = ""
    name: str = ""
    text: str | None = None
    visible: bool = True
    enabled: bool = True
    bounds: Rect = field(default_factory=Rect)
    vendor_kind: str | None = None
    children: tuple[RawNode, ...] = ()


@dataclass(frozen=True)
class NormalizedNode:
    """Flattened node with absolute form-space bounds."""

    id: str
    type: str
    name: str = ""
    text: str | None = None
    visible: bool = True
    enabled: bool = True
    abs_x: int = 0
    abs_y: int = 0
    w: int = 0
    h: int = 0
    vendor_kind: str | None = None

    @property
    def short_type(self) -> str:
        """Last dotted segment of the type name."""
        return self.type.rsplit(".", 1)[-1]

    @property
    def bounds(self) -> Rect:
        return Rect(self.abs_x, self.abs_y, self.w, self.h)

    @property
    def area(self) -> int:
        return self.w * self.h
