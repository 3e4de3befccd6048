"""Small value types shared across the data loaders."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """Axis-aligned rectangle; the right and bottom edges are exclusive."""

    left: int
    top: int
    width: int
    height: int

    def bottom(self) -> int:
        return self.top + self.height

    def right(self) -> int:
        return self.left + self.width

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right() and self.top <= y < self.bottom()


@dataclass
class Path:
    """A path step with a target position and an action code."""

    x: int
    y: int
    action: int


class CalcString(str):
    """A data-file expression evaluated against a source's stats, such as ``lvl*2``."""