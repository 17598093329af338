"""
A single source of thruth for types that are used in the other modules.
Instead of importing Rects from pygame, import them from here.
"""
from __future__ import annotations

from enum import Enum as _Enum
from typing import Union

from pygame.math import Vector2
from pygame.rect import Rect as _Rect


class BugError(AssertionError):
    """A type of error that should never occur. If it occurs, something needs to be fixed."""


# Aliases
##########################################################################

# a size, vector, or position
Coordinate = Union[tuple[float, float], Vector2]


class Enum(_Enum):
    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"


class Rect(_Rect):
    @property
    def span(self) -> tuple[int, int, int, int]:
        """x0, y0, x1, y1"""
        return self.left, self.top, self.right, self.bottom

    @staticmethod
    def from_span(point1: Coordinate, point2: Coordinate):
        """
        Rect from two points.
        """
        x1, y1 = point1
        x2, y2 = point2
        rect = Rect((x1, y1), (x2 - x1, y2 - y1))
        rect.normalize()
        return rect
