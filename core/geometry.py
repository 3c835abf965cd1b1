"""Plain geometry values shared by the stroke tracker and the compositor."""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y

    def midpoint(self, other: "Point") -> "Point":
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)


@dataclass(frozen=True)
class QuadSegment:
    """
    Quadratic Bezier piece: B(t) = (1-t)^2 * start + 2(1-t)t * control + t^2 * end
    """

    start: Point
    control: Point
    end: Point

    def point_at(self, t: float) -> Point:
        u = 1 - t
        x = u * u * self.start.x + 2 * u * t * self.control.x + t * t * self.end.x
        y = u * u * self.start.y + 2 * u * t * self.control.y + t * t * self.end.y
        return Point(x, y)

    def flatten(self, spacing: float = 3.0, max_steps: Optional[int] = None) -> np.ndarray:
        """
        Sample the curve into an (N, 2) float array, start and end included.

        Roughly one sample every `spacing` pixels along the control polygon,
        never fewer than 3. max_steps caps the count for very long segments.
        """
        # the control polygon bounds the curve length from above
        hull = np.hypot(self.control.x - self.start.x, self.control.y - self.start.y) + np.hypot(
            self.end.x - self.control.x, self.end.y - self.control.y
        )
        steps = hull / spacing
        if max_steps is not None:
            steps = min(steps, max_steps)
        steps = max(2, int(steps))
        t = np.linspace(0.0, 1.0, steps + 1)[:, None]
        u = 1.0 - t
        p0 = np.array(self.start.as_tuple(), dtype=np.float64)
        p1 = np.array(self.control.as_tuple(), dtype=np.float64)
        p2 = np.array(self.end.as_tuple(), dtype=np.float64)
        return u * u * p0 + 2 * u * t * p1 + t * t * p2


@dataclass(frozen=True)
class Rect:
    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def inset_from(cls, width: int, height: int, inset: int) -> "Rect":
        return cls(inset, inset, width - inset, height - inset)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return self.left, self.top, self.right, self.bottom

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top
