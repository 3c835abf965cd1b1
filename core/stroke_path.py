from typing import List, Optional

from core.geometry import Point, QuadSegment


class StrokePath:
    """Ordered curve segments of the stroke currently being drawn."""

    def __init__(self) -> None:
        self._segments: List[QuadSegment] = []
        self._current: Optional[Point] = None

    def reset(self) -> None:
        self._segments = []
        self._current = None

    def move_to(self, x: float, y: float) -> None:
        self._current = Point(x, y)

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> QuadSegment:
        """Append a quadratic segment from the current point; returns it."""
        start = self._current if self._current is not None else Point(cx, cy)
        segment = QuadSegment(start, Point(cx, cy), Point(x, y))
        self._segments.append(segment)
        self._current = segment.end
        return segment

    @property
    def current_point(self) -> Optional[Point]:
        return self._current

    @property
    def segments(self) -> List[QuadSegment]:
        return list(self._segments)

    @property
    def is_empty(self) -> bool:
        return not self._segments

    def __len__(self) -> int:
        return len(self._segments)
