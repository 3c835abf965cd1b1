"""
Stroke tracker - turns pointer samples into smoothed curve segments.

Each accepted move appends a quadratic Bezier from the path's current point,
with the last accepted sample (the anchor) as control point, ending halfway
between the anchor and the new sample. The trace lags half a step behind the
pointer but has no corners.
"""
import logging
from typing import Callable, Optional

from core.geometry import Point, QuadSegment
from core.stroke_path import StrokePath

logger = logging.getLogger(__name__)


class StrokeTracker:
    def __init__(
        self,
        tolerance: float,
        on_segment: Optional[Callable[[QuadSegment], object]] = None,
        request_repaint: Optional[Callable[[], None]] = None,
    ) -> None:
        """
        Args:
            tolerance: minimum per-axis displacement (pixels) for a move to count
            on_segment: receives every accepted segment for committing
            request_repaint: called after each committed segment
        """
        if not tolerance > 0:
            raise ValueError(f"tolerance must be > 0, got {tolerance!r}")
        self._tolerance = float(tolerance)
        self._on_segment = on_segment
        self._request_repaint = request_repaint

        self.path = StrokePath()
        self._anchor: Optional[Point] = None
        self._active = False

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def anchor(self) -> Optional[Point]:
        return self._anchor

    @property
    def is_active(self) -> bool:
        return self._active

    def on_start(self, x: float, y: float) -> None:
        if self._active and not self.path.is_empty:
            # last start wins; segments already committed stay on the surface
            logger.debug("stroke restarted with %d segment(s) in flight", len(self.path))
        self.path.reset()
        self.path.move_to(x, y)
        self._anchor = Point(x, y)
        self._active = True

    def on_move(self, x: float, y: float) -> Optional[QuadSegment]:
        """Returns the committed segment, or None if the move was filtered out."""
        if not self._active:
            # hover, or a drag that began outside the surface
            return None

        dx = abs(x - self._anchor.x)
        dy = abs(y - self._anchor.y)
        if dx < self._tolerance and dy < self._tolerance:
            logger.debug("move ignored (dx=%.1f, dy=%.1f)", dx, dy)
            return None

        end = self._anchor.midpoint(Point(x, y))
        segment = self.path.quad_to(self._anchor.x, self._anchor.y, end.x, end.y)
        self._anchor = Point(x, y)
        logger.debug("segment %s -> %s", segment.start.as_tuple(), segment.end.as_tuple())

        if self._on_segment is not None:
            self._on_segment(segment)
        if self._request_repaint is not None:
            self._request_repaint()
        return segment

    def on_end(self) -> None:
        # pixels are already on the surface, the path is no longer needed
        self.path.reset()
        self._active = False
