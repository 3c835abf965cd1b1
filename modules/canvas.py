# -*- coding: utf-8 -*-
"""
Canvas compositor - persistent offscreen surface plus the visible frame.

Stroke segments are painted once into the offscreen surface and never redrawn;
every visible repaint copies that surface to the screen and draws the inset
frame on top.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import cv2
import numpy as np

from core.geometry import QuadSegment, Rect
from modules.pen import Pen, validate_color

logger = logging.getLogger(__name__)

# fixed-point bits for sub-pixel polyline vertices
SHIFT_BITS = 4
# largest coordinate that still fits int32 once shifted
COORD_LIMIT = (2 ** 31 - 1) >> SHIFT_BITS


class Unsized:
    """Viewport not laid out yet: no surface, no frame."""

    def __repr__(self) -> str:
        return "Unsized()"


UNSIZED = Unsized()


@dataclass(frozen=True)
class Sized:
    surface: np.ndarray
    frame: Rect

    @property
    def size(self) -> Tuple[int, int]:
        h, w = self.surface.shape[:2]
        return w, h


ViewportState = Union[Unsized, Sized]


class CanvasCompositor:
    def __init__(self, background_color: Tuple[int, int, int], frame_inset: int = 40) -> None:
        self.background_color = validate_color("background_color", background_color)
        if frame_inset < 0:
            raise ValueError(f"frame_inset must be >= 0, got {frame_inset!r}")
        self.frame_inset = int(frame_inset)
        self._state: ViewportState = UNSIZED

    @property
    def state(self) -> ViewportState:
        return self._state

    @property
    def is_sized(self) -> bool:
        return isinstance(self._state, Sized)

    def resize(self, width: int, height: int) -> None:
        """Replace the surface with a fresh width x height one filled with the background."""
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")

        # release the old buffer before allocating the new one
        self._state = UNSIZED
        surface = np.empty((int(height), int(width), 3), dtype=np.uint8)
        surface[:] = self.background_color
        frame = Rect.inset_from(int(width), int(height), self.frame_inset)
        self._state = Sized(surface, frame)
        logger.debug("surface allocated %dx%d, frame %s", width, height, frame.as_tuple())

    def commit_segment(self, segment: QuadSegment, pen: Pen) -> bool:
        """Paint one curve segment into the offscreen surface. False if unsized."""
        state = self._state
        if isinstance(state, Unsized):
            logger.warning("segment dropped: surface not allocated yet")
            return False

        w, h = state.size
        # samples past the surface's own resolution add nothing visible
        pts = segment.flatten(max_steps=w + h)
        pts = np.clip(pts, -COORD_LIMIT, COORD_LIMIT)
        pts = np.round(pts * (1 << SHIFT_BITS)).astype(np.int32).reshape((-1, 1, 2))
        cv2.polylines(
            state.surface,
            [pts],
            False,
            pen.color,
            pen.thickness,
            lineType=pen.line_type,
            shift=SHIFT_BITS,
        )
        return True

    def render(self, target: Optional[np.ndarray], pen: Pen) -> bool:
        """Copy the surface to target at the origin and overlay the frame."""
        state = self._state
        if target is None:
            return False
        if isinstance(state, Unsized):
            logger.warning("render skipped: surface not allocated yet")
            return False

        w, h = state.size
        rows = min(h, target.shape[0])
        cols = min(w, target.shape[1])
        target[:rows, :cols] = state.surface[:rows, :cols]
        # target area the surface does not cover shows plain background
        target[rows:, :] = self.background_color
        target[:rows, cols:] = self.background_color

        frame = state.frame
        cv2.rectangle(
            target,
            (frame.left, frame.top),
            (frame.right, frame.bottom),
            pen.color,
            pen.thickness,
            lineType=pen.line_type,
        )
        return True

    def get_surface(self) -> Optional[np.ndarray]:
        state = self._state
        return state.surface if isinstance(state, Sized) else None
