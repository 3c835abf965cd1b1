"""
Drawing view - one freehand drawing surface.

Wires the stroke tracker to the canvas compositor through a single fixed pen,
and collects repaint requests for the host loop. Holds no module-level state,
so several views can live side by side.
"""
import logging
from typing import Optional, Tuple

import numpy as np

from core.geometry import Point, QuadSegment
from core.pointer_events import PointerAction, PointerEvent
from core.repaint import RepaintScheduler
from core.stroke_tracker import StrokeTracker
from modules.canvas import CanvasCompositor
from modules.pen import Pen

logger = logging.getLogger(__name__)


class DrawingView:
    def __init__(
        self,
        pen: Pen,
        background_color: Tuple[int, int, int],
        frame_inset: int = 40,
        move_tolerance: float = 8.0,
    ) -> None:
        self.pen = pen
        self.compositor = CanvasCompositor(background_color, frame_inset)
        self.repaint = RepaintScheduler()
        self.tracker = StrokeTracker(
            move_tolerance,
            on_segment=self._commit,
            request_repaint=self.repaint.request,
        )
        # latest raw sample, overwritten on every event
        self.sample = Point(0.0, 0.0)

    def _commit(self, segment: QuadSegment) -> None:
        self.compositor.commit_segment(segment, self.pen)

    def on_size_changed(self, width: int, height: int) -> None:
        logger.info("viewport resized to %dx%d", width, height)
        self.compositor.resize(width, height)
        self.repaint.request()

    def on_touch_event(self, event: Optional[PointerEvent]) -> bool:
        if event is None:
            return False
        self.sample = Point(event.x, event.y)

        if event.action is PointerAction.DOWN:
            self.tracker.on_start(event.x, event.y)
        elif event.action is PointerAction.MOVE:
            self.tracker.on_move(event.x, event.y)
        elif event.action is PointerAction.UP:
            self.tracker.on_end()
        return True

    def on_draw(self, target: Optional[np.ndarray]) -> bool:
        return self.compositor.render(target, self.pen)

    @property
    def needs_repaint(self) -> bool:
        return self.repaint.pending

    def consume_repaint(self) -> bool:
        return self.repaint.consume()
