import logging
from typing import Tuple

import cv2
import numpy as np

import config
from core.pointer_events import from_mouse_callback
from modules.drawing_view import DrawingView
from modules.pen import Pen
from utils.display import scaled_touch_slop

logger = logging.getLogger(__name__)


def window_size(name: str, fallback: Tuple[int, int]) -> Tuple[int, int]:
    """Current drawable size of the window; fallback until the backend reports one."""
    try:
        _, _, w, h = cv2.getWindowImageRect(name)
    except cv2.error:
        return fallback
    if w <= 0 or h <= 0:
        return fallback
    return w, h


def build_view() -> DrawingView:
    pen = Pen(
        color=getattr(config, 'PAINT_COLOR', (0, 199, 18)),
        stroke_width=getattr(config, 'STROKE_WIDTH', 12.0),
    )
    tolerance = scaled_touch_slop(
        getattr(config, 'TOUCH_SLOP_DP', 8),
        getattr(config, 'DISPLAY_DENSITY', 1.0),
    )
    return DrawingView(
        pen,
        background_color=getattr(config, 'BACKGROUND_COLOR', (59, 235, 255)),
        frame_inset=getattr(config, 'FRAME_INSET', 40),
        move_tolerance=tolerance,
    )


def main() -> None:
    logging.basicConfig(
        level=getattr(config, 'LOG_LEVEL', "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    name = config.WINDOW_NAME
    default_size = (config.WINDOW_WIDTH, config.WINDOW_HEIGHT)
    delay = getattr(config, 'FRAME_DELAY_MS', 16)

    view = build_view()

    try:
        cv2.namedWindow(name, cv2.WINDOW_NORMAL)
    except cv2.error as e:
        print(f"Error: cannot open a window ({e})")
        print("Check that a display is available and OpenCV was built with GUI support.")
        return
    cv2.resizeWindow(name, *default_size)

    def mouse_callback(event, x, y, flags, param):
        view.on_touch_event(from_mouse_callback(event, x, y, flags))

    cv2.setMouseCallback(name, mouse_callback)

    print("Drag with the left mouse button to draw. Press q or ESC to quit.")
    logger.info("started %s (%dx%d)", name, *default_size)

    size = None
    screen = None
    while True:
        current = window_size(name, default_size)
        if current != size:
            size = current
            view.on_size_changed(*size)
            screen = np.zeros((size[1], size[0], 3), dtype=np.uint8)

        if view.consume_repaint():
            view.on_draw(screen)
            cv2.imshow(name, screen)

        # mouse callbacks are delivered from inside waitKey, on this thread
        key = cv2.waitKey(delay) & 0xFF
        if key in (ord('q'), 27):
            break
        if cv2.getWindowProperty(name, cv2.WND_PROP_VISIBLE) < 1:
            break

    cv2.destroyAllWindows()
    logger.info("stopped")


if __name__ == "__main__":
    main()
