# -*- coding: utf-8 -*-
"""Pointer events delivered by the host window, in surface-local coordinates."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import cv2


class PointerAction(Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"


@dataclass(frozen=True)
class PointerEvent:
    action: PointerAction
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def down(cls, x: float, y: float) -> "PointerEvent":
        return cls(PointerAction.DOWN, float(x), float(y))

    @classmethod
    def move(cls, x: float, y: float) -> "PointerEvent":
        return cls(PointerAction.MOVE, float(x), float(y))

    @classmethod
    def up(cls, x: float = 0.0, y: float = 0.0) -> "PointerEvent":
        return cls(PointerAction.UP, float(x), float(y))


def from_mouse_callback(event: int, x: int, y: int, flags: int) -> Optional[PointerEvent]:
    """
    Translate a cv2.setMouseCallback event into a PointerEvent.

    Only the left button draws; plain hover moves and other buttons give None.
    """
    if event == cv2.EVENT_LBUTTONDOWN:
        return PointerEvent.down(x, y)
    if event == cv2.EVENT_MOUSEMOVE and flags & cv2.EVENT_FLAG_LBUTTON:
        return PointerEvent.move(x, y)
    if event == cv2.EVENT_LBUTTONUP:
        return PointerEvent.up(x, y)
    return None
