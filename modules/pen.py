"""
Pen - fixed stroke style shared by stroke segments and the frame.
"""
import numbers
from dataclasses import dataclass
from typing import Tuple

import cv2

ROUND = "round"


def validate_color(name: str, color) -> Tuple[int, int, int]:
    try:
        channels = tuple(color)
    except TypeError:
        channels = ()
    if len(channels) != 3 or not all(
        isinstance(c, numbers.Integral) and 0 <= c <= 255 for c in channels
    ):
        raise ValueError(f"{name} must be a BGR tuple of three ints in 0..255, got {color!r}")
    return tuple(int(c) for c in channels)


@dataclass(frozen=True)
class Pen:
    color: Tuple[int, int, int]
    stroke_width: float
    join: str = ROUND
    cap: str = ROUND
    antialias: bool = True
    # 8-bit surface, 8-bit pen colors: nothing to down-sample on this backend
    dither: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", validate_color("color", self.color))
        if not self.stroke_width > 0:
            raise ValueError(f"stroke_width must be > 0, got {self.stroke_width!r}")
        # OpenCV thick lines always have round ends and joins
        if self.join != ROUND or self.cap != ROUND:
            raise ValueError(f"only round join/cap are supported, got {self.join!r}/{self.cap!r}")

    @property
    def thickness(self) -> int:
        return max(1, int(round(self.stroke_width)))

    @property
    def line_type(self) -> int:
        return cv2.LINE_AA if self.antialias else cv2.LINE_8
