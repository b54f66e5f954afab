"""Drawable items of the crossroad: crosswalks and traffic lights."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

_WHITE = "#ffffff"
_BLACK = "#000000"
_RED = "#ff0000"
_DARK_RED = "#800000"
_GREEN = "#00ff00"
_DARK_GREEN = "#008000"
_YELLOW = "#ffff00"
_DARK_GRAY = "#808080"
_LIGHT_GRAY = "#c0c0c0"

_STRIPES = 10
_STRIPE_STEP = 20


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """Return True if the point lies inside the rectangle or on its edge."""
        return (
            self.x <= x <= self.x + self.width
            and self.y <= y <= self.y + self.height
        )


class Orientation(Enum):
    """Direction an item faces."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class DrawOp:
    """One shape to draw, in the item's local coordinates."""

    shape: Literal["rect", "ellipse"]
    rect: Rect
    fill: str
    outline: str | None = _BLACK


class CrosswalkItem:
    """A striped pedestrian crossing."""

    def __init__(self, pos: tuple[float, float], horizontal: bool) -> None:
        self.pos = pos
        self.horizontal = horizontal

    def bounding_rect(self) -> Rect:
        """Area the item occupies, in local coordinates."""
        return Rect(0, 0, 200, 10) if self.horizontal else Rect(0, 0, 10, 200)

    def paint(self) -> list[DrawOp]:
        """Return the white stripes of the crossing."""
        offsets = (i * _STRIPE_STEP for i in range(_STRIPES))
        if self.horizontal:
            return [DrawOp("rect", Rect(o, 0, 10, 20), _WHITE) for o in offsets]
        return [DrawOp("rect", Rect(0, o, 20, 10), _WHITE) for o in offsets]


_BUTTON = Rect(5, 45, 10, 10)


class TrafficLightItem:
    """A vehicle light, or a pedestrian light with a push button."""

    def __init__(
        self,
        pos: tuple[float, float],
        orientation: Orientation,
        pedestrian: bool = False,
    ) -> None:
        self.pos = pos
        self.orientation = orientation
        self.pedestrian = pedestrian
        self.current_color = _RED
        self.button_pressed = False

    def bounding_rect(self) -> Rect:
        """Area the item occupies, in local coordinates."""
        return Rect(0, 0, 20, 60)

    def paint(self) -> list[DrawOp]:
        """Return the housing and lamps of the light."""
        ops = [DrawOp("rect", self.bounding_rect(), _BLACK)]
        if self.pedestrian:
            red = _RED if self.current_color == _RED else _DARK_RED
            green = _GREEN if self.current_color == _GREEN else _DARK_GREEN
            button = _DARK_GRAY if self.button_pressed else _LIGHT_GRAY
            ops += [
                DrawOp("rect", Rect(5, 5, 10, 10), red),
                DrawOp("rect", Rect(5, 25, 10, 10), green),
                DrawOp("rect", _BUTTON, button),
            ]
        else:
            ops += [
                DrawOp("ellipse", Rect(5, 5, 10, 10), _RED),
                DrawOp("ellipse", Rect(5, 25, 10, 10), _YELLOW),
                DrawOp("ellipse", Rect(5, 45, 10, 10), _GREEN),
            ]
        return ops

    def mouse_press(self, x: float, y: float) -> bool:
        """Handle a press at local coordinates; return True if the button toggled."""
        if not (self.pedestrian and _BUTTON.contains(x, y)):
            return False
        self.button_pressed = not self.button_pressed
        self.current_color = _GREEN if self.current_color == _RED else _RED
        return True