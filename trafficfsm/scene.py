"""The crossroad scene: roads, traffic lights and crosswalks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from trafficfsm.items import CrosswalkItem, DrawOp, Orientation, Rect, TrafficLightItem

_ROAD_COLOR = "#808080"


@dataclass
class RoadItem:
    """A plain strip of road drawn without an outline."""

    rect: Rect
    fill: str = _ROAD_COLOR
    pos: tuple[float, float] = (0, 0)

    def bounding_rect(self) -> Rect:
        """Area the road occupies, in local coordinates."""
        return self.rect

    def paint(self) -> list[DrawOp]:
        """Return the single filled rectangle of the road."""
        return [DrawOp("rect", self.rect, self.fill, None)]


SceneItem = Union[RoadItem, TrafficLightItem, CrosswalkItem]


class TrafficScene:
    """A four-way crossroad with vehicle and pedestrian lights."""

    def __init__(self) -> None:
        self.scene_rect = Rect(0, 0, 1000, 1000)
        self.items: list[SceneItem] = []
        self._setup_crossroad()
        self._setup_traffic_lights()
        self._setup_pedestrian_lights()
        self._setup_crosswalks()

    def _setup_crossroad(self) -> None:
        self.items.append(RoadItem(Rect(0, 300, 800, 200)))
        self.items.append(RoadItem(Rect(300, 0, 200, 800)))

    def _setup_traffic_lights(self) -> None:
        for pos in ((380, 200), (380, 540), (200, 370), (540, 370)):
            self.items.append(TrafficLightItem(pos, Orientation.VERTICAL))

    def _setup_pedestrian_lights(self) -> None:
        for pos in ((420, 200), (420, 540), (240, 370), (580, 370)):
            self.items.append(TrafficLightItem(pos, Orientation.VERTICAL, True))

    def _setup_crosswalks(self) -> None:
        self.items.append(CrosswalkItem((305, 280), True))
        self.items.append(CrosswalkItem((305, 510), True))
        self.items.append(CrosswalkItem((280, 305), False))
        self.items.append(CrosswalkItem((510, 305), False))

    def _items_at(self, x: float, y: float):
        # Later items are drawn on top, so they are hit first.
        for item in reversed(self.items):
            px, py = item.pos
            if item.bounding_rect().contains(x - px, y - py):
                yield item

    def item_at(self, x: float, y: float) -> SceneItem | None:
        """Return the topmost item under a scene point, or None."""
        return next(self._items_at(x, y), None)

    def click(self, x: float, y: float) -> bool:
        """Deliver a click at a scene point; return True if an item changed."""
        for item in self._items_at(x, y):
            if isinstance(item, TrafficLightItem):
                px, py = item.pos
                return item.mouse_press(x - px, y - py)
        return False