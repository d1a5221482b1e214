"""Tower slots of the first three maps: drop boxes and tower positions."""

from __future__ import annotations

from dataclasses import dataclass

from bastion.state import TOWER_TYPES

# map -> slot boxes in the order a drop is checked:
# (slot, (x_min, x_max, y_min, y_max), tower position). Bounds are exclusive.
_BOXES: dict[int, tuple[tuple[int, tuple[int, int, int, int], tuple[int, int]], ...]] = {
    0: (
        (0, (299, 500, 200, 400), (300, 200)),
        (1, (650, 816, 490, 644), (650, 490)),
        (2, (1100, 1266, 200, 364), (1100, 200)),
        (3, (1440, 1606, 620, 784), (1440, 620)),
    ),
    1: (
        (0, (470, 586, 690, 804), (470, 690)),
        (1, (250, 366, 390, 504), (250, 390)),
        (2, (540, 656, 425, 539), (540, 425)),
        (3, (750, 866, 210, 324), (750, 210)),
        (4, (990, 1106, 420, 534), (990, 420)),
        (5, (1400, 1516, 620, 734), (1400, 620)),
    ),
    2: (
        (0, (260, 376, 240, 355), (260, 240)),
        (1, (470, 586, 630, 745), (470, 630)),
        (2, (700, 816, 770, 845), (700, 770)),
        (3, (910, 1026, 520, 635), (910, 520)),
        (4, (975, 1106, 300, 415), (975, 300)),
        (5, (1240, 1356, 50, 164), (1240, 50)),
        (6, (1370, 1486, 250, 365), (1370, 250)),
        (7, (1570, 1686, 710, 824), (1570, 710)),
    ),
}

# The tutorial's second slot accepts a taller drop area for the basic tower.
_OVERRIDES: dict[tuple[int, int, int], tuple[int, int, int, int]] = {
    (0, 1, 1): (650, 816, 490, 654),
}


@dataclass(frozen=True)
class Slot:
    """A place on a map where a dragged tower can be dropped."""

    index: int
    x_min: int
    x_max: int
    y_min: int
    y_max: int
    position: tuple[int, int]

    def contains(self, x: float, y: float) -> bool:
        """Whether a drop point falls inside the slot's box."""
        return self.x_min < x < self.x_max and self.y_min < y < self.y_max


def base_slots(map_index: int, tower_type: int) -> tuple[Slot, ...]:
    """Slots of a map for a tower type, in drop-check order.

    Maps without slot data here give an empty tuple.
    """
    if tower_type not in TOWER_TYPES:
        raise ValueError(f"unknown tower type: {tower_type}")
    boxes = _BOXES.get(map_index, ())
    slots = []
    for index, box, position in boxes:
        x_min, x_max, y_min, y_max = _OVERRIDES.get(
            (map_index, index, tower_type), box
        )
        slots.append(Slot(index, x_min, x_max, y_min, y_max, position))
    return tuple(slots)