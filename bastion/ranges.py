"""Tower range circles for each map slot."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

OUTLINE_THICKNESS = 5
DRAW_OFFSET = 100

# Range anchor of a type-1 tower on each slot, per map. Stronger towers
# grow the radius by 50 per level and shift the anchor by the same amount.
_ANCHORS: dict[int, tuple[tuple[int, int], ...]] = {
    0: ((150, 50), (500, 350), (950, 100), (1300, 550)),
    1: ((320, 540), (100, 240), (390, 275), (600, 60), (840, 270), (1250, 470)),
    2: (
        (110, 90), (320, 480), (550, 620), (760, 370),
        (825, 150), (1090, -100), (1220, 100), (1420, 560),
    ),
    3: (
        (-90, 160), (120, 510), (670, 730), (910, 600),
        (705, 385), (530, 160), (1100, 140), (1350, 320),
    ),
}


@dataclass(frozen=True)
class Circle:
    """A range outline; the shape is drawn from its origin."""

    x: int
    y: int
    radius: int

    @property
    def origin(self) -> tuple[int, int]:
        return (self.x - DRAW_OFFSET, self.y - DRAW_OFFSET)


def range_circle(map_index: int, slot: int, tower_type: int) -> Circle | None:
    """The range of a tower on a slot, or None where nothing is drawn."""
    anchors = _ANCHORS.get(map_index)
    if anchors is None or not 0 <= slot < len(anchors):
        return None
    if tower_type not in (1, 2, 3, 4):
        return None
    x, y = anchors[slot]
    shift = 50 * (tower_type - 1)
    return Circle(x - shift, y - shift, 300 + shift)


def tower_ranges(map_index: int, placed: Mapping[int, int]) -> list[Circle]:
    """Circles for every placed tower, by slot order; placed maps slot to type."""
    circles = (
        range_circle(map_index, slot, placed[slot]) for slot in sorted(placed)
    )
    return [circle for circle in circles if circle is not None]