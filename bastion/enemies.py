"""Enemies: sprite frames, spawning and movement along each map's path."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, NamedTuple

from bastion.state import SkillTree

ENEMY_KINDS = (1, 2, 3, 4)
BASE_SPEED = 10
HALTED = 9
WALK_STRIDE = 4
CLIMB_LIMIT = 1000


@dataclass(frozen=True)
class Rect:
    """A texture rectangle: left, top, width and height in pixels."""

    left: int
    top: int
    width: int
    height: int


# kind -> (hit points, damage) before skill-tree modifiers.
_STATS = {1: (50, 15), 2: (90, 30), 3: (200, 100), 4: (350, 200)}

_LEFT = {1: 10, 2: 10, 3: 5, 4: 0}

# kind -> angle -> (top, width, height) of the frame an enemy spawns with.
_SPAWN_FRAMES = {
    1: {0: (30, 129, 100), 1: (160, 129, 100), 3: (260, 129, 200)},
    2: {0: (30, 160, 150), 1: (180, 160, 150), 3: (330, 160, 150)},
    3: {0: (10, 100, 70), 1: (80, 100, 70), 3: (160, 100, 80)},
    4: {0: (0, 140, 36), 1: (36, 149, 36), 3: (72, 149, 36)},
}

# kind -> angle -> (top, width, height) of the frame used while moving.
_TRAVEL_FRAMES = {
    1: {0: (30, 129, 100), 1: (160, 129, 100), 3: (330, 129, 100),
        4: (430, 129, 100)},
    2: {0: (30, 160, 150), 1: (180, 160, 150), 3: (330, 160, 150),
        4: (480, 160, 150)},
    3: {0: (10, 100, 70), 1: (80, 100, 70), 3: (160, 100, 80),
        4: (240, 100, 80)},
    4: {0: (0, 140, 34), 1: (36, 149, 36), 3: (72, 149, 36),
        4: (118, 149, 36)},
}

# Second walking frame of kind 1, by angle.
_WALK_ALT_TOP = {0: 577, 3: 900, 4: 1070}

# angle -> unit step (dx, dy); 0 right, 1 up, 3 down, 4 left.
_MOVES = {0: (1, 0), 1: (0, -1), 3: (0, 1), 4: (-1, 0)}


def _check_kind(kind: int) -> None:
    if kind not in ENEMY_KINDS:
        raise ValueError(f"unknown enemy kind: {kind}")


def spawn_rect(kind: int, angle: int) -> Rect:
    """The texture frame an enemy of this kind spawns with."""
    _check_kind(kind)
    top, width, height = _SPAWN_FRAMES[kind].get(angle, (0, 0, 0))
    return Rect(_LEFT[kind], top, width, height)


def travel_rect(kind: int, angle: int) -> Rect | None:
    """The frame used while moving at an angle, or None if it does not move."""
    _check_kind(kind)
    frame = _TRAVEL_FRAMES[kind].get(angle)
    if frame is None:
        return None
    top, width, height = frame
    return Rect(_LEFT[kind], top, width, height)


class _Rule(NamedTuple):
    when: Callable[[float, float, int], bool]
    angle: int
    leg: int | None = None
    attack: bool = False


# Turning rules of each map, checked in order after every move.
_PATHS: dict[int, tuple[_Rule, ...]] = {
    0: (
        _Rule(lambda x, y, leg: x < 240 and y >= 360 and leg == 0, 1),
        _Rule(lambda x, y, leg: x < 1320 and y <= 360, 0),
        _Rule(lambda x, y, leg: x > 1320 and y <= 790, 3, leg=1),
        _Rule(lambda x, y, leg: x < 1675 and y >= 790 and leg == 1, 0),
        _Rule(lambda x, y, leg: x >= 1675, HALTED, attack=True),
    ),
    1: (
        _Rule(lambda x, y, leg: x < 370 and y >= 745, 0),
        _Rule(lambda x, y, leg: x > 370 and y >= 350, 1),
        _Rule(lambda x, y, leg: x < 1110 and y <= 350, 0),
        _Rule(lambda x, y, leg: x >= 1110 and y <= 730, 3, leg=1),
        _Rule(lambda x, y, leg: x < 1640 and y >= 730 and leg == 1, 0),
        _Rule(lambda x, y, leg: x >= 1640, HALTED),
    ),
    2: (
        _Rule(lambda x, y, leg: x < 350 and y == 125 and leg == 0, 0),
        _Rule(lambda x, y, leg: x > 350 and y <= 860 and leg == 0, 3),
        _Rule(lambda x, y, leg: x < 790 and y >= 860, 0, leg=1),
        _Rule(lambda x, y, leg: x >= 790 and y >= 415 and leg == 1, 1),
        _Rule(lambda x, y, leg: x < 1055 and y <= 415 and leg == 1, 0),
        _Rule(lambda x, y, leg: 1055 < x < 1400 and y >= 160, 1, leg=2),
        _Rule(lambda x, y, leg: x < 1450 and y <= 160 and leg == 2, 0),
        _Rule(lambda x, y, leg: x > 1450 and y < 620 and leg == 2, 3),
        _Rule(lambda x, y, leg: x < 1625 and y >= 620 and leg == 2, 0),
        _Rule(lambda x, y, leg: x >= 1625, HALTED, attack=True),
    ),
    3: (
        _Rule(lambda x, y, leg: x == 150 and y <= 755, 3),
        _Rule(lambda x, y, leg: x < 940 and y >= 755, 0),
        _Rule(lambda x, y, leg: x > 940 and y >= 450 and leg == 0, 1, leg=1),
        _Rule(lambda x, y, leg: x > 560 and y <= 450 and leg == 1, 4),
        _Rule(lambda x, y, leg: x < 560 and y >= 190 and leg == 1, 1, leg=2),
        _Rule(lambda x, y, leg: x < 1335 and y <= 190 and leg == 2, 0, leg=2),
        _Rule(lambda x, y, leg: x > 1335 and y < 580 and leg == 2, 3),
        _Rule(lambda x, y, leg: x < 1635 and y >= 580 and leg == 2, 0),
        _Rule(lambda x, y, leg: x >= 1635, HALTED, attack=True),
    ),
}


@dataclass
class Enemy:
    """One enemy on the map."""

    kind: int
    x: float
    y: float
    angle: int
    speed: float
    hp: float
    damage: float
    rect: Rect
    leg: int = 0
    stride: int = 0
    attacking: bool = False

    @property
    def at_base(self) -> bool:
        """Whether the enemy has reached the end of its path."""
        return self.attacking or self.angle == HALTED

    @property
    def scale(self) -> float:
        return 3.0 if self.kind == 4 else 1.0

    @property
    def texture(self) -> str:
        return f"images/ennemy{self.kind}.png"

    def _walk_frame(self) -> None:
        frame = travel_rect(self.kind, self.angle)
        if self.angle == 1:
            if self.stride < CLIMB_LIMIT:
                self.rect = frame
                self.stride += 1
            return
        if self.stride <= WALK_STRIDE:
            self.rect = frame
            self.stride += 1
        else:
            self.rect = replace(frame, top=_WALK_ALT_TOP[self.angle])
            self.stride = 0

    def advance(self) -> None:
        """Move one step along the current angle and update the frame."""
        direction = _MOVES.get(self.angle)
        if direction is None:
            return
        if self.kind == 1:
            self._walk_frame()
        else:
            self.rect = travel_rect(self.kind, self.angle)
        dx, dy = direction
        self.x += dx * self.speed
        self.y += dy * self.speed

    def step(self, map_index: int) -> bool:
        """Move along a map's path; return whether the base is reached."""
        rules = _PATHS.get(map_index)
        if rules is None:
            return self.at_base
        self.advance()
        for rule in rules:
            if rule.when(self.x, self.y, self.leg):
                if rule.leg is not None:
                    self.leg = rule.leg
                self.angle = rule.angle
                if rule.attack:
                    self.attacking = True
        return self.at_base


def spawn_enemy(
    kind: int, x: float, y: float, angle: int, tree: SkillTree
) -> Enemy:
    """A new enemy of a kind, with the skill tree's modifiers applied."""
    _check_kind(kind)
    hp, damage = _STATS[kind]
    return Enemy(
        kind=kind,
        x=float(x),
        y=float(y),
        angle=angle,
        speed=BASE_SPEED * tree.speed_mod,
        hp=hp * tree.life_mod,
        damage=damage * tree.enemy_damage_mod,
        rect=spawn_rect(kind, angle),
    )