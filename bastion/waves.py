"""Enemy waves: spawning from the level scripts, moving the horde, winning."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from bastion.enemies import Enemy, spawn_enemy
from bastion.state import Defender, SkillTree

MAX_ENEMIES = 16
SPAWN_PERIOD = 20
ATTACK_FACTOR = 0.3
WIN_SCREEN = 10
LOSE_SCREEN = 9

# map -> (x, y, angle) where that map's enemies enter.
_SPAWN_POINTS = {
    0: (240, 970, 1),
    1: (0, 735, 0),
    2: (0, 150, 0),
    3: (150, 0, 3),
}


@dataclass
class WaveState:
    """Wave scripts of the four maps and how far the current one has run.

    Each script is a string of digits, one per spawn period: ``0`` spawns
    nothing, any other digit spawns an enemy of that kind.
    """

    levels: tuple[str, str, str, str] = ("", "", "", "")
    index: int = 0

    def __post_init__(self) -> None:
        if len(self.levels) != len(_SPAWN_POINTS):
            raise ValueError(
                f"expected {len(_SPAWN_POINTS)} wave scripts, got {len(self.levels)}"
            )
        self.levels = tuple(self.levels)


def _script(waves: WaveState, map_index: int) -> str | None:
    if map_index not in _SPAWN_POINTS:
        return None
    return waves.levels[map_index]


@dataclass
class Horde:
    """The enemies spawned so far in the current game, oldest first."""

    enemies: list[Enemy] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.enemies)

    def __iter__(self) -> Iterator[Enemy]:
        return iter(self.enemies)

    def spawn(
        self, kind: int, x: float, y: float, angle: int, tree: SkillTree
    ) -> Enemy | None:
        """Add a new enemy; return it, or None once the horde is full."""
        if len(self.enemies) >= MAX_ENEMIES:
            return None
        enemy = spawn_enemy(kind, x, y, angle, tree)
        self.enemies.append(enemy)
        return enemy

    def total_hp(self) -> float:
        """Sum of the hit points left in the horde."""
        return sum(enemy.hp for enemy in self.enemies)

    def move_all(self, defender: Defender, map_index: int) -> int:
        """Move every enemy one step; those at the base hurt the defender.

        Returns how many enemies attacked the base this step.
        """
        attackers = 0
        for enemy in self.enemies:
            if enemy.step(map_index) and enemy.x > 0:
                defender.hp -= enemy.damage * ATTACK_FACTOR
                attackers += 1
            if defender.hp < 0:
                defender.screen = LOSE_SCREEN
        return attackers


def check_wave(
    defender: Defender, horde: Horde, waves: WaveState
) -> Enemy | None:
    """Play the next entry of the current map's script; return any spawn."""
    map_index = defender.map_index
    script = _script(waves, map_index)
    if script is None or waves.index >= len(script):
        return None
    x, y, angle = _SPAWN_POINTS[map_index]
    defender.spawn_angle = angle
    entry = script[waves.index]
    if not entry.isdigit():
        raise ValueError(f"invalid wave entry: {entry!r}")
    kind = int(entry)
    waves.index += 1
    if kind == 0:
        return None
    return horde.spawn(kind, x, y, angle, defender.tree)


def check_win(defender: Defender, horde: Horde, waves: WaveState) -> bool:
    """Switch to the victory screen once the script is done and all are dead."""
    script = _script(waves, defender.map_index)
    if script is None or waves.index != len(script):
        return False
    if horde.total_hp() > 0:
        return False
    defender.screen = WIN_SCREEN
    return True


def run_enemies(defender: Defender, horde: Horde, waves: WaveState) -> bool:
    """One game tick for the enemies; return whether the level is won."""
    if defender.tick == SPAWN_PERIOD:
        check_wave(defender, horde, waves)
        defender.tick = 0
    if check_win(defender, horde, waves):
        return True
    horde.move_all(defender, defender.map_index)
    return False