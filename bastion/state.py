"""Game state: inventory, key bindings, the skill tree and the market."""

from __future__ import annotations

from dataclasses import dataclass, field

TOWER_TYPES = (1, 2, 3, 4)
MAX_STOCK = 8
SKILL_MIN_MONEY = 500

# Market hit boxes, exclusive bounds: (x_min, x_max, y_min, y_max).
_MARKET_BOXES = {
    1: (1780, 1860, 80, 200),
    2: (1780, 1860, 220, 380),
    3: (1780, 1860, 430, 560),
    4: (1780, 1860, 640, 750),
}

# Skill tree nodes in the order they are checked:
# (node, box, prerequisite node, cost, modifier flag).
_SKILL_NODES = (
    (1, (360, 640, 50, 100), None, 500, 1),
    (2, (800, 1080, 50, 100), None, 500, 2),
    (3, (330, 520, 180, 230), 1, 1000, 3),
    (4, (530, 700, 180, 230), 1, 1000, 4),
    (6, (930, 1120, 180, 230), 2, 1000, 5),
    (5, (730, 920, 180, 230), 2, 1000, 6),
)

_MODIFIERS = {
    1: ("damage_mod", 1.2),
    2: ("life_mod", 0.8),
    3: ("upgrade_mod", 0.8),
    4: ("buy_mod", 0.8),
    5: ("speed_mod", 0.8),
    6: ("enemy_damage_mod", 0.8),
}


def _inside(box: tuple[int, int, int, int], x: float, y: float) -> bool:
    x_min, x_max, y_min, y_max = box
    return x_min < x < x_max and y_min < y < y_max


@dataclass
class Inventory:
    """Towers held in stock, keyed by tower type."""

    counts: dict[int, int] = field(
        default_factory=lambda: {kind: 0 for kind in TOWER_TYPES}
    )


@dataclass
class KeyBindings:
    """Keys that open the market and the inventory."""

    buy: str = "M"
    inventory: str = "I"
    pending: int = 0


@dataclass
class SkillTree:
    """Purchased skill nodes and the modifiers they grant."""

    bought: set[int] = field(default_factory=set)
    damage_mod: float = 1.0
    life_mod: float = 1.0
    upgrade_mod: float = 1.0
    buy_mod: float = 1.0
    speed_mod: float = 1.0
    enemy_damage_mod: float = 1.0

    def apply(self, flag: int) -> None:
        """Set the modifier that belongs to a skill flag (1 to 6)."""
        try:
            name, value = _MODIFIERS[flag]
        except KeyError:
            raise ValueError(f"unknown skill flag: {flag}") from None
        setattr(self, name, value)


@dataclass
class Defender:
    """The whole mutable state of one game."""

    inventory: Inventory = field(default_factory=Inventory)
    keys: KeyBindings = field(default_factory=KeyBindings)
    tree: SkillTree = field(default_factory=SkillTree)
    screen: int = 8
    mouse: bool = False
    frame_size: int = 169
    map_index: int = 0
    framerate: int = 60
    music_slider: tuple[float, float] = (665.0, 686.0)
    sound_slider: tuple[float, float] = (665.0, 885.0)
    hud: int = 0
    money: int = 100
    hp: float = 100.0
    tick: int = 0
    spawn_angle: int = 0
    anim: int = 0
    towers: dict[int, object] = field(default_factory=dict)

    def click_skill_tree(self, x: float, y: float) -> int | None:
        """Handle a click on the skill tree; return the node bought, if any."""
        if not self.mouse:
            return None
        for node, box, needs, cost, flag in _SKILL_NODES:
            if not _inside(box, x, y):
                continue
            if self.money < SKILL_MIN_MONEY or node in self.tree.bought:
                continue
            if needs is not None and needs not in self.tree.bought:
                continue
            self.tree.bought.add(node)
            self.money -= cost
            self.tree.apply(flag)
            return node
        return None

    def price(self, tower_type: int) -> int:
        """Market price of a tower type after the buy-cost modifier."""
        if tower_type not in TOWER_TYPES:
            raise ValueError(f"unknown tower type: {tower_type}")
        return int(100 * tower_type * self.tree.buy_mod)

    def buy_at(self, x: float, y: float) -> int | None:
        """Buy the tower under the cursor; return its type, or None."""
        if not ((self.mouse and self.hud == 21) or self.hud == 10):
            return None
        for kind, box in _MARKET_BOXES.items():
            if not _inside(box, x, y):
                continue
            cost = self.price(kind)
            if self.money < cost or self.inventory.counts[kind] > MAX_STOCK:
                return None
            self.money -= cost
            self.inventory.counts[kind] += 1
            return kind
        return None


def new_defender() -> Defender:
    """A fresh game in its starting state."""
    return Defender()