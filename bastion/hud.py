"""In-game panels: inventory, market and skill tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bastion.state import TOWER_TYPES, Defender, SkillTree

PANEL_SCALE = 1.3
NODE_SCALE = 0.6


class Panel(Enum):
    """A HUD panel that can be shown during play."""

    INVENTORY = "inventory"
    MARKET = "market"
    SKILL_TREE = "skill_tree"


@dataclass(frozen=True)
class Label:
    """A piece of text to draw; highlighted text is drawn green."""

    text: str
    x: float
    y: float
    scale: float
    highlighted: bool = False


_PANELS = {
    21: (Panel.INVENTORY, Panel.MARKET, Panel.SKILL_TREE),
    11: (Panel.INVENTORY,),
    10: (Panel.MARKET, Panel.SKILL_TREE),
}

# node -> (text, position)
_SKILL_TEXTS = (
    (1, "increase towers dmg by 20%\n\t\t\t\t\t500", (360, 50)),
    (2, "decrease ennemy life by 20%\n\t\t\t\t\t500", (800, 50)),
    (3, "-20% upgrade cost\n\t\t\t1000", (330, 180)),
    (4, "-20% buy cost\n\t\t1000", (530, 180)),
    (5, "-20% ennemy speed\n\t\t\t1000", (730, 180)),
    (6, "-20% ennemy dmg\n\t\t\t1000", (940, 180)),
)

_STOCK_POSITIONS = {1: (580, 970), 2: (710, 970), 3: (1120, 970), 4: (1280, 970)}
_PRICE_POSITIONS = {1: (1790, 170), 2: (1790, 330), 3: (1790, 520), 4: (1790, 700)}


def _amount(value: int) -> str:
    return str(value) if value > 0 else " 0"


def visible_panels(hud: int) -> list[Panel]:
    """Panels shown for a HUD mode, in drawing order."""
    return list(_PANELS.get(hud, ()))


def skill_tree_labels(tree: SkillTree) -> list[Label]:
    """The skill tree's title and node texts; bought nodes are highlighted."""
    labels = [Label("Skill Tree", 620, 0, PANEL_SCALE)]
    labels.extend(
        Label(text, x, y, NODE_SCALE, highlighted=node in tree.bought)
        for node, text, (x, y) in _SKILL_TEXTS
    )
    return labels


def inventory_labels(defender: Defender) -> list[Label]:
    """Stock counts, money and the title of the inventory panel."""
    labels = [
        Label(str(defender.inventory.counts[kind]), x, y, PANEL_SCALE)
        for kind, (x, y) in _STOCK_POSITIONS.items()
    ]
    labels.append(Label(_amount(defender.money), 880, 970, PANEL_SCALE))
    labels.append(Label("Money :", 860, 930, PANEL_SCALE))
    labels.append(Label("Inventory", 830, 880, PANEL_SCALE))
    return labels


def market_labels(defender: Defender) -> list[Label]:
    """Tower prices and the title of the market panel."""
    labels = [
        Label(_amount(defender.price(kind)), *_PRICE_POSITIONS[kind], PANEL_SCALE)
        for kind in TOWER_TYPES
    ]
    labels.append(Label("Market", 1750, 0, PANEL_SCALE))
    return labels