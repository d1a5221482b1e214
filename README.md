# bastion

The rules of a tower defense game with four levels, kept apart from drawing and
sound. Enemies walk fixed paths, waves spawn them, towers have fixed slots and
range circles, and a shop and a skill tree spend the player's money. A front
end reads and changes this state each frame.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `bastion.state`: the game state. `new_defender()` returns a `Defender` with
  100 money, an empty `Inventory` (`counts` by tower type 1 to 4),
  `KeyBindings` and a `SkillTree`.
  - `Defender.price(tower_type)` is 100 × type, scaled by the buy-cost
    modifier.
  - `Defender.buy_at(x, y)` buys the tower whose market box is under the point
    when the market is open (`hud` 10, or 21 with `mouse` pressed), and returns
    its type or `None`.
  - `Defender.click_skill_tree(x, y)` buys a skill node under the point when
    `mouse` is pressed, checking money and prerequisites, and applies its
    modifier through `SkillTree.apply(flag)`.
- `bastion.ranges`: `range_circle(map_index, slot, tower_type)` gives the
  `Circle` of a tower's range on a slot; `tower_ranges(map_index, placed)` gives
  the circles for a mapping of slot to tower type.
- `bastion.enemies`: `spawn_enemy(kind, x, y, angle, tree)` makes an `Enemy`
  with hit points, damage and speed scaled by the skill tree. `Enemy.advance()`
  moves one step and updates its sprite `Rect`; `Enemy.step(map_index)` also
  applies the map's turning rules and returns whether the enemy has reached the
  base. `spawn_rect` and `travel_rect` give the sprite frames.
- `bastion.waves`: a `WaveState` holds four wave scripts, strings of digits
  where `0` spawns nothing and another digit spawns that enemy kind. A `Horde`
  holds up to sixteen enemies (`spawn`, `total_hp`, `move_all`).
  `check_wave` plays the next script entry, `check_win` switches to the victory
  screen once the script is done and the horde's hit points are gone, and
  `run_enemies` runs one tick of both plus movement.
- `bastion.ui`: `Button` (hit test, hover state, level selection and selected
  marking) and `IntroAnimation`, whose `tick` advances the intro and returns
  its caption.
- `bastion.hud`: `visible_panels(hud)` lists the `Panel`s shown for a HUD mode;
  `skill_tree_labels`, `inventory_labels` and `market_labels` give the `Label`s
  each panel carries.
- `bastion.slots`: `base_slots(map_index, tower_type)` gives the `Slot`s of the
  first three maps (indices 0 to 2), each with its drop box (`Slot.contains`)
  and tower position.

## Example

```python
from bastion.state import new_defender
from bastion.waves import Horde, WaveState, check_wave

game = new_defender()
game.hud = 10                  # market open
game.buy_at(1800, 100)         # buy a tower of the first type
print(game.money, game.inventory.counts[1])   # 0 1

waves = WaveState(levels=("12", "", "", ""))
horde = Horde()
enemy = check_wave(game, horde, waves)         # spawns a kind-1 enemy
print(enemy.x, enemy.y, enemy.hp)              # 240.0 970.0 50.0
```

## What it does not do

- It draws nothing, plays no sound and opens no window; there is no command to
  start a game.
- It does not read wave scripts from files; the caller passes them to
  `WaveState`.
- It has no slot data for the fourth map, and no code that takes a tower out
  of the inventory and places it in a slot, nor towers that shoot. Slots and
  range circles are data for a front end to use.