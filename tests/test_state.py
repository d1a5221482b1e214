import pytest

from bastion.state import Defender, Inventory, KeyBindings, SkillTree, new_defender


def test_new_defender_defaults():
    game = new_defender()
    assert game.money == 100
    assert game.screen == 8
    assert game.map_index == 0
    assert game.framerate == 60
    assert game.frame_size == 169
    assert game.music_slider == (665.0, 686.0)
    assert game.sound_slider == (665.0, 885.0)
    assert game.inventory.counts == {1: 0, 2: 0, 3: 0, 4: 0}


def test_key_bindings_defaults():
    keys = KeyBindings()
    assert (keys.buy, keys.inventory, keys.pending) == ("M", "I", 0)


def test_apply_sets_modifiers():
    tree = SkillTree()
    tree.apply(1)
    tree.apply(4)
    assert tree.damage_mod == 1.2
    assert tree.buy_mod == 0.8
    assert tree.life_mod == 1.0


def test_apply_rejects_unknown_flag():
    with pytest.raises(ValueError):
        SkillTree().apply(7)


def test_price_base_and_discount():
    game = new_defender()
    assert [game.price(t) for t in (1, 2, 3, 4)] == [100, 200, 300, 400]
    game.tree.apply(4)
    discounted = [game.price(t) for t in (1, 2, 3, 4)]
    assert all(d < full for d, full in zip(discounted, [100, 200, 300, 400]))


def test_price_rejects_unknown_type():
    with pytest.raises(ValueError):
        new_defender().price(5)


def test_buy_with_click_on_open_market():
    game = Defender(mouse=True, hud=21)
    assert game.buy_at(1800, 100) == 1
    assert game.money == 0
    assert game.inventory.counts[1] == 1


def test_buy_requires_click_when_hud_21():
    game = Defender(mouse=False, hud=21)
    assert game.buy_at(1800, 100) is None
    assert game.money == 100


def test_buy_without_click_when_hud_10():
    game = Defender(mouse=False, hud=10)
    assert game.buy_at(1800, 100) == 1
    assert game.inventory.counts[1] == 1


def test_buy_refused_without_money():
    game = Defender(mouse=True, hud=21, money=199)
    assert game.buy_at(1800, 300) is None
    assert game.money == 199
    assert game.inventory.counts[2] == 0


def test_buy_refused_when_stock_full():
    game = Defender(
        mouse=True, hud=21, money=1000, inventory=Inventory({1: 9, 2: 0, 3: 0, 4: 0})
    )
    assert game.buy_at(1800, 100) is None
    assert game.money == 1000


def test_buy_outside_market_does_nothing():
    game = Defender(mouse=True, hud=21, money=1000)
    assert game.buy_at(1800, 210) is None
    assert game.money == 1000


def test_skill_root_node():
    game = Defender(mouse=True, money=500)
    assert game.click_skill_tree(400, 75) == 1
    assert game.money == 0
    assert game.tree.damage_mod == 1.2
    assert game.tree.bought == {1}


def test_skill_requires_click():
    game = Defender(mouse=False, money=500)
    assert game.click_skill_tree(400, 75) is None
    assert game.tree.bought == set()


def test_skill_child_needs_parent():
    game = Defender(mouse=True, money=1000)
    assert game.click_skill_tree(400, 200) is None
    assert game.money == 1000


def test_skill_child_after_parent():
    game = Defender(mouse=True, money=1000, tree=SkillTree(bought={1}))
    assert game.click_skill_tree(400, 200) == 3
    assert game.money == 0
    assert game.tree.upgrade_mod == 0.8


def test_skill_child_checks_only_500():
    game = Defender(mouse=True, money=600, tree=SkillTree(bought={1}))
    assert game.click_skill_tree(600, 200) == 4
    assert game.money == -400


def test_skill_enemy_damage_box_sets_speed():
    game = Defender(mouse=True, money=1000, tree=SkillTree(bought={2}))
    assert game.click_skill_tree(1000, 200) == 6
    assert game.tree.speed_mod == 0.8
    assert game.tree.enemy_damage_mod == 1.0


def test_skill_not_bought_twice():
    game = Defender(mouse=True, money=1000, tree=SkillTree(bought={1}))
    assert game.click_skill_tree(400, 75) is None
    assert game.money == 1000