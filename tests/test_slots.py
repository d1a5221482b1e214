import pytest

from bastion.slots import Slot, base_slots


def test_contains_is_exclusive_on_bounds():
    slot = Slot(0, 299, 500, 200, 400, (300, 200))
    assert slot.contains(300, 201)
    assert not slot.contains(299, 300)
    assert not slot.contains(500, 300)
    assert not slot.contains(400, 200)
    assert not slot.contains(400, 400)


@pytest.mark.parametrize("map_index", [0, 1, 2])
@pytest.mark.parametrize("tower_type", [1, 2, 3, 4])
def test_indices_are_consecutive(map_index, tower_type):
    slots = base_slots(map_index, tower_type)
    assert [slot.index for slot in slots] == list(range(len(slots)))
    assert len(slots) >= 4


@pytest.mark.parametrize("map_index", [0, 1, 2])
@pytest.mark.parametrize("tower_type", [1, 2, 3, 4])
def test_tower_position_lies_in_its_slot(map_index, tower_type):
    for slot in base_slots(map_index, tower_type):
        x, y = slot.position
        assert slot.contains(x + 1, y + 1)


@pytest.mark.parametrize("map_index", [0, 1, 2])
def test_slots_do_not_overlap_positions(map_index):
    slots = base_slots(map_index, 1)
    positions = [slot.position for slot in slots]
    assert len(set(positions)) == len(positions)


def test_tutorial_second_slot_is_taller_for_basic_tower():
    basic = base_slots(0, 1)[1]
    other = base_slots(0, 2)[1]
    assert basic.y_max == 654
    assert other.y_max == 644
    assert basic.contains(700, 650)
    assert not other.contains(700, 650)


@pytest.mark.parametrize("map_index", [1, 2])
def test_boxes_are_the_same_for_every_type(map_index):
    reference = base_slots(map_index, 1)
    for tower_type in (2, 3, 4):
        assert base_slots(map_index, tower_type) == reference


def test_pinned_positions_from_source():
    assert base_slots(1, 1)[4].position == (990, 420)
    assert base_slots(2, 3)[5] == Slot(5, 1240, 1356, 50, 164, (1240, 50))
    assert base_slots(0, 4)[0].position == (300, 200)


def test_unknown_map_has_no_slots():
    assert base_slots(7, 1) == ()


@pytest.mark.parametrize("tower_type", [0, 5, -1])
def test_unknown_tower_type_is_rejected(tower_type):
    with pytest.raises(ValueError):
        base_slots(0, tower_type)