import pytest

from bastion.state import new_defender
from bastion.ui import (
    HOVER_TEXTURE,
    IDLE_TEXTURE,
    PRESSED_TEXTURE,
    Button,
    ButtonState,
    IntroAnimation,
)


def test_contains_inside_and_outside():
    button = Button("   Level  1", 50, 50)
    assert button.contains(60, 60)
    assert not button.contains(10, 10)
    assert not button.contains(60, 500)


def test_scale_grows_the_hit_box():
    small = Button("x", 0, 0, scale=1.0)
    big = Button("x", 0, 0, scale=2.0)
    assert not small.contains(300, 10)
    assert big.contains(300, 10)


def test_update_hover_and_press():
    button = Button("x", 50, 50)
    assert button.update(60, 60, False) == HOVER_TEXTURE
    assert button.state is ButtonState.HOVER
    other = Button("x", 50, 50)
    assert other.update(60, 60, True) == PRESSED_TEXTURE


def test_update_outside_returns_to_idle():
    button = Button("x", 50, 50)
    button.update(60, 60, False)
    assert button.update(1000, 1000, False) == IDLE_TEXTURE
    assert button.state is ButtonState.IDLE


def test_selected_button_keeps_its_look():
    button = Button("   Level  2", 50, 50)
    button.mark_selected(2)
    assert button.update(1000, 1000, False) == PRESSED_TEXTURE
    assert button.state is ButtonState.SELECTED


def test_clicked_requires_press():
    button = Button("x", 50, 50)
    assert button.clicked(60, 60, True)
    assert not button.clicked(60, 60, False)
    assert not button.clicked(1000, 60, True)


@pytest.mark.parametrize(
    "label, level",
    [("   tutoriel", 0), ("   Level  1", 1), ("   Level  2", 2), (" boss  final", 3), ("quit", None)],
)
def test_level_from_label(label, level):
    assert Button(label, 0, 0).level() == level


def test_select_level_changes_map():
    defender = new_defender()
    defender.mouse = True
    button = Button(" boss  final", 50, 50)
    assert button.select_level(defender, 60, 60) == 3
    assert defender.map_index == 3


def test_select_level_ignored_without_click():
    defender = new_defender()
    button = Button(" boss  final", 50, 50)
    assert button.select_level(defender, 60, 60) is None
    assert defender.map_index == 0


def test_mark_selected_border():
    button = Button("   Level  2", 0, 0)
    assert button.mark_selected(2) == (942, 392)
    assert button.texture == PRESSED_TEXTURE
    assert Button("   Level  1", 0, 0).mark_selected(2) is None


def test_intro_walkers_move_and_caption():
    defender = new_defender()
    anim = IntroAnimation()
    before = [walker.x for walker in anim.walkers]
    caption = anim.tick(defender)
    assert caption == "We are invaded !!"
    assert defender.anim == 1
    assert [walker.x - old for walker, old in zip(anim.walkers, before)] == [2.0] * 10


def test_intro_frames_flip_after_counter():
    defender = new_defender()
    anim = IntroAnimation()
    tops = [walker.rect.top for walker in anim.walkers]
    for _ in range(10):
        anim.tick(defender)
    assert [walker.rect.top for walker in anim.walkers] == tops
    anim.tick(defender)
    flipped = [walker.rect.top for walker in anim.walkers]
    assert all(a != b for a, b in zip(tops, flipped))
    assert set(flipped) == {30, 577}
    assert anim.counter == 0


def test_intro_ends_on_menu():
    defender = new_defender()
    anim = IntroAnimation()
    captions = [anim.tick(defender) for _ in range(301)]
    assert captions[99] is None
    assert captions[-1] == "help us please !!"
    assert defender.screen == 0


def test_intro_skip_button():
    defender = new_defender()
    defender.mouse = True
    anim = IntroAnimation(cursor=(60, 60))
    anim.tick(defender)
    assert defender.screen == 0