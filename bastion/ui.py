"""Menu buttons and the intro animation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from bastion.enemies import Rect
from bastion.state import Defender

BUTTON_WIDTH = 200
BUTTON_HEIGHT = 64

IDLE_TEXTURE = "images/buttons2.png"
HOVER_TEXTURE = "images/buttons1.png"
PRESSED_TEXTURE = "images/buttons3.png"
BORDER_TEXTURE = "images/border.png"

LEVEL_LABELS = {
    "   tutoriel": 0,
    "   Level  1": 1,
    "   Level  2": 2,
    " boss  final": 3,
}

# Where the selection border is drawn around each level button.
_BORDERS = {0: (92, 392), 1: (518, 392), 2: (942, 392), 3: (1367, 392)}

MENU_SCREEN = 0
INTRO_LENGTH = 300
CAPTION_SWITCH = 100
FRAME_SWITCH = 10
WALK_STEP = 2
SKIP_LABEL = "\t  SKIP"


class ButtonState(Enum):
    """How a button is currently shown."""

    IDLE = 0
    HOVER = 1
    SELECTED = 2


@dataclass
class Button:
    """A clickable menu button with a text label."""

    label: str
    x: float
    y: float
    scale: float = 1.0
    state: ButtonState = ButtonState.IDLE
    texture: str = IDLE_TEXTURE

    @property
    def text_position(self) -> tuple[float, float]:
        """Where the label text is drawn."""
        return (self.x + self.scale, self.y + 10 + self.scale)

    def contains(self, x: float, y: float) -> bool:
        """Whether a point lies on the button."""
        x_min = int(self.x - 1)
        x_max = int(self.x + (BUTTON_WIDTH + 1) * self.scale)
        y_min = int(self.y - 1)
        y_max = int(self.y + (BUTTON_HEIGHT + 1) * self.scale)
        return x_min < x < x_max and y_min < y < y_max

    def update(self, x: float, y: float, pressed: bool) -> str:
        """Refresh the look for a cursor position; return the texture."""
        if self.contains(x, y) and self.state is ButtonState.IDLE:
            self.texture = PRESSED_TEXTURE if pressed else HOVER_TEXTURE
            self.state = ButtonState.HOVER
        elif self.state is not ButtonState.SELECTED:
            self.texture = IDLE_TEXTURE
            self.state = ButtonState.IDLE
        return self.texture

    def clicked(self, x: float, y: float, pressed: bool) -> bool:
        """Whether the button is pressed at this cursor position."""
        return pressed and self.contains(x, y)

    def level(self) -> int | None:
        """The map this button selects, or None if it is not a level button."""
        return LEVEL_LABELS.get(self.label)

    def select_level(self, defender: Defender, x: float, y: float) -> int | None:
        """Choose this button's level on a click; return the new map, if any."""
        if not self.clicked(x, y, defender.mouse):
            return None
        level = self.level()
        if level is not None:
            defender.map_index = level
        return level

    def mark_selected(self, current_map: int) -> tuple[int, int] | None:
        """Show the button as chosen if it is the current map.

        Returns where the selection border goes, or None.
        """
        level = self.level()
        if level is None or level != current_map:
            return None
        self.texture = PRESSED_TEXTURE
        self.state = ButtonState.SELECTED
        return _BORDERS[level]


_FRAME_A = Rect(0, 30, 129, 100)
_FRAME_B = Rect(0, 577, 129, 100)


@dataclass
class _Walker:
    x: float
    y: float
    rect: Rect

    def walk(self, flip: bool) -> None:
        self.x += WALK_STEP
        if flip:
            top = _FRAME_B.top if self.rect.top == _FRAME_A.top else _FRAME_A.top
            self.rect = replace(self.rect, top=top)


def _walkers() -> list[_Walker]:
    return [
        _Walker(
            x=float(50 * (row % 2)),
            y=float(200 + 100 * row),
            rect=_FRAME_A if row % 2 == 0 else _FRAME_B,
        )
        for row in range(10)
    ]


def _skip_button() -> Button:
    return Button(SKIP_LABEL, 50, 50)


@dataclass
class IntroAnimation:
    """The intro scene: marching enemies, a caption and a skip button.

    ``cursor`` is the pointer position the skip button reacts to.
    """

    walkers: list[_Walker] = field(default_factory=_walkers)
    counter: int = 0
    cursor: tuple[float, float] | None = None
    skip_button: Button = field(default_factory=_skip_button)

    def tick(self, defender: Defender) -> str | None:
        """Advance one frame; return the caption shown, if any."""
        defender.anim += 1
        self.counter += 1
        if defender.anim > INTRO_LENGTH:
            defender.screen = MENU_SCREEN
        caption = None
        if defender.anim < CAPTION_SWITCH:
            caption = "We are invaded !!"
        elif defender.anim > CAPTION_SWITCH:
            caption = "help us please !!"
        flip = self.counter > FRAME_SWITCH
        for walker in self.walkers:
            walker.walk(flip)
        if flip:
            self.counter = 0
        self.skip_button = _skip_button()
        if self.cursor is not None:
            x, y = self.cursor
            self.skip_button.update(x, y, defender.mouse)
            if self.skip_button.clicked(x, y, defender.mouse):
                defender.screen = MENU_SCREEN
        return caption