"""Menu buttons, their colours and the main and level-select menus."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

UI_FONT = "fonts/Nunito-Black.ttf"
TITLE = "Piping Hot"
TITLE_FONT_SIZE = 100.0
BUTTON_FONT_SIZE = 33.0
BUTTON_HEIGHT = 65.0
BUTTON_BORDER = 5.0
LEVEL_SELECT_COLUMNS = 6


@dataclass(frozen=True)
class Color:
    """An sRGB colour with components from 0 to 1."""

    red: float
    green: float
    blue: float

    @classmethod
    def srgb(cls, red: float, green: float, blue: float) -> Color:
        return cls(red, green, blue)

    @classmethod
    def srgb_u8(cls, red: int, green: int, blue: int) -> Color:
        for component in (red, green, blue):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component out of range: {component}")
        return cls(red / 255, green / 255, blue / 255)

    def to_u8(self) -> tuple[int, int, int]:
        """The colour as three bytes."""
        return tuple(round(c * 255) for c in (self.red, self.green, self.blue))


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
BUTTON_COLOR = Color.srgb_u8(76, 146, 212)
PRESSED_COLOR = Color.srgb_u8(200, 200, 200)
PRESSED_BORDER = Color.srgb_u8(200, 41, 13)
HOVERED_COLOR = Color.srgb_u8(176, 146, 112)
TEXT_COLOR = Color.srgb(0.9, 0.9, 0.9)


class Interaction(Enum):
    """How the pointer is interacting with a button."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


class ActionKind(Enum):
    """What pressing a menu button does."""

    START_GAME = "start_game"
    QUIT = "quit"
    PLAY_LEVEL = "play_level"
    BACK = "back"


@dataclass(frozen=True)
class MenuAction:
    """A menu button's action; ``level`` names the level for ``PLAY_LEVEL``."""

    kind: ActionKind
    level: str | None = None

    def __post_init__(self) -> None:
        if (self.kind is ActionKind.PLAY_LEVEL) != (self.level is not None):
            raise ValueError("only a PLAY_LEVEL action names a level")


_COLORS = {
    Interaction.PRESSED: (PRESSED_COLOR, PRESSED_BORDER),
    Interaction.HOVERED: (HOVERED_COLOR, WHITE),
    Interaction.NONE: (BUTTON_COLOR, BLACK),
}


@dataclass
class Button:
    """A clickable menu button."""

    text: str
    font: str
    width: float
    height: float = BUTTON_HEIGHT
    action: MenuAction | None = None
    font_size: float = BUTTON_FONT_SIZE
    border_width: float = BUTTON_BORDER
    text_color: Color = TEXT_COLOR
    background: Color = BUTTON_COLOR
    border: Color = BLACK
    interaction: Interaction = field(default=Interaction.NONE)

    def set_interaction(self, interaction: Interaction) -> MenuAction | None:
        """Recolour the button for ``interaction``; return its action if pressed."""
        self.interaction = interaction
        self.background, self.border = _COLORS[interaction]
        if interaction is Interaction.PRESSED:
            return self.action
        return None


def button(text: str, font: str) -> Button:
    """A full-width menu button."""
    return Button(text=text, font=font, width=250.0)


def button_small(text: str, font: str) -> Button:
    """A narrow button, as used in the level grid."""
    return Button(text=text, font=font, width=100.0)


def main_menu(font: str) -> list[Button]:
    """Buttons of the main menu, top to bottom."""
    start = MenuAction(ActionKind.START_GAME)
    entries = [
        ("Play", start),
        ("Options", start),
        ("Credits", start),
        ("Quit", MenuAction(ActionKind.QUIT)),
    ]
    buttons = []
    for text, action in entries:
        item = button(text, font)
        item.action = action
        buttons.append(item)
    return buttons


def level_select_menu(font: str) -> list[Button]:
    """Buttons of the level grid, row by row, six to a row."""
    buttons = []
    for world in range(1, 4):
        for stage in range(1, 7):
            name = f"{world}-{stage}"
            item = button_small(name, font)
            item.action = MenuAction(ActionKind.PLAY_LEVEL, name)
            buttons.append(item)
    return buttons


def level_path(name: str) -> str:
    """Asset path of the level called ``name``."""
    return f"levels/{name}.tmx"