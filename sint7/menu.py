"""Main menu, story screen and pause state."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field

from .config import SCREEN_HEIGHT, SCREEN_WIDTH
from .geometry import Rect

BUTTON_WIDTH = 200
BUTTON_HEIGHT = 50
BUTTON_START_Y = 300
BUTTON_SPACING = 20
BUTTON_LABELS = ("Jogar", "Sair")

LORE_SCROLL_SPEED = 35.0
LORE_SKIP_DELAY = 2.0
LORE_TEXT_HEIGHT = 400.0

BACKGROUND_TEXTURE = "assets/inicio.jpg"
LORE_TEXTURE = "assets/bg-historia.png"

STORY = (
    "SINT-7\n\n"
    "Em um laboratorio abandonado da Corporacao Neurodyne,\n"
    "repousam os restos de SINT-7, uma IA descontinuada.\n\n"
    "Voce acorda sem memoria, apenas com um numero de serie\n"
    "e a certeza de que algo deu errado.\n\n"
    "Explore o complexo, recupere fragmentos de memoria e\n"
    "reconstrua sua identidade.\n\n"
    "Suas decisoes afetarao diretamente o destino de SINT-7\n"
    "e o futuro da pesquisa em inteligencia artificial.\n\n"
    "Descubra a verdade... mas cuidado com o que deseja saber."
)


class MenuState(enum.Enum):
    MAIN = enum.auto()
    LORE = enum.auto()
    PLAYING = enum.auto()
    PAUSED = enum.auto()
    GAME_OVER = enum.auto()


@dataclass
class Button:
    rect: Rect
    text: str
    hover: bool = False


def _default_buttons(screen_width: int = SCREEN_WIDTH) -> list[Button]:
    return [
        Button(
            Rect(
                (screen_width - BUTTON_WIDTH) // 2,
                BUTTON_START_Y + index * (BUTTON_HEIGHT + BUTTON_SPACING),
                BUTTON_WIDTH,
                BUTTON_HEIGHT,
            ),
            label,
        )
        for index, label in enumerate(BUTTON_LABELS)
    ]


@dataclass
class Menu:
    """Menu state machine.

    ``update`` returns "start" when play begins, "quit" when Sair is clicked,
    otherwise None.
    """

    state: MenuState = MenuState.MAIN
    buttons: list[Button] = field(default_factory=_default_buttons)
    story: str = STORY
    scroll_offset: float = 0.0
    scroll_speed: float = LORE_SCROLL_SPEED
    can_skip: bool = False
    shown_for: float = 0.0
    screen_height: int = SCREEN_HEIGHT

    def update(
        self,
        dt: float,
        mouse: tuple[float, float],
        clicked: bool,
        enter: bool,
        escape: bool,
    ) -> str | None:
        if self.state is MenuState.MAIN:
            for index, button in enumerate(self.buttons):
                button.hover = button.rect.contains(*mouse)
                if button.hover and clicked:
                    if index == 0:
                        self.state = MenuState.LORE
                        self.scroll_offset = 0.0
                        self.can_skip = False
                        self.shown_for = 0.0
                    elif index == 1:
                        return "quit"
        elif self.state is MenuState.LORE:
            self.scroll_offset += dt * self.scroll_speed
            self.shown_for += dt
            if self.shown_for > LORE_SKIP_DELAY:
                self.can_skip = True
            done = self.scroll_offset > LORE_TEXT_HEIGHT + self.screen_height
            if (self.can_skip and (enter or clicked)) or done:
                self.state = MenuState.PLAYING
                return "start"
        elif self.state is MenuState.PLAYING and escape:
            self.state = MenuState.PAUSED
        elif self.state is MenuState.PAUSED and escape:
            self.state = MenuState.PLAYING
        return None


def layout_story(
    text: str,
    x: int,
    y: int,
    font_size: int,
    char_spacing: int,
    line_spacing: int,
    measure: Callable[[str], int],
) -> list[tuple[str, int, int]]:
    """Place each character of ``text``; returns (char, x, y) tuples."""
    placed: list[tuple[str, int, int]] = []
    cx, cy = x, y
    for char in text:
        if char == "\n":
            cx = x
            cy += font_size + line_spacing
        else:
            placed.append((char, cx, cy))
            cx += measure(char) + char_spacing
    return placed