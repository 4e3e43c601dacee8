"""Screen dimming overlay, text wrapping and interaction label layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .geometry import Rect

BG_COUNT = 12
MAX_EXTRA_BGS = 10
BACKGROUND_PATTERN = "assets/setores/bg{}.png"

INTERACTION_TEXT = "(I) para interagir"
INTERACTION_FONT_SIZE = 20
INTERACTION_PADDING = 4

OVERLAY_MAX_ALPHA = 153.0
OVERLAY_SPEED = 300.0


@dataclass
class DarkOverlay:
    """A translucent black layer that fades in while a panel is open."""

    darkening: bool = False
    lightening: bool = False
    alpha: float = 0.0
    visible: bool = False

    def update(self, dt: float) -> None:
        """Advance the fade by ``dt`` seconds."""
        if self.darkening and self.alpha < OVERLAY_MAX_ALPHA:
            self.alpha = min(self.alpha + OVERLAY_SPEED * dt, OVERLAY_MAX_ALPHA)
        if self.lightening and self.alpha > 0.0:
            self.alpha = max(self.alpha - OVERLAY_SPEED * dt, 0.0)
        if self.alpha > 0.0:
            self.visible = True

    def set_open(self, opened: bool) -> None:
        """Start fading in when a panel opens, fading out when it closes."""
        if opened:
            self.darkening = True
            self.lightening = False
        else:
            self.darkening = False
            self.lightening = True
            self.visible = False


def wrap_text(text: str, max_width: float, measure: Callable[[str], float]) -> str:
    """Break ``text`` into lines no wider than ``max_width`` as measured by ``measure``."""
    pieces: list[str] = []
    line = ""
    pos = 0
    length = len(text)
    while pos < length:
        end = pos
        while end < length and text[end] not in " \n":
            end += 1
        word = text[pos:end]
        pos = end
        if pos < length and text[pos] == " ":
            pos += 1
        if pos < length and text[pos] == "\n":
            pieces.append(line + "\n")
            line = ""
            pos += 1
            continue
        candidate = f"{line} {word}" if line else word
        if measure(candidate) > max_width:
            pieces.append(line + "\n")
            line = word
        else:
            line = candidate
    pieces.append(line)
    return "".join(pieces)


def interaction_label_rect(x: float, y: float, text_width: float, font_size: float) -> Rect:
    """Return the background box drawn behind an interaction hint at (x, y)."""
    return Rect(
        x - INTERACTION_PADDING,
        y - INTERACTION_PADDING,
        text_width + INTERACTION_PADDING * 2,
        font_size + INTERACTION_PADDING * 2,
    )