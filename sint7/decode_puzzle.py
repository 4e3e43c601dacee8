"""The decoding puzzle: align two rotating rows of symbols against a timer."""

from __future__ import annotations

import enum
from collections.abc import Collection
from dataclasses import dataclass, field

SEQ_LENGTH = 7
ROW_SIZE = SEQ_LENGTH
TOTAL_TIME = 30.0
VISIBLE_HALF = 2

BOARD_TEXTURE = "assets/puzzles/decode/pc.png"
SEGMENT_PATTERN = "assets/puzzles/decode/seg/{}.png"
PROGRESS_PATTERN = "assets/puzzles/decode/progress/{}.png"


@dataclass
class TypewriterText:
    """Text revealed one character at a time."""

    text: str
    delay_per_char: float
    timer: float = 0.0
    visible_chars: int = 0
    completed: bool = False

    def update(self, dt: float) -> None:
        """Reveal the next character once enough time has passed."""
        if self.completed:
            return
        self.timer += dt
        if self.timer >= self.delay_per_char:
            self.timer = 0.0
            self.visible_chars += 1
            if len(self.text) <= self.visible_chars:
                self.completed = True

    def visible_text(self) -> str:
        return self.text[: self.visible_chars]

    def reset(self) -> None:
        self.visible_chars = 0
        self.completed = False


class DecodeState(enum.Enum):
    INITIALIZING = enum.auto()
    COUNTDOWN = enum.auto()
    DISPLAY_SEQUENCE = enum.auto()
    SELECTING = enum.auto()
    SUCCESS = enum.auto()
    FAILURE = enum.auto()


def _intro_messages() -> list[TypewriterText]:
    return [
        TypewriterText("Rastreando servidor...", 0.05),
        TypewriterText("WARNING: Ameaça detectada", 0.05),
        TypewriterText("Necessita código de autenticação. Completar decodificação...", 0.03),
    ]


@dataclass
class DecodePuzzle:
    """State machine of the decoding puzzle.

    ``pressed`` holds the names of keys pressed this frame: "enter", "a" and "d"
    for the first row, "j" and "l" for the second.
    """

    correct_row1: tuple[int, ...] = tuple(range(SEQ_LENGTH))
    correct_row2: tuple[int, ...] = tuple(range(SEQ_LENGTH))
    messages: list[TypewriterText] = field(default_factory=_intro_messages)
    current_index: int = 0
    row1_index: int = 0
    row2_index: int = 0
    timer: float = TOTAL_TIME
    state: DecodeState = DecodeState.INITIALIZING

    @property
    def progress(self) -> float:
        """Fraction of the time still left."""
        return self.timer / TOTAL_TIME

    @property
    def solved(self) -> bool:
        return self.state is DecodeState.SUCCESS

    def update(self, dt: float, pressed: Collection[str]) -> DecodeState:
        """Advance one frame and return the new state."""
        if self.state is DecodeState.INITIALIZING:
            self._update_intro(dt, pressed)
        elif self.state is DecodeState.COUNTDOWN:
            self.state = DecodeState.DISPLAY_SEQUENCE
        elif self.state is DecodeState.DISPLAY_SEQUENCE:
            if "enter" in pressed:
                self.state = DecodeState.SELECTING
        elif self.state is DecodeState.SELECTING:
            self._update_selecting(dt, pressed)
        elif self.state is DecodeState.FAILURE:
            if "enter" in pressed:
                self.reset()
        return self.state

    def _update_intro(self, dt: float, pressed: Collection[str]) -> None:
        ready = True
        for message in self.messages:
            if not ready:
                break
            message.update(dt)
            ready = message.completed
        if ready and "enter" in pressed:
            self.state = DecodeState.COUNTDOWN

    def _update_selecting(self, dt: float, pressed: Collection[str]) -> None:
        self.timer -= dt
        if "a" in pressed:
            self.row1_index = (self.row1_index - 1) % ROW_SIZE
        if "d" in pressed:
            self.row1_index = (self.row1_index + 1) % ROW_SIZE
        if "j" in pressed:
            self.row2_index = (self.row2_index - 1) % ROW_SIZE
        if "l" in pressed:
            self.row2_index = (self.row2_index + 1) % ROW_SIZE

        if "enter" in pressed:
            if self.current_index >= SEQ_LENGTH:
                self.state = DecodeState.SUCCESS
                return
            if (
                self.row1_index == self.correct_row1[self.current_index]
                and self.row2_index == self.correct_row2[self.current_index]
            ):
                self.current_index += 1
                if self.current_index >= SEQ_LENGTH:
                    self.state = DecodeState.SUCCESS
                    return
            else:
                self.state = DecodeState.FAILURE
        if self.timer <= 0:
            self.state = DecodeState.FAILURE

    def reset(self) -> None:
        """Restart the puzzle from the intro messages."""
        self.timer = TOTAL_TIME
        self.current_index = 0
        self.row1_index = 0
        self.row2_index = 0
        self.state = DecodeState.INITIALIZING
        for message in self.messages:
            message.reset()

    def visible_indices(self, row: int) -> list[int]:
        """Symbol indices shown for row 1 or 2, centred on the selected one."""
        if row == 1:
            center = self.row1_index
        elif row == 2:
            center = self.row2_index
        else:
            raise ValueError(f"no such row: {row}")
        return [(center + offset) % ROW_SIZE for offset in range(-VISIBLE_HALF, VISIBLE_HALF + 1)]