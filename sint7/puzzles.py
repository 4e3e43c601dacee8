"""The four phase puzzles: keypad, circuit, module choice and block ordering."""

from __future__ import annotations

import re
from collections.abc import Collection
from dataclasses import dataclass, field

from .player import Player
from .puzzle_setup import Puzzle

KEYPAD_ANSWER = (2, 3, 5, 7)
KEYPAD_LENGTH = len(KEYPAD_ANSWER)
KEYPAD_APPROVED = "Aprovado."
KEYPAD_DENIED = "Acesso negado."

# Key -> (value driven, LED index); later entries win when they share a LED.
CIRCUIT_CONNECTIONS: dict[str, tuple[int, int]] = {
    "a": (0, 1),
    "b": (0, 3),
    "c": (0, 2),
    "d": (0, 0),
    "e": (1, 0),
    "f": (1, 2),
    "g": (1, 1),
    "h": (1, 3),
}
LED_COUNT = 4
LED_OFF = -1
CIRCUIT_TARGET = [0, 1, 0, 1]
CIRCUIT_SOLVED = "Validado!"
CIRCUIT_HINT = "Pressione A-H para conectar saídas"

CHOICE_PHASE = 3
CHOICE_DELAY = 2.0
FADE_STEP = 2
FADE_MAX = 255
ANALYTIC_RANGE = (4800, 4850)
EMPATHIC_RANGE = (5900, 5950)
ANALYTIC_LABEL = "Módulo Analítico"
EMPATHIC_LABEL = "Módulo Empático"

ORDER_MAX_CHARS = 64
ORDER_ANSWER = ["1", "2", "3", "4"]
ORDER_TOKEN_COUNT = len(ORDER_ANSWER)
ORDER_NOT_READY = "Blocos insuficientes"
ORDER_SOLVED = "Identidade desbloqueada!"
ORDER_WRONG = "Reorganize suas ideias!"
BLOCK_NAMES = ("[1] Ativação", "[2] Conexão", "[3] Conflito", "[4]] Desconexão")


@dataclass
class KeypadPuzzle:
    """Phase 1: enter the four-digit code on a keypad."""

    inputs: list[int] = field(default_factory=list)
    success: bool = False
    error: bool = False

    @property
    def message(self) -> str | None:
        if self.success:
            return KEYPAD_APPROVED
        if self.error:
            return KEYPAD_DENIED
        return None

    def press(self, digit: int, player: Player, puzzle: Puzzle) -> None:
        """Enter ``digit``; the fourth digit checks the code."""
        if not 0 <= digit <= 9:
            raise ValueError(f"not a keypad digit: {digit}")
        if len(self.inputs) >= KEYPAD_LENGTH:
            return
        self.inputs.append(digit)
        self.success = False
        self.error = False
        if len(self.inputs) < KEYPAD_LENGTH:
            return
        if tuple(self.inputs) == KEYPAD_ANSWER:
            self.success = True
            puzzle.solved = True
            if not player.unlocked[1]:
                player.unlock_phase(1)
        else:
            self.error = True

    def reset(self) -> None:
        """Clear the entered digits and the result."""
        self.inputs.clear()
        self.success = False
        self.error = False


@dataclass
class CircuitPuzzle:
    """Phase 2: connect outputs so the LEDs read off, on, off, on."""

    connected: set[str] = field(default_factory=set)

    def leds(self) -> list[int]:
        """State of each LED: 1 on, 0 off, -1 unpowered."""
        states = [LED_OFF] * LED_COUNT
        for key, (value, led) in CIRCUIT_CONNECTIONS.items():
            if key in self.connected:
                states[led] = value
        return states

    @property
    def resolved(self) -> bool:
        return self.leds() == CIRCUIT_TARGET

    @property
    def message(self) -> str:
        return CIRCUIT_SOLVED if self.resolved else CIRCUIT_HINT

    def toggle(self, key: str, player: Player, puzzle: Puzzle) -> bool:
        """Flip the connection bound to ``key`` and return whether the circuit is solved."""
        key = key.lower()
        if key not in CIRCUIT_CONNECTIONS:
            raise ValueError(f"no connection on key: {key!r}")
        self.connected ^= {key}
        resolved = self.resolved
        if resolved and not puzzle.solved:
            puzzle.solved = True
            if not player.unlocked[2]:
                player.unlock_phase(2)
        return resolved


@dataclass
class ChoicePuzzle:
    """Phase 3: after a message, reactivate either the analytic or the empathic module."""

    analytic_near: bool = False
    empathic_near: bool = False
    showing_message: bool = True
    fade_alpha: int = 0
    decision_made: bool = False
    finished: bool = False
    starting: bool = True
    waited: float = 0.0
    choice: str | None = None

    def locate(self, player: Player, puzzle: Puzzle) -> str | None:
        """Update which module the player stands at; returns its label, if any."""
        if player.phase != CHOICE_PHASE or puzzle.solved:
            return None
        self.analytic_near = ANALYTIC_RANGE[0] <= player.x <= ANALYTIC_RANGE[1]
        self.empathic_near = EMPATHIC_RANGE[0] <= player.x <= EMPATHIC_RANGE[1]
        if self.analytic_near:
            return ANALYTIC_LABEL
        if self.empathic_near:
            return EMPATHIC_LABEL
        return None

    def update(
        self, dt: float, pressed: Collection[str], player: Player, puzzle: Puzzle
    ) -> bool:
        """Advance one frame; returns True when the player closes the puzzle."""
        if player.phase != CHOICE_PHASE or self.finished:
            return False

        if self.starting:
            self.waited += dt
            if self.waited < CHOICE_DELAY:
                return False
            self.starting = False
            self.showing_message = True
            self.fade_alpha = 0

        if self.showing_message and not self.decision_made:
            if self.fade_alpha < FADE_MAX:
                self.fade_alpha += FADE_STEP
            if self.fade_alpha >= FADE_MAX and "x" in pressed:
                self.showing_message = False
            return False

        if not self.decision_made:
            if (self.analytic_near or self.empathic_near) and "e" in pressed:
                self.choice = "analytic" if self.analytic_near else "empathic"
                self.decision_made = True
                puzzle.solved = True
                if not player.unlocked[3]:
                    player.unlock_phase(3)
            return False

        if "x" in pressed:
            self.finished = True
            self.showing_message = False
            self.fade_alpha = 0
            self.decision_made = False
            self.starting = True
            self.waited = 0.0
            return True
        return False


@dataclass
class OrderPuzzle:
    """Phase 4: type the order of the collected blocks, separated by commas or spaces."""

    text: str = ""
    submitted: bool = False

    def type(self, text: str) -> None:
        """Append the printable characters of ``text`` up to the input limit."""
        if self.submitted:
            return
        for char in text:
            if len(self.text) >= ORDER_MAX_CHARS:
                break
            if 32 <= ord(char) <= 125:
                self.text += char

    def backspace(self) -> None:
        if not self.submitted and self.text:
            self.text = self.text[:-1]

    def submit(self) -> None:
        self.submitted = True

    def verdict(self, blocks_ready: bool) -> str | None:
        """The message to show, or None while the answer is still being typed."""
        if not blocks_ready:
            return ORDER_NOT_READY
        if not self.submitted:
            return None
        tokens = [token for token in re.split(r"[, ]", self.text) if token]
        if tokens[:ORDER_TOKEN_COUNT] == ORDER_ANSWER:
            return ORDER_SOLVED
        return ORDER_WRONG