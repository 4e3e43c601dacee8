"""The player character: movement, animation and unlocked phases."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .config import PHASE_COUNT
from .geometry import Rect

SPRITE_SIZE = 16
SPRITE_SCALE = 5
WALK_SPEED = 2
START_X = 200
START_Y = 398
LEFT_LIMIT = 200
PHASE_2_LIMIT = 1500
PHASE_3_LIMIT = 4300

IDLE_TEXTURE = "assets/edu/idle.png"
WALK_TEXTURE = "assets/edu/walk.png"


class PlayerState(enum.Enum):
    IDLE = enum.auto()
    WALK = enum.auto()


def _initial_unlocks() -> list[bool]:
    return [index == 0 for index in range(PHASE_COUNT)]


@dataclass
class Player:
    """Position, animation frame and progress of the player."""

    x: float = START_X
    y: float = START_Y
    phase: int = 1
    state: PlayerState = PlayerState.IDLE
    frame: int = 0
    max_frames: int = 3
    frame_time: float = 0.1
    frame_timer: float = 0.0
    direction: int = 0
    width: int = 0
    height: int = 0
    unlocked: list[bool] = field(default_factory=_initial_unlocks)

    def unlock_phase(self, phase: int) -> bool:
        """Unlock the phase following ``phase`` and move on to it."""
        if not 0 < phase <= PHASE_COUNT:
            return False
        if phase < len(self.unlocked):
            self.unlocked[phase] = True
        self.phase = phase + 1
        return True

    def update(self, dt: float, right: bool, left: bool) -> None:
        """Advance the animation and move according to the held arrow keys."""
        self.frame_timer += dt
        if self.frame_timer >= self.frame_time:
            self.frame_timer = 0.0
            self.frame = (self.frame + 1) % self.max_frames

        if right:
            self.state = PlayerState.WALK
            self.x += WALK_SPEED
            self.direction = 1
            if not self.unlocked[1] and self.x > PHASE_2_LIMIT:
                self.x = PHASE_2_LIMIT
            if not self.unlocked[2] and self.x > PHASE_3_LIMIT:
                self.x = PHASE_3_LIMIT
        elif left:
            self.state = PlayerState.WALK
            self.x -= WALK_SPEED
            self.direction = -1
            if self.x < LEFT_LIMIT:
                self.x = LEFT_LIMIT
        else:
            self.state = PlayerState.IDLE

    def hitbox(self) -> Rect:
        """The area the player occupies in the world."""
        size = SPRITE_SIZE * SPRITE_SCALE
        return Rect(self.x, self.y, size, size)

    def source_rect(self) -> Rect:
        """The sprite-sheet region for the current frame; negative width mirrors it."""
        if self.direction == 1:
            return Rect(self.frame * SPRITE_SIZE, 0, SPRITE_SIZE, SPRITE_SIZE)
        return Rect((self.frame + 1) * SPRITE_SIZE, 0, -SPRITE_SIZE, SPRITE_SIZE)