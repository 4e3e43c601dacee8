"""A side-scrolling camera that keeps the player inside screen margins."""

from __future__ import annotations

from dataclasses import dataclass

from .config import SCREEN_HEIGHT, SCREEN_WIDTH, SECTOR_COUNT, SECTOR_WIDTH
from .player import Player

LEFT_MARGIN = 200
RIGHT_MARGIN = SCREEN_WIDTH - 200
PHASE_2_CAMERA_LIMIT = 630
PHASE_3_CAMERA_LIMIT = 2690


@dataclass
class Camera:
    """A 2D camera: world target point and screen offset."""

    target_x: float = 0.0
    target_y: float = 0.0
    offset_x: float = 10.0
    offset_y: float = SCREEN_HEIGHT / 2.0
    rotation: float = 0.0
    zoom: float = 1.0

    @classmethod
    def for_player(cls, player: Player) -> Camera:
        """A camera centred on the player's sprite."""
        return cls(
            target_x=player.x + player.width // 2,
            target_y=player.y + player.height // 2,
        )

    def follow(self, player: Player) -> None:
        """Scroll so the player stays between the left and right margins."""
        screen_x = player.x - self.target_x + self.offset_x
        if screen_x < LEFT_MARGIN:
            self.target_x = player.x - LEFT_MARGIN + self.offset_x
        elif screen_x > RIGHT_MARGIN:
            self.target_x = player.x - RIGHT_MARGIN + self.offset_x
        self.target_y = SCREEN_HEIGHT / 2.0

    def clamped_x(self, player: Player) -> float:
        """Horizontal scroll limited to the world and to the unlocked phases."""
        half = SCREEN_WIDTH // 2
        camera_x = max(self.target_x - half, 0.0)
        camera_x = min(camera_x, SECTOR_WIDTH * SECTOR_COUNT - SCREEN_WIDTH)
        if not player.unlocked[1] and self.target_x > PHASE_2_CAMERA_LIMIT:
            camera_x = PHASE_2_CAMERA_LIMIT - half
        if not player.unlocked[2] and self.target_x > PHASE_3_CAMERA_LIMIT:
            camera_x = PHASE_3_CAMERA_LIMIT - half
        return camera_x