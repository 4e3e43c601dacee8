"""Per-frame collision handling between the player and the world."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

from .fragments import FragmentStore
from .graphics import INTERACTION_TEXT
from .player import Player
from .puzzle_setup import FINAL_PUZZLE_INDEX, PuzzleBoard

INTERACT_KEY = "i"
COLLECT_KEY = "c"
COLLECT_TEXT = "(C) para coletar"


@dataclass(frozen=True)
class CollisionResult:
    """What the player's contacts triggered this frame and the hints to draw."""

    final_puzzle: bool = False
    puzzle_activated: bool = False
    block_activated: bool = False
    hints: tuple[tuple[float, float, str], ...] = ()


def check_collisions(
    player: Player,
    board: PuzzleBoard,
    fragments: FragmentStore,
    keys: Collection[str],
    now: float,
) -> CollisionResult:
    """Resolve contacts for one frame.

    ``keys`` holds the names of keys pressed this frame: "i" interacts and
    "c" collects a block. Touching the final puzzle while interacting ends the
    check early.
    """
    hitbox = player.hitbox()
    interact = INTERACT_KEY in keys
    hints: list[tuple[float, float, str]] = []

    final = board.puzzles[FINAL_PUZZLE_INDEX]
    if hitbox.collides(final.hitbox):
        hints.append((*final.hint_position, INTERACTION_TEXT))
    if board.check_final_collision(hitbox, interact, player.phase):
        return CollisionResult(final_puzzle=True, hints=tuple(hints))

    if hitbox.collides(board.current.hitbox):
        hints.append((*board.current.hint_position, INTERACTION_TEXT))
    puzzle_activated = board.check_collision(hitbox, interact, player.phase)

    hints.extend(
        (x, y, INTERACTION_TEXT) for x, y in fragments.check_collisions(hitbox, interact, now)
    )

    hints.extend(
        (*block.hint_position, COLLECT_TEXT)
        for block in board.blocks
        if hitbox.collides(block.hitbox)
    )
    block_activated = board.check_block_collisions(hitbox, COLLECT_KEY in keys)

    return CollisionResult(
        puzzle_activated=puzzle_activated,
        block_activated=block_activated,
        hints=tuple(hints),
    )