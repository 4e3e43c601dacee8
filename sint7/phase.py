"""Phases of the game and starting one."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .config import PHASE_COUNT
from .fragments import FragmentStore, MemoryFragment
from .player import Player
from .puzzle_setup import Puzzle, PuzzleBoard


@dataclass
class Phase:
    """One phase: its puzzle and the fragment that must be found."""

    number: int
    puzzle: Puzzle
    required_fragment: MemoryFragment
    completed: bool = False


def start_phase(player: Player, fragments: FragmentStore, board: PuzzleBoard) -> Phase | None:
    """Set up the phase the player is in; None when the player is past the last one."""
    for index in range(PHASE_COUNT):
        number = index + 1
        if player.phase == number:
            phase = Phase(
                number=number,
                puzzle=replace(board.puzzles[index]),
                required_fragment=replace(fragments.required[index]),
            )
            fragments.init_phase(number)
            board.init_puzzle(number)
            return phase
    return None