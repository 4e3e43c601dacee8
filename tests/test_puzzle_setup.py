import pytest

from sint7.geometry import Rect
from sint7.puzzle_setup import (
    ANALYTIC_PROMPT,
    EMPATHY_PROMPT,
    PuzzleBoard,
)


def _hitbox_at(x, y):
    return Rect(x, y, 80, 80)


def test_init_puzzle_copies_and_sets_texture():
    board = PuzzleBoard()
    board.init_puzzle(1)
    assert board.current.phase == 1
    assert board.current.x == 1095
    assert board.current.texture == "assets/puzzles/terminal.png"
    assert board.puzzles[0].texture is None
    assert not board.active


def test_init_puzzle_circuit_and_none():
    board = PuzzleBoard()
    board.init_puzzle(2)
    assert board.current.texture == "assets/puzzles/circuito.png"
    board.init_puzzle(3)
    assert board.current.texture is None


def test_init_puzzle_rejects_unknown_phase():
    with pytest.raises(ValueError):
        PuzzleBoard().init_puzzle(5)


def test_check_collision_activates():
    board = PuzzleBoard()
    board.init_puzzle(1)
    assert board.check_collision(_hitbox_at(1095, 290), True, 1)
    assert board.active


def test_check_collision_without_interact():
    board = PuzzleBoard()
    board.init_puzzle(1)
    assert not board.check_collision(_hitbox_at(1095, 290), False, 1)
    assert not board.active


def test_unsolved_puzzle_reinitialises_for_phase():
    board = PuzzleBoard()
    board.init_puzzle(1)
    assert board.check_collision(_hitbox_at(1095, 290), True, 2)
    assert board.current.phase == 2
    assert board.current.x == 3800


def test_solved_puzzle_is_kept():
    board = PuzzleBoard()
    board.init_puzzle(1)
    board.current.solved = True
    assert board.check_collision(_hitbox_at(1095, 290), True, 2)
    assert board.current.phase == 1
    assert board.current.solved


def test_final_collision():
    board = PuzzleBoard()
    assert board.check_final_collision(_hitbox_at(10470, 300), True, 4)
    assert board.active
    assert board.current.phase == 4
    assert not board.check_final_collision(_hitbox_at(0, 0), True, 4)


def test_block_collisions():
    board = PuzzleBoard()
    assert not board.check_block_collisions(_hitbox_at(2230, 330), False)
    assert board.current_block is board.blocks[0]
    assert not board.block_active
    assert board.check_block_collisions(_hitbox_at(2230, 330), True)
    assert board.block_active


def test_collect_blocks():
    board = PuzzleBoard()
    assert not board.all_blocks_collected()
    for block in board.blocks:
        board.collect_block(block.num)
    assert board.all_blocks_collected()
    with pytest.raises(ValueError):
        board.collect_block(len(board.blocks))


def test_block_textures():
    board = PuzzleBoard()
    assert board.blocks[2].texture == "assets/puzzles/blocos/2.png"


def test_module_triggers():
    board = PuzzleBoard()
    assert board.check_module_triggers(3900, 3, False) == [ANALYTIC_PROMPT]
    assert not board.active
    assert board.check_module_triggers(3900, 3, True) == [ANALYTIC_PROMPT]
    assert board.active
    assert board.current.phase == 3


def test_module_triggers_empathy_and_other_phase():
    board = PuzzleBoard()
    assert board.check_module_triggers(5050, 3, False) == [EMPATHY_PROMPT]
    assert board.check_module_triggers(5050, 2, True) == []
    assert not board.active