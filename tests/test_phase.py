from sint7.fragments import FragmentStore
from sint7.phase import start_phase
from sint7.player import Player
from sint7.puzzle_setup import PuzzleBoard


def test_start_phase_sets_everything_up():
    player = Player(phase=2)
    fragments = FragmentStore()
    board = PuzzleBoard()
    phase = start_phase(player, fragments, board)
    assert phase.number == 2
    assert not phase.completed
    assert phase.puzzle.x == 3800
    assert phase.required_fragment.phase == 2
    assert fragments.current_required.phase == 2
    assert board.current.phase == 2


def test_start_phase_first():
    player = Player()
    board = PuzzleBoard()
    phase = start_phase(player, FragmentStore(), board)
    assert phase.number == player.phase
    assert board.current.texture == "assets/puzzles/terminal.png"


def test_start_phase_past_last_returns_none():
    player = Player(phase=9)
    fragments = FragmentStore()
    board = PuzzleBoard()
    assert start_phase(player, fragments, board) is None
    assert fragments.current_required is None
    assert board.current.phase == 0


def test_phase_copies_are_independent():
    board = PuzzleBoard()
    phase = start_phase(Player(), FragmentStore(), board)
    phase.puzzle.solved = True
    assert not board.puzzles[0].solved