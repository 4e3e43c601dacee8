import pytest

from sint7.decode_puzzle import (
    ROW_SIZE,
    SEQ_LENGTH,
    TOTAL_TIME,
    DecodePuzzle,
    DecodeState,
    TypewriterText,
)


def _to_selecting() -> DecodePuzzle:
    puzzle = DecodePuzzle()
    for _ in range(500):
        if all(message.completed for message in puzzle.messages):
            break
        puzzle.update(1.0, set())
    assert puzzle.update(0.0, {"enter"}) is DecodeState.COUNTDOWN
    assert puzzle.update(0.0, set()) is DecodeState.DISPLAY_SEQUENCE
    assert puzzle.update(0.0, {"enter"}) is DecodeState.SELECTING
    return puzzle


def test_typewriter_reveals_whole_text():
    tw = TypewriterText("abc", 0.05)
    for _ in range(3):
        assert not tw.completed
        tw.update(0.05)
    assert tw.completed
    assert tw.visible_text() == "abc"


def test_typewriter_waits_for_delay():
    tw = TypewriterText("hello", 1.0)
    tw.update(0.5)
    assert tw.visible_text() == ""
    tw.update(0.5)
    assert tw.visible_text() == "h"


def test_typewriter_reset():
    tw = TypewriterText("ab", 0.1)
    tw.update(0.1)
    tw.update(0.1)
    tw.reset()
    assert (tw.visible_chars, tw.completed) == (0, False)


def test_enter_ignored_during_intro():
    puzzle = DecodePuzzle()
    assert puzzle.update(0.0, {"enter"}) is DecodeState.INITIALIZING


def test_messages_reveal_in_order():
    puzzle = DecodePuzzle()
    puzzle.update(1.0, set())
    assert puzzle.messages[0].visible_chars == 1
    assert puzzle.messages[1].visible_chars == 0


def test_full_solution_succeeds():
    puzzle = _to_selecting()
    puzzle.update(0.0, {"enter"})
    for _ in range(SEQ_LENGTH - 1):
        puzzle.update(0.0, {"d", "l", "enter"})
    assert puzzle.state is DecodeState.SUCCESS
    assert puzzle.solved
    assert puzzle.current_index == SEQ_LENGTH


def test_wrong_choice_fails_and_enter_resets():
    puzzle = _to_selecting()
    assert puzzle.update(0.0, {"d", "enter"}) is DecodeState.FAILURE
    assert puzzle.update(0.0, {"enter"}) is DecodeState.INITIALIZING
    assert puzzle.timer == TOTAL_TIME
    assert (puzzle.current_index, puzzle.row1_index, puzzle.row2_index) == (0, 0, 0)
    assert not any(message.completed for message in puzzle.messages)


def test_timeout_fails():
    puzzle = _to_selecting()
    assert puzzle.update(TOTAL_TIME + 1, set()) is DecodeState.FAILURE


def test_progress_drops_with_time():
    puzzle = _to_selecting()
    puzzle.update(TOTAL_TIME / 2, set())
    assert puzzle.progress == pytest.approx(0.5)


def test_rows_wrap_around():
    puzzle = _to_selecting()
    puzzle.update(0.0, {"a", "j"})
    assert puzzle.row1_index == ROW_SIZE - 1
    assert puzzle.row2_index == ROW_SIZE - 1
    puzzle.update(0.0, {"d", "l"})
    assert (puzzle.row1_index, puzzle.row2_index) == (0, 0)


def test_visible_indices_centred():
    puzzle = DecodePuzzle()
    assert puzzle.visible_indices(1) == [5, 6, 0, 1, 2]
    puzzle.row2_index = 3
    shown = puzzle.visible_indices(2)
    assert shown[len(shown) // 2] == 3
    assert all(0 <= index < ROW_SIZE for index in shown)


def test_visible_indices_bad_row():
    with pytest.raises(ValueError):
        DecodePuzzle().visible_indices(3)