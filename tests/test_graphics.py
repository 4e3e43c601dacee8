from sint7.graphics import (
    OVERLAY_MAX_ALPHA,
    DarkOverlay,
    interaction_label_rect,
    wrap_text,
)


def test_overlay_fades_in_up_to_cap():
    overlay = DarkOverlay()
    overlay.set_open(True)
    for _ in range(100):
        overlay.update(0.1)
    assert overlay.alpha == OVERLAY_MAX_ALPHA
    assert overlay.visible


def test_overlay_fade_is_monotonic():
    overlay = DarkOverlay()
    overlay.set_open(True)
    previous = overlay.alpha
    for _ in range(20):
        overlay.update(0.01)
        assert overlay.alpha >= previous
        previous = overlay.alpha


def test_overlay_fades_out_to_zero():
    overlay = DarkOverlay()
    overlay.set_open(True)
    overlay.update(1.0)
    overlay.set_open(False)
    assert overlay.visible is False
    assert overlay.lightening and not overlay.darkening
    overlay.update(10.0)
    assert overlay.alpha == 0.0
    assert overlay.visible is False


def test_overlay_idle_does_nothing():
    overlay = DarkOverlay()
    overlay.update(1.0)
    assert overlay.alpha == 0.0
    assert overlay.visible is False


def test_wrap_text_worked_example():
    assert wrap_text("aaa bbb ccc", 7, len) == "aaa bbb\nccc"


def test_wrap_text_fits_on_one_line():
    text = "short words here"
    assert wrap_text(text, 1000, len) == text


def test_wrap_text_respects_width_and_keeps_words():
    text = "the quick brown fox jumps over the lazy dog again and again"
    wrapped = wrap_text(text, 15, len)
    lines = wrapped.split("\n")
    assert all(len(line) <= 15 for line in lines)
    assert wrapped.split() == text.split()


def test_wrap_text_empty():
    assert wrap_text("", 10, len) == ""


def test_interaction_label_surrounds_text_evenly():
    rect = interaction_label_rect(100, 50, 180, 20)
    assert rect.x < 100 and rect.y < 50
    left_pad = 100 - rect.x
    right_pad = rect.right - (100 + 180)
    top_pad = 50 - rect.y
    bottom_pad = rect.bottom - (50 + 20)
    assert left_pad == right_pad == top_pad == bottom_pad