import pytest

from text_motions import (
    last_line_start,
    line_col_to_offset,
    line_down,
    line_end,
    line_start,
    line_up,
    offset_to_line_col,
    word_backward,
    word_forward,
)


@pytest.mark.parametrize(
    "text, offset, expected",
    [
        ("GET\nPOST", 5, (1, 1)),
        ("GET\nPOST", 3, (0, 3)),  # end of line, not start of the next
        ("GET\nPOST", 4, (1, 0)),
        ("", 0, (0, 0)),
        ("abc\n", 4, (1, 0)),
        ("a\n\nb", 2, (1, 0)),
        ("GET\nPOST", 99, (1, 0)),  # past the end clamps to last line
    ],
)
def test_offset_to_line_col(text, offset, expected):
    assert offset_to_line_col(text, offset) == expected


@pytest.mark.parametrize(
    "text, line, col, expected",
    [
        ("GET\nPOST", 1, 1, 5),
        ("GET\nPOST", 0, 0, 0),
        ("GET\nPOST", 1, 4, 8),
        ("GET\nPOST", 7, 0, 8),  # line past the end never fails
        ("", 3, 0, 0),
    ],
)
def test_line_col_to_offset(text, line, col, expected):
    assert line_col_to_offset(text, line, col) == expected


@pytest.mark.parametrize(
    "text",
    ["", "x", "GET\nPOST", "abc\n", "\n\n", "one two\n  three\n\nfour", "żółw\njaźń"],
)
def test_round_trip_for_every_valid_offset(text):
    for offset in range(len(text) + 1):
        line, col = offset_to_line_col(text, offset)
        assert line_col_to_offset(text, line, col) == offset


def test_word_forward_skips_word_then_whitespace():
    assert word_forward("foo bar", 0) == 4
    assert word_forward("foo   bar", 1) == 6


def test_word_forward_treats_punctuation_as_its_own_word():
    text = "a.b==c"
    assert word_forward(text, 0) == 1
    assert word_forward(text, 1) == 2
    assert word_forward(text, 3) == 5


def test_word_forward_noop_at_end():
    assert word_forward("abc", 3) == 3
    assert word_forward("", 0) == 0


def test_word_backward_lands_on_word_starts():
    text = "word1.word2"
    assert word_backward(text, len(text)) == 6
    assert word_backward(text, 6) == 5
    assert word_backward(text, 5) == 0


def test_word_backward_skips_whitespace_and_newlines():
    text = "GET /users\n\n  id"
    assert word_backward(text, len(text) - 2) == 5
    assert word_backward(text, 0) == 0


@pytest.mark.parametrize(
    "text",
    ["hello, world", "  leading", "a\nb\nc", "{\"k\": [1, 2]}", "naïve café"],
)
def test_word_motions_are_monotonic_and_terminate(text):
    offset = 0
    for _ in range(len(text) + 1):
        nxt = word_forward(text, offset)
        assert nxt >= offset
        offset = nxt
    assert offset == len(text)

    for _ in range(len(text) + 1):
        prev = word_backward(text, offset)
        assert prev <= offset
        offset = prev
    assert offset == 0


def test_line_motions_keep_ragged_column():
    text = "abcdef\nxy\nlonger line"
    assert line_down(text, 5) == 9  # clamped to end of "xy"
    assert line_down(text, 9) == 12
    assert line_up(text, 12) == 9
    assert line_up(text, 2) == 2  # already on the first line
    assert line_down(text, len(text)) == len(text)


def test_line_start_end_and_last_line():
    text = "GET\nPOST\nPUT"
    assert line_start(text, 6) == 4
    assert line_end(text, 6) == 8
    assert last_line_start(text) == 9
    assert last_line_start("") == 0
