"""Offset <-> (line, col) conversion and word/line motions over plain strings.

Everything here is pure: callers pass the text and an offset and get a new
offset (or coordinates) back. Offsets are ordinary string indices.
"""


def split_lines(text: str) -> list[str]:
    return text.split("\n")


def is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


# ---------- coordinates ----------
def offset_to_line_col(text: str, offset: int) -> tuple[int, int]:
    lines = split_lines(text)
    start = 0
    for line_num, line in enumerate(lines):
        line_end = start + len(line)
        if offset <= line_end:
            return line_num, offset - start
        start = line_end + 1

    # past the end of the text: last line, column 0
    return len(lines) - 1, 0


def line_col_to_offset(text: str, line: int, col: int) -> int:
    offset = 0
    for line_num, line_text in enumerate(split_lines(text)):
        if line_num == line:
            return offset + col
        offset += len(line_text) + 1
    return min(offset, len(text))


# ---------- words ----------
def word_forward(text: str, offset: int) -> int:
    n = len(text)
    idx = offset
    if idx >= n:
        return offset

    if is_word_char(text[idx]):
        while idx < n and is_word_char(text[idx]):
            idx += 1
    elif not text[idx].isspace():
        while idx < n and not text[idx].isspace() and not is_word_char(text[idx]):
            idx += 1

    while idx < n and text[idx].isspace():
        idx += 1
    return idx


def word_backward(text: str, offset: int) -> int:
    n = len(text)
    if offset <= 0 or n == 0:
        return 0

    idx = min(offset, n) - 1
    while idx > 0 and text[idx].isspace():
        idx -= 1

    if not text[idx].isspace():
        in_word = is_word_char(text[idx])
        while idx > 0:
            prev = text[idx - 1]
            if prev.isspace() or is_word_char(prev) != in_word:
                break
            idx -= 1
    return idx


# ---------- lines ----------
def line_start(text: str, offset: int) -> int:
    line, _ = offset_to_line_col(text, offset)
    return line_col_to_offset(text, line, 0)


def line_end(text: str, offset: int) -> int:
    line, _ = offset_to_line_col(text, offset)
    return line_col_to_offset(text, line, len(split_lines(text)[line]))


def last_line_start(text: str) -> int:
    return line_col_to_offset(text, len(split_lines(text)) - 1, 0)


def line_down(text: str, offset: int) -> int:
    """Move one line down keeping the column, clamped to the target line."""
    lines = split_lines(text)
    line, col = offset_to_line_col(text, offset)
    if line + 1 >= len(lines):
        return offset
    return line_col_to_offset(text, line + 1, min(col, len(lines[line + 1])))


def line_up(text: str, offset: int) -> int:
    """Move one line up keeping the column, clamped to the target line."""
    line, col = offset_to_line_col(text, offset)
    if line == 0:
        return offset
    lines = split_lines(text)
    return line_col_to_offset(text, line - 1, min(col, len(lines[line - 1])))
