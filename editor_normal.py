from typing import Optional

from buffer_registry import MULTILINE_REGIONS, Region
from editor_command import load_collection, send_current_request
from editor_modes import ModeState, PendingOperator
from keys import Keys
from text_motions import (
    last_line_start,
    line_col_to_offset,
    line_down,
    line_end,
    line_start,
    line_up,
    offset_to_line_col,
    split_lines,
    word_backward,
    word_forward,
)


def motion_target(ch: int, text: str, cursor: int) -> Optional[int]:
    """Offset a plain motion key moves to, or None if ch is not a motion."""
    if ch == ord("h"):
        return max(0, cursor - 1)
    if ch == ord("l"):
        return min(len(text), cursor + 1)
    if ch == ord("j"):
        return line_down(text, cursor)
    if ch == ord("k"):
        return line_up(text, cursor)
    if ch == ord("w"):
        return word_forward(text, cursor)
    if ch == ord("b"):
        return word_backward(text, cursor)
    if ch == ord("0"):
        return line_start(text, cursor)
    if ch == ord("$"):
        return line_end(text, cursor)
    if ch == ord("G"):
        return last_line_start(text)
    return None


OPERATOR_KEYS = {
    ord("d"): PendingOperator.DELETE,
    ord("y"): PendingOperator.YANK,
    ord("g"): PendingOperator.GOTO,
}

INSERT_KEYS = frozenset(ord(c) for c in "iaIAoO")


class EditorNormal:
    """Normal-mode keys: focus, motions, operators, paste and send."""

    def __init__(self, ctx):
        self.ctx = ctx

    # ---------- public entrypoint ----------
    def handle_key(self, ch: int) -> bool:
        ctx = self.ctx
        if ctx.pending is not None:
            self._resolve_pending(ctx.pending, ch)
            return True

        if ch == Keys.ESCAPE:
            return True

        if ch == ord(":"):
            ctx.set_mode(ModeState.command())
            return True

        if ch == ord("v"):
            ctx.focus.focus(Region.RESPONSE)
            ctx.set_mode(ModeState.visual(ctx.buffers.cursor(Region.RESPONSE)))
            return True

        if ch in INSERT_KEYS and ctx.region is not Region.SIDEBAR:
            self._enter_insert(ch)
            return True

        if self._handle_focus(ch):
            return True

        if ctx.region is Region.SIDEBAR:
            return self._handle_sidebar(ch)

        target = motion_target(ch, ctx.text(), ctx.cursor())
        if target is not None:
            ctx.set_cursor(target)
            return True

        if ch in OPERATOR_KEYS:
            ctx.set_pending(OPERATOR_KEYS[ch])
            return True

        if ch == ord("p"):
            self._paste()
            return True

        return self._handle_global(ch)

    # ---------- focus ----------
    def _handle_focus(self, ch: int) -> bool:
        focus = self.ctx.focus
        if ch == Keys.TAB:
            focus.next()
            return True
        if ch == Keys.BACKTAB:
            focus.prev()
            return True
        if ord("1") <= ch <= ord("5"):
            focus.jump(ch - ord("0"))
            return True
        return False

    def _handle_sidebar(self, ch: int) -> bool:
        ctx = self.ctx
        if ch == ord("j"):
            if ctx.selected_collection < len(ctx.collections) - 1:
                ctx.selected_collection += 1
            return True
        if ch == ord("k"):
            if ctx.selected_collection > 0:
                ctx.selected_collection -= 1
            return True
        if ch == ord("o"):
            name = ctx.selected_collection_name()
            if name is not None:
                load_collection(ctx, name)
            return True
        return self._handle_global(ch)

    def _handle_global(self, ch: int) -> bool:
        if ch == ord("q"):
            self.ctx.should_exit = True
            return True
        if ch in Keys.ENTER:
            send_current_request(self.ctx)
            return True
        return False

    # ---------- insert entry ----------
    def _enter_insert(self, ch: int) -> None:
        ctx = self.ctx
        if not ctx.editable():
            ctx.set_status("Read-only region", 2)
            return

        text = ctx.text()
        cursor = ctx.cursor()
        if ch == ord("a"):
            ctx.set_cursor(min(cursor + 1, line_end(text, cursor)))
        elif ch == ord("I"):
            ctx.set_cursor(line_start(text, cursor))
        elif ch == ord("A"):
            ctx.set_cursor(line_end(text, cursor))
        elif ch in (ord("o"), ord("O")):
            if ctx.region not in MULTILINE_REGIONS:
                return
            if ch == ord("o"):
                at = line_end(text, cursor)
                ctx.replace_text(text[:at] + "\n" + text[at:], at + 1)
            else:
                at = line_start(text, cursor)
                ctx.replace_text(text[:at] + "\n" + text[at:], at)
        ctx.set_mode(ModeState.insert())

    # ---------- operators ----------
    def _resolve_pending(self, pending: PendingOperator, ch: int) -> None:
        ctx = self.ctx
        if ch == Keys.ESCAPE:
            ctx.set_pending(None)
            return

        if pending is PendingOperator.GOTO:
            if ch == ord("g"):
                ctx.set_cursor(0)
                ctx.set_pending(None)
            return

        if ch == ord("$"):
            if pending is PendingOperator.DELETE:
                self._delete_to_line_end()
            else:
                self._yank_to_line_end()
            ctx.set_pending(None)
            return

        if ch == ord(pending.value):
            if pending is PendingOperator.DELETE:
                self._delete_line()
            else:
                self._yank_line()
            ctx.set_pending(None)

    def _current_line(self):
        text = self.ctx.text()
        lines = split_lines(text)
        line, col = offset_to_line_col(text, self.ctx.cursor())
        return lines, line, col

    def _delete_line(self) -> None:
        ctx = self.ctx
        if not ctx.editable():
            return
        lines, line, _ = self._current_line()
        del lines[line]
        if not lines:
            ctx.replace_text("", 0)
            return
        new_text = "\n".join(lines)
        target = min(line, len(lines) - 1)
        ctx.replace_text(new_text, line_col_to_offset(new_text, target, 0))

    def _delete_to_line_end(self) -> None:
        ctx = self.ctx
        if not ctx.editable():
            return
        lines, line, col = self._current_line()
        lines[line] = lines[line][:col]
        ctx.replace_text("\n".join(lines), ctx.cursor())

    def _yank_line(self) -> None:
        lines, line, _ = self._current_line()
        self.ctx.yank_register = lines[line]

    def _yank_to_line_end(self) -> None:
        lines, line, col = self._current_line()
        self.ctx.yank_register = lines[line][col:]

    def _paste(self) -> None:
        ctx = self.ctx
        register = ctx.yank_register
        if register is None or not ctx.editable():
            return

        text = ctx.text()
        if text == "":
            ctx.replace_text(register, 0)
            return
        lines, line, _ = self._current_line()
        lines.insert(line + 1, register)
        new_text = "\n".join(lines)
        ctx.replace_text(new_text, line_col_to_offset(new_text, line + 1, 0))
