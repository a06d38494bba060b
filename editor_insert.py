from buffer_registry import MULTILINE_REGIONS
from editor_modes import ModeState
from keys import Keys, is_printable
from text_motions import line_down, line_up


class EditorInsert:
    """Insert-mode text entry for the focused editable region."""

    def __init__(self, ctx):
        self.ctx = ctx

    def handle_key(self, ch: int) -> bool:
        ctx = self.ctx
        if ch == Keys.ESCAPE:
            ctx.set_mode(ModeState.normal())
            return True

        text = ctx.text()
        cursor = ctx.cursor()

        if ch in Keys.BACKSPACE:
            if cursor > 0:
                ctx.replace_text(text[: cursor - 1] + text[cursor:], cursor - 1)
            return True

        if ch == Keys.DELETE:
            if cursor < len(text):
                ctx.replace_text(text[:cursor] + text[cursor + 1 :], cursor)
            return True

        if ch == Keys.LEFT:
            ctx.set_cursor(cursor - 1)
            return True
        if ch == Keys.RIGHT:
            ctx.set_cursor(cursor + 1)
            return True
        if ch == Keys.UP:
            ctx.set_cursor(line_up(text, cursor))
            return True
        if ch == Keys.DOWN:
            ctx.set_cursor(line_down(text, cursor))
            return True

        if ch in Keys.ENTER:
            # the URL field stays single-line
            if ctx.region in MULTILINE_REGIONS:
                self._insert("\n")
            return True

        if ch == Keys.TAB or is_printable(ch):
            self._insert(chr(ch))
            return True

        return False

    def _insert(self, s: str) -> None:
        text = self.ctx.text()
        cursor = self.ctx.cursor()
        self.ctx.replace_text(text[:cursor] + s + text[cursor:], cursor + len(s))
