import curses

from buffer_registry import Region
from editor_modes import Mode
from editor_visual import selection_range
from keys import Keys, from_wch
from screen_layout import ScreenLayout
from status_bar import render_status
from text_motions import offset_to_line_col, split_lines


PANE_TITLES = {
    Region.SIDEBAR: "1 Collections",
    Region.URL: "2 URL",
    Region.HEADERS: "3 Headers",
    Region.BODY: "4 Body",
    Region.RESPONSE: "5 Response",
}


def pane_title(ctx, region):
    title = PANE_TITLES[region]
    request = ctx.current_request
    if region is Region.RESPONSE and request is not None:
        # which request the shown response belongs to
        title += f" | {request.method.value} {request.url}"
    return title


class Orchestrator:
    def __init__(self, stdscr, editor):
        self.stdscr = stdscr
        curses.curs_set(1)
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)

        self.editor = editor
        self.ctx = editor.ctx
        self.layout = ScreenLayout(stdscr)
        self._cursor_pos = None

    # ---------------- UI ----------------

    def redraw(self):
        self._cursor_pos = None
        for region in Region:
            if region is Region.SIDEBAR:
                self._draw_sidebar()
            else:
                self._draw_text_pane(region)
        self._draw_status()
        self._draw_command()
        self._place_cursor()

    def _draw_frame(self, win, region):
        win.erase()
        win.box()
        _, w = win.getmaxyx()
        attr = curses.A_BOLD if self.ctx.region is region else curses.A_DIM
        try:
            win.addnstr(0, 2, f" {pane_title(self.ctx, region)} ", max(0, w - 4), attr)
        except curses.error:
            pass

    def _draw_sidebar(self):
        win = self.layout.windows[Region.SIDEBAR]
        self._draw_frame(win, Region.SIDEBAR)
        h, w = win.getmaxyx()
        rows = max(0, h - 2)
        selected = self.ctx.selected_collection
        top = max(0, selected - rows + 1)
        for i, name in enumerate(self.ctx.collections[top : top + rows]):
            idx = top + i
            attr = curses.A_REVERSE if idx == selected else curses.A_NORMAL
            try:
                win.addnstr(1 + i, 1, name.ljust(w - 2), w - 2, attr)
            except curses.error:
                pass
        win.refresh()

    def _draw_text_pane(self, region):
        ctx = self.ctx
        buffers = ctx.buffers
        win = self.layout.windows[region]
        self._draw_frame(win, region)
        h, w = win.getmaxyx()
        rows = self.layout.visible_rows(region)
        text_w = max(1, w - 2)

        text = buffers.get(region)
        lines = split_lines(text)
        cursor_line, cursor_col = offset_to_line_col(text, buffers.cursor(region))
        scroll = buffers.update_scroll(region, cursor_line, rows)

        selection = selection_range(ctx) if region is Region.RESPONSE else None
        line_offset = sum(len(line) + 1 for line in lines[:scroll])
        for i, line in enumerate(lines[scroll : scroll + rows]):
            y = 1 + i
            try:
                win.addnstr(y, 1, line.expandtabs(1), text_w)
            except curses.error:
                pass
            if selection is not None:
                self._highlight(win, y, line, line_offset, selection, text_w)
            line_offset += len(line) + 1
        win.refresh()

        if ctx.region is region and ctx.mode is not Mode.COMMAND:
            begin_y, begin_x = win.getbegyx()
            self._cursor_pos = (
                begin_y + 1 + cursor_line - scroll,
                begin_x + 1 + min(cursor_col, text_w - 1),
            )

    def _highlight(self, win, y, line, line_offset, selection, text_w):
        start, end = selection
        # the newline after a line is selectable too
        lo = max(start, line_offset)
        hi = min(end, line_offset + len(line))
        if lo > hi:
            return
        col = lo - line_offset
        width = min(hi - lo + 1, text_w - col)
        if width <= 0:
            return
        try:
            win.chgat(y, 1 + col, width, curses.A_REVERSE)
        except curses.error:
            pass

    def _draw_status(self):
        ctx = self.ctx
        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        text = render_status(
            {
                "status_msg": ctx.status_msg,
                "status_until": ctx.status_until,
                "mode": ctx.mode_state.label,
                "method": ctx.method.value,
                "region": ctx.region.value,
                "pending": ctx.pending.value if ctx.pending else None,
                "collection": ctx.selected_collection_name()
                if ctx.region is Region.SIDEBAR
                else None,
            },
            w,
        )
        try:
            sw.addnstr(0, 0, text, w - 1, curses.A_REVERSE)
        except curses.error:
            pass
        sw.refresh()

    def _draw_command(self):
        cw = self.layout.cmd_win
        cw.erase()
        _, w = cw.getmaxyx()
        if self.ctx.mode is Mode.COMMAND:
            line = ":" + self.ctx.buffers.command_line
            # keep the tail visible
            visible = line[-(w - 1) :] if len(line) >= w else line
            try:
                cw.addnstr(0, 0, visible, w - 1)
            except curses.error:
                pass
            begin_y, begin_x = cw.getbegyx()
            self._cursor_pos = (begin_y, begin_x + min(len(visible), w - 1))
        cw.refresh()

    def _place_cursor(self):
        try:
            if self._cursor_pos is None:
                curses.curs_set(0)
                return
            curses.curs_set(1)
            self.stdscr.move(*self._cursor_pos)
            self.stdscr.refresh()
        except curses.error:
            pass

    # ---------------- input ----------------

    def _read_key(self):
        try:
            return from_wch(self.stdscr.get_wch())
        except curses.error:
            return None

    def _resize(self):
        curses.update_lines_cols()
        self.stdscr.clear()
        self.stdscr.refresh()
        self.layout = ScreenLayout(self.stdscr)

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            ch = self._read_key()
            if ch is None:
                self.redraw()
                continue

            if ch == Keys.RESIZE:
                self._resize()
                self.redraw()
                continue

            if self.editor.send_pending(ch):
                self.ctx.set_status("Sending...", 60)
                self.redraw()

            if not self.editor.handle_key(ch):
                break

            if self.ctx.status_msg == "Sending...":
                self.ctx.status_msg = None
            self.redraw()
