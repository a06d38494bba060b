import curses

from buffer_registry import Region


class ScreenLayout:
    SIDEBAR_MAX_W = 24
    URL_H = 3
    MIN_PANE_H = 3

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: sidebar | url / headers / body / response, then status bar
        # (1 line) and command bar (1 line) across the full width
        self.status_h = 1
        self.cmd_h = 1
        main_h = max(self.URL_H + 3 * self.MIN_PANE_H, self.H - self.status_h - self.cmd_h)

        self.sidebar_w = max(12, min(self.SIDEBAR_MAX_W, self.W // 5))
        right_x = self.sidebar_w
        right_w = max(10, self.W - self.sidebar_w)

        rest = main_h - self.URL_H
        headers_h = max(self.MIN_PANE_H, rest // 5)
        body_h = max(self.MIN_PANE_H, (rest * 3) // 10)
        response_h = max(self.MIN_PANE_H, rest - headers_h - body_h)

        y = 0
        self.windows = {
            Region.SIDEBAR: curses.newwin(main_h, self.sidebar_w, 0, 0),
        }
        for region, h in (
            (Region.URL, self.URL_H),
            (Region.HEADERS, headers_h),
            (Region.BODY, body_h),
            (Region.RESPONSE, response_h),
        ):
            self.windows[region] = curses.newwin(h, right_w, y, right_x)
            y += h

        for win in self.windows.values():
            # panes never own the cursor; the orchestrator places it
            win.leaveok(True)

        self.status_win = curses.newwin(self.status_h, self.W, main_h, 0)
        self.status_win.leaveok(True)
        self.cmd_win = curses.newwin(self.cmd_h, self.W, main_h + self.status_h, 0)

    def visible_rows(self, region: Region) -> int:
        h, _ = self.windows[region].getmaxyx()
        return max(1, h - 2)
