import curses


# curses function-key codes overlap real code points (KEY_UP is 259, which is
# also "ă"), so function keys are shifted above the Unicode range.
FUNCTION_KEY_BASE = 0x110000


def function_key(code: int) -> int:
    return FUNCTION_KEY_BASE + code


def from_wch(key) -> int:
    """Normalize a get_wch() result: characters -> code point, keys -> shifted."""
    if isinstance(key, str):
        return ord(key)
    return function_key(key)


class Keys:
    # Ctrl+[ produces the same byte as Esc
    ESCAPE = 27
    CTRL_C = 3
    TAB = 9
    BACKTAB = function_key(curses.KEY_BTAB)
    ENTER = frozenset({10, 13, function_key(curses.KEY_ENTER)})
    BACKSPACE = frozenset({function_key(curses.KEY_BACKSPACE), 127, 8})
    DELETE = function_key(curses.KEY_DC)

    UP = function_key(curses.KEY_UP)
    DOWN = function_key(curses.KEY_DOWN)
    LEFT = function_key(curses.KEY_LEFT)
    RIGHT = function_key(curses.KEY_RIGHT)
    RESIZE = function_key(curses.KEY_RESIZE)


def is_printable(ch: int) -> bool:
    return 32 <= ch < FUNCTION_KEY_BASE and ch != 127
