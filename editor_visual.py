from typing import Optional

from buffer_registry import Region
from editor_modes import Mode, ModeState
from editor_normal import motion_target
from keys import Keys


VISUAL_MOTIONS = frozenset(ord(c) for c in "hljkwb0$")


def selection_range(ctx) -> Optional[tuple[int, int]]:
    """Inclusive (start, end) of the live selection, or None outside VISUAL."""
    if ctx.mode is not Mode.VISUAL:
        return None
    anchor = ctx.visual_anchor
    cursor = ctx.buffers.cursor(Region.RESPONSE)
    return min(anchor, cursor), max(anchor, cursor)


def selected_text(ctx) -> str:
    bounds = selection_range(ctx)
    if bounds is None:
        return ""
    text = ctx.buffers.get(Region.RESPONSE)
    start, end = bounds
    return text[start : min(end + 1, len(text))]


class EditorVisual:
    """Character selection over the read-only response view."""

    def __init__(self, ctx):
        self.ctx = ctx

    def handle_key(self, ch: int) -> bool:
        ctx = self.ctx
        buffers = ctx.buffers

        if ch == Keys.ESCAPE:
            ctx.set_mode(ModeState.normal())
            return True

        if ch == ord("y"):
            selection = selected_text(ctx)
            ctx.yank_register = selection
            if ctx.copy is not None:
                ctx.copy(selection)
            ctx.set_mode(ModeState.normal())
            ctx.set_status(f"Yanked {len(selection)} chars", 2)
            return True

        if ch in VISUAL_MOTIONS:
            text = buffers.get(Region.RESPONSE)
            target = motion_target(ch, text, buffers.cursor(Region.RESPONSE))
            buffers.set_cursor(Region.RESPONSE, target)
            return True

        return False
