from editor_command import EditorCommand
from editor_context import EditorContext
from editor_insert import EditorInsert
from editor_modes import Mode
from editor_normal import EditorNormal
from editor_visual import EditorVisual
from keys import Keys


class Editor:
    """Routes each key to the handler for the current mode."""

    def __init__(self, ctx: EditorContext, history=None):
        self.ctx = ctx
        self.normal = EditorNormal(ctx)
        self.insert = EditorInsert(ctx)
        self.command = EditorCommand(ctx, history=history)
        self.visual = EditorVisual(ctx)
        self._handlers = {
            Mode.NORMAL: self.normal,
            Mode.INSERT: self.insert,
            Mode.COMMAND: self.command,
            Mode.VISUAL: self.visual,
        }

    def handle_key(self, ch: int) -> bool:
        """Dispatch one key. Returns False once the editor wants to exit."""
        if ch == Keys.CTRL_C:
            self.ctx.should_exit = True
            return False

        self._handlers[self.ctx.mode].handle_key(ch)
        return not self.ctx.should_exit

    def send_pending(self, ch: int) -> bool:
        """True if dispatching ch is about to perform a blocking send."""
        ctx = self.ctx
        if ctx.mode is Mode.NORMAL and ctx.pending is None:
            return ch in Keys.ENTER
        if ctx.mode is Mode.COMMAND and ch in Keys.ENTER:
            return ctx.buffers.command_line.strip() == "send"
        return False
