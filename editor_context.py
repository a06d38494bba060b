import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from buffer_registry import BufferRegistry, Region
from editor_modes import Mode, ModeState, PendingOperator
from focus_model import FocusModel
from http_client import Method, Request, Response


@dataclass
class EditorContext:
    """All mutable editor state, handed explicitly to every mode handler."""

    buffers: BufferRegistry = field(default_factory=BufferRegistry)
    focus: FocusModel = field(default_factory=FocusModel)
    mode_state: ModeState = field(default_factory=ModeState.normal)

    # Collaborators
    send: Optional[Callable[[Request], Response]] = None
    store: Optional[Any] = None
    copy: Optional[Callable[[str], Any]] = None

    # Request state
    method: Method = Method.GET
    current_request: Optional[Request] = None  # what produced last_response
    last_response: Optional[Response] = None

    # Registers
    yank_register: Optional[str] = None

    # Sidebar
    collections: list = field(default_factory=list)
    selected_collection: int = 0

    # Status line
    status_msg: Optional[str] = None
    status_until: float = 0.0

    should_exit: bool = False

    # ---------- mode ----------
    @property
    def mode(self) -> Mode:
        return self.mode_state.mode

    @property
    def pending(self) -> Optional[PendingOperator]:
        return self.mode_state.pending

    @property
    def visual_anchor(self) -> Optional[int]:
        return self.mode_state.anchor

    def set_mode(self, state: ModeState) -> None:
        self.mode_state = state
        if state.mode is not Mode.COMMAND:
            self.buffers.clear_command_line()

    def set_pending(self, pending: Optional[PendingOperator]) -> None:
        self.mode_state = self.mode_state.with_pending(pending)

    # ---------- focused region ----------
    @property
    def region(self) -> Region:
        return self.focus.region

    def text(self) -> str:
        return self.buffers.get(self.region)

    def cursor(self) -> int:
        return self.buffers.cursor(self.region)

    def set_cursor(self, offset: int) -> int:
        return self.buffers.set_cursor(self.region, offset)

    def editable(self) -> bool:
        return self.buffers.is_editable(self.region)

    def replace_text(self, text: str, cursor: int) -> bool:
        if not self.buffers.edit(self.region, text):
            return False
        self.set_cursor(cursor)
        return True

    # ---------- sidebar ----------
    def set_collections(self, names) -> None:
        self.collections = list(names or [])
        self.selected_collection = max(
            0, min(self.selected_collection, len(self.collections) - 1)
        )

    def selected_collection_name(self) -> Optional[str]:
        if 0 <= self.selected_collection < len(self.collections):
            return self.collections[self.selected_collection]
        return None

    # ---------- status ----------
    def set_status(self, msg: str, seconds: float = 3) -> None:
        self.status_msg = msg
        self.status_until = time.time() + seconds
