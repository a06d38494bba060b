from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Mode(Enum):
    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"
    VISUAL = "visual"


class PendingOperator(Enum):
    DELETE = "d"
    YANK = "y"
    GOTO = "g"


@dataclass(frozen=True)
class ModeState:
    """Current mode with its mode-specific payload.

    A pending operator only exists in NORMAL and a selection anchor only in
    VISUAL; any other combination is rejected at construction time, so every
    mode transition drops whatever the previous mode carried.
    """

    mode: Mode = Mode.NORMAL
    pending: Optional[PendingOperator] = None
    anchor: Optional[int] = None

    def __post_init__(self):
        if self.pending is not None and self.mode is not Mode.NORMAL:
            raise ValueError(f"pending operator not allowed in {self.mode.value} mode")
        if self.mode is Mode.VISUAL:
            if self.anchor is None:
                raise ValueError("visual mode requires an anchor")
        elif self.anchor is not None:
            raise ValueError(f"anchor not allowed in {self.mode.value} mode")

    @classmethod
    def normal(cls, pending: Optional[PendingOperator] = None) -> "ModeState":
        return cls(Mode.NORMAL, pending=pending)

    @classmethod
    def insert(cls) -> "ModeState":
        return cls(Mode.INSERT)

    @classmethod
    def command(cls) -> "ModeState":
        return cls(Mode.COMMAND)

    @classmethod
    def visual(cls, anchor: int) -> "ModeState":
        return cls(Mode.VISUAL, anchor=anchor)

    def with_pending(self, pending: Optional[PendingOperator]) -> "ModeState":
        return ModeState(self.mode, pending=pending, anchor=self.anchor)

    @property
    def label(self) -> str:
        return self.mode.value.upper()
