from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .state import EditorState


class CommandStatus(str, Enum):
    APPLIED = "applied"
    NOOP = "noop"  # target not found, or nothing to change
    DENIED = "denied"


@dataclass(frozen=True)
class CommandResult:
    state: EditorState
    status: CommandStatus
    command: Any
    reason: Optional[str] = None

    @property
    def applied(self) -> bool:
        return self.status == CommandStatus.APPLIED

    @property
    def denied(self) -> bool:
        return self.status == CommandStatus.DENIED

    @classmethod
    def from_transition(cls, before: EditorState, after: EditorState, command) -> "CommandResult":
        if after is before:
            return cls(state=before, status=CommandStatus.NOOP, command=command)
        return cls(state=after, status=CommandStatus.APPLIED, command=command)

    @classmethod
    def refused(cls, state: EditorState, command, reason: str) -> "CommandResult":
        return cls(state=state, status=CommandStatus.DENIED, command=command, reason=reason)
