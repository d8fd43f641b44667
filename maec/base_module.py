"""Base state handling shared by all modules."""

from __future__ import annotations

import enum


class State(enum.Enum):
    """Lifecycle states of a module."""

    CREATED = enum.auto()
    STARTED = enum.auto()
    STOPPED = enum.auto()
    FINISHING = enum.auto()
    FINISHED = enum.auto()


class BaseModule:
    """A component with a lifecycle state."""

    def __init__(self) -> None:
        self.state = State.CREATED

    def start(self) -> None:
        """Move to the started state."""
        self.state = State.STARTED

    def stop(self) -> None:
        """Move to the stopped state."""
        self.state = State.STOPPED

    def finish(self) -> None:
        """Move to the finishing state."""
        self.state = State.FINISHING

    def done(self) -> None:
        """Move to the finished state."""
        self.state = State.FINISHED