# src/logging/context.py — v1
"""Contextual logging support — attach artifact and command to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging — set per command invocation.
_artifact: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "artifact", default=None
)
_command: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "command", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    artifact: str | None = None
    command: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(artifact=_artifact.get(), command=_command.get())


def set_artifact_context(artifact: str, command: str | None = None) -> None:
    """Set the artifact (and command) being processed."""
    _artifact.set(artifact)
    _command.set(command)


def clear_context() -> None:
    """Reset all context variables."""
    _artifact.set(None)
    _command.set(None)
