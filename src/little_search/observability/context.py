"""Context propagation so per-document log lines correlate with their build."""

from __future__ import annotations

from contextvars import ContextVar
from uuid import uuid4


build_context: ContextVar[dict | None] = ContextVar("build_context", default=None)


def generate_build_id() -> str:
    """Generate a 16-char hex build ID."""
    return uuid4().hex[:16]


def get_build_context() -> dict:
    """Get the current build context, or an empty dict outside a build."""
    return build_context.get() or {}


def set_build_context(build_id: str, **extra: object) -> None:
    """Set the build context for the current execution context."""
    build_context.set({"build_id": build_id, **extra})


def update_build_context(**extra: object) -> None:
    """Merge extra keys into the current context while preserving build_id."""
    ctx = build_context.get() or {}
    build_context.set({**ctx, **extra})


def clear_build_context() -> None:
    build_context.set(None)
