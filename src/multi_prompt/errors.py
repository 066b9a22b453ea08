"""Exceptions raised by prompt sessions."""

from __future__ import annotations


class PromptCancelled(RuntimeError):
    """Raised when the user aborts a single field read."""
