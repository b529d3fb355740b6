"""Core package for okerr: the Result type and its settings/logging helpers."""

from __future__ import annotations

__all__ = ["__doc__"]
