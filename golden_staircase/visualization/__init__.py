"""Visualization subsystem package."""

from . import adapters, text
from .adapters import build_merge_events

__all__ = ["adapters", "text", "build_merge_events"]
