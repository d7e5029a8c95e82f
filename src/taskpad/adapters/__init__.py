"""Adapters - I/O implementations of ports."""

from .json_store import JsonTaskStore, StorageInfo
from .terminal import TerminalPresenter

__all__ = [
    "JsonTaskStore",
    "StorageInfo",
    "TerminalPresenter",
]
