"""Ports - interfaces/protocols for external dependencies."""

from .task_store import TaskStore
from .presenter import Presenter

__all__ = [
    "TaskStore",
    "Presenter",
]
