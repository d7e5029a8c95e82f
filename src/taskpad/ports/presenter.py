"""Presentation interface."""

from typing import Protocol

from taskpad.core.view import BoardView, Notice


class Presenter(Protocol):
    """Interface for showing the board and notifications to the user."""

    def render(self, board: BoardView) -> None:
        """Draw the current board."""
        ...

    def notify(self, notice: Notice) -> None:
        """Show a transient message."""
        ...

    def clear_form(self) -> None:
        """Reset the task entry form after a successful submit."""
        ...
