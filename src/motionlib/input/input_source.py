"""Narrow polling interface the input sampler reads from."""

from __future__ import annotations

from typing import Protocol, Tuple, runtime_checkable

from .input_commands import InputCommand


@runtime_checkable
class InputSource(Protocol):
    """
    Device state for one tick.

    Implementations are passed explicitly to the sampler, so tests and
    replays can substitute their own.
    """

    def get_action_strength(self, command: InputCommand) -> float:
        """Current strength of an axis command in [0, 1]."""

    def is_action_pressed(self, command: InputCommand) -> bool:
        """Whether a button command is currently held."""

    def drain_mouse_delta(self) -> Tuple[float, float]:
        """Return the mouse motion buffered since the last call and clear it."""
