"""Per-tick input snapshot handed from the sampler to the controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Tuple


class LookSource(Enum):
    """Device that produced a tick's look intent."""

    NONE = auto()
    MOUSE = auto()
    CONTROLLER = auto()


@dataclass(frozen=True, slots=True)
class FrameInput:
    """
    Input for exactly one tick.

    Attributes:
        movement_intent: (strafe, back) with each axis in [-1, 1] and length <= 1
        look_intent: Raw look delta; +x looks right, +y looks down
        look_source: Which device the look delta came from
        jump_requested: True only on the tick the jump button went down
    """

    movement_intent: Tuple[float, float] = (0.0, 0.0)
    look_intent: Tuple[float, float] = (0.0, 0.0)
    look_source: LookSource = LookSource.NONE
    jump_requested: bool = False

    @classmethod
    def idle(cls) -> "FrameInput":
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "movement_intent": list(self.movement_intent),
            "look_intent": list(self.look_intent),
            "look_source": self.look_source.name,
            "jump_requested": self.jump_requested,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FrameInput":
        movement = data.get("movement_intent", (0.0, 0.0))
        look = data.get("look_intent", (0.0, 0.0))
        return cls(
            movement_intent=(float(movement[0]), float(movement[1])),
            look_intent=(float(look[0]), float(look[1])),
            look_source=LookSource[data.get("look_source", "NONE")],
            jump_requested=bool(data.get("jump_requested", False)),
        )
