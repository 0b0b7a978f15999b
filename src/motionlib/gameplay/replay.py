"""Record and deterministically replay controller ticks."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from ..config.controller_config import ControllerConfig
from ..core.motion_state import MotionState
from ..input.frame_input import FrameInput
from ..physics.resolver import GroundContact, MotionResolver
from .motion_controller import step

logger = logging.getLogger(__name__)

REPLAY_FORMAT_VERSION = 1


@dataclass(frozen=True, slots=True)
class ReplayFrame:
    frame: FrameInput
    contact: GroundContact
    delta_time: float


@dataclass(slots=True)
class ReplayRecording:
    """Ordered tick inputs plus the tuning they were recorded with."""

    config: ControllerConfig = field(default_factory=ControllerConfig)
    frames: List[ReplayFrame] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.frames)

    def to_dict(self) -> dict:
        return {
            "version": REPLAY_FORMAT_VERSION,
            "config": self.config.to_dict(),
            "frames": [
                {
                    "input": item.frame.to_dict(),
                    "on_floor": item.contact.on_floor,
                    "dt": item.delta_time,
                }
                for item in self.frames
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ReplayRecording":
        version = data.get("version")
        if version != REPLAY_FORMAT_VERSION:
            raise ValueError(f"Unsupported replay version: {version!r}")

        frames = [
            ReplayFrame(
                frame=FrameInput.from_dict(entry["input"]),
                contact=GroundContact(on_floor=bool(entry["on_floor"])),
                delta_time=float(entry["dt"]),
            )
            for entry in data.get("frames", [])
        ]
        return cls(config=ControllerConfig.from_dict(data.get("config", {})), frames=frames)

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info("Saved %d replay frames to %s", len(self.frames), path)

    @classmethod
    def load(cls, path: Path) -> "ReplayRecording":
        with open(path, "r") as f:
            data = json.load(f)
        recording = cls.from_dict(data)
        logger.info("Loaded %d replay frames from %s", len(recording.frames), path)
        return recording


class ReplayRecorder:
    """Collects the inputs of live ticks into a ReplayRecording."""

    def __init__(self, config: ControllerConfig) -> None:
        self.recording = ReplayRecording(config=config)

    def record(self, frame: FrameInput, contact: GroundContact, delta_time: float) -> None:
        self.recording.frames.append(ReplayFrame(frame, contact, float(delta_time)))


def replay(
    recording: ReplayRecording,
    resolver_factory: Callable[[], MotionResolver],
    initial_state: Optional[MotionState] = None,
    camera_attached: bool = True,
) -> List[MotionState]:
    """
    Re-run a recording through the pure tick.

    Args:
        recording: Recorded inputs and tuning
        resolver_factory: Builds a fresh resolver for this run
        initial_state: Starting state (default: all zero); its pitch is
            clamped to the recording's limits
        camera_attached: Whether look input should move the camera

    Returns:
        The state after every tick, in order
    """
    resolver = resolver_factory()
    config = recording.config
    state = initial_state.copy() if initial_state is not None else MotionState()
    state.set_camera_pitch(state.camera_pitch, config.pitch_min, config.pitch_max)
    states: List[MotionState] = []
    for item in recording.frames:
        result = step(
            state,
            item.frame,
            item.contact,
            item.delta_time,
            config,
            resolver,
            camera_attached=camera_attached,
        )
        state = result.state
        states.append(state)
    return states
