"""Immutable controller tuning with construction-time validation."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .settings import (
    CAMERA_CONTROLLER_SPEED,
    CAMERA_MOUSE_SPEED,
    CAMERA_PITCH_MAX,
    CAMERA_PITCH_MIN,
    CONTROLLER_CONFIG_PATH,
    PLAYER_FALL_ACCELERATION,
    PLAYER_FLOOR_SNAP,
    PLAYER_JUMP_IMPULSE,
    PLAYER_MAX_SLOPE_ANGLE,
    PLAYER_ORIENTATION_SMOOTHING,
    PLAYER_SPEED,
)

logger = logging.getLogger(__name__)


class ControllerConfigError(ValueError):
    """Raised when controller tuning violates its contract."""


@dataclass(frozen=True, slots=True)
class ControllerConfig:
    """Per-session controller tuning. Read-only once constructed."""

    speed: float = PLAYER_SPEED
    fall_acceleration: float = PLAYER_FALL_ACCELERATION
    jump_impulse: float = PLAYER_JUMP_IMPULSE
    mouse_look_sensitivity: float = CAMERA_MOUSE_SPEED
    controller_look_sensitivity: float = CAMERA_CONTROLLER_SPEED
    pitch_min: float = CAMERA_PITCH_MIN
    pitch_max: float = CAMERA_PITCH_MAX
    orientation_smoothing: float = PLAYER_ORIENTATION_SMOOTHING
    max_slope_angle: float = PLAYER_MAX_SLOPE_ANGLE
    floor_snap: bool = PLAYER_FLOOR_SNAP

    def __post_init__(self) -> None:
        if not self.speed > 0.0:
            raise ControllerConfigError(f"speed must be > 0, got {self.speed}")
        if not self.fall_acceleration >= 0.0:
            raise ControllerConfigError(f"fall_acceleration must be >= 0, got {self.fall_acceleration}")
        if not self.jump_impulse >= 0.0:
            raise ControllerConfigError(f"jump_impulse must be >= 0, got {self.jump_impulse}")
        if not self.mouse_look_sensitivity > 0.0:
            raise ControllerConfigError(
                f"mouse_look_sensitivity must be > 0, got {self.mouse_look_sensitivity}"
            )
        if not self.controller_look_sensitivity > 0.0:
            raise ControllerConfigError(
                f"controller_look_sensitivity must be > 0, got {self.controller_look_sensitivity}"
            )
        if not self.pitch_min < self.pitch_max:
            raise ControllerConfigError(
                f"pitch_min ({self.pitch_min}) must be less than pitch_max ({self.pitch_max})"
            )
        if not 0.0 <= self.orientation_smoothing <= 1.0:
            raise ControllerConfigError(
                f"orientation_smoothing must be in [0, 1], got {self.orientation_smoothing}"
            )
        if not self.max_slope_angle >= 0.0:
            raise ControllerConfigError(f"max_slope_angle must be >= 0, got {self.max_slope_angle}")

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ControllerConfig":
        """
        Build a config from a mapping, falling back to defaults for missing keys.

        Args:
            data: Field name to value mapping

        Returns:
            Validated ControllerConfig

        Raises:
            ControllerConfigError: Unknown keys or out-of-contract values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ControllerConfigError(f"Unknown controller config keys: {', '.join(unknown)}")

        values: Dict[str, Any] = {}
        for name, value in data.items():
            if name == "floor_snap":
                values[name] = bool(value)
                continue
            try:
                values[name] = float(value)
            except (TypeError, ValueError) as exc:
                raise ControllerConfigError(f"{name} must be a number, got {value!r}") from exc
        return cls(**values)

    @classmethod
    def from_json(cls, path: Path) -> "ControllerConfig":
        """Load a config from a JSON object file."""

        with open(path, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise ControllerConfigError(f"Invalid controller config {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ControllerConfigError(f"Controller config {path} must contain a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_controller_config(path: Optional[Path] = None) -> ControllerConfig:
    """
    Load controller tuning, using defaults when no file exists.

    Args:
        path: JSON file to read (default: CONTROLLER_CONFIG_PATH)

    Returns:
        ControllerConfig
    """
    config_path = Path(path) if path is not None else CONTROLLER_CONFIG_PATH

    if not config_path.exists():
        logger.info("Controller config not found at %s, using defaults", config_path)
        return ControllerConfig()

    config = ControllerConfig.from_json(config_path)
    logger.info("Loaded controller config from %s", config_path)
    return config
