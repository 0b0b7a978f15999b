"""Controller configuration"""
from .controller_config import ControllerConfig, ControllerConfigError, load_controller_config

__all__ = [
    "ControllerConfig",
    "ControllerConfigError",
    "load_controller_config",
]
