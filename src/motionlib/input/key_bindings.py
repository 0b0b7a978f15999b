"""
Key Bindings

Maps host key codes to controller commands with save/load support.
"""

from typing import Dict, Optional, List
import json
import logging
from pathlib import Path

from ..config.settings import KEY_BINDINGS_PATH
from .input_commands import InputCommand

logger = logging.getLogger(__name__)


class KeyBindings:
    """
    Manages key bindings with save/load support.

    Features:
    - Default bindings
    - Rebindable keys
    - Save/load to JSON
    - Multiple keys per command
    """

    def __init__(self, keys, config_path: Optional[Path] = None):
        """
        Initialize key bindings.

        Args:
            keys: Host key-code namespace exposing W, A, S, D, arrow keys,
                  SPACE, EQUAL, MINUS and ESCAPE (e.g. a window's ``keys``)
            config_path: Path to the bindings JSON (default: KEY_BINDINGS_PATH)
        """
        self.keys = keys
        self.config_path = Path(config_path) if config_path is not None else KEY_BINDINGS_PATH

        # Key code → Command mappings
        self.keyboard_bindings: Dict[int, InputCommand] = {}

        # Reverse lookup: Command → Keys
        self.command_to_keys: Dict[InputCommand, List[int]] = {}

        self._set_default_bindings()
        self.load_bindings()
        self._update_command_to_keys()

    def _set_default_bindings(self):
        """Set default key bindings"""

        # Movement
        self.keyboard_bindings[self.keys.W] = InputCommand.MOVE_FORWARD
        self.keyboard_bindings[self.keys.S] = InputCommand.MOVE_BACK
        self.keyboard_bindings[self.keys.A] = InputCommand.MOVE_LEFT
        self.keyboard_bindings[self.keys.D] = InputCommand.MOVE_RIGHT
        self.keyboard_bindings[self.keys.SPACE] = InputCommand.JUMP

        # Keyboard stand-in for the look stick
        self.keyboard_bindings[self.keys.LEFT] = InputCommand.LOOK_LEFT
        self.keyboard_bindings[self.keys.RIGHT] = InputCommand.LOOK_RIGHT
        self.keyboard_bindings[self.keys.UP] = InputCommand.LOOK_UP
        self.keyboard_bindings[self.keys.DOWN] = InputCommand.LOOK_DOWN

        # Camera arm
        self.keyboard_bindings[self.keys.EQUAL] = InputCommand.CAMERA_ZOOM_IN
        self.keyboard_bindings[self.keys.MINUS] = InputCommand.CAMERA_ZOOM_OUT

        self.keyboard_bindings[self.keys.ESCAPE] = InputCommand.SYSTEM_TOGGLE_MOUSE

    def _update_command_to_keys(self):
        """Update reverse lookup (command → keys)"""
        self.command_to_keys.clear()
        for key, command in self.keyboard_bindings.items():
            self.command_to_keys.setdefault(command, []).append(key)

    def get_command(self, key: int) -> Optional[InputCommand]:
        return self.keyboard_bindings.get(key)

    def get_keys_for_command(self, command: InputCommand) -> List[int]:
        return self.command_to_keys.get(command, [])

    def rebind_key(self, command: InputCommand, new_key: int):
        """
        Rebind a command to a new key, replacing its current keys.

        Args:
            command: Command to rebind
            new_key: New key code
        """
        old_keys = [k for k, cmd in self.keyboard_bindings.items() if cmd == command]
        for old_key in old_keys:
            del self.keyboard_bindings[old_key]

        self.keyboard_bindings[new_key] = command
        self._update_command_to_keys()

    def add_binding(self, command: InputCommand, key: int):
        """Add an additional key for a command."""
        self.keyboard_bindings[key] = command
        self._update_command_to_keys()

    def remove_binding(self, key: int):
        if key in self.keyboard_bindings:
            del self.keyboard_bindings[key]
            self._update_command_to_keys()

    def save_bindings(self):
        """Save bindings to JSON file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w') as f:
            json.dump(self.export_bindings(), f, indent=2)

    def load_bindings(self) -> bool:
        """
        Load bindings from JSON file.

        Returns:
            True if loaded successfully, False if the file is missing or unreadable
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Error loading key bindings from %s: %s", self.config_path, e)
            return False

        if not isinstance(data, dict):
            logger.warning("Key bindings file %s must contain a JSON object", self.config_path)
            return False

        self.import_bindings(data)
        return True

    def reset_to_defaults(self):
        """Reset all bindings to defaults"""
        self.keyboard_bindings.clear()
        self._set_default_bindings()
        self._update_command_to_keys()

    def export_bindings(self) -> Dict:
        """
        Export bindings as a dictionary.

        Returns:
            Dict with keyboard bindings keyed by key code string
        """
        return {"keyboard": {str(k): v.name for k, v in self.keyboard_bindings.items()}}

    def import_bindings(self, data: Dict):
        """
        Replace bindings from a dictionary; invalid entries are skipped.

        Args:
            data: Dict with a 'keyboard' mapping of key code → command name
        """
        self.keyboard_bindings.clear()

        for key_str, command_name in data.get("keyboard", {}).items():
            try:
                self.keyboard_bindings[int(key_str)] = InputCommand[command_name]
            except (ValueError, KeyError) as e:
                logger.warning("Invalid binding %s→%s: %s", key_str, command_name, e)

        self._update_command_to_keys()
