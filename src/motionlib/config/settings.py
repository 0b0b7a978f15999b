"""
Controller Configuration Settings

Default tuning constants for the character and camera controller.
Modify these values (or override them from a JSON file) to change feel.
"""

from pathlib import Path

# ============================================================================
# Project Paths
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
CONTROLLER_CONFIG_PATH = CONFIG_DIR / "controller.json"
KEY_BINDINGS_PATH = CONFIG_DIR / "keybindings.json"

# ============================================================================
# Character Movement Defaults
# ============================================================================

PLAYER_SPEED = 14.0              # Units per second at full stick
PLAYER_FALL_ACCELERATION = 75.0  # Units per second squared
PLAYER_JUMP_IMPULSE = 20.0       # Added to vertical velocity on jump

# Body pivot turns toward the movement heading by this fraction every tick
PLAYER_ORIENTATION_SMOOTHING = 0.15

# Below this direction length the body keeps its last heading
PLAYER_HEADING_EPSILON = 1e-3

# ============================================================================
# Collision Resolver Parameters
# ============================================================================

PLAYER_MAX_SLOPE_ANGLE = 0.785398  # Radians (45 degrees)
PLAYER_FLOOR_SNAP = False          # Stop on slopes instead of sliding
WORLD_UP = (0.0, 1.0, 0.0)

# ============================================================================
# Camera Settings
# ============================================================================

# Mouse look (radians per input-device unit)
CAMERA_MOUSE_SPEED = 0.001

# Controller look (radians per tick at full deflection)
CAMERA_CONTROLLER_SPEED = 0.1

# Pitch limits (prevents camera flipping over the character)
CAMERA_PITCH_MIN = -1.2
CAMERA_PITCH_MAX = 1.2

# Spring arm
CAMERA_ARM_LENGTH = 6.0
CAMERA_ARM_MIN_LENGTH = 2.0
CAMERA_ARM_MAX_LENGTH = 12.0
CAMERA_ARM_SPRING_STIFFNESS = 0.2  # Fraction of the remaining length closed per tick
CAMERA_ZOOM_STEP = 0.5

# ============================================================================
# Scene Layout
# ============================================================================

# Node paths relative to the character's root node
CAMERA_PIVOT_PATH = "CameraPivot"
CAMERA_ARM_PATH = "CameraPivot/SpringArm"
CAMERA_PATH = "CameraPivot/SpringArm/Camera"
BODY_PIVOT_PATH = "Pivot"

# ============================================================================
# Simulation
# ============================================================================

FIXED_TIME_STEP = 1.0 / 60.0
DEMO_TICKS = 180

