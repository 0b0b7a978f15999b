#!/usr/bin/env python3
"""
MotionLib - Headless Demo

Drives the character controller with a scripted input sequence over a flat
floor and logs the resulting motion. Can record the run or replay one.
"""

import argparse
import logging
import math
from pathlib import Path

from src.motionlib import (
    DEMO_TICKS,
    FIXED_TIME_STEP,
    FloorPlaneResolver,
    InputCommand,
    InputManager,
    InputSampler,
    MotionController,
    ReplayRecorder,
    ReplayRecording,
    SceneNode,
    load_controller_config,
    replay,
)
from src.motionlib.physics import GroundContact


logger = logging.getLogger(__name__)


def build_character() -> SceneNode:
    """Character root with a body pivot and a camera on a spring arm."""

    root = SceneNode("Player")
    root.add_child(SceneNode("Pivot"))
    camera_pivot = root.add_child(SceneNode("CameraPivot"))
    spring_arm = camera_pivot.add_child(SceneNode("SpringArm"))
    spring_arm.add_child(SceneNode("Camera"))
    return root


def scripted_input(manager: InputManager, tick: int, total: int) -> None:
    """Walk forward, sweep the mouse, strafe with the stick, then let go."""

    phase = tick / max(total, 1)
    manager.clear_all_input()

    if phase < 0.25:
        manager.set_axis_strength(InputCommand.MOVE_FORWARD, 1.0)
    elif phase < 0.5:
        manager.set_axis_strength(InputCommand.MOVE_FORWARD, 1.0)
        manager.on_mouse_move(8.0 * math.sin(phase * math.tau), 1.5)
    elif phase < 0.75:
        manager.set_axis_strength(InputCommand.MOVE_RIGHT, 0.6)
        manager.set_axis_strength(InputCommand.LOOK_RIGHT, 0.3)


def run_live(args) -> None:
    config = load_controller_config(args.config)
    body = FloorPlaneResolver(position=(0.0, 0.0, 0.0), time_step=FIXED_TIME_STEP)
    controller = MotionController(config, body, root=build_character())
    manager = InputManager()
    controller.bind_input(manager)
    sampler = InputSampler()
    recorder = ReplayRecorder(config) if args.record else None

    jump_tick = int(args.ticks * 0.6)
    for tick in range(args.ticks):
        scripted_input(manager, tick, args.ticks)
        manager.set_button(InputCommand.JUMP, tick == jump_tick)
        frame = sampler.sample(manager)
        if recorder is not None:
            recorder.record(frame, GroundContact(body.is_on_floor()), FIXED_TIME_STEP)
        state = controller.physics_process(frame, FIXED_TIME_STEP)

        if tick % args.log_every == 0:
            logger.info(
                "tick %4d pos=(%.2f, %.2f, %.2f) vel=(%.2f, %.2f, %.2f) cam=(%.2f, %.2f, %.2f) "
                "yaw=%.3f pitch=%.3f body=%.3f",
                tick,
                *body.position,
                *state.velocity,
                *controller.rig.get_camera_offset(),
                state.camera_yaw,
                state.camera_pitch,
                state.body_yaw,
            )

    if recorder is not None:
        recorder.recording.save(args.record)


def run_replay(args) -> None:
    recording = ReplayRecording.load(args.replay)
    states = replay(recording, lambda: FloorPlaneResolver(time_step=FIXED_TIME_STEP))
    for tick, state in enumerate(states):
        if tick % args.log_every == 0:
            logger.info("tick %4d state=%s", tick, tuple(round(v, 4) for v in state.snapshot()))
    logger.info("Replayed %d ticks", len(states))


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the character controller headless")
    parser.add_argument("--config", type=Path, default=None, help="Controller config JSON")
    parser.add_argument("--ticks", type=int, default=DEMO_TICKS, help="Number of ticks to simulate")
    parser.add_argument("--log-every", type=int, default=15, help="Log every N ticks")
    parser.add_argument("--record", type=Path, default=None, help="Write a replay file")
    parser.add_argument("--replay", type=Path, default=None, help="Replay a recorded file instead")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every tick at debug level")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.replay is not None:
        run_replay(args)
    else:
        run_live(args)


if __name__ == "__main__":
    main()
