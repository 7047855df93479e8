"""
Gesture3D Interaction State Management.
=======================================

One `InteractionStateMachine` per controllable object. Every frame it:

1. Applies the freeze policy (fist locks, any release gesture unlocks).
2. Applies the reset override (zero targets, unit scale, unfrozen).
3. Writes gesture input into the *targets* (only while ACTIVE).
4. Eases the *current* values toward the targets, even while FROZEN.

Targets jump, current values never do: the fixed smoothing factors
rate-limit everything the renderer sees.
"""
import logging
from typing import Optional

from gesture3d.core.kinematics import clamp, lerp, lerp_point
from gesture3d.core.types import (
    GestureState,
    InteractionConfig,
    InteractionMode,
    InteractionState,
    Point2D,
    Transform,
)

def advance(state: InteractionState,
            gesture: GestureState,
            config: InteractionConfig) -> InteractionState:
    """Runs one frame of the interaction model. Mutates and returns `state`."""
    # 1. FREEZE POLICY
    if gesture.is_fist and not state.is_frozen:
        state.mode = InteractionMode.FROZEN
    # A lone fist never releases
    if not gesture.is_fist and gesture.any_release:
        state.mode = InteractionMode.ACTIVE

    # 2. RESET (wins over a same-frame fist)
    if gesture.is_reset:
        state.target_rotation = Point2D.zero()
        state.target_position = Point2D.zero()
        state.target_scale = 1.0
        state.mode = InteractionMode.ACTIVE

    # 3. TARGET UPDATES
    if not state.is_frozen:
        if gesture.is_open_hand:
            # Unbounded: the renderer wraps angles
            state.target_rotation = state.target_rotation + gesture.rotation_delta

        if gesture.is_peace:
            moved = state.target_position + gesture.position_delta
            state.target_position = Point2D(
                clamp(moved.x, -config.position_clamp_x, config.position_clamp_x),
                clamp(moved.y, -config.position_clamp_y, config.position_clamp_y),
            )

        if gesture.is_zoom_in:
            state.target_scale = min(config.scale_max, state.target_scale + config.zoom_step)
        if gesture.is_zoom_out:
            state.target_scale = max(config.scale_min, state.target_scale - config.zoom_step)

    # 4. SMOOTHING (always)
    state.current_rotation = lerp_point(
        state.current_rotation,
        state.target_rotation + config.rest_rotation,
        config.rotation_smoothing,
    )
    state.current_position = lerp_point(
        state.current_position, state.target_position, config.position_smoothing
    )
    state.current_scale = lerp(state.current_scale, state.target_scale, config.scale_smoothing)
    return state

class InteractionStateMachine:
    """
    Owns the InteractionState of a single displayed object.

    Attributes:
        config (InteractionConfig): Clamp ranges and smoothing factors.
        state (InteractionState): Targets, smoothed values and mode.
    """
    def __init__(self, config: Optional[InteractionConfig] = None):
        self.config = config or InteractionConfig()
        self.state = InteractionState()

    @property
    def is_frozen(self) -> bool:
        return self.state.is_frozen

    @property
    def transform(self) -> Transform:
        s = self.state
        return Transform(s.current_rotation, s.current_position, s.current_scale, s.is_frozen)

    def advance(self, gesture: GestureState) -> Transform:
        prev_mode = self.state.mode
        advance(self.state, gesture, self.config)
        if self.state.mode is not prev_mode:
            logging.debug(f"Interaction {prev_mode.name} -> {self.state.mode.name}")
        return self.transform
