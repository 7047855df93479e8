"""
Gesture3D Cognition Engine (The Referee).
=========================================

This module maps Raw Skeletal Data to Semantic Intents for the 3D viewer.
There is no learned model here: every gesture is a strict geometric rule
over the 21 hand landmarks.

Pipeline (per frame):
1. **Finger Extension:** index..pinky are tested against the wrist,
   the thumb against the index base (thumbs abduct, they do not curl).
2. **Pose Flags:** six independent booleans (zoom in/out, open hand,
   fist, peace, reset).
3. **Palm Motion:** the palm reference point is compared to the previous
   frame's to produce rotation (open hand) and translation (peace) deltas.

The only memory is the previous palm position. `classify` threads it
explicitly; `GestureClassifier` holds it for callers that prefer an object.
"""

import logging
import numpy as np
from typing import Any, Dict, Optional, Tuple

from gesture3d.config import CONFIG
from gesture3d.core.kinematics import distance_2d
from gesture3d.core.types import Gesture, GestureState, Point2D
from gesture3d.hand_utils import (
    FINGER_JOINTS,
    INDEX_MCP,
    THUMB_TIP,
    WRIST,
    palm_center,
    to_array,
)

# Precedence used whenever a single label is needed (HUD, logs).
PRECEDENCE = [
    Gesture.ZOOM_IN,
    Gesture.ZOOM_OUT,
    Gesture.PEACE,
    Gesture.OPEN_HAND,
    Gesture.FIST,
    Gesture.RESET,
]

def _is_absent(landmarks: Any) -> bool:
    if landmarks is None:
        return True
    if hasattr(landmarks, "landmark"):
        return len(landmarks.landmark) == 0
    return len(landmarks) == 0

def is_finger_extended(coords: np.ndarray, tip: int, pip: int, mcp: int) -> bool:
    """
    A straight finger keeps its tip farther from the wrist than both its
    PIP (with a 5% tolerance) and its MCP. A curled tip folds back inside.
    """
    wrist = coords[WRIST]
    tip_to_wrist = distance_2d(coords[tip], wrist)
    pip_to_wrist = distance_2d(coords[pip], wrist)
    mcp_to_wrist = distance_2d(coords[mcp], wrist)
    return (tip_to_wrist > pip_to_wrist * CONFIG["FINGER_PIP_RATIO"]
            and tip_to_wrist > mcp_to_wrist)

def is_thumb_extended(coords: np.ndarray) -> bool:
    return distance_2d(coords[THUMB_TIP], coords[INDEX_MCP]) > CONFIG["THUMB_EXTENSION_THRESHOLD"]

def finger_states(coords: np.ndarray) -> Dict[str, bool]:
    """Extension map: thumb, index, middle, ring, pinky."""
    states = {"thumb": is_thumb_extended(coords)}
    for name, (tip, pip, mcp) in FINGER_JOINTS.items():
        states[name] = is_finger_extended(coords, tip, pip, mcp)
    return states

def classify(landmarks: Any,
             previous_palm: Optional[Point2D]) -> Tuple[GestureState, Optional[Point2D]]:
    """
    Pipeline: Convert -> Extension -> Flags -> Motion.

    Args:
        landmarks: 21 hand points, or None when no hand is visible.
        previous_palm: Palm reference from the last frame that had a hand.

    Returns:
        (GestureState, palm reference to pass to the next call)
    """
    # A dropped frame leaves the motion reference alone
    if _is_absent(landmarks):
        return GestureState.idle(), previous_palm

    coords = to_array(landmarks)
    f = finger_states(coords)
    thumb, index, middle, ring, pinky = f["thumb"], f["index"], f["middle"], f["ring"], f["pinky"]
    extended_count = sum((index, middle, ring, pinky))

    is_zoom_in = thumb and index and not middle and not ring and not pinky
    is_zoom_out = not thumb and index and not middle and not ring and not pinky
    is_open_hand = extended_count >= 4 and thumb
    is_fist = extended_count == 0 and not thumb
    is_peace = index and middle and not ring and not pinky and not thumb
    is_reset = thumb and pinky and not index and not middle and not ring

    cx, cy = palm_center(coords)
    palm = Point2D(float(cx), float(cy))

    rotation_delta = Point2D.zero()
    position_delta = Point2D.zero()
    if previous_palm is not None:
        dx = palm.x - previous_palm.x
        dy = palm.y - previous_palm.y
        if is_open_hand:
            gain = CONFIG["ROTATION_GAIN"]
            # Vertical hand motion pitches (x axis), horizontal motion yaws (y axis)
            rotation_delta = Point2D(dy * gain, -dx * gain)
        if is_peace:
            gain = CONFIG["POSITION_GAIN"]
            position_delta = Point2D(-dx * gain, -dy * gain)

    state = GestureState(
        is_zoom_in=is_zoom_in,
        is_zoom_out=is_zoom_out,
        is_open_hand=is_open_hand,
        is_fist=is_fist,
        is_peace=is_peace,
        is_reset=is_reset,
        palm_position=palm,
        rotation_delta=rotation_delta,
        position_delta=position_delta,
    )
    return state, palm

def dominant_gesture(state: GestureState) -> Gesture:
    """Single label for a frame: first active flag in PRECEDENCE order."""
    flags = state.flags()
    for gesture in PRECEDENCE:
        if flags[gesture]:
            return gesture
    return Gesture.NONE

class GestureClassifier:
    """
    Stateful wrapper around `classify`.

    Attributes:
        previous_palm (Point2D | None): Motion reference for the next frame.
    """
    def __init__(self):
        self.previous_palm: Optional[Point2D] = None

    def process(self, landmarks: Any) -> GestureState:
        state, self.previous_palm = classify(landmarks, self.previous_palm)
        if sum(state.flags().values()) > 1:
            logging.debug(f"Overlapping gestures: {[g.name for g, on in state.flags().items() if on]}")
        return state
