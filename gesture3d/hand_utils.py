"""
Gesture3D Landmark Processing Utilities.
========================================

Converts detector output into a plain (21, 3) NumPy matrix so the rest of the
engine never touches MediaPipe objects directly.

Accepted inputs:
1. A MediaPipe `NormalizedLandmarkList` (has `.landmark`).
2. Any sequence of objects exposing `.x`, `.y`, `.z`.
3. Raw numbers: a (21, 3) array, nested lists, or a flat list of 63 floats.
"""

import numpy as np
from typing import Any

# --- LANDMARK INDICES (MediaPipe Hands topology) ---
NUM_LANDMARKS = 21

WRIST = 0
THUMB_TIP = 4
INDEX_MCP, INDEX_PIP, INDEX_TIP = 5, 6, 8
MIDDLE_MCP, MIDDLE_PIP, MIDDLE_TIP = 9, 10, 12
RING_MCP, RING_PIP, RING_TIP = 13, 14, 16
PINKY_MCP, PINKY_PIP, PINKY_TIP = 17, 18, 20

# (tip, pip, mcp) per non-thumb finger, index -> pinky
FINGER_JOINTS = {
    "index": (INDEX_TIP, INDEX_PIP, INDEX_MCP),
    "middle": (MIDDLE_TIP, MIDDLE_PIP, MIDDLE_MCP),
    "ring": (RING_TIP, RING_PIP, RING_MCP),
    "pinky": (PINKY_TIP, PINKY_PIP, PINKY_MCP),
}

PALM_POINTS = [WRIST, INDEX_MCP, MIDDLE_MCP, RING_MCP, PINKY_MCP]

def to_array(landmark_list: Any) -> np.ndarray:
    """
    Transforms raw landmarks into a (21, 3) float matrix.

    Raises:
        ValueError: if the input does not hold exactly 21 points.
    """
    if hasattr(landmark_list, "landmark"):
        landmark_list = landmark_list.landmark

    if len(landmark_list) and hasattr(landmark_list[0], "x"):
        # MediaPipe Object -> Numpy
        coords = np.array([[lm.x, lm.y, lm.z] for lm in landmark_list], dtype=np.float64)
    else:
        # Raw List/Array Input -> Numpy
        coords = np.asarray(landmark_list, dtype=np.float64).reshape(-1, 3)

    if coords.shape != (NUM_LANDMARKS, 3):
        raise ValueError(f"Expected {NUM_LANDMARKS} landmarks, got {coords.shape[0]}")
    return coords

def palm_center(coords: np.ndarray) -> np.ndarray:
    """Mean (x, y) of the wrist and the four finger base joints."""
    return coords[PALM_POINTS, :2].mean(axis=0)
