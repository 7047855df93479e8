"""
Gesture3D Configuration Management.
===================================

This module defines the tunable parameters of the gesture controller.
The parameters follow the same "Layer Cake" as the runtime:

1. Input (camera + hand detector)
2. Gesture rules (the geometric classifier)
3. Motion gains (palm displacement -> transform units)
4. Interaction physics (smoothing, clamps, zoom step)
5. Feedback (audio cues, HUD)

! WARNING !
Changing the gesture rule thresholds changes which poses are recognised.
Use `tools/lab_classifier.py` to tune them against a live camera.
"""

from pathlib import Path
import os

# --- SYSTEM PATHS ---
FILE_PATH = Path(__file__).resolve()
PROJECT_ROOT = FILE_PATH.parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"

PATHS = {
    "SOUNDS_DIR": ASSETS_DIR / "sounds",
}

# --- MASTER CONFIGURATION ---
CONFIG = {
    # =========================================================
    # LAYER 1: INPUT SIGNAL (Camera + Detector)
    # =========================================================
    "TARGET_FPS": 30,
    "CAMERA_INDEX": 0,
    "FRAME_WIDTH": 640,
    "FRAME_HEIGHT": 480,
    "DETECTION_CONFIDENCE": 0.5,
    "TRACKING_CONFIDENCE": 0.5,
    "MODEL_COMPLEXITY": 1,          # 0=Fast, 1=Balanced

    # =========================================================
    # LAYER 2: GESTURE RULES (The Referee)
    # =========================================================
    "FINGER_PIP_RATIO": 0.95,       # Tip must reach 95% of the PIP-to-wrist distance
    "THUMB_EXTENSION_THRESHOLD": 0.12,  # Thumb tip to index base, normalized frame units

    # =========================================================
    # LAYER 3: MOTION GAINS
    # =========================================================
    "ROTATION_GAIN": 3.0,           # Open hand: palm displacement -> radians
    "POSITION_GAIN": 5.0,           # Peace sign: palm displacement -> scene units

    # =========================================================
    # LAYER 4: INTERACTION PHYSICS (Defaults for every model)
    # =========================================================
    "SCALE_MIN": 0.3,
    "SCALE_MAX": 3.0,
    "POSITION_CLAMP_X": 3.0,
    "POSITION_CLAMP_Y": 2.0,
    "ROTATION_SMOOTHING": 0.15,
    "POSITION_SMOOTHING": 0.15,
    "SCALE_SMOOTHING": 0.1,
    "ZOOM_STEP": 0.02,              # Scale change per frame while zooming

    # =========================================================
    # LAYER 5: FEEDBACK
    # =========================================================
    "AUDIO_ENABLED": True,
    "AUDIO_VOLUME": 0.3,
    "CUE_DEBOUNCE": {               # Seconds between two plays of the same cue
        "ZOOM": 0.5,
        "ROTATE": 1.0,
        "MOVE": 1.0,
        "FREEZE": 0.5,
        "RESET": 0.5,
        "SELECT": 0.5,
    },

    "DEFAULT_MODEL": "solar",
    "LOG_LEVEL": "INFO",
}

# --- PER-MODEL PROFILES ---
# Only the keys that differ from the LAYER 4 defaults are listed.
# Order matters: it is the order of the number keys in the viewer.
MODEL_PROFILES = {
    "torus": {},
    "sphere": {},
    "cube": {},
    "icosahedron": {},
    "car": {},
    "chair": {},
    "solar": {
        "SCALE_MIN": 0.2,
        "REST_ROTATION": (0.2, 0.0),  # Tilt of the orbital plane towards the camera
    },
}

def init_environment():
    """
    Creates necessary directories safely at runtime.
    """
    os.makedirs(PATHS["SOUNDS_DIR"], exist_ok=True)
