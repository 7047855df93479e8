"""
Gesture3D - Main Entry Point.
=============================

Bootloader for the gesture-controlled 3D viewer. It wires the layers:
1. Perception: camera thread + MediaPipe Hands (one hand).
2. Cognition + Control: SceneController (classifier, interaction state, cues).
3. Feedback: cue player (audio) and HUD (OpenCV window).

Usage:
    $ python -m gesture3d.main
    $ gesture3d            (after `pip install -e .`)
"""
import logging
import threading
import time
from typing import Any, Optional, Tuple

import cv2
import mediapipe as mp
import numpy as np

from gesture3d.config import CONFIG, init_environment
from gesture3d.control.controller import MODEL_NAMES, SceneController
from gesture3d.control.cue_player import CuePlayer
from gesture3d.ui.hud import HUD

class ThreadedCamera:
    """
    Non-blocking Camera Reader.

    Runs `VideoCapture.read()` in a daemon thread so the render loop always
    gets the freshest frame instead of draining a stale hardware buffer.

    Raises:
        RuntimeError: if the device cannot be opened.
    """
    def __init__(self, src: int = 0):
        self.cap = cv2.VideoCapture(src)
        if not self.cap.isOpened():
            raise RuntimeError(f"Camera {src} could not be opened")
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, CONFIG["FRAME_WIDTH"])
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, CONFIG["FRAME_HEIGHT"])
        self.cap.set(cv2.CAP_PROP_FPS, CONFIG.get("TARGET_FPS", 30))

        self.ret, self.frame = self.cap.read()
        self.running = True
        self.lock = threading.Lock()

        # Start the I/O thread
        threading.Thread(target=self._reader, daemon=True).start()

    def _reader(self):
        """Background thread loop for frame grabbing."""
        while self.running:
            ret, frame = self.cap.read()
            if not ret:
                logging.error("Camera stream ended")
                self.running = False
                break
            # Lock ensures we don't read a half-written frame
            with self.lock:
                self.ret, self.frame = ret, frame

    def read(self) -> Tuple[bool, Optional[np.ndarray]]:
        """Returns the most recent frame. Non-blocking."""
        with self.lock:
            return self.ret, self.frame.copy() if self.frame is not None else None

    def release(self):
        """Safely stops the thread and releases hardware."""
        self.running = False
        self.cap.release()

class HandTracker:
    """MediaPipe Hands wrapper. Yields the first hand's landmarks or None."""
    def __init__(self):
        self.hands = mp.solutions.hands.Hands(
            static_image_mode=False,
            max_num_hands=1,
            min_detection_confidence=CONFIG["DETECTION_CONFIDENCE"],
            min_tracking_confidence=CONFIG["TRACKING_CONFIDENCE"],
            model_complexity=CONFIG["MODEL_COMPLEXITY"],
        )

    def process(self, frame_bgr: np.ndarray) -> Optional[Any]:
        # MediaPipe requires RGB; OpenCV uses BGR
        rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(rgb)
        if results.multi_hand_landmarks:
            return results.multi_hand_landmarks[0].landmark
        return None

    def close(self):
        self.hands.close()

def main():
    """
    Main Event Loop.
    """
    # 1. Boot Sequence
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(levelname)s %(message)s")
    init_environment()
    print("🚀 GESTURE3D: ONLINE")
    print("   -> Press 'ESC' to Exit")
    print(f"   -> Press '1'-'{len(MODEL_NAMES)}' to pick a model: {', '.join(MODEL_NAMES)}")
    print("   -> Press 'V' to Toggle Visuals")

    try:
        cam = ThreadedCamera(CONFIG["CAMERA_INDEX"])
    except RuntimeError as e:
        # The core just never runs; nothing else to clean up
        logging.error(f"❌ Tracking unavailable: {e}")
        return

    player = tracker = None
    window_name = "Gesture3D"
    prev_time = 0
    show_visuals = True

    try:
        # 2. Initialize Subsystems
        player = CuePlayer()
        controller = SceneController(cue_player=player)
        tracker = HandTracker()
        hud = HUD()
        cv2.namedWindow(window_name)

        while cam.running:
            # --- 1. PERCEPTION ---
            ret, frame = cam.read()
            if not ret or frame is None: continue

            # Flip horizontal for mirror effect
            frame = cv2.flip(frame, 1)
            landmarks = tracker.process(frame)

            # --- 2. CONTROL (runs every frame, hand or not) ---
            controller.process(landmarks)

            # --- 3. FEEDBACK ---
            if show_visuals:
                hud.render(frame, controller, landmarks)

            curr = time.time()
            fps = 1/(curr-prev_time) if (curr-prev_time)>0 else 0
            prev_time = curr
            hud.draw_fps(frame, fps)

            cv2.imshow(window_name, frame)

            # Input Handling
            k = cv2.waitKey(1) & 0xFF
            if k == 27: break # ESC
            elif k == ord('v'): show_visuals = not show_visuals
            elif ord('1') <= k < ord('1') + len(MODEL_NAMES):
                controller.select_model(MODEL_NAMES[k - ord('1')])

    finally:
        # Graceful Shutdown
        cam.release()
        if tracker is not None: tracker.close()
        if player is not None: player.close()
        cv2.destroyAllWindows()
        print("🔴 SYSTEM OFFLINE")

if __name__ == "__main__":
    main()
