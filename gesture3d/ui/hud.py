"""
Gesture3D HUD.
Visualizes the classifier and the interaction physics on the camera frame.
"""

import cv2
import numpy as np
import mediapipe as mp

from gesture3d.core.types import Gesture, Transform
from gesture3d.hand_utils import palm_center, to_array

# Wireframe preview: unit cube, 8 corners, 12 edges
CUBE_VERTS = np.array([[x, y, z] for x in (-1, 1) for y in (-1, 1) for z in (-1, 1)], dtype=np.float32)
CUBE_EDGES = [(a, b) for a in range(8) for b in range(a + 1, 8)
              if np.sum(np.abs(CUBE_VERTS[a] - CUBE_VERTS[b])) == 2]

def rotation_matrix(pitch: float, yaw: float) -> np.ndarray:
    """R = Rx(pitch) @ Ry(yaw), the XYZ Euler order used by the renderer."""
    cx, sx = np.cos(pitch), np.sin(pitch)
    cy, sy = np.cos(yaw), np.sin(yaw)
    rx = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
    ry = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
    return rx @ ry

def project_transform(transform: Transform, center, size: float) -> np.ndarray:
    """Perspective-projects the cube posed by `transform` into pixel space."""
    r = transform.rotation
    pts = CUBE_VERTS @ rotation_matrix(r.x, r.y).T * transform.scale * 0.5
    pts[:, 0] += transform.position.x * 0.5
    pts[:, 1] += transform.position.y * 0.5
    z = pts[:, 2] + 4.5
    x = (pts[:, 0] / z) * size + center[0]
    # Scene y is up, image y is down
    y = (-pts[:, 1] / z) * size + center[1]
    return np.stack([x, y], axis=-1).astype(np.int32)

class HUD:
    def __init__(self):
        self.mp_hands = mp.solutions.hands

        # --- THEME COLORS (BGR), one per gesture ---
        self.GESTURE_COLORS = {
            Gesture.ZOOM_IN:   (136, 255, 0),    # Green
            Gesture.ZOOM_OUT:  (0, 136, 255),    # Orange
            Gesture.PEACE:     (170, 68, 255),   # Pink
            Gesture.OPEN_HAND: (255, 255, 0),    # Cyan
            Gesture.FIST:      (255, 68, 136),   # Purple
            Gesture.RESET:     (102, 0, 255),    # Red
            Gesture.NONE:      (255, 255, 0),
        }
        self.C_DARK = (20, 20, 20)
        self.C_WHITE = (255, 255, 255)

        # --- ANIMATION STATE ---
        self.pulse_phase = 0.0

    def _draw_glass_panel(self, img, x, y, w, h, color, alpha=0.6):
        """Draws a semi-transparent 'Glass' background."""
        # Safety check for image bounds
        if y+h > img.shape[0] or x+w > img.shape[1] or x < 0 or y < 0: return

        sub_img = img[y:y+h, x:x+w]
        rect = np.full(sub_img.shape, color, dtype=np.uint8)
        img[y:y+h, x:x+w] = cv2.addWeighted(sub_img, 1 - alpha, rect, alpha, 1.0)
        cv2.rectangle(img, (x, y), (x+w, y+h), color, 1)

    def render(self, frame, controller, landmarks):
        h, w, _ = frame.shape
        result = controller.last_result
        color = self.GESTURE_COLORS[result.dominant]
        self.pulse_phase += 0.05
        pulse = np.sin(self.pulse_phase) * 0.5 + 0.5

        # 1. SKELETON + PALM RING
        if landmarks is not None:
            coords = to_array(landmarks)
            pts = [(int(x * w), int(y * h)) for x, y, _ in coords]

            for a, b in self.mp_hands.HAND_CONNECTIONS:
                cv2.line(frame, pts[a], pts[b], self.C_DARK, 4)
                cv2.line(frame, pts[a], pts[b], color, 2)
            for i, p in enumerate(pts):
                cv2.circle(frame, p, 6 if i in (4, 8, 12, 16, 20) else 3, color, -1)

            palm = palm_center(coords)
            palm_px = (int(palm[0] * w), int(palm[1] * h))
            cv2.circle(frame, palm_px, int(35 + pulse * 10), color, 2)

            # Freeze indicator: six-spoke ice crystal
            if result.gesture.is_fist:
                for k in range(6):
                    a = k * np.pi / 3
                    tip = (int(palm_px[0] + 40 * np.cos(a)), int(palm_px[1] + 40 * np.sin(a)))
                    cv2.line(frame, palm_px, tip, color, 3)

        # 2. TRANSFORM PREVIEW (bottom right)
        preview_c = (w - 110, h - 110)
        self._draw_glass_panel(frame, w - 210, h - 210, 200, 200, self.C_DARK, 0.5)
        t = result.transform
        pts2d = [tuple(int(v) for v in p) for p in project_transform(t, preview_c, 220)]
        edge_color = self.GESTURE_COLORS[Gesture.FIST] if t.frozen else self.C_WHITE
        for a, b in CUBE_EDGES:
            cv2.line(frame, pts2d[a], pts2d[b], edge_color, 1)

        # 3. STATUS BAR
        self._draw_glass_panel(frame, 20, 20, 400, 110, self.C_DARK, 0.4)
        label = result.dominant.value if result.dominant is not Gesture.NONE else "--"
        cv2.putText(frame, label, (35, 55), cv2.FONT_HERSHEY_SIMPLEX, 0.8, color, 2)

        mode = "FROZEN" if t.frozen else "ACTIVE"
        cv2.putText(frame, f"MODEL: {controller.model.upper()} // {mode}", (35, 80),
                    cv2.FONT_HERSHEY_PLAIN, 1.1, self.C_WHITE, 1)
        cv2.putText(frame, f"ROT ({t.rotation.x:+.2f}, {t.rotation.y:+.2f})  "
                           f"POS ({t.position.x:+.2f}, {t.position.y:+.2f})  "
                           f"SCL {t.scale:.2f}", (35, 110),
                    cv2.FONT_HERSHEY_PLAIN, 0.9, self.C_WHITE, 1)

    def draw_fps(self, frame, fps):
        cv2.putText(frame, f"{int(fps)} FPS", (frame.shape[1]-100, 40),
                    cv2.FONT_HERSHEY_PLAIN, 1.2, (0, 255, 0), 1)
