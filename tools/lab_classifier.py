import cv2
import mediapipe as mp
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from gesture3d.config import CONFIG
from gesture3d.gesture_engine import GestureClassifier, dominant_gesture, finger_states
from gesture3d.hand_utils import to_array

def run_lab():
    print("🖐 CLASSIFIER LAB (Layer 2)")
    print("   -> Tune the finger extension rules live.")
    print("   -> Green = extended | Red = curled. Press 'S' to print config.")

    cv2.namedWindow("Classifier Lab", cv2.WINDOW_NORMAL)
    cv2.resizeWindow("Classifier Lab", 1000, 700)

    def nothing(x): pass

    # Sliders
    # Thumb threshold: 0.00 to 0.30 (normalized frame units)
    cv2.createTrackbar("THUMB (x100)", "Classifier Lab", int(CONFIG["THUMB_EXTENSION_THRESHOLD"]*100), 30, nothing)
    # PIP ratio: 0.50 to 1.20
    cv2.createTrackbar("PIP RATIO (%)", "Classifier Lab", int(CONFIG["FINGER_PIP_RATIO"]*100), 120, nothing)

    cam = cv2.VideoCapture(CONFIG["CAMERA_INDEX"])
    hands = mp.solutions.hands.Hands(max_num_hands=1, model_complexity=CONFIG["MODEL_COMPLEXITY"])
    mp_hands = mp.solutions.hands
    classifier = GestureClassifier()

    while True:
        # Live Updates (the classifier reads CONFIG every frame)
        thumb_val = cv2.getTrackbarPos("THUMB (x100)", "Classifier Lab") / 100.0
        ratio_val = max(cv2.getTrackbarPos("PIP RATIO (%)", "Classifier Lab"), 50) / 100.0
        CONFIG["THUMB_EXTENSION_THRESHOLD"] = thumb_val
        CONFIG["FINGER_PIP_RATIO"] = ratio_val

        ret, frame = cam.read()
        if not ret: break
        frame = cv2.flip(frame, 1)
        h, w, _ = frame.shape
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        results = hands.process(rgb)

        lms = results.multi_hand_landmarks[0].landmark if results.multi_hand_landmarks else None
        gesture = classifier.process(lms)

        if lms is not None:
            coords = to_array(lms)
            pts = [(int(x * w), int(y * h)) for x, y, _ in coords]
            for a, b in mp_hands.HAND_CONNECTIONS:
                cv2.line(frame, pts[a], pts[b], (80, 80, 80), 1)

            # Per-finger verdicts
            states = finger_states(coords)
            tips = {"thumb": 4, "index": 8, "middle": 12, "ring": 16, "pinky": 20}
            for row, (name, extended) in enumerate(states.items()):
                col = (0, 255, 0) if extended else (0, 0, 255)
                cv2.circle(frame, pts[tips[name]], 8, col, -1)
                cv2.putText(frame, f"{name.upper()}: {'EXT' if extended else 'CURL'}",
                            (w - 200, 40 + row * 25), 1, 1.2, col, 1)

        # HUD
        active = [g.name for g, on in gesture.flags().items() if on]
        cv2.rectangle(frame, (20, h-120), (500, h-20), (0,0,0), -1)
        cv2.putText(frame, f"GESTURE: {dominant_gesture(gesture).value}  {active}", (30, h-90), 1, 1.2, (255,255,0), 1)
        cv2.putText(frame, f"THUMB THRESH: {thumb_val:.2f}", (30, h-60), 1, 1, (255,255,255), 1)
        cv2.putText(frame, f"PIP RATIO: {ratio_val:.2f}", (30, h-30), 1, 1, (255,255,255), 1)

        cv2.imshow("Classifier Lab", frame)
        k = cv2.waitKey(1)
        if k == 27: break
        if k == ord('s'):
            print("\n" + "="*40)
            print("💾 CONFIG VALUES (GESTURE RULES):")
            print(f'    "FINGER_PIP_RATIO": {ratio_val:.2f},')
            print(f'    "THUMB_EXTENSION_THRESHOLD": {thumb_val:.2f},')
            print("="*40 + "\n")

    cam.release()
    hands.close()
    cv2.destroyAllWindows()

if __name__ == "__main__":
    run_lab()
