import unittest

from gesture3d.config import CONFIG
from gesture3d.control.controller import MODEL_NAMES, SceneController
from gesture3d.core.interfaces import ICuePlayer
from gesture3d.core.types import Cue, Gesture, Point2D

import hand_fixtures as hands

class RecordingPlayer(ICuePlayer):
    def __init__(self):
        self.played = []

    def play(self, cue): self.played.append(cue)
    def close(self): pass

class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

class TestSceneController(unittest.TestCase):
    def setUp(self):
        CONFIG["FINGER_PIP_RATIO"] = 0.95
        CONFIG["THUMB_EXTENSION_THRESHOLD"] = 0.12
        CONFIG["ROTATION_GAIN"] = 3.0
        self.player = RecordingPlayer()
        self.clock = FakeClock()
        self.ctrl = SceneController(model="cube", cue_player=self.player, clock=self.clock)

    def test_catalogue(self):
        self.assertEqual(MODEL_NAMES, ["torus", "sphere", "cube", "icosahedron", "car", "chair", "solar"])
        self.assertEqual(SceneController(clock=self.clock).model, CONFIG["DEFAULT_MODEL"])

    def test_open_hand_scenario(self):
        """Two open-hand frames rotate the target; current moves 15% of the way."""
        self.ctrl.process(hands.open_hand(palm=(0.40, 0.40)))
        result = self.ctrl.process(hands.open_hand(palm=(0.45, 0.42)))

        self.assertEqual(result.dominant, Gesture.OPEN_HAND)
        target = self.ctrl.interaction.state.target_rotation
        self.assertAlmostEqual(target.x, 0.06)
        self.assertAlmostEqual(target.y, -0.15)
        self.assertAlmostEqual(result.transform.rotation.x, 0.06 * 0.15)
        self.assertAlmostEqual(result.transform.rotation.y, -0.15 * 0.15)

    def test_fist_freeze_then_release(self):
        self.ctrl.process(None)
        r = self.ctrl.process(hands.fist())
        self.assertTrue(r.transform.frozen)
        self.assertEqual(r.cues, [Cue.FREEZE])

        # No hand: still frozen
        self.assertTrue(self.ctrl.process(None).transform.frozen)

        self.clock.now += 1
        r = self.ctrl.process(hands.zoom_in())
        self.assertFalse(r.transform.frozen)
        self.assertEqual(r.cues, [Cue.ZOOM])
        self.assertEqual(self.player.played, [Cue.FREEZE, Cue.ZOOM])

    def test_select_model_starts_fresh(self):
        for _ in range(5):
            self.ctrl.process(hands.zoom_in())
        self.assertGreater(self.ctrl.interaction.state.target_scale, 1.0)

        self.ctrl.select_model("solar")
        self.assertEqual(self.ctrl.model, "solar")
        self.assertEqual(self.ctrl.interaction.state.target_scale, 1.0)
        self.assertEqual(self.ctrl.interaction.config.scale_min, 0.2)
        self.assertEqual(self.ctrl.interaction.config.rest_rotation, Point2D(0.2, 0.0))
        self.assertEqual(self.player.played[-1], Cue.SELECT)

    def test_reselect_keeps_pose(self):
        for _ in range(5):
            self.ctrl.process(hands.zoom_in())
        machine = self.ctrl.interaction
        self.ctrl.select_model("cube")
        self.assertIs(self.ctrl.interaction, machine)
        self.assertEqual(self.player.played[-1], Cue.SELECT)

    def test_unknown_model(self):
        with self.assertRaises(KeyError):
            self.ctrl.select_model("teapot")
        self.assertEqual(self.ctrl.model, "cube")

    def test_runs_without_player(self):
        ctrl = SceneController(model="torus", clock=self.clock)
        ctrl.process(hands.open_hand())
        ctrl.select_model("car")
        self.assertEqual(ctrl.transform.scale, 1.0)

if __name__ == '__main__':
    unittest.main()
