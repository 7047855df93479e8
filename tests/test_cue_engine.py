import unittest

from gesture3d.control.cue_engine import CueEngine
from gesture3d.core.types import Cue, GestureState

class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now

DEBOUNCE = {"ZOOM": 0.5, "ROTATE": 1.0, "MOVE": 1.0, "FREEZE": 0.5, "RESET": 0.5, "SELECT": 0.5}

class TestCueEngine(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.engine = CueEngine(clock=self.clock, debounce=DEBOUNCE)

    def test_pose_held_on_first_frame_fires(self):
        """The detector starts from idle, so an already posed hand cues once."""
        self.assertEqual(self.engine.update(GestureState(is_fist=True)), [Cue.FREEZE])
        self.assertEqual(self.engine.update(GestureState(is_fist=True)), [])

    def test_idle_first_frame_is_silent(self):
        self.assertEqual(self.engine.update(GestureState.idle()), [])

    def test_rising_edge_fires_once(self):
        self.engine.update(GestureState.idle())
        self.assertEqual(self.engine.update(GestureState(is_fist=True)), [Cue.FREEZE])
        self.clock.now += 5
        self.assertEqual(self.engine.update(GestureState(is_fist=True)), [])

    def test_debounce_window(self):
        idle, rotate = GestureState.idle(), GestureState(is_open_hand=True)
        self.engine.update(idle)
        self.assertEqual(self.engine.update(rotate), [Cue.ROTATE])

        self.clock.now += 0.4
        self.engine.update(idle)
        self.assertEqual(self.engine.update(rotate), [])

        self.clock.now += 0.7
        self.engine.update(idle)
        self.assertEqual(self.engine.update(rotate), [Cue.ROTATE])

    def test_zoom_directions_share_a_cue(self):
        self.engine.update(GestureState.idle())
        self.assertEqual(self.engine.update(GestureState(is_zoom_in=True)), [Cue.ZOOM])
        self.clock.now += 0.6
        self.assertEqual(self.engine.update(GestureState(is_zoom_out=True)), [Cue.ZOOM])

    def test_simultaneous_edges(self):
        self.engine.update(GestureState.idle())
        fired = self.engine.update(GestureState(is_peace=True, is_reset=True))
        self.assertEqual(fired, [Cue.MOVE, Cue.RESET])

    def test_manual_trigger(self):
        self.assertTrue(self.engine.trigger(Cue.SELECT))
        self.assertFalse(self.engine.trigger(Cue.SELECT))
        self.clock.now += 0.5
        self.assertTrue(self.engine.trigger(Cue.SELECT))

if __name__ == '__main__':
    unittest.main()
