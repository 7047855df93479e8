import unittest
from unittest import mock

from gesture3d import main as app

class FakeCamera:
    def __init__(self, src=0):
        self.running = True
        self.released = False

    def release(self):
        self.running = False
        self.released = True

class TestStartup(unittest.TestCase):
    def test_subsystem_failure_releases_camera(self):
        cams = []

        def open_camera(src):
            cams.append(FakeCamera(src))
            return cams[-1]

        with mock.patch.object(app, "ThreadedCamera", side_effect=open_camera), \
             mock.patch.object(app, "init_environment"), \
             mock.patch.object(app, "CuePlayer", side_effect=OSError("audio backend exploded")), \
             mock.patch.object(app.cv2, "destroyAllWindows"):
            with self.assertRaises(OSError):
                app.main()

        self.assertEqual(len(cams), 1)
        self.assertTrue(cams[0].released)

    def test_camera_failure_returns_quietly(self):
        with mock.patch.object(app, "ThreadedCamera", side_effect=RuntimeError("Camera 0 could not be opened")), \
             mock.patch.object(app, "init_environment"), \
             mock.patch.object(app, "CuePlayer") as player:
            self.assertIsNone(app.main())
        player.assert_not_called()

if __name__ == '__main__':
    unittest.main()
