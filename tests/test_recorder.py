import unittest
import sys
import os
import shutil
import cv2
import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.config import VISITED_COLOR
from maze_carver.core.grid import MazeState
from maze_carver.algo.dfs import RecursiveBacktracker
from maze_carver.viz.renderer import Renderer
from maze_carver.viz.recorder import VideoRecorder, save_snapshot, to_bgr

class TestRecorder(unittest.TestCase):
    def setUp(self):
        os.makedirs("test_out", exist_ok=True)

    def tearDown(self):
        shutil.rmtree("test_out", ignore_errors=True)

    def rendered_frame(self):
        state = MazeState()
        RecursiveBacktracker(state, seed=8).run_all()
        renderer = Renderer(state)
        frame = renderer.new_frame()
        renderer.render(frame)
        return frame

    def test_to_bgr(self):
        frame = np.zeros((2, 3, 4), dtype=np.uint8)
        frame[...] = VISITED_COLOR
        bgr = to_bgr(frame)
        self.assertEqual(bgr.shape, (2, 3, 3))
        r, g, b, _ = VISITED_COLOR
        self.assertEqual(tuple(int(c) for c in bgr[1, 2]), (b, g, r))

    def test_snapshot(self):
        frame = self.rendered_frame()
        path = "test_out/nested/maze.png"
        self.assertTrue(save_snapshot(frame, path))

        loaded = cv2.imread(path)
        self.assertEqual(loaded.shape, (frame.shape[0], frame.shape[1], 3))
        # PNG is lossless
        self.assertTrue(np.array_equal(loaded, to_bgr(frame)))

    def test_inactive_recorder(self):
        recorder = VideoRecorder(active=False)
        self.assertTrue(recorder.capture_frame(self.rendered_frame()))
        self.assertIsNone(recorder.writer)
        self.assertEqual(recorder.frame_count, 0)
        recorder.stop()

    def test_records_frames(self):
        frame = self.rendered_frame()
        path = "test_out/run.mp4"
        recorder = VideoRecorder(active=True, output_file=path)
        for _ in range(3):
            self.assertTrue(recorder.capture_frame(frame))
        self.assertEqual(recorder.frame_size, (frame.shape[1], frame.shape[0]))
        recorder.stop()

        self.assertIsNone(recorder.writer)
        self.assertEqual(recorder.frame_count, 3)
        self.assertTrue(os.path.exists(path))
        self.assertGreater(os.path.getsize(path), 0)

    def test_unwritable_output_deactivates(self):
        recorder = VideoRecorder(active=True, output_file="test_out/missing/dir/run.mp4")
        self.assertFalse(recorder.capture_frame(self.rendered_frame()))
        self.assertFalse(recorder.active)
        self.assertIsNone(recorder.writer)
        self.assertEqual(recorder.frame_count, 0)
        # Later frames are ignored
        self.assertTrue(recorder.capture_frame(self.rendered_frame()))
        recorder.stop()

    def test_explicit_output_file(self):
        recorder = VideoRecorder(active=True, output_file="test_out/run.mp4")
        self.assertEqual(recorder.output_file, "test_out/run.mp4")
        self.assertIsNone(recorder.writer)
        recorder.stop()

if __name__ == '__main__':
    unittest.main()
