import os
import logging
import cv2
import numpy as np
from datetime import datetime
from maze_carver.core.config import RECORDING_DIR

logger = logging.getLogger(__name__)


def to_bgr(frame: np.ndarray) -> np.ndarray:
    # Frames are (height, width, 4) RGBA, OpenCV wants BGR
    return cv2.cvtColor(frame, cv2.COLOR_RGBA2BGR)


def save_snapshot(frame: np.ndarray, path: str) -> bool:
    """Writes one RGBA frame as an image file. The format follows the extension."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    ok = cv2.imwrite(path, to_bgr(frame))
    if ok:
        logger.info(f"Snapshot saved: {path}")
    else:
        logger.error(f"Could not write snapshot to {path}")
    return ok


class VideoRecorder:
    def __init__(self, active=False, output_file=None, fps=30):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

        if self.active and not self.output_file:
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            fname = f"maze_gen_{ts}.mp4"
            os.makedirs(RECORDING_DIR, exist_ok=True)
            self.output_file = os.path.join(RECORDING_DIR, fname)

    def capture_frame(self, frame: np.ndarray) -> bool:
        """
        Appends an RGBA frame to the video. The writer is opened on the first frame.
        Returns False (and deactivates) if OpenCV cannot open the output.
        """
        if not self.active:
            return True

        height, width = frame.shape[:2]

        if self.writer is None:
            self.frame_size = (width, height)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            if not self.writer.isOpened():
                logger.error(f"Could not open video writer for {self.output_file}")
                self.writer = None
                self.active = False
                return False
            logger.info(f"Recording started: {self.output_file}")

        self.writer.write(to_bgr(frame))
        self.frame_count += 1
        return True

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
            self.writer = None
