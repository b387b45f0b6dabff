import logging
import os
from datetime import datetime

import cv2
import numpy as np
import pygame

logger = logging.getLogger(__name__)

def surface_to_bgr(surface: pygame.Surface) -> np.ndarray:
    # surfarray is (width, height, 3) RGB, OpenCV wants (height, width, 3) BGR
    frame = np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2))
    return cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)

class VideoRecorder:
    """
    Records the curve as it is drawn.

    A frame is only written when the segment count has moved since the last
    one, so idle frames after the curve finishes (or while the window sits
    open) add nothing. hold() repeats the finished picture at the end.
    """

    def __init__(self, active=False, output_file=None, fps=30, prefix="hilbert", hold_seconds=2.0):
        self.active = active
        self.output_file = output_file
        self.fps = fps
        self.hold_seconds = hold_seconds
        self.writer = None
        self.frame_size = None
        self.frame_count = 0
        self.last_segments = None

        if self.active and not self.output_file:
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            fname = f"{prefix}_{ts}.mp4"
            if os.path.exists("recordings"):
                self.output_file = os.path.join("recordings", fname)
            else:
                self.output_file = fname

    def capture_frame(self, surface: pygame.Surface, segments: int) -> bool:
        """Writes the frame if new segments were drawn. Returns True if written."""
        if not self.active or segments == self.last_segments:
            return False
        self.last_segments = segments
        self._write(surface)
        return True

    def hold(self, surface: pygame.Surface):
        if not self.active:
            return
        for _ in range(int(self.fps * self.hold_seconds)):
            self._write(surface)

    def _write(self, surface: pygame.Surface):
        # Writer is sized from the first frame
        if self.writer is None:
            self.frame_size = surface.get_size()
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.writer = cv2.VideoWriter(self.output_file, fourcc, self.fps, self.frame_size)
            logger.info(f"Recording started: {self.output_file}")

        self.writer.write(surface_to_bgr(surface))
        self.frame_count += 1

    def stop(self):
        if self.writer:
            self.writer.release()
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames, {self.last_segments} segments)")
            self.writer = None
