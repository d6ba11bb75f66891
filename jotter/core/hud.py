import time

import cv2

from jotter import config


class HUDMessage:
    """Short fading banner in the bottom right corner, e.g. "Circle"."""

    def __init__(self, duration=config.HUD_DURATION):
        self.active_msg = None
        self.start_time = 0
        self.duration = duration

    def show(self, msg):
        self.active_msg = msg
        self.start_time = time.time()

    def draw(self, frame, now=None):
        """Blend the message onto `frame` in place and return it."""
        if self.active_msg is None:
            return frame

        elapsed = (time.time() if now is None else now) - self.start_time
        if elapsed > self.duration:
            self.active_msg = None
            return frame

        alpha = max(0.0, min(1.0, 1 - elapsed / self.duration))

        overlay = frame.copy()
        font = cv2.FONT_HERSHEY_SIMPLEX
        scale, thickness = 0.8, 2
        (text_w, text_h), _ = cv2.getTextSize(self.active_msg, font, scale, thickness)

        padding = 12
        H, W = frame.shape[:2]
        x2, y2 = W - 20, H - 20
        x1, y1 = x2 - text_w - padding * 2, y2 - text_h - padding * 2

        cv2.rectangle(overlay, (x1, y1), (x2, y2), (60, 60, 60), -1)
        cv2.putText(overlay, self.active_msg, (x1 + padding, y2 - padding), font, scale,
                    (255, 255, 255), thickness, cv2.LINE_AA)

        cv2.addWeighted(overlay, alpha, frame, 1 - alpha, 0, frame)
        return frame
