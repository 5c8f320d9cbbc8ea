"""
frame_driver.py: Host-agnostic animation-frame scheduling.

Games never loop on their own. Each frame callback decides whether to ask
for another frame; a game that stops asking simply stops running until
something requests a frame again.
"""

from typing import Callable, List

FrameCallback = Callable[[float], None]


class FrameScheduler:
    """
    Queue of callbacks waiting for the next frame. The host calls run_frame
    once per display refresh with a millisecond timestamp.
    """

    def __init__(self):
        self._queue: List[FrameCallback] = []

    @property
    def pending(self) -> bool:
        return bool(self._queue)

    def request_frame(self, callback: FrameCallback):
        """Schedules callback for the next frame."""
        self._queue.append(callback)

    def run_frame(self, timestamp: float) -> int:
        """
        Runs the callbacks queued before this call. Callbacks requested while
        running land in the following frame. Returns how many ran.
        """
        due, self._queue = self._queue, []
        for callback in due:
            callback(timestamp)
        return len(due)


class FrameThrottle:
    """
    Lets work through at most once per frame_duration milliseconds.
    The baseline advances in whole frame steps so a host polling faster than
    the target rate averages out at the target rate instead of drifting below it.
    """

    def __init__(self, frame_duration: float):
        self.frame_duration = frame_duration
        self.last_frame_time = 0.0

    def ready(self, timestamp: float) -> bool:
        if timestamp < self.last_frame_time + self.frame_duration:
            return False
        self.last_frame_time += self.frame_duration
        # More than a frame behind (first frame, stalled host): resync, no burst
        if timestamp - self.last_frame_time >= self.frame_duration:
            self.last_frame_time = timestamp
        return True
