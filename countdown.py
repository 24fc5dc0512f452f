"""Console countdown to the next poll, redrawn in place."""

import sys
import time


def format_time_remaining(milliseconds: int) -> str:
    minutes = milliseconds // 60000
    seconds = (milliseconds % 60000) // 1000
    return f"{minutes} minutes and {seconds} seconds"


class Countdown:
    """Owns the countdown line; restart() it for each new poll cycle."""

    def __init__(self, stream=None, clock=time.time, interactive=None):
        self.stream = stream or sys.stdout
        self._clock = clock
        # redirected output (cron, nohup) gets no redraws
        self.interactive = self.stream.isatty() if interactive is None else interactive
        self.target = None
        self._drawn = False

    @property
    def active(self) -> bool:
        return self.target is not None

    def restart(self, target: float):
        self.stop()
        self.target = target
        self.tick()

    def tick(self, now=None):
        """Redraw the remaining time; draws nothing once the target has passed."""
        if self.target is None or not self.interactive:
            return
        now = self._clock() if now is None else now
        remaining = int((self.target - now) * 1000)
        if remaining <= 0:
            return

        # \r + clear line, so the countdown overwrites itself
        self.stream.write(f"\r\033[2KNext check in: {format_time_remaining(remaining)}")
        self.stream.flush()
        self._drawn = True

    def stop(self):
        if self._drawn:
            self.stream.write("\n")
            self.stream.flush()
        self.target = None
        self._drawn = False
