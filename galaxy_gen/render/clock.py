"""Animation clock."""

import time


class Clock:
    """Elapsed wall-clock time since start, in seconds."""

    def __init__(self):
        self.start()

    def start(self):
        self._start = time.perf_counter()

    def get_elapsed_time(self) -> float:
        return time.perf_counter() - self._start
