import time
from datetime import datetime


class Timer:
    """
    Context for run time measurement.
    started_at is the local clock time, elapsed comes from perf_counter.
    """

    def __enter__(self):
        self.started_at = datetime.now()
        self._start = time.perf_counter()
        self.elapsed = 0.0
        return self


    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self._start
