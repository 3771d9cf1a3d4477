import time
from typing import Callable, Optional

from adaptive_lights.timing.base_timing import WaitStrategy


class RealTimeWait(WaitStrategy):
    """
    Blocks the calling thread for the whole phase duration.
    """

    name = "realtime"

    def __init__(self, sleep: Optional[Callable[[float], None]] = None):
        super().__init__()
        self._sleep = sleep or time.sleep

    def wait(self, seconds: int) -> None:
        if seconds <= 0:
            return
        self._sleep(seconds)
        self.total_waited += seconds
