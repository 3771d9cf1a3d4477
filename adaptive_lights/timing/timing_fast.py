from typing import Callable

from adaptive_lights.io.logging_utils import logger
from adaptive_lights.timing.base_timing import WaitStrategy


class SimulatedWait(WaitStrategy):
    """
    Fast simulation: reports the duration and returns immediately.
    """

    name = "fast"

    def __init__(self, echo: Callable[[str], None] = print):
        super().__init__()
        self._echo = echo

    def wait(self, seconds: int) -> None:
        if seconds <= 0:
            return
        self.total_waited += seconds
        self._echo(f"   (simulated {seconds}s)")
        logger.debug(f"Skipped {seconds}s wait")
