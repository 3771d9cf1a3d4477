from abc import ABC, abstractmethod


class WaitStrategy(ABC):
    """
    Abstract base for the wait step after every phase change (real-time, fast).
    """

    name: str = "base"

    def __init__(self) -> None:
        self.total_waited = 0


    @abstractmethod
    def wait(self, seconds: int) -> None:
        """
        Hold the current phase for the given number of seconds.

        :param seconds: phase duration; values <= 0 are skipped
        """
        raise NotImplementedError
