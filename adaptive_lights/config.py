from dataclasses import dataclass, asdict
from typing import Literal, Optional


TimingMode = Literal["realtime", "fast"]


@dataclass(frozen=True)
class ControllerConfig:
    # green bounds (seconds)
    min_green: int = 5
    max_green: int = 40
    yellow_time: int = 3
    # gap where both directions show red
    all_red_time: int = 1
    cycles: int = 5

    timing_mode: TimingMode = "fast"

    # inclusive range for random densities
    density_low: int = 0
    density_high: int = 100
    # None -> seeded from the OS
    random_seed: Optional[int] = None

    first_label: str = "North-South"
    second_label: str = "East-West"
    # scenario desc
    label: Optional[str] = None

    def __post_init__(self) -> None:
        if self.min_green < 0 or self.max_green < self.min_green:
            raise ValueError(
                f"Invalid green bounds: min_green={self.min_green}, max_green={self.max_green}"
            )
        if self.yellow_time < 0 or self.all_red_time < 0:
            raise ValueError("yellow_time and all_red_time must be non-negative")
        if self.cycles < 0:
            raise ValueError(f"cycles must be non-negative, got {self.cycles}")
        if self.density_low < 0 or self.density_high < self.density_low:
            raise ValueError(
                f"Invalid density range [{self.density_low}, {self.density_high}]"
            )

    def to_dict(self) -> dict:
        return asdict(self)
