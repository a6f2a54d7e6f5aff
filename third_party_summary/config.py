from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

PASS_THRESHOLD_IN_MS = 250
BLOCKING_TIME_ALLOWANCE_MS = 50
MIN_TRANSFER_SIZE_FOR_SUBITEMS = 4096
MAX_SUBITEMS = 100

THROTTLING_METHODS = ("simulate", "devtools", "provided")

MalformedPolicy = Literal["raise", "skip"]


@dataclass
class AuditSettings:
    throttling_method: str = "simulate"
    cpu_slowdown_multiplier: float = 4.0
    pass_threshold_ms: float = PASS_THRESHOLD_IN_MS
    on_malformed: MalformedPolicy = "raise"

    def __post_init__(self) -> None:
        if self.throttling_method not in THROTTLING_METHODS:
            raise ValueError(f"Unknown throttling method: {self.throttling_method!r}")
        if self.cpu_slowdown_multiplier <= 0:
            raise ValueError("cpu_slowdown_multiplier must be positive")
        if self.on_malformed not in ("raise", "skip"):
            raise ValueError(f"Unknown malformed-URL policy: {self.on_malformed!r}")

    @property
    def cpu_multiplier(self) -> float:
        # Observed task times are only scaled when throttling is simulated.
        if self.throttling_method == "simulate":
            return float(self.cpu_slowdown_multiplier)
        return 1.0
