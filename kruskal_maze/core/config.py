import sys
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

# Above this many cells the depth-first solver switches to an explicit stack
DEFAULT_RECURSION_THRESHOLD = 700

# Frames reserved for the caller and the solver's own bookkeeping
RECURSION_MARGIN = 100


class ConfigurationError(ValueError):
    pass


@dataclass
class MazeConfig:
    rows: int
    cols: int
    seed: Optional[int] = None
    recursion_threshold: int = DEFAULT_RECURSION_THRESHOLD
    shuffle_cells: bool = True

    def __post_init__(self):
        for name in ("rows", "cols"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigurationError(f"seed must be an integer or None, got {self.seed!r}")

        threshold = self.recursion_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
            raise ConfigurationError(f"recursion_threshold must be a non-negative integer, got {threshold!r}")

        limit = sys.getrecursionlimit() - RECURSION_MARGIN
        if threshold > limit:
            raise ConfigurationError(
                f"recursion_threshold {threshold} exceeds the safe recursion depth {limit} "
                f"(interpreter limit {sys.getrecursionlimit()})"
            )

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
