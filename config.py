# config.py
from dataclasses import dataclass

# -----------------------------
# Signal Timing Defaults
# -----------------------------
MIN_GREEN_TIME = 5     # Shortest green any direction receives (seconds).
MAX_GREEN_TIME = 40    # Longest green any direction receives (seconds).
YELLOW_TIME = 3
ALL_RED_TIME = 1       # Both directions red between phases.

# -----------------------------
# General Simulation Settings
# -----------------------------
DEFAULT_CYCLES = 5
REALTIME = False       # Sleep for real between transitions.
DIRECTION_NAMES = ("North-South", "East-West")

# -----------------------------
# Serving Order
# -----------------------------
# "strict" always gives the first direction green first.
# "alternate" swaps which direction opens the cycle every other cycle.
STRICT_ORDER = "strict"
ALTERNATING_ORDER = "alternate"
SERVING_ORDERS = (STRICT_ORDER, ALTERNATING_ORDER)
SERVING_ORDER = STRICT_ORDER

# -----------------------------
# Random Density Settings
# -----------------------------
DENSITY_LOW = 0
DENSITY_HIGH = 100
RANDOM_SEED = None     # None reseeds from the wall clock.

# -----------------------------
# Output Files
# -----------------------------
EVENTS_CSV = "signal_events.csv"
TIMELINE_FILE = "signal_timeline.png"


class ConfigError(ValueError):
    pass


def _check_whole(name, value, unit):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be a whole number of {unit}, got {value!r}")
    if value < 0:
        raise ConfigError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class ControllerConfig:
    """
    Timing and run settings for one intersection controller.

    Built once at startup and handed to the controller; it never changes
    afterwards.
    """

    min_green: int = MIN_GREEN_TIME
    max_green: int = MAX_GREEN_TIME
    yellow_time: int = YELLOW_TIME
    all_red_time: int = ALL_RED_TIME
    cycles: int = DEFAULT_CYCLES
    realtime: bool = REALTIME
    serving_order: str = SERVING_ORDER

    def __post_init__(self):
        for name in ("min_green", "max_green", "yellow_time", "all_red_time"):
            _check_whole(name, getattr(self, name), "seconds")
        _check_whole("cycles", self.cycles, "cycles")
        if self.min_green > self.max_green:
            raise ConfigError(
                f"min_green ({self.min_green}) cannot exceed max_green ({self.max_green})"
            )
        if self.serving_order not in SERVING_ORDERS:
            raise ConfigError(
                f"Unknown serving order {self.serving_order!r}; expected one of {SERVING_ORDERS}"
            )
