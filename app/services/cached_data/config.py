"""Controller configuration - injected, never read from globals."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from settings import CACHE_MAX_AGE, FETCH_THROTTLE


@dataclass(frozen=True)
class ControllerConfig:
    """Timing knobs shared by cached-data controllers.

    All durations are in seconds; `clock` returns epoch seconds and is used
    both for cache ages and for the fetch throttle.
    """

    max_age: float = CACHE_MAX_AGE
    throttle: float = FETCH_THROTTLE
    clock: Callable[[], float] = field(default=time.time)
