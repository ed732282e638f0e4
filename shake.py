# shake.py
import math
import time
import logging
import threading

logger = logging.getLogger(__name__)

GRAVITY_EARTH = 9.80665


class InvalidReading(ValueError):
    pass


class ShakeDetector:
    """Turns raw accelerometer readings (m/s^2) into debounced shake events.

    A reading counts as a shake when its g-force reaches `threshold`, and
    shakes closer together than `slop_time` seconds are collapsed into one.
    `on_shake`, when given, is called once per accepted shake.
    """

    def __init__(self, on_shake=None, clock=time.monotonic, threshold=2.7, slop_time=0.5):
        self.on_shake = on_shake
        self.clock = clock
        self.threshold = threshold
        self.slop_time = slop_time
        self._last_shake = None
        self._lock = threading.Lock()

    @staticmethod
    def _axis(value):
        if isinstance(value, bool):
            raise InvalidReading("axis values must be numbers")
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise InvalidReading(f"not a number: {value!r}") from None
        if not math.isfinite(value):
            raise InvalidReading(f"not a finite number: {value!r}")
        return value

    def g_force(self, x, y, z):
        gx, gy, gz = (self._axis(v) / GRAVITY_EARTH for v in (x, y, z))
        return math.sqrt(gx * gx + gy * gy + gz * gz)

    def reading(self, x, y, z):
        if self.g_force(x, y, z) < self.threshold:
            return False
        with self._lock:
            now = self.clock()
            if self._last_shake is not None and now - self._last_shake < self.slop_time:
                return False
            self._last_shake = now
        logger.debug("shake detected at %.3f", now)
        if self.on_shake is not None:
            self.on_shake()
        return True
