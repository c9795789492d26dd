import logging
import random

from config import (DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH, FALLBACK_LENGTH,
                    HARD_MAX_LENGTH, HARD_MIN_LENGTH, MAX_SAMPLING_ATTEMPTS,
                    MIN_SEPARATION)
from geometry_2d import angular_distance

logger = logging.getLogger(__name__)


class InfeasibleConstraintError(RuntimeError):
    pass


class AngleSampler:
    def __init__(self, rng=None, min_separation=MIN_SEPARATION, max_attempts=MAX_SAMPLING_ATTEMPTS):
        self.rng = rng or random.Random()
        self.min_separation = min_separation
        self.max_attempts = max_attempts

    def is_valid(self, angles):
        a, b, c = angles
        return (angular_distance(a, b) >= self.min_separation and
                angular_distance(a, c) >= self.min_separation and
                angular_distance(b, c) >= self.min_separation)

    def sample(self):
        # Rejection sampling: si ricampionano tutti e tre gli angoli
        for attempt in range(1, self.max_attempts + 1):
            angles = tuple(self.rng.randrange(360) for _ in range(3))
            if self.is_valid(angles):
                logger.debug("Angles accepted after %d attempts", attempt)
                return angles

        logger.error("No angle triple with separation >= %s after %d attempts",
                     self.min_separation, self.max_attempts)
        raise InfeasibleConstraintError(
            f"no angles with separation >= {self.min_separation} in {self.max_attempts} attempts")


def rand_len(rng, min_len, max_len):
    span = max_len - min_len + 1
    if span <= 0:
        logger.error("Min length %s >= max length %s, using %s", min_len, max_len, FALLBACK_LENGTH)
        return FALLBACK_LENGTH
    return rng.randrange(span) + min_len


def _parse_int(raw):
    try:
        return int(str(raw).strip())
    except ValueError:
        pass
    try:
        return int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return None


def validate_bounds(raw_min, raw_max):
    """Ritorna (min, max) validi per la generazione, senza mai sollevare errori."""
    lo = _parse_int(raw_min)
    hi = _parse_int(raw_max)

    if lo is None or lo < HARD_MIN_LENGTH: lo = HARD_MIN_LENGTH
    if hi is None or hi > HARD_MAX_LENGTH: hi = HARD_MAX_LENGTH

    # min < max obbligatorio
    if lo >= hi:
        hi = lo + 1
        if hi > HARD_MAX_LENGTH:
            hi = HARD_MAX_LENGTH
            lo = HARD_MAX_LENGTH - 1

    if (lo, hi) != (_parse_int(raw_min), _parse_int(raw_max)):
        logger.info("Length bounds corrected to [%d, %d]", lo, hi)
    return lo, hi


DEFAULT_BOUNDS = (DEFAULT_MIN_LENGTH, DEFAULT_MAX_LENGTH)
