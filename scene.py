import logging
import random
from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from geometry_2d import ORIGIN, Point2, polar_to_cartesian
from perspective import BoxGeometry, build_box
from sampling import DEFAULT_BOUNDS, AngleSampler, rand_len, validate_bounds

logger = logging.getLogger(__name__)

AXES = ('A', 'B', 'C')


@dataclass(frozen=True)
class AxisState:
    angle: int
    length: int

    @property
    def tip(self) -> Point2:
        # Sempre derivata da (lunghezza, angolo)
        return polar_to_cartesian(self.length, self.angle)


@dataclass(frozen=True)
class VectorConfig:
    min_length: int = DEFAULT_BOUNDS[0]
    max_length: int = DEFAULT_BOUNDS[1]
    axes: Optional[Dict[str, AxisState]] = None
    convergence: Dict[str, float] = field(default_factory=lambda: {k: 0.0 for k in AXES})
    box_visible: bool = False


@dataclass(frozen=True)
class SceneSnapshot:
    origin: Point2
    tips: Dict[str, Point2]
    box: Optional[BoxGeometry] = None


# ==========================================
# EVENTI (ognuno ritorna una nuova config)
# ==========================================
def apply_bounds(config, raw_min, raw_max):
    lo, hi = validate_bounds(raw_min, raw_max)
    return replace(config, min_length=lo, max_length=hi)


def generate(config, rng=None, sampler=None):
    rng = rng or random.Random()
    sampler = sampler or AngleSampler(rng)

    lengths = [rand_len(rng, config.min_length, config.max_length) for _ in AXES]
    angles = sampler.sample()
    axes = {k: AxisState(angle, length) for k, angle, length in zip(AXES, angles, lengths)}

    logger.info("Generated: A=%d°, B=%d°, C=%d°", *angles)
    # Nuova generazione: il box si nasconde
    return replace(config, axes=axes, box_visible=False)


def set_length(config, axis, length):
    if config.axes is None:
        return config
    axes = dict(config.axes)
    axes[axis] = replace(axes[axis], length=int(length))
    return replace(config, axes=axes)


def set_convergence(config, axis, value):
    convergence = dict(config.convergence)
    convergence[axis] = float(value)
    return replace(config, convergence=convergence)


def show_box(config):
    return replace(config, box_visible=True)


def snapshot(config):
    if config.axes is None:
        return SceneSnapshot(ORIGIN, {})

    tips = {k: config.axes[k].tip for k in AXES}
    box = None
    if config.box_visible:
        box = build_box(ORIGIN, tips, config.convergence)
        missing = [k for k, p in box.face_corners.items() if p is None]
        if missing:
            logger.debug("Degenerate face corners: %s", ", ".join(missing))
    return SceneSnapshot(ORIGIN, tips, box)
