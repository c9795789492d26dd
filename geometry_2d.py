import math
from dataclasses import dataclass
from typing import Optional, Tuple

from config import OX, OY


@dataclass(frozen=True, slots=True)
class Point2:
    x: float
    y: float
    def as_tuple(self) -> Tuple[float, float]: return (self.x, self.y)
    def __add__(self, o: "Point2") -> "Point2": return Point2(self.x + o.x, self.y + o.y)
    def __sub__(self, o: "Point2") -> "Point2": return Point2(self.x - o.x, self.y - o.y)
    def __mul__(self, k: float) -> "Point2": return Point2(self.x * k, self.y * k)
    __rmul__ = __mul__
    def __abs__(self) -> float: return math.hypot(self.x, self.y)


ORIGIN = Point2(OX, OY)


def angular_distance(a, b):
    """Distanza sull'arco più corto tra due angoli in gradi."""
    diff = abs(a - b)
    return min(diff, 360 - diff)


def polar_to_cartesian(length, angle_degrees, origin=ORIGIN):
    rad = math.radians(angle_degrees)
    # y del canvas cresce verso il basso
    return Point2(origin.x + length * math.cos(rad), origin.y - length * math.sin(rad))


def get_intersection(p1, p2, p3, p4) -> Optional[Point2]:
    """Intersezione tra le rette infinite (p1,p2) e (p3,p4), None se parallele."""
    d = (p1.x - p2.x) * (p3.y - p4.y) - (p1.y - p2.y) * (p3.x - p4.x)
    # Confronto esatto, nessuna tolleranza
    if d == 0: return None

    t = ((p1.x - p3.x) * (p3.y - p4.y) - (p1.y - p3.y) * (p3.x - p4.x)) / d
    return Point2(p1.x + t * (p2.x - p1.x), p1.y + t * (p2.y - p1.y))
