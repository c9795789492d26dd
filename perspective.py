from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from config import CONVERGENCE_EPSILON
from geometry_2d import Point2, get_intersection


@dataclass(frozen=True)
class Parallel:
    direction: Point2  # spostamento, non un punto assoluto
    def target(self, start): return start + self.direction


@dataclass(frozen=True)
class Converging:
    vanishing_point: Point2
    def target(self, start): return self.vanishing_point


PerspectiveInfo = Union[Parallel, Converging]
Edge = Tuple[Point2, Point2]


def is_parallel(convergence):
    return convergence <= CONVERGENCE_EPSILON


def get_perspective_info(origin, tip, convergence) -> Optional[PerspectiveInfo]:
    delta = tip - origin
    if is_parallel(convergence):
        return Parallel(delta)

    length = abs(delta)
    if length == 0: return None  # asse degenere, nessun punto di fuga

    dist_to_vp = length / convergence
    # Il punto di fuga sta sulla semiretta origine -> punta, misurato dall'origine
    return Converging(origin + delta * (dist_to_vp / length))


def construct_corner(s1, info1, s2, info2) -> Optional[Point2]:
    """Chiude una faccia: il raggio da s1 usa info2, quello da s2 usa info1."""
    if s1 is None or s2 is None or info1 is None or info2 is None:
        return None
    return get_intersection(s1, info2.target(s1), s2, info1.target(s2))


@dataclass(frozen=True)
class BoxGeometry:
    face_corners: Dict[str, Optional[Point2]]
    far_corner: Optional[Point2] = None
    visible_edges: List[Edge] = field(default_factory=list)
    hidden_edges: List[Edge] = field(default_factory=list)


def assemble_box(origin, tip_a, tip_b, tip_c, info_a, info_b, info_c):
    # --- Angoli delle facce (visibili) ---
    p_ab = construct_corner(tip_a, info_a, tip_b, info_b)
    p_ac = construct_corner(tip_a, info_a, tip_c, info_c)
    p_bc = construct_corner(tip_b, info_b, tip_c, info_c)

    # --- Angolo lontano ---
    # Raggio da P_AB lungo C, raggio da P_BC lungo A
    p_abc = construct_corner(p_ab, info_a, p_bc, info_c)

    visible = []
    for tip, corner in ((tip_a, p_ab), (tip_a, p_ac), (tip_b, p_ab),
                        (tip_b, p_bc), (tip_c, p_ac), (tip_c, p_bc)):
        if corner is not None: visible.append((tip, corner))

    hidden = []
    if p_abc is not None:
        for corner in (p_ab, p_ac, p_bc):
            if corner is not None: hidden.append((corner, p_abc))

    return BoxGeometry(
        face_corners={'AB': p_ab, 'AC': p_ac, 'BC': p_bc},
        far_corner=p_abc,
        visible_edges=visible,
        hidden_edges=hidden,
    )


def build_box(origin, tips, convergences):
    """Proietta i tre assi e assembla il box. tips/convergences indicizzati 'A','B','C'."""
    infos = {k: get_perspective_info(origin, tips[k], convergences[k]) for k in 'ABC'}
    return assemble_box(origin, tips['A'], tips['B'], tips['C'],
                        infos['A'], infos['B'], infos['C'])
