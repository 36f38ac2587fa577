"""Path elements: straight lines and cubic Bézier curves.

A path element is an atomic piece of a path. Only two kinds are supported:
`LineTo` and `BezierCurveTo`. Moves, quadratic Béziers and arcs are left out
on purpose.

Path elements do not store a start point: it is implicitly the origin of the
element's local coordinate system. Chaining elements and translating them
into a shape's frame is the caller's job.

Envelope
- `envelope(direction)` returns how far along `direction` one can travel to
  place a perpendicular line that just touches the element, measured in units
  of |direction|. Applied to +x/-x/+y/-y it yields the tight bbox; applied to
  any other direction it extends the bbox idea to every direction.
- Curves are never sampled: the extrema of the projected cubic come from the
  roots of its derivative (see `solve_quadratic`).

Zero-length directions are a precondition violation. By default the IEEE-754
result (inf/nan) is returned; with `strict_direction` enabled in settings a
typed error is raised instead.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Union, assert_never, final

from envolvente.core.settings import get_settings
from envolvente.geom.point import ZERO, Point
from envolvente.utils.errors import EnvolventeValidationError

log = logging.getLogger(__name__)

# Evita spameo: la dirección nula se avisa una sola vez por proceso.
_ZERO_DIRECTION_WARNED = False


def _normalize(value: float, direction: Point) -> float:
    """Divide `value` by |direction| with IEEE-754 semantics for |direction| == 0."""
    global _ZERO_DIRECTION_WARNED
    length = direction.magnitude
    if length != 0.0:
        return value / length

    if get_settings().strict_direction:
        raise EnvolventeValidationError(f"envelope: dirección de longitud cero {direction!r}")
    if not _ZERO_DIRECTION_WARNED:
        log.warning("envelope con dirección de longitud cero %r; el resultado es inf/nan", direction)
        _ZERO_DIRECTION_WARNED = True

    # Python lanza ZeroDivisionError; reproducimos x / +0.0 de IEEE-754.
    if value > 0.0:
        return math.inf
    if value < 0.0:
        return -math.inf
    return math.nan


def solve_quadratic(a: float, b: float, c: float) -> List[float]:
    """Real roots of a*t^2 + b*t + c = 0.

    Case split:
    - a == b == c == 0: every t is a root; returns [0.0] as representative.
    - a == b == 0, c != 0: no solution.
    - a == 0: linear, [-c/b].
    - discriminant < 0: no real roots.
    - b == 0: symmetric pair [sqrt(-c/a), -sqrt(-c/a)].
    - discriminant == 0: repeated root [-b/(2a)].
    - otherwise: [q/a, c/q] with q = -(b + sign(b)*sqrt(d)) / 2, which avoids
      the cancellation of the textbook (-b ± sqrt(d)) / 2a.

    Comparisons against zero are exact. Roots are not sorted.
    """
    if a == 0.0:
        if b == 0.0:
            return [0.0] if c == 0.0 else []
        return [-c / b]

    d = (b * b) - (4.0 * a * c)
    if d < 0.0:
        return []

    if b == 0.0:
        r2 = -c / a
        if r2 < 0.0:
            # 4*a*c hizo underflow a 0 pero el signo real de -c/a es negativo.
            return []
        r = math.sqrt(r2)
        return [r, -r]

    if d == 0.0:
        return [-b / (2.0 * a)]

    q = -0.5 * (b + math.copysign(math.sqrt(d), b))
    return [q / a, c / q]


@final
@dataclass(frozen=True)
class LineTo:
    """Straight line from the local origin to `end`."""

    end: Point

    def envelope(self, direction: Point) -> float:
        # Una línea es convexa: uno de sus dos extremos define la envolvente.
        return _normalize(max(ZERO.dot(direction), self.end.dot(direction)), direction)


@final
@dataclass(frozen=True)
class BezierCurveTo:
    """Cubic Bézier from the local origin, through controls `c1`, `c2`, to `end`."""

    c1: Point
    c2: Point
    end: Point

    def point_at(self, t: float) -> Point:
        """B(t) = 3(1-t)^2 t c1 + 3(1-t) t^2 c2 + t^3 end (start term is zero)."""
        mt = 1.0 - t
        return (self.c1 * (3.0 * mt * mt * t)) + (self.c2 * (3.0 * mt * t * t)) + (self.end * (t * t * t))

    def derivative_coefficients(self, direction: Point) -> tuple[float, float, float]:
        """(a, b, c) of d/dt dot(B(t), direction) = a*t^2 + b*t + c."""
        a = (((self.c1 * 3) - (self.c2 * 3) + self.end) * 3).dot(direction)
        b = (((self.c1 * -2) + self.c2) * 6).dot(direction)
        c = (self.c1 * 3).dot(direction)
        return a, b, c

    def critical_parameters(self, direction: Point) -> List[float]:
        """Interior t in (0, 1) where the projection onto `direction` is stationary.

        t = 0 and t = 1 are excluded: the endpoints are accounted for separately.
        """
        a, b, c = self.derivative_coefficients(direction)
        if a == 0.0 and b == 0.0 and c == 0.0:
            # Proyección constante: solve_quadratic devuelve [0.0] y el filtro lo descarta.
            log.debug("Derivada idénticamente nula para %r en dirección %r", self, direction)
        return [t for t in solve_quadratic(a, b, c) if 0.0 < t < 1.0]

    def envelope(self, direction: Point) -> float:
        projections = [ZERO.dot(direction), self.end.dot(direction)]
        projections.extend(self.point_at(t).dot(direction) for t in self.critical_parameters(direction))
        return _normalize(max(projections), direction)


PathElement = Union[LineTo, BezierCurveTo]


def envelope(segment: PathElement, direction: Point) -> float:
    """Envelope of `segment` along `direction` (exhaustive over PathElement)."""
    if isinstance(segment, LineTo):
        return segment.envelope(direction)
    if isinstance(segment, BezierCurveTo):
        return segment.envelope(direction)
    assert_never(segment)
