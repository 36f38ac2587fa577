"""2D point / vector value type.

A Point doubles as a vector: segments store their end and control points as
Points, and envelope queries take a direction as a Point.

All operations are pure and total over floats. NaN/Inf are not validated;
they propagate following IEEE-754 rules.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from envolvente.utils.errors import EnvolventeValidationError


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __mul__(self, s: float) -> "Point":
        return Point(s * self.x, s * self.y)

    __rmul__ = __mul__

    def __add__(self, p: "Point") -> "Point":
        return Point(self.x + p.x, self.y + p.y)

    def __sub__(self, p: "Point") -> "Point":
        return Point(self.x - p.x, self.y - p.y)

    def dot(self, p: "Point") -> float:
        return (self.x * p.x) + (self.y * p.y)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (float(self.x), float(self.y))

    @staticmethod
    def zero() -> "Point":
        return ZERO

    @staticmethod
    def from_xy(value: Any) -> "Point":
        """Coerce `value` into a Point.

        Accepts a Point, a 2-item sequence, a complex number (x + yj) or any
        object exposing numeric `.x` / `.y` (e.g. svgelements.Point).
        """
        if isinstance(value, Point):
            return value
        if isinstance(value, complex):
            return Point(float(value.real), float(value.imag))
        try:
            if isinstance(value, (list, tuple)):
                if len(value) != 2:
                    raise EnvolventeValidationError(f"Se esperaban 2 coordenadas, hay {len(value)}: {value!r}")
                return Point(float(value[0]), float(value[1]))
            if hasattr(value, "x") and hasattr(value, "y"):
                return Point(float(value.x), float(value.y))
        except (TypeError, ValueError) as e:
            raise EnvolventeValidationError(f"Coordenadas no numéricas: {value!r}") from e
        raise EnvolventeValidationError(f"No se puede interpretar como punto: {value!r}")


ZERO = Point(0.0, 0.0)


def scale(p: Point, s: float) -> Point:
    return p * s


def add(p: Point, q: Point) -> Point:
    return p + q


def subtract(p: Point, q: Point) -> Point:
    return p - q


def dot(p: Point, q: Point) -> float:
    return p.dot(q)


def magnitude(p: Point) -> float:
    return p.magnitude
