"""Geometry core: points, path elements and their envelopes.

This package is intentionally small and dependency-light. The svgelements
adapter lives in `envolvente.geom.svgelements_adapter` and is not imported
here.
"""

from __future__ import annotations

from envolvente.geom.path_elements import BezierCurveTo, LineTo, PathElement, envelope, solve_quadratic
from envolvente.geom.point import ZERO, Point, add, dot, magnitude, scale, subtract

__all__ = [
    "ZERO",
    "BezierCurveTo",
    "LineTo",
    "PathElement",
    "Point",
    "add",
    "dot",
    "envelope",
    "magnitude",
    "scale",
    "solve_quadratic",
    "subtract",
]
