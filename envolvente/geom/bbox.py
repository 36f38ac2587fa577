"""Axis-aligned bboxes derived from envelopes, plus bbox comparison.

Purpose
- `segment_bbox`: the tight local-frame bbox of a path element, obtained from
  four envelope queries (+x, -x, +y, -y). No sampling.
- `compare_bboxes`: compare a reference bbox (typically `svgelements`) against
  the envelope bbox and produce a JSON-serializable report.

Design constraints
- `compare_bboxes` must never raise (debug tooling should be robust).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from envolvente.core.settings import get_settings
from envolvente.geom.path_elements import PathElement, envelope
from envolvente.geom.point import Point

AXIS_POS_X = Point(1.0, 0.0)
AXIS_NEG_X = Point(-1.0, 0.0)
AXIS_POS_Y = Point(0.0, 1.0)
AXIS_NEG_Y = Point(0.0, -1.0)


@dataclass(frozen=True)
class BBoxXYXY:
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def w(self) -> float:
        return float(self.x1 - self.x0)

    @property
    def h(self) -> float:
        return float(self.y1 - self.y0)

    def as_list(self) -> List[float]:
        return [float(self.x0), float(self.y0), float(self.x1), float(self.y1)]

    def translated(self, dx: float, dy: float) -> "BBoxXYXY":
        return BBoxXYXY(self.x0 + dx, self.y0 + dy, self.x1 + dx, self.y1 + dy)

    def union(self, other: "BBoxXYXY") -> "BBoxXYXY":
        return BBoxXYXY(
            min(self.x0, other.x0),
            min(self.y0, other.y0),
            max(self.x1, other.x1),
            max(self.y1, other.y1),
        )


def segment_bbox(segment: PathElement) -> BBoxXYXY:
    """Tight bbox of `segment` in its local frame (start at the origin)."""
    # 0.0 - x en lugar de -x: evita -0.0 en los bordes que tocan el origen.
    return BBoxXYXY(
        0.0 - envelope(segment, AXIS_NEG_X),
        0.0 - envelope(segment, AXIS_NEG_Y),
        envelope(segment, AXIS_POS_X),
        envelope(segment, AXIS_POS_Y),
    )


def bbox_from_xyxy(xyxy: Any) -> Optional[BBoxXYXY]:
    """Coerce (x0,y0,x1,y1) or a BBoxXYXY to BBoxXYXY."""

    if xyxy is None:
        return None
    if isinstance(xyxy, BBoxXYXY):
        return xyxy
    if isinstance(xyxy, (list, tuple)) and len(xyxy) == 4:
        try:
            x0, y0, x1, y1 = xyxy
            return BBoxXYXY(float(x0), float(y0), float(x1), float(y1))
        except (TypeError, ValueError):
            return None
    return None


def compare_bboxes(
    reference_bbox: Any,
    envelope_bbox: Any,
    *,
    tol_abs: float | None = None,
    warn_abs: float | None = None,
) -> Dict[str, Any]:
    """Compare bboxes and return a JSON-serializable report.

    Tolerances default to the `bbox_tol_abs` / `bbox_warn_abs` settings.

    Status:
    - PASS: max_abs_err <= tol_abs
    - WARN: tol_abs < max_abs_err <= warn_abs
    - FAIL: max_abs_err > warn_abs (or NaN)
    - NO_REF: either bbox missing or not coercible
    """

    if tol_abs is None or warn_abs is None:
        settings = get_settings()
        tol_abs = settings.bbox_tol_abs if tol_abs is None else tol_abs
        warn_abs = settings.bbox_warn_abs if warn_abs is None else warn_abs

    notes: List[str] = []

    ref = bbox_from_xyxy(reference_bbox)
    env = bbox_from_xyxy(envelope_bbox)

    if ref is None or env is None:
        return {
            "status": "NO_REF",
            "tol_abs": float(tol_abs),
            "warn_abs": float(warn_abs),
            "reference_xyxy": ref.as_list() if ref else None,
            "envelope_xyxy": env.as_list() if env else None,
            "max_abs_err": None,
            "delta": None,
            "notes": ["reference bbox not available" if ref is None else "envelope bbox not available"],
        }

    dx0 = float(ref.x0 - env.x0)
    dy0 = float(ref.y0 - env.y0)
    dx1 = float(ref.x1 - env.x1)
    dy1 = float(ref.y1 - env.y1)

    deltas = (dx0, dy0, dx1, dy1)
    if any(math.isnan(d) for d in deltas):
        max_abs = math.nan
    else:
        max_abs = max(abs(d) for d in deltas)

    # Líneas horizontales/verticales dan bbox de ancho o alto cero.
    if env.w <= 0.0 or env.h <= 0.0:
        notes.append("envelope bbox degenerate")

    if max_abs <= float(tol_abs):
        status = "PASS"
    elif max_abs <= float(warn_abs):
        status = "WARN"
    else:
        status = "FAIL"

    return {
        "status": status,
        "tol_abs": float(tol_abs),
        "warn_abs": float(warn_abs),
        "reference_xyxy": ref.as_list(),
        "envelope_xyxy": env.as_list(),
        "max_abs_err": float(max_abs),
        "delta": {
            "dx0": dx0,
            "dy0": dy0,
            "dx1": dx1,
            "dy1": dy1,
        },
        "notes": notes,
    }
