"""svgelements adapter.

- `element_from_segment`: turn an absolute `svgelements` segment into a local
  frame path element (segment start moved to the origin).
- `reference_bbox`: bbox that `svgelements` itself computes for the segment,
  expressed in the same local frame. Used as an independent reference for
  `compare_bboxes`.

Only `Line` / `Close` and `CubicBezier` map to path elements. `Move`,
`QuadraticBezier` and `Arc` are rejected with EnvolventeUnsupportedSegment.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from svgelements import Close, CubicBezier, Line

from envolvente.geom.bbox import BBoxXYXY, bbox_from_xyxy
from envolvente.geom.path_elements import BezierCurveTo, LineTo, PathElement
from envolvente.geom.point import Point
from envolvente.utils.errors import EnvolventeUnsupportedSegment, EnvolventeValidationError

log = logging.getLogger(__name__)


def _start_of(seg: Any) -> Point:
    start = getattr(seg, "start", None)
    if start is None:
        # svgelements deja start=None en segmentos sueltos sin reify.
        raise EnvolventeValidationError(f"Segmento sin punto inicial: {seg!r}")
    return Point.from_xy(start)


def element_from_segment(seg: Any) -> PathElement:
    """Convert a `svgelements` Line/Close/CubicBezier to LineTo/BezierCurveTo."""
    if isinstance(seg, (Line, Close)):
        origin = _start_of(seg)
        return LineTo(Point.from_xy(seg.end) - origin)
    if isinstance(seg, CubicBezier):
        origin = _start_of(seg)
        return BezierCurveTo(
            Point.from_xy(seg.control1) - origin,
            Point.from_xy(seg.control2) - origin,
            Point.from_xy(seg.end) - origin,
        )
    raise EnvolventeUnsupportedSegment(f"Segmento no soportado: {type(seg).__name__}")


def reference_bbox(seg: Any) -> Dict[str, Any]:
    """Compute the segment bbox with `svgelements`, in the segment's local frame.

    Returns a dict like:
    - available: bool
    - bbox: BBoxXYXY or None
    - error: str (optional)

    Never raises.
    """

    try:
        origin = _start_of(seg)
        b = bbox_from_xyxy(tuple(seg.bbox()))
    except Exception as e:
        log.debug("reference_bbox falló para %r", seg, exc_info=True)
        return {"available": False, "bbox": None, "error": f"{type(e).__name__}: {e}"}

    if b is None:
        return {"available": False, "bbox": None, "error": "svgelements bbox not coercible"}

    local: BBoxXYXY = b.translated(-origin.x, -origin.y)
    return {"available": True, "bbox": local}
