# File: envolvente/cli.py
# Project: Envolvente (ENV)
# Version: 0.1.0
# Status: stable
# Purpose: Harness CLI: envolvente / bbox de un segmento (línea o Bézier cúbica) sin UI.
from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Any

from envolvente.core.settings import get_settings
from envolvente.core.version import APP_NAME, APP_VERSION
from envolvente.geom.bbox import segment_bbox
from envolvente.geom.path_elements import BezierCurveTo, LineTo, PathElement
from envolvente.geom.point import Point
from envolvente.utils.errors import EnvolventeError
from envolvente.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="envolvente",
        description=f"{APP_NAME} — envelope (support function) de un segmento en coordenadas locales.",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--dir",
        nargs=2,
        type=float,
        metavar=("DX", "DY"),
        help="Dirección de consulta (no nula)",
    )
    common.add_argument("--bbox", action="store_true", help="Imprime además el bbox local (x0 y0 x1 y1)")
    common.add_argument("--json", action="store_true", help="Salida como objeto JSON")
    common.add_argument(
        "--log-dir",
        default=os.environ.get("ENVOLVENTE_LOG_DIR", "logs"),
        help="Carpeta del log (default: ./logs)",
    )

    sub = ap.add_subparsers(dest="kind", required=True)

    p_line = sub.add_parser("line", parents=[common], help="Línea desde el origen hasta (X, Y)")
    p_line.add_argument("coords", nargs=2, type=float, metavar="N", help="X Y")

    p_bez = sub.add_parser("bezier", parents=[common], help="Bézier cúbica desde el origen")
    p_bez.add_argument("coords", nargs=6, type=float, metavar="N", help="C1X C1Y C2X C2Y X Y")
    return ap


def _segment_from_args(kind: str, coords: list[float]) -> PathElement:
    if kind == "line":
        return LineTo(Point(coords[0], coords[1]))
    return BezierCurveTo(
        Point(coords[0], coords[1]),
        Point(coords[2], coords[3]),
        Point(coords[4], coords[5]),
    )


def _describe(segment: PathElement) -> dict[str, Any]:
    if isinstance(segment, LineTo):
        return {"type": "line", "end": list(segment.end.as_tuple())}
    return {
        "type": "bezier",
        "c1": list(segment.c1.as_tuple()),
        "c2": list(segment.c2.as_tuple()),
        "end": list(segment.end.as_tuple()),
    }


def main(argv: list[str] | None = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)

    if args.dir is None and not args.bbox:
        ap.error("hace falta --dir DX DY y/o --bbox")

    settings = get_settings()
    setup_logging(args.log_dir, level=settings.log_level)

    segment = _segment_from_args(args.kind, list(args.coords))
    result: dict[str, Any] = {"segment": _describe(segment)}

    try:
        if args.dir is not None:
            direction = Point(args.dir[0], args.dir[1])
            result["direction"] = list(direction.as_tuple())
            result["envelope"] = segment.envelope(direction)
            if isinstance(segment, BezierCurveTo):
                result["critical_t"] = segment.critical_parameters(direction)
        if args.bbox:
            result["bbox"] = segment_bbox(segment).as_list()
    except EnvolventeError as e:
        log.error("envolvente: %s", e)
        print(f"[ENV] Error: {e}", file=sys.stderr)
        return 2

    log.debug("Resultado: %s", result)

    if args.json:
        print(json.dumps(result, ensure_ascii=False))
        return 0

    if "envelope" in result:
        print(f"envelope={result['envelope']:.17g}")
    if "bbox" in result:
        print("bbox=" + " ".join(f"{v:.17g}" for v in result["bbox"]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
