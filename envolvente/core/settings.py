# File: envolvente/core/settings.py
# Project: Envolvente (ENV)
# Version: 0.1.0
# Status: stable
# Purpose: Configuración: envolvente_settings.json (repo-local) + overrides por variables de entorno.
# Notes: No depende de geom; lo consumen geom/path_elements, geom/bbox y el CLI.
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

from envolvente.core.version import PROJECT_SETTINGS_FILENAME

log = logging.getLogger(__name__)

ENV_STRICT_DIRECTION = "ENVOLVENTE_STRICT_DIRECTION"
ENV_BBOX_TOL = "ENVOLVENTE_BBOX_TOL"
ENV_BBOX_WARN = "ENVOLVENTE_BBOX_WARN"
ENV_LOG_LEVEL = "ENVOLVENTE_LOG_LEVEL"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EnvolventeSettings:
    """Valores efectivos de configuración.

    - strict_direction: si está activo, una dirección de longitud cero en
      `envelope` lanza EnvolventeValidationError en vez de devolver inf/nan.
    - bbox_tol_abs / bbox_warn_abs: umbrales PASS/WARN de `compare_bboxes`.
    - log_level: nivel usado por el CLI al llamar setup_logging.
    """

    strict_direction: bool = False
    bbox_tol_abs: float = 1e-9
    bbox_warn_abs: float = 1e-6
    log_level: str = "INFO"


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca envolvente_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except Exception as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def _coerce_bool(v: Any) -> Optional[bool]:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on"):
            return True
        if s in ("0", "false", "no", "off", ""):
            return False
    return None


def _coerce_tol(v: Any) -> Optional[float]:
    # bool es int en Python: no lo aceptamos como tolerancia.
    if v is None or isinstance(v, bool):
        return None
    try:
        f = float(v)
    except (TypeError, ValueError):
        return None
    if f != f or f < 0.0:
        return None
    return f


def _coerce_level(v: Any) -> Optional[str]:
    if not isinstance(v, str):
        return None
    s = v.strip().upper()
    return s if s in VALID_LOG_LEVELS else None


def load_settings(
    start: Path | None = None,
    *,
    prefer_env: bool = True,
    logger: logging.Logger | None = None,
) -> EnvolventeSettings:
    """Combina defaults + envolvente_settings.json + variables de entorno.

    - Si `prefer_env=True`, una env var seteada gana sobre el JSON.
    - Si `prefer_env=False`, el JSON gana sobre la env var.

    Valores inválidos se ignoran (con warning) y se conserva el anterior.
    """
    _log = logger or log
    data = load_project_settings(start, logger=_log)

    json_values: Dict[str, Any] = {
        "strict_direction": _coerce_bool(_deep_get(data, "geom.strict_direction")),
        "bbox_tol_abs": _coerce_tol(_deep_get(data, "bbox.tol_abs")),
        "bbox_warn_abs": _coerce_tol(_deep_get(data, "bbox.warn_abs")),
        "log_level": _coerce_level(_deep_get(data, "log.level")),
    }

    env_raw = {
        "strict_direction": (ENV_STRICT_DIRECTION, _coerce_bool),
        "bbox_tol_abs": (ENV_BBOX_TOL, _coerce_tol),
        "bbox_warn_abs": (ENV_BBOX_WARN, _coerce_tol),
        "log_level": (ENV_LOG_LEVEL, _coerce_level),
    }
    env_values: Dict[str, Any] = {}
    for field_name, (key, coerce) in env_raw.items():
        raw = os.environ.get(key)
        if raw is None or raw == "":
            env_values[field_name] = None
            continue
        value = coerce(raw)
        if value is None:
            _log.warning("Valor inválido en %s=%r; se ignora", key, raw)
        env_values[field_name] = value

    first, second = (env_values, json_values) if prefer_env else (json_values, env_values)
    merged: Dict[str, Any] = {}
    for field_name in json_values:
        value = first[field_name]
        if value is None:
            value = second[field_name]
        if value is not None:
            merged[field_name] = value

    out = replace(EnvolventeSettings(), **merged)
    if out.bbox_warn_abs < out.bbox_tol_abs:
        # WARN nunca puede ser más estricto que PASS.
        out = replace(out, bbox_warn_abs=out.bbox_tol_abs)
    if merged:
        _log.debug("Settings aplicados: %s", merged)
    return out


_CACHED: EnvolventeSettings | None = None


def get_settings() -> EnvolventeSettings:
    """Settings del proceso (se cargan una vez)."""
    global _CACHED
    if _CACHED is None:
        _CACHED = load_settings()
    return _CACHED


def reset_settings_cache() -> None:
    global _CACHED
    _CACHED = None
