# File: envolvente/utils/errors.py
# Project: Envolvente (ENV)
# Version: 0.1.0
# Status: stable
# Purpose: Errores tipados del proyecto.
from __future__ import annotations


class EnvolventeError(Exception):
    """Error base del proyecto."""


class EnvolventeValidationError(EnvolventeError):
    """Error de validación (coordenadas/dirección/estructura)."""


class EnvolventeUnsupportedSegment(EnvolventeValidationError):
    """Tipo de segmento fuera del conjunto soportado (solo línea y Bézier cúbica)."""
