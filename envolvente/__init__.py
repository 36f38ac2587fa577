"""Envolvente: support/envelope function of 2D line and cubic Bézier segments."""

from envolvente.core.version import APP_VERSION as __version__

__all__ = ["__version__"]
