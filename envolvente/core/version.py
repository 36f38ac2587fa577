"""Envolvente - version constants.

Keep this module tiny and dependency-free. It is imported by the CLI and
settings and must not have side effects.
"""

APP_NAME = "Envolvente"

# App semantic version (must match pyproject.toml).
APP_VERSION = "0.1.0"

# Project settings file (repo-local) looked up from the CWD upwards.
PROJECT_SETTINGS_FILENAME = "envolvente_settings.json"
