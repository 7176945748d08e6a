from __future__ import annotations

import os
from importlib import metadata


_DEFAULT_APP_VERSION = "0.1.0"
_DISTRIBUTION = "taskgraph"


def _read_installed_version(distribution: str) -> str | None:
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        return None


def get_app_version() -> str:
    env_override = (os.getenv("TASKGRAPH_APP_VERSION") or "").strip()
    if env_override:
        return env_override

    installed = _read_installed_version(_DISTRIBUTION)
    if installed:
        return installed

    return _DEFAULT_APP_VERSION


__all__ = ["get_app_version"]
