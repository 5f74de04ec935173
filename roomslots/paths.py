from __future__ import annotations

import os
from pathlib import Path

APP_ENV_CONFIG = "ROOMSLOTS_CONFIG"


def project_root() -> Path:
    """
    Repository/project root directory.
    Contains roomslots/, config/, tests/.
    """
    return Path(__file__).parent.parent.resolve()


def config_path() -> Path:
    """
    Settings file for roomslots.

    Resolution order:
    1. ROOMSLOTS_CONFIG env var (explicit override)
    2. <project root>/config/roomslots.yaml (default)
    """
    if os.environ.get(APP_ENV_CONFIG):
        return Path(os.environ[APP_ENV_CONFIG]).expanduser().resolve()
    return project_root() / "config" / "roomslots.yaml"
