"""Locate ``enumguard.toml``.

The file is searched from a start directory upward, the way git finds
``.git/``. ``ENUMGUARD_CONFIG`` names a file directly and disables the
search; ``--config`` on the CLI bypasses both.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "enumguard.toml"
CONFIG_ENV_VAR = "ENUMGUARD_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``enumguard.toml`` at or above *start* (default: cwd).

    When ``ENUMGUARD_CONFIG`` is set, its file is returned if it exists
    and no search happens.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
