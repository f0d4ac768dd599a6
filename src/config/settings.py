"""Global configuration and constants for responsive breakpoint handling."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Final, Mapping, Optional

# Desktop-oriented scale: xs < 640 <= sm < 960 <= md < 1280 <= lg < 1600 <= xl
DEFAULT_BREAKPOINTS: Final[Mapping[str, int]] = {
    "xs": 0,
    "sm": 640,
    "md": 960,
    "lg": 1280,
    "xl": 1600,
}

CLASS_NAME_PREFIX: Final = os.environ.get("RESPONSIVE_CLASS_PREFIX", "fresnel")
BREAKPOINTS_FILE_ENV: Final = "RESPONSIVE_BREAKPOINTS_FILE"


def load_breakpoints(path: Optional[str | Path] = None) -> Dict[str, int]:
    """Return the configured breakpoint name -> width mapping.

    Reads a JSON object from `path` (or the file named by the
    RESPONSIVE_BREAKPOINTS_FILE environment variable). Falls back to
    DEFAULT_BREAKPOINTS when neither is given. Values are passed through
    unvalidated; the registry rejects malformed widths.
    """
    source = path or os.environ.get(BREAKPOINTS_FILE_ENV)
    if not source:
        return dict(DEFAULT_BREAKPOINTS)
    data = json.loads(Path(source).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Breakpoint config {source} must contain a JSON object")
    return data
