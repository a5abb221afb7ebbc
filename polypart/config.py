"""
Configuration & Constants
=========================
Central registry for numeric tolerances and repository paths.

Exports:
    EPS (float): Relative tolerance for orientation tests. A turn whose sine is
        below EPS counts as collinear. Override with ``POLYPART_EPS``.
    DEFAULT_LOG_LEVEL (str): Level used by the scripts unless ``--log-level``
        is given. Override with ``POLYPART_LOG_LEVEL``.
    ROOT, RESULTS_DIR, POLYGONS_DIR (Path): Locations used by ``scripts/``.
"""
from __future__ import annotations

import os
from pathlib import Path


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not value >= 0.0:
        raise ValueError(f"{name} must be non-negative, got {raw!r}")
    return value


EPS: float = _env_float("POLYPART_EPS", 1e-12)

DEFAULT_LOG_LEVEL: str = os.environ.get("POLYPART_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT: str = '%H:%M:%S'

ROOT: Path = Path(__file__).resolve().parent.parent
RESULTS_DIR: Path = ROOT / "results"
POLYGONS_DIR: Path = ROOT / "polygons" / "generated"
