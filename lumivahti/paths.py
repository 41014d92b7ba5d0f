"""
paths.py – keskitetyt polut Lumivahdille.

    from lumivahti.paths import LOGS, root_path
"""

from __future__ import annotations

from pathlib import Path

_THIS_FILE = Path(__file__).resolve()

# lumivahti/paths.py -> lumivahti -> projektin juuri
ROOT_DIR = _THIS_FILE.parent.parent


def root_path(*parts: str) -> Path:
    """Palauttaa polun projektin juureen suhteessa."""
    return ROOT_DIR.joinpath(*parts)


LOGS = root_path("logs")


def ensure_dirs() -> None:
    """Varmistaa, että lokihakemisto on olemassa."""
    LOGS.mkdir(parents=True, exist_ok=True)
