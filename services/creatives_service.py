"""
Creatives Data Service — loads the static creative roster.

Source: a JSON array of creative records at data/creatives.json, or the path in
CREATIVES_DATA_PATH. The roster is read-only; nothing here writes back.
"""
from __future__ import annotations
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple, Union

import pandas as pd
from dotenv import load_dotenv

from models.creative import Creative

load_dotenv()

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Path configuration
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_CREATIVES_JSON = DATA_DIR / "creatives.json"


def creatives_path() -> Path:
    return Path(os.getenv("CREATIVES_DATA_PATH", "").strip() or DEFAULT_CREATIVES_JSON)


# ---------------------------------------------------------------------------
# READ operations
# ---------------------------------------------------------------------------

def load_creatives_df(path: Optional[Union[str, Path]] = None) -> pd.DataFrame:
    """Load the roster document as a DataFrame (one row per creative)."""
    path = Path(path) if path else creatives_path()
    if not path.exists():
        logger.error(f"Creative roster not found at {path}")
        raise FileNotFoundError(path)
    # dtype=False keeps ids like "001" as strings
    return pd.read_json(path, orient="records", dtype=False)


def load_creatives(path: Optional[Union[str, Path]] = None) -> Tuple[Creative, ...]:
    """Fresh read of the roster as Creative records."""
    df = load_creatives_df(path)
    creatives = tuple(Creative.from_dict(row) for _, row in df.iterrows())
    logger.info(f"Loaded {len(creatives)} creatives from {Path(path).name if path else creatives_path().name}.")
    return creatives


@lru_cache(maxsize=4)
def _cached_creatives(path: str) -> Tuple[Creative, ...]:
    return load_creatives(path)


def get_creatives(path: Optional[Union[str, Path]] = None) -> Tuple[Creative, ...]:
    """Roster from a read-only, per-path cache. Use clear_cache() to pick up file edits."""
    return _cached_creatives(str(Path(path) if path else creatives_path()))


def clear_cache() -> None:
    _cached_creatives.cache_clear()
