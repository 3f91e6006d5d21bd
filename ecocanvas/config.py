from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent / "data" / "products.json"


@dataclass(frozen=True)
class AppConfig:
    catalog_path: Path = Path(os.getenv("ECOCANVAS_CATALOG_PATH", str(_BUNDLED_CATALOG)))
    session_secret: str = os.getenv("SESSION_SECRET", "ecocanvas-secret-change-in-production")
    log_level: str = os.getenv("ECOCANVAS_LOG_LEVEL", "INFO").upper()
    recommendation_limit: int = 5
    similar_limit: int = 4
    max_compare_items: int = 4


DEFAULT_APP_CONFIG = AppConfig()
