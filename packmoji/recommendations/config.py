from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DEFAULT_CATALOG = Path(__file__).resolve().parent.parent / "data" / "items.json"


@dataclass(frozen=True)
class EngineConfig:
    catalog_path: Path = Path(os.getenv("PACKMOJI_CATALOG_PATH", str(_DEFAULT_CATALOG)))
    default_lang: str = "en"
    relevance_buffer: float = 15.0
    threshold_floor: float = 10.0
    cache_ttl: int = int(os.getenv("PACKMOJI_CACHE_TTL", "300"))
    rate_limit: str = os.getenv("PACKMOJI_RATE_LIMIT", "100 per 15 minutes")


DEFAULT_ENGINE_CONFIG = EngineConfig()
