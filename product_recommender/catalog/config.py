from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class CatalogConfig:
    source: str = os.getenv("CATALOG_SOURCE", "http")
    url: str = os.getenv("CATALOG_URL", "http://localhost:3001/products")
    path: Path = Path(os.getenv("CATALOG_PATH", "data/db.json"))
    timeout: float = float(os.getenv("CATALOG_TIMEOUT", "5.0"))


DEFAULT_CATALOG_CONFIG = CatalogConfig()
