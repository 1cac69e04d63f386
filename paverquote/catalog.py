"""
Stone catalog — StoneMetadata by sku_id.

The engine only ever calls .get(sku_id). StoneCatalog is the caller-owned
store behind that: each pattern that picks a stone adds its metadata, each
pattern that drops it removes it, and a SKU is evicted once nothing uses it.

load_catalog() reads a JSON list of stone records:
1. STONE_CATALOG_PATH if set
2. paverquote/data/stones.json (packaged sample catalog)
"""

import json
import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Iterable, Optional

from .config import settings
from .schemas import StoneMetadata

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_CATALOG_PATH = DATA_DIR / "stones.json"


class StoneCatalog:
    """Reference-counted StoneMetadata store."""

    def __init__(self, stones: Iterable[StoneMetadata] = ()):
        self._stones: dict[str, StoneMetadata] = {}
        self._user_counts: dict[str, int] = {}
        for stone in stones:
            self.add(stone)

    @classmethod
    def from_records(cls, records: list) -> "StoneCatalog":
        """Build from raw dicts (JSON rows). Invalid rows raise pydantic ValidationError."""
        return cls(StoneMetadata.model_validate(r) for r in records)

    def add(self, metadata: StoneMetadata) -> int:
        """Register one more user of a stone. Returns the new user count."""
        if metadata.sku_id not in self._stones:
            self._stones[metadata.sku_id] = metadata
        self._user_counts[metadata.sku_id] = self._user_counts.get(metadata.sku_id, 0) + 1
        return self._user_counts[metadata.sku_id]

    def remove(self, sku_id: str) -> int:
        """Drop one user of a stone; evicts it at zero. Returns the remaining count."""
        count = self._user_counts.get(sku_id, 0) - 1
        if count <= 0:
            self._user_counts.pop(sku_id, None)
            self._stones.pop(sku_id, None)
            return 0
        self._user_counts[sku_id] = count
        return count

    def get(self, sku_id: str) -> Optional[StoneMetadata]:
        return self._stones.get(sku_id)

    def user_count(self, sku_id: str) -> int:
        return self._user_counts.get(sku_id, 0)

    def sku_ids(self) -> list[str]:
        return list(self._stones)

    def __contains__(self, sku_id) -> bool:
        return sku_id in self._stones

    def __len__(self) -> int:
        return len(self._stones)


def as_lookup(catalog):
    """
    Normalize the catalog argument of compute_quote.
    Anything with .get(sku_id) passes through, a lookup function is wrapped,
    and a list of StoneMetadata is indexed.
    """
    if hasattr(catalog, "get"):
        return catalog
    if callable(catalog):
        return SimpleNamespace(get=catalog)
    return {stone.sku_id: stone for stone in catalog}


def load_catalog(path=None) -> StoneCatalog:
    """Load a StoneCatalog from a JSON list of stone records."""
    path = Path(path or settings.STONE_CATALOG_PATH or DEFAULT_CATALOG_PATH)
    if not path.exists():
        raise FileNotFoundError(f"Stone catalog not found: {path}")

    with open(path) as f:
        records = json.load(f)

    catalog = StoneCatalog.from_records(records)
    logger.info("Loaded %d stones from %s", len(catalog), path)
    logger.debug("Catalog SKUs: %s", ", ".join(catalog.sku_ids()))
    return catalog
