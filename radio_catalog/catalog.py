import json
from pathlib import Path
from typing import List

from radio_catalog.models import CatalogEntry


def write_catalog(entries: List[CatalogEntry], path: Path):
    """Overwrite `path` with the whole catalog as an indented JSON array."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump([entry.model_dump() for entry in entries], f, ensure_ascii=False, indent=2)


def load_catalog(path: Path) -> List[CatalogEntry]:
    with open(path, "r", encoding="utf-8") as f:
        return [CatalogEntry.model_validate(item) for item in json.load(f)]
