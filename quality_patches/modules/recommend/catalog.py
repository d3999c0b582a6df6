#!/usr/bin/env python3
"""Parser for magento/quality-patches patches-info.json"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, FrozenSet, List, Optional

from ...common.utils import Verbosity, log_warning


@dataclass(frozen=True)
class PatchCatalogEntry:
    id: str
    releases: FrozenSet[str]
    deprecated: bool = False
    has_requirements: bool = False

    def applies_to(self, version: str) -> bool:
        return version in self.releases


def parse_catalog_entry(raw: Any) -> Optional[PatchCatalogEntry]:
    """Build an entry from one item of the "patches" list.

    Items without "id" or "releases" are ignored. A list id uses its first
    element and a single release string becomes a one-element set.
    """
    if not isinstance(raw, dict):
        return None
    if raw.get("id") is None or raw.get("releases") is None:
        return None

    patch_id = raw["id"]
    if isinstance(patch_id, list):
        if not patch_id:
            return None
        patch_id = patch_id[0]

    releases = raw["releases"]
    if not isinstance(releases, list):
        releases = [releases]

    return PatchCatalogEntry(
        id=str(patch_id),
        releases=frozenset(str(r) for r in releases),
        deprecated=bool(raw.get("deprecated")),
        has_requirements=raw.get("require") is not None,
    )


def load_patch_catalog(patches_info: Path) -> List[PatchCatalogEntry]:
    """Load the catalog in file order.

    Returns an empty list if the file is missing or malformed.
    """
    if not patches_info.exists():
        log_warning("patches-info.json not found", Verbosity.VERY_VERBOSE)
        return []

    try:
        with open(patches_info, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return []

    if not isinstance(data, dict) or not isinstance(data.get("patches"), list):
        return []

    entries = []
    for raw in data["patches"]:
        entry = parse_catalog_entry(raw)
        if entry is not None:
            entries.append(entry)
    return entries
