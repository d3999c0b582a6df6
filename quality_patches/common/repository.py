#!/usr/bin/env python3
"""Read-only view of the packages Composer installed into the project"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List

from .context import Context
from .utils import log_debug


@dataclass(frozen=True)
class InstalledPackage:
    name: str
    pretty_version: str


class InstalledRepository:
    """
    Installed package lookup

    Built from vendor/composer/installed.json when present (Composer 2 writes
    {"packages": [...]}, Composer 1 a bare list), otherwise from composer.lock.
    Package names are matched case-insensitively, as Composer does.

    Example:
        repo = InstalledRepository.from_context(ctx)
        for package in repo.find_packages("magento/magento2-base"):
            print(package.pretty_version)
    """

    def __init__(self, packages: Iterable[InstalledPackage] = ()):
        self._packages: Dict[str, List[InstalledPackage]] = {}
        for package in packages:
            self._packages.setdefault(package.name.lower(), []).append(package)

    def find_packages(self, name: str) -> List[InstalledPackage]:
        return list(self._packages.get(name.lower(), []))

    def __len__(self) -> int:
        return sum(len(p) for p in self._packages.values())

    @classmethod
    def from_context(cls, ctx: Context) -> "InstalledRepository":
        installed_json = ctx.get_installed_json_path()
        if installed_json.exists():
            data = _read_json(installed_json)
            # Unreadable installed.json falls through to composer.lock
            if data is not None:
                if isinstance(data, dict):
                    entries = data.get("packages", [])
                else:
                    entries = data
                return cls(_parse_packages(entries))

        composer_lock = ctx.get_composer_lock_path()
        if composer_lock.exists():
            data = _read_json(composer_lock)
            entries = []
            if isinstance(data, dict):
                entries = list(data.get("packages") or []) + list(
                    data.get("packages-dev") or []
                )
            return cls(_parse_packages(entries))

        log_debug("No installed.json or composer.lock found")
        return cls()


def _read_json(path: Path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        log_debug(f"Could not read {path}: {e}")
        return None


def _parse_packages(entries) -> List[InstalledPackage]:
    packages = []
    if not isinstance(entries, list):
        return packages

    for entry in entries:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name")
        version = entry.get("version")
        if not name or version is None:
            continue
        packages.append(InstalledPackage(name=str(name), pretty_version=str(version)))

    return packages
