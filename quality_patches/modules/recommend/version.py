#!/usr/bin/env python3
"""Detect the installed Magento version"""

import re
from typing import Optional

from ...common.repository import InstalledRepository

MAGENTO_PACKAGES = [
    "magento/product-community-edition",
    "magento/product-enterprise-edition",
    "magento/magento2-base",
]

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+(?:-p\d+)?)")


def normalize_version(version: str) -> str:
    """Strip a "v" prefix and anything after major.minor.patch[-pN]

    "v2.4.6-p13-extra" -> "2.4.6-p13". Strings that do not start with a
    version number are returned unchanged.
    """
    match = _VERSION_RE.match(version)
    return match.group(1) if match else version


def detect_magento_version(repository: InstalledRepository) -> Optional[str]:
    """Get current Magento version from installed packages, e.g. "2.4.6-p13" """
    for package_name in MAGENTO_PACKAGES:
        packages = repository.find_packages(package_name)
        if packages:
            return normalize_version(packages[0].pretty_version)
    return None
