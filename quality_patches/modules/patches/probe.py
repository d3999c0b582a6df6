#!/usr/bin/env python3
"""Detect whether magento/quality-patches is installed"""

import os
from pathlib import Path

from ...common.context import MAGENTO_PATCHES_BIN


def is_available(base_path: Path) -> bool:
    """Check the magento-patches binary exists and is executable

    Pure filesystem check, nothing is executed.
    """
    binary = Path(base_path) / MAGENTO_PATCHES_BIN
    return binary.is_file() and os.access(binary, os.X_OK)
