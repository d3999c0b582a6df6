#!/usr/bin/env python3
"""
Run context dataclass holding the project location and derived paths

The base path is always passed in explicitly (the CLI defaults it to the
current working directory) so every component can be exercised against a
temporary project tree.
"""

from dataclasses import dataclass, field
from pathlib import Path

# Relative to the project root
MAGENTO_PATCHES_BIN = "vendor/bin/magento-patches"
PATCHES_INFO_FILE = "vendor/magento/quality-patches/patches-info.json"
INSTALLED_JSON_FILE = "vendor/composer/installed.json"
COMPOSER_JSON_FILE = "composer.json"
COMPOSER_LOCK_FILE = "composer.lock"

PROCESS_TIMEOUT = 600


@dataclass
class Context:
    """
    Context Object pattern - one place for the state of a single run
    """

    base_path: Path = field(default_factory=Path.cwd)
    process_timeout: float = PROCESS_TIMEOUT

    def __post_init__(self):
        self.base_path = Path(self.base_path)

    # Path getter methods
    def get_patches_binary(self) -> Path:
        """Get the magento-patches executable path"""
        return self.base_path / MAGENTO_PATCHES_BIN

    def get_patches_info_path(self) -> Path:
        """Get the quality patches catalog (patches-info.json)"""
        return self.base_path / PATCHES_INFO_FILE

    def get_composer_json_path(self) -> Path:
        return self.base_path / COMPOSER_JSON_FILE

    def get_composer_lock_path(self) -> Path:
        return self.base_path / COMPOSER_LOCK_FILE

    def get_installed_json_path(self) -> Path:
        """Get Composer's record of installed packages"""
        return self.base_path / INSTALLED_JSON_FILE
