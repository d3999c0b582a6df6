"""Tests for the magento-patches availability check."""
from pathlib import Path

from conftest import posix_only, write_binary

from quality_patches.common.context import MAGENTO_PATCHES_BIN
from quality_patches.modules.patches import is_available


def test_missing_binary(tmp_path: Path) -> None:
    assert is_available(tmp_path) is False


@posix_only
def test_executable_binary(tmp_path: Path) -> None:
    write_binary(tmp_path, "#!/bin/sh\nexit 0\n")
    assert is_available(tmp_path) is True


@posix_only
def test_non_executable_binary(tmp_path: Path) -> None:
    write_binary(tmp_path, "#!/bin/sh\nexit 0\n", executable=False)
    assert is_available(tmp_path) is False


def test_directory_in_place_of_binary(tmp_path: Path) -> None:
    (tmp_path / MAGENTO_PATCHES_BIN).mkdir(parents=True)
    assert is_available(tmp_path) is False
