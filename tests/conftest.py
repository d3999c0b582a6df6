"""Shared fixtures: temporary Magento project trees and fake magento-patches runs."""
import os
import stat
from pathlib import Path
from typing import Dict, List

import pytest

from quality_patches.common.context import Context, MAGENTO_PATCHES_BIN
from quality_patches.common.utils import Verbosity, set_verbosity
from quality_patches.modules.patches import CommandResult


class FakeRunner:
    """Stands in for run_patch_command; records every patch id it is asked to apply."""

    def __init__(self, results: Dict[str, CommandResult] = None):
        self.results = results or {}
        self.calls: List[str] = []

    def __call__(self, ctx: Context, patch_id: str) -> CommandResult:
        self.calls.append(patch_id)
        return self.results.get(patch_id, CommandResult(success=True))


def write_binary(project: Path, script: str, executable: bool = True) -> Path:
    binary = project / MAGENTO_PATCHES_BIN
    binary.parent.mkdir(parents=True, exist_ok=True)
    binary.write_text(script, encoding="utf-8")
    mode = binary.stat().st_mode
    if executable:
        binary.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    else:
        binary.chmod(mode & ~(stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))
    return binary


@pytest.fixture(autouse=True)
def _reset_verbosity():
    set_verbosity(Verbosity.NORMAL)
    yield
    set_verbosity(Verbosity.NORMAL)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def installed_project(project: Path) -> Path:
    """Project with an executable magento-patches that always succeeds."""
    write_binary(project, "#!/bin/sh\nexit 0\n")
    return project


@pytest.fixture
def ctx(project: Path) -> Context:
    return Context(base_path=project)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


posix_only = pytest.mark.skipif(os.name != "posix", reason="needs POSIX shell scripts")
