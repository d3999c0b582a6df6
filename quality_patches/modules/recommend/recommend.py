#!/usr/bin/env python3
"""
Recommend - List quality patches released for the installed Magento version.

Not part of the post install/update flow. Available through the
`recommend` CLI command only.
"""

from typing import List, Optional

from ...common.context import Context
from ...common.module import CommandModule, ValidationError
from ...common.repository import InstalledRepository
from ...common.utils import Verbosity, log_debug, log_error, log_info, log_warning
from .catalog import PatchCatalogEntry, load_patch_catalog
from .version import detect_magento_version


def filter_catalog(entries: List[PatchCatalogEntry], version: str) -> List[str]:
    """Ids of non-deprecated entries for this version, in catalog order.

    Entries that declare requirements are always skipped.
    """
    recommended = []
    for entry in entries:
        if entry.deprecated:
            continue
        if not entry.applies_to(version):
            continue
        if entry.has_requirements:
            log_debug(f"Skipping {entry.id} (has dependencies)")
            continue
        recommended.append(entry.id)
    return recommended


def recommended_patches(
    ctx: Context, repository: Optional[InstalledRepository] = None
) -> List[str]:
    """Get list of recommended patches from patches-info.json

    Returns an empty list when the catalog or the Magento version is missing.
    """
    entries = load_patch_catalog(ctx.get_patches_info_path())
    if not entries:
        return []

    if repository is None:
        repository = InstalledRepository.from_context(ctx)

    version = detect_magento_version(repository)
    if version is None:
        log_error("Could not detect Magento version")
        return []

    log_info(f"Detected Magento version: {version}", Verbosity.VERBOSE)

    return filter_catalog(entries, version)


class RecommendPatchesModule(CommandModule):
    """Print the quality patches available for this Magento version"""

    produces = []
    requires = []
    description = "List recommended quality patches"

    def __init__(self):
        self.patches: List[str] = []

    def validate(self, ctx: Context) -> None:
        patches_info = ctx.get_patches_info_path()
        if not patches_info.exists():
            raise ValidationError(f"Patch catalog not found: {patches_info}")

    def execute(self, ctx: Context, **kwargs) -> None:
        self.patches = recommended_patches(ctx)

        if not self.patches:
            log_warning("No recommended patches for this installation")
            return

        log_info(f"Recommended patches ({len(self.patches)}):")
        for patch_id in self.patches:
            log_info(f"  {patch_id}")
