"""
Patches module - Apply Magento quality patches.

Provides:
- is_available: Check magento-patches is installed
- apply_patches: Run magento-patches for each patch id and summarize
- PatchInstaller: Config-driven flow used by the post install/update hook
- ApplyPatchesModule: CLI module for an explicit patch list
"""

from .apply import RunSummary, apply_patches, ApplyPatchesModule
from .classify import OutcomeKind, PatchOutcome, classify_failure, classify_result
from .installer import PatchInstaller
from .probe import is_available
from .utils import CommandResult, run_command, run_patch_command

__all__ = [
    "RunSummary",
    "apply_patches",
    "ApplyPatchesModule",
    "OutcomeKind",
    "PatchOutcome",
    "classify_failure",
    "classify_result",
    "PatchInstaller",
    "is_available",
    "CommandResult",
    "run_command",
    "run_patch_command",
]
