#!/usr/bin/env python3
"""
Apply - Run magento-patches once per configured patch and summarize.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from ...common.context import Context
from ...common.module import CommandModule, ValidationError
from ...common.utils import Verbosity, log_error, log_info, log_success, log_warning
from .classify import OutcomeKind, PatchOutcome, classify_result
from .probe import is_available
from .utils import CommandResult, run_patch_command

PatchRunner = Callable[[Context, str], CommandResult]


@dataclass
class RunSummary:
    """Counters for one orchestration pass"""

    applied: int = 0
    skipped: int = 0
    failed: int = 0
    outcomes: List[PatchOutcome] = field(default_factory=list)

    def record(self, outcome: PatchOutcome) -> None:
        self.outcomes.append(outcome)
        if outcome.kind is OutcomeKind.APPLIED:
            self.applied += 1
        elif outcome.is_skipped:
            self.skipped += 1
        else:
            self.failed += 1

    @property
    def failed_patches(self) -> List[str]:
        return [o.patch_id for o in self.outcomes if o.is_failed]


def apply_patches(
    ctx: Context,
    patches: Sequence[str],
    runner: Optional[PatchRunner] = None,
) -> RunSummary:
    """Apply patches in order, one magento-patches call each.

    A failing patch is reported and the loop moves on to the next one.

    Args:
        ctx: Run context (base path, timeout)
        patches: Patch identifiers, e.g. ["ACSD-52277"]
        runner: Invocation function, defaults to run_patch_command

    Returns:
        RunSummary with applied/skipped/failed counts
    """
    runner = runner or run_patch_command
    summary = RunSummary()

    if not patches:
        log_warning("No patches to apply")
        return summary

    for patch_id in patches:
        outcome = classify_result(patch_id, runner(ctx, patch_id))
        summary.record(outcome)
        _report_outcome(outcome)

    if summary.applied > 0:
        log_success(f"Successfully applied {summary.applied} patch(es)")
    if summary.skipped > 0:
        log_warning(
            f"Skipped {summary.skipped} patch(es) (already applied or not available)",
            Verbosity.VERBOSE,
        )
    if summary.failed > 0:
        log_error(f"Failed to apply {summary.failed} patch(es)")

    return summary


def _report_outcome(outcome: PatchOutcome) -> None:
    patch_id = outcome.patch_id
    if outcome.kind is OutcomeKind.APPLIED:
        log_info(f"  ✓ Applied: {patch_id}")
    elif outcome.kind is OutcomeKind.ALREADY_APPLIED:
        log_info(f"  - Already applied: {patch_id}", Verbosity.VERBOSE)
    elif outcome.kind is OutcomeKind.NOT_AVAILABLE:
        log_info(f"  ⊘ Skipped (not available): {patch_id}", Verbosity.VERBOSE)
    else:
        log_error(f"  ✗ Failed: {patch_id} - {outcome.message}")


class ApplyPatchesModule(CommandModule):
    """Apply an explicit list of quality patches"""

    produces = []
    requires = []
    description = "Apply Magento quality patches with magento-patches"

    def __init__(self, runner: Optional[PatchRunner] = None):
        self.runner = runner
        self.summary: Optional[RunSummary] = None

    def validate(self, ctx: Context) -> None:
        if not is_available(ctx.base_path):
            raise ValidationError(
                f"magento-patches not found or not executable: {ctx.get_patches_binary()}"
            )

    def execute(self, ctx: Context, patches: Sequence[str] = (), **kwargs) -> None:
        log_info(f"Applying {len(patches)} patch(es)...")
        self.summary = apply_patches(ctx, patches, runner=self.runner)

        if self.summary.failed:
            raise RuntimeError(f"Failed to apply {self.summary.failed} patch(es)")
