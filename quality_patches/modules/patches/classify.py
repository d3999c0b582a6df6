#!/usr/bin/env python3
"""
Outcome classification for magento-patches runs

magento-patches does not use distinct exit codes, so the only way to tell
"already applied" from a real failure is the text it prints.
"""

from dataclasses import dataclass
from enum import Enum

from .utils import CommandResult

ALREADY_APPLIED_PATTERNS = (
    "already applied",
    "already installed",
)

NOT_FOUND_PATTERNS = (
    "weren't found",
    "not found",
    "does not exist",
    "cannot find",
)


class OutcomeKind(Enum):
    APPLIED = "applied"
    ALREADY_APPLIED = "already_applied"
    NOT_AVAILABLE = "not_available"
    FAILED = "failed"


@dataclass(frozen=True)
class PatchOutcome:
    patch_id: str
    kind: OutcomeKind
    message: str = ""

    @property
    def is_skipped(self) -> bool:
        return self.kind in (OutcomeKind.ALREADY_APPLIED, OutcomeKind.NOT_AVAILABLE)

    @property
    def is_failed(self) -> bool:
        return self.kind is OutcomeKind.FAILED


def _contains_any(message: str, patterns) -> bool:
    lowered = message.lower()
    return any(pattern in lowered for pattern in patterns)


def is_already_applied_error(message: str) -> bool:
    return _contains_any(message, ALREADY_APPLIED_PATTERNS)


def is_patch_not_found_error(message: str) -> bool:
    """Check if error message indicates patch not found"""
    return _contains_any(message, NOT_FOUND_PATTERNS)


def classify_failure(patch_id: str, message: str) -> PatchOutcome:
    """Classify the diagnostic text of a failed run.

    "already applied" is checked before the not-found patterns.
    """
    if is_already_applied_error(message):
        kind = OutcomeKind.ALREADY_APPLIED
    elif is_patch_not_found_error(message):
        kind = OutcomeKind.NOT_AVAILABLE
    else:
        kind = OutcomeKind.FAILED
    return PatchOutcome(patch_id=patch_id, kind=kind, message=message)


def classify_result(patch_id: str, result: CommandResult) -> PatchOutcome:
    if result.success:
        return PatchOutcome(patch_id=patch_id, kind=OutcomeKind.APPLIED)
    return classify_failure(patch_id, result.message)
