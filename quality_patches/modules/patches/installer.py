#!/usr/bin/env python3
"""Patch installer run after composer install/update"""

from typing import Any, Mapping, Optional

from ...common.config import CONFIG_KEY, PluginConfig, resolve_config
from ...common.context import Context
from ...common.utils import Verbosity, log_info, log_success, log_warning
from .apply import PatchRunner, RunSummary, apply_patches
from .probe import is_available


class PatchInstaller:
    """
    Applies the configured quality patches to the project

    Reads the plugin configuration from the project's extra map, checks that
    magento/quality-patches is installed, then hands the patch list to
    apply_patches().
    """

    def __init__(
        self,
        ctx: Context,
        extra: Optional[Mapping[str, Any]] = None,
        runner: Optional[PatchRunner] = None,
    ):
        self.ctx = ctx
        self.config: PluginConfig = resolve_config(extra)
        self.runner = runner

    def install(self) -> Optional[RunSummary]:
        """Install quality patches

        Returns:
            The run summary, or None when nothing was attempted
        """
        if not self.config.enabled:
            log_warning(
                "Quality Patches plugin is disabled in configuration",
                Verbosity.VERBOSE,
            )
            return None

        log_info("Checking for available Magento patches...")

        if not is_available(self.ctx.base_path):
            log_warning(
                "No patch packages found. Install magento/quality-patches "
                "to enable automated patching."
            )
            return None

        summary = None
        if self.config.patches:
            summary = self._apply_quality_patches()
        else:
            log_warning(
                "No patches specified in configuration. Add patches to "
                f'"extra.{CONFIG_KEY}.patches" in composer.json'
            )

        log_success("Patch application completed")
        return summary

    def _apply_quality_patches(self) -> RunSummary:
        patches = self.config.patches
        log_info("Applying Magento Quality patches...")
        log_info(f"Configured {len(patches)} patch(es) to apply")
        return apply_patches(self.ctx, patches, runner=self.runner)
