#!/usr/bin/env python3
"""
Composer plugin entry point for automatic Magento quality patches

Composer calls into this on post-install-cmd and post-update-cmd (through
the `quality-patches run` command wired in composer.json "scripts"). Nothing
raised in here may break the Composer operation that triggered it.
"""

import traceback
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .common.config import load_config_file, load_project_extra
from .common.context import Context
from .common.utils import Verbosity, is_very_verbose, log_error, log_info
from .modules.patches import PatchInstaller, RunSummary
from .modules.patches.apply import PatchRunner

POST_INSTALL_CMD = "post-install-cmd"
POST_UPDATE_CMD = "post-update-cmd"


@dataclass
class ScriptEvent:
    """A host script event and what the plugin needs from the host"""

    name: str
    context: Context = field(default_factory=Context)
    # None means: read it from composer.json (or config_file) when handled
    extra: Optional[Mapping[str, Any]] = None
    config_file: Optional[Path] = None

    def load_extra(self) -> Mapping[str, Any]:
        if self.extra is not None:
            return self.extra
        if self.config_file is not None:
            return load_config_file(self.config_file)
        return load_project_extra(self.context.get_composer_json_path())


class QualityPatchesPlugin:
    """Applies Magento quality patches after composer install/update"""

    def __init__(self, runner: Optional[PatchRunner] = None):
        self.runner = runner

    def activate(self) -> None:
        log_info("Quality Patches Plugin activated", Verbosity.VERBOSE)

    def deactivate(self) -> None:
        pass

    def uninstall(self) -> None:
        pass

    @staticmethod
    def get_subscribed_events() -> Dict[str, str]:
        return {
            POST_INSTALL_CMD: "on_post_install_or_update",
            POST_UPDATE_CMD: "on_post_install_or_update",
        }

    def dispatch(self, event: ScriptEvent) -> Optional[RunSummary]:
        """Route an event to its handler; unsubscribed events are ignored"""
        handler_name = self.get_subscribed_events().get(event.name)
        if handler_name is None:
            log_info(f"Ignoring event: {event.name}", Verbosity.DEBUG)
            return None
        return getattr(self, handler_name)(event)

    def on_post_install_or_update(self, event: ScriptEvent) -> Optional[RunSummary]:
        """Handle post-install and post-update events

        Never raises - errors are reported and swallowed.
        """
        try:
            installer = PatchInstaller(
                event.context, event.load_extra(), runner=self.runner
            )
            return installer.install()
        except Exception as e:
            log_error(f"Quality Patches Plugin Error: {e}")
            if is_very_verbose():
                log_error(traceback.format_exc())
            return None
