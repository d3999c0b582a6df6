#!/usr/bin/env python3
"""
Quality Patches CLI - apply Magento quality patches from composer.json

Hook it into Composer through composer.json scripts:

    "scripts": {
        "post-install-cmd": ["quality-patches run --event post-install-cmd"],
        "post-update-cmd": ["quality-patches run --event post-update-cmd"]
    }
"""

from pathlib import Path
from typing import List, Optional

import typer
from typer import Typer, Option, Argument

from ..common.config import ConfigError, load_project_extra, resolve_config
from ..common.context import Context
from ..common.module import CommandModule, ValidationError
from ..common.repository import InstalledRepository
from ..common.utils import (
    log_info,
    log_error,
    log_success,
    log_warning,
    set_verbosity,
    verbosity_from_flags,
)
from ..plugin import POST_INSTALL_CMD, QualityPatchesPlugin, ScriptEvent

app = Typer(
    name="quality-patches",
    help="Magento quality patches runner",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
    pretty_exceptions_show_locals=False,
)


# State class to hold global options
class State:
    def __init__(self):
        self.base_path: Optional[Path] = None


state = State()


def create_context() -> Context:
    """Create Context for the selected project directory"""
    if state.base_path is None:
        return Context()
    return Context(base_path=state.base_path.resolve())


def execute_module(ctx: Context, module: CommandModule, **kwargs) -> None:
    """Execute a single module with validation"""
    try:
        module.validate(ctx)
        module.execute(ctx, **kwargs)
    except ValidationError as e:
        log_error(f"Validation failed: {e}")
        raise typer.Exit(1)
    except Exception as e:
        log_error(f"Module failed: {e}")
        raise typer.Exit(1)


@app.callback()
def main(
    base_path: Optional[Path] = Option(
        None,
        "--base-path",
        "-C",
        help="Project root (defaults to the current directory)",
        exists=True,
        file_okay=False,
    ),
    verbose: int = Option(
        0, "--verbose", "-v", count=True, help="Increase verbosity (-v, -vv, -vvv)"
    ),
    quiet: bool = Option(False, "--quiet", "-q", help="Only show errors"),
):
    """
    Apply Magento quality patches with vendor/bin/magento-patches

    Patches are configured in composer.json:

      "extra": {"hryvinskyi-quality-patches": {"patches": ["ACSD-52277"]}}
    """
    state.base_path = base_path
    set_verbosity(verbosity_from_flags(verbose, quiet))


@app.command()
def run(
    event: str = Option(
        POST_INSTALL_CMD, "--event", "-e", help="Composer script event name"
    ),
    config_file: Optional[Path] = Option(
        None,
        "--config",
        "-c",
        help="YAML file to read the patch configuration from instead of composer.json",
        dir_okay=False,
    ),
):
    """Run the post install/update hook (never fails the caller)"""
    plugin = QualityPatchesPlugin()
    plugin.activate()
    plugin.dispatch(
        ScriptEvent(name=event, context=create_context(), config_file=config_file)
    )


@app.command()
def apply(
    patches: List[str] = Argument(..., help="Patch ids, e.g. ACSD-52277"),
):
    """Apply the given patches regardless of composer.json"""
    from ..modules.patches import ApplyPatchesModule

    execute_module(create_context(), ApplyPatchesModule(), patches=patches)


@app.command()
def recommend():
    """List patches released for the installed Magento version"""
    from ..modules.recommend import RecommendPatchesModule

    execute_module(create_context(), RecommendPatchesModule())


@app.command()
def status():
    """Show project, binary and configuration status"""
    from ..modules.patches import is_available
    from ..modules.recommend import detect_magento_version

    ctx = create_context()
    log_info("Quality Patches Status")
    log_info("-" * 40)
    log_info(f"Project: {ctx.base_path}")

    if is_available(ctx.base_path):
        log_success(f"magento-patches: {ctx.get_patches_binary()}")
    else:
        log_warning("magento-patches: not installed")

    try:
        config = resolve_config(load_project_extra(ctx.get_composer_json_path()))
    except ConfigError as e:
        log_error(str(e))
        raise typer.Exit(1)

    log_info(f"Enabled: {'yes' if config.enabled else 'no'}")
    log_info(f"Configured patches: {len(config.patches)}")
    for patch_id in config.patches:
        log_info(f"  - {patch_id}")

    version = detect_magento_version(InstalledRepository.from_context(ctx))
    log_info(f"Magento version: {version or 'unknown'}")


if __name__ == "__main__":
    app()
