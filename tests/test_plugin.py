"""Tests for the Composer plugin boundary."""
import json

from conftest import FakeRunner, posix_only

from quality_patches.common.config import CONFIG_KEY
from quality_patches.common.context import Context
from quality_patches.common.utils import Verbosity, set_verbosity
from quality_patches.plugin import (
    POST_INSTALL_CMD,
    POST_UPDATE_CMD,
    QualityPatchesPlugin,
    ScriptEvent,
)


def test_subscribed_events() -> None:
    events = QualityPatchesPlugin.get_subscribed_events()
    assert events == {
        POST_INSTALL_CMD: "on_post_install_or_update",
        POST_UPDATE_CMD: "on_post_install_or_update",
    }


@posix_only
def test_dispatch_runs_installer(installed_project) -> None:
    runner = FakeRunner()
    plugin = QualityPatchesPlugin(runner=runner)
    event = ScriptEvent(
        name=POST_UPDATE_CMD,
        context=Context(base_path=installed_project),
        extra={CONFIG_KEY: {"patches": ["ACSD-1"]}},
    )
    summary = plugin.dispatch(event)
    assert runner.calls == ["ACSD-1"]
    assert summary.applied == 1


def test_unsubscribed_event_is_ignored(ctx) -> None:
    runner = FakeRunner()
    plugin = QualityPatchesPlugin(runner=runner)
    assert plugin.dispatch(ScriptEvent(name="pre-autoload-dump", context=ctx)) is None
    assert runner.calls == []


@posix_only
def test_reads_composer_json(installed_project) -> None:
    (installed_project / "composer.json").write_text(
        json.dumps({"extra": {CONFIG_KEY: {"patches": ["ACSD-9"]}}}), encoding="utf-8"
    )
    runner = FakeRunner()
    event = ScriptEvent(name=POST_INSTALL_CMD, context=Context(base_path=installed_project))
    QualityPatchesPlugin(runner=runner).on_post_install_or_update(event)
    assert runner.calls == ["ACSD-9"]


def test_errors_are_swallowed(ctx, capsys) -> None:
    (ctx.base_path / "composer.json").write_text("{not json", encoding="utf-8")
    event = ScriptEvent(name=POST_INSTALL_CMD, context=ctx)
    assert QualityPatchesPlugin().on_post_install_or_update(event) is None
    err = capsys.readouterr().err
    assert "Quality Patches Plugin Error:" in err
    assert "Traceback" not in err


def test_traceback_only_when_very_verbose(ctx, capsys) -> None:
    (ctx.base_path / "composer.json").write_text("{not json", encoding="utf-8")
    set_verbosity(Verbosity.VERY_VERBOSE)
    event = ScriptEvent(name=POST_INSTALL_CMD, context=ctx)
    QualityPatchesPlugin().on_post_install_or_update(event)
    assert "Traceback" in capsys.readouterr().err


@posix_only
def test_runner_exception_is_swallowed(installed_project, capsys) -> None:
    def exploding_runner(context, patch_id):
        raise RuntimeError("runner exploded")

    event = ScriptEvent(
        name=POST_INSTALL_CMD,
        context=Context(base_path=installed_project),
        extra={CONFIG_KEY: {"patches": ["ACSD-1"]}},
    )
    assert QualityPatchesPlugin(runner=exploding_runner).dispatch(event) is None
    assert "runner exploded" in capsys.readouterr().err
