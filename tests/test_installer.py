"""Tests for the config-driven PatchInstaller flow."""
from conftest import FakeRunner, posix_only, write_binary

from quality_patches.common.config import CONFIG_KEY
from quality_patches.common.context import Context
from quality_patches.modules.patches import CommandResult, PatchInstaller


def extra(**section):
    return {CONFIG_KEY: section}


def test_disabled_runs_nothing(installed_project, fake_runner) -> None:
    installer = PatchInstaller(
        Context(base_path=installed_project),
        extra(enabled=False, patches=["ACSD-1"]),
        runner=fake_runner,
    )
    assert installer.install() is None
    assert fake_runner.calls == []


def test_missing_binary_is_a_notice(ctx, fake_runner, capsys) -> None:
    installer = PatchInstaller(ctx, extra(patches=["ACSD-1"]), runner=fake_runner)
    assert installer.install() is None
    assert fake_runner.calls == []
    captured = capsys.readouterr()
    assert "No patch packages found" in captured.out
    assert captured.err == ""


@posix_only
def test_empty_patch_list_runs_nothing(installed_project, fake_runner, capsys) -> None:
    installer = PatchInstaller(Context(base_path=installed_project), {}, runner=fake_runner)
    assert installer.install() is None
    assert fake_runner.calls == []
    out = capsys.readouterr().out
    assert f"extra.{CONFIG_KEY}.patches" in out
    assert "Patch application completed" in out


@posix_only
def test_configured_patches_are_applied(installed_project) -> None:
    runner = FakeRunner({"ACSD-2": CommandResult(success=False, stderr="already applied")})
    installer = PatchInstaller(
        Context(base_path=installed_project),
        extra(patches=["ACSD-1", "ACSD-2"]),
        runner=runner,
    )
    summary = installer.install()
    assert runner.calls == ["ACSD-1", "ACSD-2"]
    assert (summary.applied, summary.skipped, summary.failed) == (1, 1, 0)


@posix_only
def test_end_to_end_with_real_binary(project) -> None:
    # ACSD-1 succeeds, ACSD-2 reports it is already applied
    write_binary(
        project,
        "#!/bin/sh\n"
        'if [ "$1" != "apply" ] || [ "$2" != "--no-interaction" ]; then exit 2; fi\n'
        'echo "$3" >> calls.log\n'
        'if [ "$3" = "ACSD-2" ]; then echo "already applied" >&2; exit 1; fi\n'
        "exit 0\n",
    )
    installer = PatchInstaller(Context(base_path=project), extra(enabled=True, patches=["ACSD-1", "ACSD-2"]))
    summary = installer.install()
    assert (summary.applied, summary.skipped, summary.failed) == (1, 1, 0)
    # Working directory is the project root
    assert (project / "calls.log").read_text().split() == ["ACSD-1", "ACSD-2"]


@posix_only
def test_bad_bytes_do_not_stop_the_run(project) -> None:
    write_binary(
        project,
        "#!/bin/sh\n"
        "if [ \"$3\" = \"ACSD-1\" ]; then printf 'diff \\377\\376 bad\\n' >&2; exit 1; fi\n"
        "exit 0\n",
    )
    installer = PatchInstaller(Context(base_path=project), extra(patches=["ACSD-1", "ACSD-2"]))
    summary = installer.install()
    assert [o.patch_id for o in summary.outcomes] == ["ACSD-1", "ACSD-2"]
    assert (summary.applied, summary.failed) == (1, 1)
