#!/usr/bin/env python3
"""Subprocess helpers for invoking magento-patches"""

import subprocess
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import IO, List, Optional

from ...common.context import Context
from ...common.utils import is_very_verbose, log_debug, log_raw


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command invocation"""

    success: bool
    stdout: str = ""
    stderr: str = ""
    returncode: Optional[int] = None
    timed_out: bool = False

    @property
    def message(self) -> str:
        """Diagnostic text: stderr if present, else stdout"""
        error_output = self.stderr.strip()
        output = self.stdout.strip()
        return (error_output or output) or "Command failed"


def _timeout_result(timeout: float, stdout: str = "") -> CommandResult:
    return CommandResult(
        success=False,
        stdout=stdout,
        stderr=f"The process exceeded the timeout of {timeout:g} seconds.",
        timed_out=True,
    )


def run_command(cmd: List[str], cwd: Path, timeout: float) -> CommandResult:
    """Run a command and capture its output.

    Never raises for command-level problems: a non-zero exit, a timeout,
    undecodable output or a command that cannot be started all come back
    as a failed result. At very verbose level output is echoed live.
    """
    log_debug(f"Executing: {' '.join(cmd)}")

    if is_very_verbose():
        return _run_streaming(cmd, cwd, timeout)

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        return _timeout_result(timeout, _decode(e.stdout))
    except OSError as e:
        return CommandResult(success=False, stderr=str(e))

    return CommandResult(
        success=result.returncode == 0,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
        returncode=result.returncode,
    )


def _pump(stream: IO[str], sink: List[str], err: bool) -> None:
    with stream:
        for line in stream:
            sink.append(line)
            log_raw(line, err=err)


def _run_streaming(cmd: List[str], cwd: Path, timeout: float) -> CommandResult:
    """Same as run_command, echoing stdout/stderr line by line as it arrives"""
    try:
        process = subprocess.Popen(
            cmd,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        return CommandResult(success=False, stderr=str(e))

    stdout_lines: List[str] = []
    stderr_lines: List[str] = []
    readers = [
        threading.Thread(target=_pump, args=(process.stdout, stdout_lines, False), daemon=True),
        threading.Thread(target=_pump, args=(process.stderr, stderr_lines, True), daemon=True),
    ]
    for reader in readers:
        reader.start()

    try:
        returncode = process.wait(timeout=timeout)
    except subprocess.TimeoutExpired:
        process.kill()
        process.wait()
        # Grandchildren may still hold the pipes open
        for reader in readers:
            reader.join(timeout=1)
        return _timeout_result(timeout, "".join(stdout_lines))

    for reader in readers:
        reader.join()

    return CommandResult(
        success=returncode == 0,
        stdout="".join(stdout_lines),
        stderr="".join(stderr_lines),
        returncode=returncode,
    )


def run_patch_command(ctx: Context, patch_id: str) -> CommandResult:
    """Apply a single quality patch with magento-patches"""
    cmd = [
        str(ctx.get_patches_binary()),
        "apply",
        "--no-interaction",
        patch_id,
    ]
    return run_command(cmd, cwd=ctx.base_path, timeout=ctx.process_timeout)


def _decode(output) -> str:
    # TimeoutExpired carries bytes even when an encoding was requested
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode(errors="replace")
    return output
