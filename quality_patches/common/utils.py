#!/usr/bin/env python3
"""
Console output helpers for the quality patches runner

Every message goes through one of the log_* functions so the CLI can control
how chatty the runner is. Levels mirror the host dependency manager:

    NORMAL        always shown (unless quiet)
    VERBOSE       -v
    VERY_VERBOSE  -vv   (also echoes subprocess output)
    DEBUG         -vvv  (also prints executed command lines)
"""

from enum import IntEnum

import click


class Verbosity(IntEnum):
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    VERY_VERBOSE = 3
    DEBUG = 4


_verbosity = Verbosity.NORMAL


def set_verbosity(level: Verbosity) -> None:
    """Set the global output verbosity"""
    global _verbosity
    _verbosity = Verbosity(level)


def get_verbosity() -> Verbosity:
    return _verbosity


def verbosity_from_flags(verbose: int = 0, quiet: bool = False) -> Verbosity:
    """Map CLI flags (-v count, --quiet) to a Verbosity level"""
    if quiet:
        return Verbosity.QUIET
    return Verbosity(min(Verbosity.NORMAL + verbose, Verbosity.DEBUG))


def is_verbose() -> bool:
    return _verbosity >= Verbosity.VERBOSE


def is_very_verbose() -> bool:
    return _verbosity >= Verbosity.VERY_VERBOSE


def is_debug() -> bool:
    return _verbosity >= Verbosity.DEBUG


def _write(
    message: str,
    verbosity: Verbosity,
    fg=None,
    err: bool = False,
    nl: bool = True,
) -> None:
    # Errors are never hidden by --quiet
    if err and verbosity <= Verbosity.NORMAL:
        click.secho(message, fg=fg, err=True, nl=nl)
        return
    if _verbosity >= verbosity:
        click.secho(message, fg=fg, err=err, nl=nl)


def log_info(message: str, verbosity: Verbosity = Verbosity.NORMAL) -> None:
    """Informational line on stdout"""
    _write(message, verbosity)


def log_success(message: str, verbosity: Verbosity = Verbosity.NORMAL) -> None:
    """Success line on stdout (green)"""
    _write(message, verbosity, fg="green")


def log_warning(message: str, verbosity: Verbosity = Verbosity.NORMAL) -> None:
    """Comment/notice line on stdout (yellow)"""
    _write(message, verbosity, fg="yellow")


def log_error(message: str, verbosity: Verbosity = Verbosity.NORMAL) -> None:
    """Error line on stderr (red)"""
    _write(message, verbosity, fg="red", err=True)


def log_debug(message: str) -> None:
    """Only shown at -vvv"""
    _write(message, Verbosity.DEBUG)


def log_raw(buffer: str, err: bool = False) -> None:
    """Pass subprocess output through untouched (very verbose only)"""
    if is_very_verbose():
        click.echo(buffer, err=err, nl=False)
