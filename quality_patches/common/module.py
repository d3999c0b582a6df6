#!/usr/bin/env python3
"""Base class for runnable command modules"""

from typing import List

from .context import Context


class QualityPatchesError(Exception):
    """Base error for the quality patches runner"""


class ValidationError(QualityPatchesError):
    """Raised by CommandModule.validate when preconditions are not met"""


class CommandModule:
    """
    A unit of work driven by the CLI

    Subclasses check their preconditions in validate() and do the work in
    execute(). Callers always run validate() first:

        module = ApplyPatchesModule()
        module.validate(ctx)
        module.execute(ctx, patches=["ACSD-52277"])
    """

    produces: List[str] = []
    requires: List[str] = []
    description: str = ""

    def validate(self, ctx: Context) -> None:
        raise NotImplementedError

    def execute(self, ctx: Context, **kwargs) -> None:
        raise NotImplementedError
