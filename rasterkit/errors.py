"""Contract checks for the algorithms.

Precondition failures (bad dimensions, unsupported channel counts, bad
resample targets) are programming errors on the caller's side. They raise
:class:`ContractViolation`, which carries a numeric tag identifying the
call site so a failure can be traced without a debugger.
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class ContractViolation(AssertionError):
    """A precondition of an algorithm was not met.

    Attributes
    ----------
    code : int
        Diagnostic tag of the failing check.
    values : tuple
        Offending values reported by the check (may be empty).
    """

    def __init__(self, code: int, *values: object) -> None:
        self.code = code
        self.values = values
        message = f"contract violation [{code}]"
        if values:
            message += ": " + ", ".join(repr(v) for v in values)
        super().__init__(message)


def check(condition: bool, code: int, *values: object) -> None:
    """Raise :class:`ContractViolation` with ``code`` unless ``condition`` holds."""
    if condition:
        return
    err = ContractViolation(code, *values)
    logger.error("%s", err)
    raise err


__all__ = ["ContractViolation", "check"]
