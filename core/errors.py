"""
Error kinds raised by the projection / simulation kernel.

Depletion is never an error; it is reported in the result data.
"""

from __future__ import annotations


class EndowmentError(Exception):
    """Base class for kernel errors."""


class InvalidInput(EndowmentError, ValueError):
    """Scenario or simulation parameters rejected at an engine entry point."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class NumericDomainError(EndowmentError, ArithmeticError):
    """The uniform source produced a value outside [0, 1) or only zeros. Fatal."""
