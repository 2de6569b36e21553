"""Exception hierarchy for flow processes.

Every failure surfaces as a ``FlowProcessError`` so callers can catch one
kind. Subclasses let higher layers tell configuration mistakes, name
resolution failures, missing outputs and backend failures apart.
"""

from __future__ import annotations


class FlowProcessError(Exception):
    """Base class for all flow process errors."""


class FlowConfigurationError(FlowProcessError):
    """Raised when a process is configured with invalid arguments."""


class NoResolverError(FlowConfigurationError):
    """Raised when a process is run before a flow was selected."""


class FlowResolutionError(FlowProcessError):
    """Raised when a configuration lookup does not yield exactly one flow name."""


class RequiredOutputError(FlowProcessError):
    """Raised when a required output variable was not produced by the flow."""

    def __init__(self, flow_name: str, missing):
        self.flow_name = flow_name
        self.missing = sorted(missing)
        names = ", ".join(self.missing)
        super().__init__(f"Flow '{flow_name}' did not return required output(s): {names}")


class InterpreterError(FlowProcessError):
    """Raised when the flow interpreter rejects or fails a run."""


class StoreError(FlowProcessError):
    """Raised when the configuration store backend fails irrecoverably."""


class TableNotAllowedError(StoreError):
    """Raised when a lookup targets a table outside the read allow-list."""


__all__ = [
    "FlowProcessError",
    "FlowConfigurationError",
    "NoResolverError",
    "FlowResolutionError",
    "RequiredOutputError",
    "InterpreterError",
    "StoreError",
    "TableNotAllowedError",
]
