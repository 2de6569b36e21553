from typing import Any, Dict, Protocol

"""Interpreter contracts.

The flow engine itself is hosted elsewhere; this package only talks to it
through two small protocols:

    - FlowInterpreter: creates a session for a named flow with its inputs.
    - FlowSession: starts the session synchronously and exposes its
      variables once it has finished.

Callers type-hint against these protocols so an in-memory interpreter can
stand in for the hosted one in tests and local runs.
"""


class FlowSession(Protocol):
    """One invocation of a flow."""

    def start(self) -> None:
        """Run the flow to completion."""

    def get_variable(self, name: str) -> Any:
        """Return the value of output variable ``name`` or None when unset."""


class FlowInterpreter(Protocol):
    def create_session(self, flow_name: str, inputs: Dict[str, Any]) -> FlowSession:
        ...


__all__ = ["FlowSession", "FlowInterpreter"]
