from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from flowproc.exceptions import InterpreterError

FlowFunc = Callable[..., Optional[Dict[str, Any]]]


class InMemorySession:
    def __init__(self, flow_name: str, func: FlowFunc, inputs: Dict[str, Any]):
        self.flow_name = flow_name
        self.inputs = dict(inputs)
        self._func = func
        self._variables: Optional[Dict[str, Any]] = None

    @property
    def started(self) -> bool:
        return self._variables is not None

    def start(self) -> None:
        result = self._func(**self.inputs)
        if result is not None and not isinstance(result, dict):
            raise InterpreterError(
                f"Flow '{self.flow_name}' returned {type(result).__name__}, expected a dict of variables"
            )
        self._variables = dict(result or {})

    def get_variable(self, name: str) -> Any:
        if self._variables is None:
            raise InterpreterError(f"Session for flow '{self.flow_name}' has not been started")
        return self._variables.get(name)


class InMemoryInterpreter:
    """Local interpreter for tests and offline runs.

    Flows are plain callables registered by name. A flow receives its inputs
    as keyword arguments and returns a dict of output variables (or None).
    Every created session is kept in ``sessions`` for inspection.
    """

    def __init__(self, flows: Dict[str, FlowFunc] | None = None):
        self._flows: Dict[str, FlowFunc] = dict(flows or {})
        self.sessions: List[InMemorySession] = []

    def register(self, name: str, func: FlowFunc) -> None:
        self._flows[name] = func

    def list(self):
        return list(self._flows.keys())

    def create_session(self, flow_name: str, inputs: Dict[str, Any]) -> InMemorySession:
        func = self._flows.get(flow_name)
        if func is None:
            raise InterpreterError(f"Unknown flow: {flow_name}")
        session = InMemorySession(flow_name, func, inputs)
        self.sessions.append(session)
        return session


__all__ = ["InMemoryInterpreter", "InMemorySession"]
