"""Fluent builder for running a flow and collecting its outputs.

Usage::

    outputs = (
        FlowProcess(executor=executor)
        .named("Create_Case")
        .with_input("AccountId", account_id)
        .output("CaseNumber")
        .required("CaseId")
        .run()
    )

    case_id = FlowProcess(executor=executor).from_config("Case_Intake").returning("CaseId")

Nothing runs until ``run()`` or ``returning()`` is called. At that point the
builder's inputs and output declarations are copied into a frozen
``ProcessConfig``, so later builder calls never affect a run in progress.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Set

from flowproc.config import settings
from flowproc.exceptions import FlowConfigurationError, NoResolverError
from flowproc.executor import FlowExecutor
from flowproc.models import ProcessConfig
from flowproc.resolvers import FlowResolver, NameResolver, RecordLookupResolver
from flowproc.store.service import ConfigStoreAdapter, ConfigStoreService


def _check_name(name: Any, what: str) -> str:
    if not isinstance(name, str) or not name:
        raise FlowConfigurationError(f"{what} name must be a non-empty string, got {name!r}")
    return name


class FlowProcess:
    def __init__(self, executor: Optional[FlowExecutor] = None, store: Optional[ConfigStoreAdapter] = None):
        self._executor = executor
        if store is not None and not isinstance(store, ConfigStoreService):
            store = ConfigStoreService(store, read_allowlist=settings.get_read_allowlist())
        self._store = store
        self._resolver: Optional[FlowResolver] = None
        self._inputs: Dict[str, Any] = {}
        self._outputs: Set[str] = set()
        self._required: Set[str] = set()

    # ---------------------------- Flow selection --------------------------- #
    def using(self, resolver: FlowResolver) -> "FlowProcess":
        """Select the flow through any resolver; replaces a previous choice."""
        if not callable(getattr(resolver, "resolve", None)):
            raise FlowConfigurationError(f"{resolver!r} does not provide resolve()")
        self._resolver = resolver
        return self

    def named(self, flow_name: str) -> "FlowProcess":
        return self.using(NameResolver(flow_name))

    def from_config(
        self,
        record_name: str,
        table: Optional[str] = None,
        field: Optional[str] = None,
        name_column: Optional[str] = None,
    ) -> "FlowProcess":
        """Read the flow name from a configuration record when the process runs."""
        if self._store is None:
            from flowproc.factory import build_store

            self._store = build_store()
        return self.using(
            RecordLookupResolver(
                record_name,
                table or settings.CONFIG_TABLE,
                field or settings.CONFIG_FIELD,
                self._store,
                name_column=name_column or settings.CONFIG_NAME_COLUMN,
            )
        )

    # ------------------------------- Inputs -------------------------------- #
    def with_input(self, name: str, value: Any) -> "FlowProcess":
        self._inputs[_check_name(name, "Input")] = value
        return self

    def with_inputs(self, mapping: Optional[Mapping[str, Any]] = None, /, **values: Any) -> "FlowProcess":
        for name, value in {**dict(mapping or {}), **values}.items():
            self.with_input(name, value)
        return self

    # ------------------------------- Outputs ------------------------------- #
    def output(self, name: str) -> "FlowProcess":
        self._outputs.add(_check_name(name, "Output"))
        return self

    def outputs(self, *names: str) -> "FlowProcess":
        for name in names:
            self.output(name)
        return self

    def required(self, name: str) -> "FlowProcess":
        # Additive: once required, a later output() call does not relax it.
        self.output(name)
        self._required.add(name)
        return self

    # ------------------------------ Execution ------------------------------ #
    @property
    def resolver(self) -> Optional[FlowResolver]:
        return self._resolver

    @property
    def executor(self) -> FlowExecutor:
        if self._executor is None:
            from flowproc.factory import build_executor

            self._executor = build_executor()
        return self._executor

    def snapshot(self) -> ProcessConfig:
        return ProcessConfig.build(self._inputs, self._outputs, self._required)

    def run(self) -> Dict[str, Any]:
        """Resolve the flow, run it and return its declared outputs."""
        if self._resolver is None:
            raise NoResolverError("No flow selected: call named(), from_config() or using() before running")
        config = self.snapshot()
        flow_name = self._resolver.resolve()
        return self.executor.execute(flow_name, config)

    def returning(self, name: str) -> Any:
        """Run the flow and return the single required output ``name``."""
        return self.required(name).run()[name]


__all__ = ["FlowProcess"]
