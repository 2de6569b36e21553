"""Composition helpers for flow processes.

Purpose
-------
- One place that turns settings into interpreters, executors and stores.
- Tests swap backends with ``kind='memory'`` (or by passing instances) and
  never touch module-level state.
"""

from __future__ import annotations

from typing import Optional

from flowproc.config import settings
from flowproc.executor import FlowExecutor, InterpreterExecutor
from flowproc.interpreter.interface import FlowInterpreter
from flowproc.store.service import ConfigStoreAdapter, ConfigStoreService


def build_interpreter(kind: Optional[str] = None) -> FlowInterpreter:
    kind = (kind or settings.FLOWPROC_INTERPRETER).lower()
    if kind == "salesforce":
        if not settings.SF_INSTANCE_URL or not settings.SF_ACCESS_TOKEN:
            raise RuntimeError("SF_INSTANCE_URL / SF_ACCESS_TOKEN not configured for the flow interpreter")
        from flowproc.interpreter.salesforce import SalesforceFlowInterpreter

        return SalesforceFlowInterpreter(
            settings.SF_INSTANCE_URL,
            settings.SF_ACCESS_TOKEN,
            api_version=settings.SF_API_VERSION,
        )
    elif kind == "memory":
        from flowproc.interpreter.in_memory import InMemoryInterpreter

        return InMemoryInterpreter()
    else:
        raise ValueError(f"Unknown flow interpreter kind '{kind}'")


def build_executor(kind: Optional[str] = None, interpreter: Optional[FlowInterpreter] = None) -> FlowExecutor:
    return InterpreterExecutor(interpreter or build_interpreter(kind))


def build_store(kind: Optional[str] = None) -> ConfigStoreService:
    kind = (kind or settings.FLOWPROC_STORE).lower()
    if kind == "supabase":
        if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
            raise RuntimeError("SUPABASE_URL / SUPABASE_KEY not configured for the configuration store")
        from flowproc.store.adapters.supabase_adapter import SupabaseConfigStore

        adapter = SupabaseConfigStore(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    elif kind == "memory":
        from flowproc.store.adapters.in_memory_adapter import InMemoryConfigStore

        adapter = InMemoryConfigStore()
    else:
        raise ValueError(f"Unknown configuration store kind '{kind}'")
    return ConfigStoreService(adapter, read_allowlist=settings.get_read_allowlist())


def create_flow_process(
    interpreter: Optional[FlowInterpreter] = None,
    store: Optional[ConfigStoreAdapter] = None,
):
    """Build a FlowProcess wired to the given (or configured) backends.

    A bare store adapter is wrapped in a ConfigStoreService by FlowProcess so
    lookups get the allow-list and instrumentation.
    """
    from flowproc.process import FlowProcess

    return FlowProcess(executor=build_executor(interpreter=interpreter), store=store)


__all__ = [
    "build_interpreter",
    "build_executor",
    "build_store",
    "create_flow_process",
]
