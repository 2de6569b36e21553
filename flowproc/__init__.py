"""
Fluent invocation of hosted flows.

Pick a flow by name or through a configuration record, pass inputs, declare
the outputs you expect and run it.
"""

__version__ = "1.0.0"

from flowproc.exceptions import (
    FlowProcessError,
    FlowConfigurationError,
    NoResolverError,
    FlowResolutionError,
    RequiredOutputError,
    InterpreterError,
    StoreError,
    TableNotAllowedError,
)
from flowproc.models import ProcessConfig
from flowproc.resolvers import FlowResolver, NameResolver, RecordLookupResolver
from flowproc.executor import FlowExecutor, InterpreterExecutor
from flowproc.process import FlowProcess
from flowproc.factory import create_flow_process

__all__ = [
    "FlowProcess",
    "ProcessConfig",
    "FlowResolver",
    "NameResolver",
    "RecordLookupResolver",
    "FlowExecutor",
    "InterpreterExecutor",
    "create_flow_process",
    "FlowProcessError",
    "FlowConfigurationError",
    "NoResolverError",
    "FlowResolutionError",
    "RequiredOutputError",
    "InterpreterError",
    "StoreError",
    "TableNotAllowedError",
]
