"""
Flow interpreter contracts and implementations.

The hosted interpreter is reached over REST; the in-memory one runs
registered Python callables for tests and local experimentation.
"""

from flowproc.interpreter.interface import FlowInterpreter, FlowSession
from flowproc.interpreter.in_memory import InMemoryInterpreter, InMemorySession
from flowproc.interpreter.salesforce import SalesforceFlowInterpreter

__all__ = [
    "FlowInterpreter",
    "FlowSession",
    "InMemoryInterpreter",
    "InMemorySession",
    "SalesforceFlowInterpreter",
]
