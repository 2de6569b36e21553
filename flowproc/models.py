"""Immutable process configuration handed to executors."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping


@dataclass(frozen=True)
class ProcessConfig:
    """Snapshot of a FlowProcess taken when it starts running.

    Fields:
    - inputs: read-only mapping of input variable name -> value
    - outputs: every output name the caller asked for
    - required: subset of ``outputs`` that must be produced
    """

    inputs: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    outputs: FrozenSet[str] = frozenset()
    required: FrozenSet[str] = frozenset()

    @classmethod
    def build(
        cls,
        inputs: Dict[str, Any],
        outputs: Iterable[str],
        required: Iterable[str],
    ) -> "ProcessConfig":
        required = frozenset(required)
        return cls(
            inputs=MappingProxyType(dict(inputs)),
            outputs=frozenset(outputs) | required,
            required=required,
        )

    def is_required(self, name: str) -> bool:
        return name in self.required


__all__ = ["ProcessConfig"]
