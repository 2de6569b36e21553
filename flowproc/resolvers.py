"""Flow name resolvers.

A resolver decides which flow a process runs. There are two kinds:

- ``NameResolver``: the caller names the flow directly.
- ``RecordLookupResolver``: the flow name is read from a field of an
  admin-managed configuration record, found by its unique name. This lets
  admins repoint a process at a different flow without a code change.

Both satisfy the ``FlowResolver`` protocol.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Protocol

import platform_monitoring

from flowproc.exceptions import FlowConfigurationError, FlowProcessError, FlowResolutionError, StoreError
from flowproc.store.service import ConfigStoreAdapter


class FlowResolver(Protocol):
    def resolve(self) -> str:
        ...


def _require_name(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise FlowConfigurationError(f"{what} must be a non-empty string, got {value!r}")
    return value


@dataclass(frozen=True)
class NameResolver:
    flow_name: str

    def __post_init__(self):
        _require_name(self.flow_name, "Flow name")

    def resolve(self) -> str:
        return self.flow_name


@dataclass(frozen=True)
class RecordLookupResolver:
    record_name: str
    table: str
    field: str
    store: ConfigStoreAdapter = dataclasses.field(compare=False, repr=False)
    name_column: str = "developer_name"

    def __post_init__(self):
        _require_name(self.record_name, "Record name")
        _require_name(self.table, "Configuration table")
        _require_name(self.field, "Configuration field")
        _require_name(self.name_column, "Record name column")

    def resolve(self) -> str:
        # Two rows are enough to tell "unique" from "ambiguous".
        try:
            rows = self.store.query(
                self.table,
                filters={self.name_column: self.record_name},
                select=[self.field],
                limit=2,
            )
        except FlowProcessError:
            raise
        except Exception as e:
            raise StoreError(f"Lookup of '{self.record_name}' in '{self.table}' failed: {e}") from e
        if len(rows) != 1:
            platform_monitoring.log_event(
                "flow.resolve.error",
                {"table": self.table, "record": self.record_name, "matches": len(rows)},
            )
            raise FlowResolutionError(
                f"Expected exactly one '{self.table}' record named '{self.record_name}', found {len(rows)}"
            )
        value = rows[0].get(self.field)
        if value is None or str(value).strip() == "":
            raise FlowResolutionError(
                f"Record '{self.record_name}' in '{self.table}' has no value for '{self.field}'"
            )
        flow_name = str(value)
        platform_monitoring.log_event(
            "flow.resolve",
            {"table": self.table, "record": self.record_name, "flow": flow_name},
        )
        return flow_name


__all__ = ["FlowResolver", "NameResolver", "RecordLookupResolver"]
