from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol
import logging
import os
import time

from flowproc import metrics
from flowproc.exceptions import StoreError, TableNotAllowedError

logger = logging.getLogger(__name__)


class ConfigStoreAdapter(Protocol):
    """Protocol for configuration store backends (Supabase / in-memory)."""

    def query(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
        select: Optional[List[str]] = None,
    ) -> List[Dict[str, Any]]: ...

    def get_columns(self, table: str) -> Optional[List[str]]: ...


class ConfigStoreService:
    """Read-only façade over a configuration store adapter.

    Responsibilities
    ----------------
    - Enforce the read allow-list (``None`` or empty means any table).
    - Wrap backend exceptions in ``StoreError`` so callers only ever see
      ``FlowProcessError`` subclasses.
    - Record per (op, table) counters and latency in ``flowproc.metrics``.
    """

    def __init__(self, adapter: ConfigStoreAdapter, read_allowlist: Optional[Iterable[str]] = None):
        self.adapter = adapter
        self.read_allowlist = set(t.lower() for t in (read_allowlist or [])) or None

    def _check_table(self, table: str):
        if self.read_allowlist and table.lower() not in self.read_allowlist:
            raise TableNotAllowedError(f"Read access to table '{table}' is not permitted by policy")

    def query(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
        select: Optional[List[str]] = None,
    ) -> List[Dict[str, Any]]:
        self._check_table(table)
        return self._invoke(
            "query",
            table,
            lambda: self.adapter.query(table, filters=filters, limit=limit, select=select),
        )

    def get_columns(self, table: str) -> Optional[List[str]]:
        self._check_table(table)
        return self._invoke("get_columns", table, lambda: self.adapter.get_columns(table))

    def _invoke(self, op: str, table: str, func: Callable[[], Any]):
        start = time.time()
        try:
            return func()
        except StoreError:
            raise
        except Exception as e:
            raise StoreError(f"Store error during {op} on {table}: {e}") from e
        finally:
            duration = (time.time() - start) * 1000.0
            metrics.inc(op, table)
            metrics.observe(op, table, duration)
            if os.environ.get("FLOWPROC_STORE_LOGGING"):
                logger.info("[store] op=%s table=%s ms=%.1f", op, table, duration)


__all__ = ["ConfigStoreAdapter", "ConfigStoreService"]
