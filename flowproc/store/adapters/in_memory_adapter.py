"""In-memory configuration store.

Test/local backend implementing the ConfigStoreAdapter contract. Rows are
plain dicts grouped by table; queries support equality filters, projection
and a limit, which is all lookup resolvers need.
"""

from __future__ import annotations

from typing import Dict, Any, Iterable, List, Optional, Set


class InMemoryConfigStore:
	def __init__(self, tables: Optional[Dict[str, Iterable[Dict[str, Any]]]] = None) -> None:
		self._tables: Dict[str, List[Dict[str, Any]]] = {}
		for table, rows in (tables or {}).items():
			self.add_many(table, rows)

	def _ensure(self, table: str) -> List[Dict[str, Any]]:
		return self._tables.setdefault(table, [])

	def add(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
		stored = dict(row)
		self._ensure(table).append(stored)
		return stored

	def add_many(self, table: str, rows: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
		return [self.add(table, r) for r in rows]

	def clear_tables(self) -> None:
		"""Test helper: reset all stored rows across all tables."""
		self._tables.clear()

	def query(
		self,
		table: str,
		filters: Optional[Dict[str, Any]] = None,
		limit: Optional[int] = None,
		select: Optional[List[str]] = None,
	) -> List[Dict[str, Any]]:
		results = [
			row for row in self._ensure(table)
			if all(row.get(k) == v for k, v in (filters or {}).items())
		]
		if select:
			results = [{k: r.get(k) for k in select} for r in results]
		else:
			results = [dict(r) for r in results]
		if limit is not None:
			results = results[:limit]
		return results

	def get_columns(self, table: str) -> Optional[List[str]]:
		keys: Set[str] = set()
		for r in self._ensure(table):
			keys.update(r.keys())
		return sorted(keys)


__all__ = ["InMemoryConfigStore"]
