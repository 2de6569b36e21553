"""Supabase configuration store.

Implements the ConfigStoreAdapter contract using the official Supabase SDK
with a PostgREST fallback over ``requests``. The adapter is intentionally
thin: allow-list enforcement and instrumentation live in ConfigStoreService.
"""

from __future__ import annotations

import logging
from typing import Dict, Any, List, Optional

import requests

logger = logging.getLogger(__name__)


def _data(resp: Any) -> Any:
	return resp.get("data") if isinstance(resp, dict) else getattr(resp, "data", None)


class SupabaseConfigStore:
	def __init__(self, url: str, key: str, client: Optional[Any] = None, timeout: float = 15.0):
		self.url = url.rstrip("/")
		self.key = key
		self.timeout = timeout
		if client is None:
			from supabase import create_client  # local import to avoid heavy deps at module import

			client = create_client(url, key)
		self.client = client

	def query(
		self,
		table: str,
		filters: Optional[Dict[str, Any]] = None,
		limit: Optional[int] = None,
		select: Optional[List[str]] = None,
	) -> List[Dict[str, Any]]:
		"""Equality-filtered select; falls back to REST when the SDK call fails."""
		try:
			q = self.client.table(table).select("*" if not select else ",".join(select))
			for k, v in (filters or {}).items():
				q = q.eq(k, v)
			if limit is not None:
				q = q.limit(limit)
			data = _data(q.execute())
			return data if isinstance(data, list) else []
		except Exception as e:
			logger.debug("supabase sdk query on %s failed (%s); retrying over REST", table, e)
			return self._rest_query(table, filters=filters, limit=limit, select=select)

	def get_columns(self, table: str) -> Optional[List[str]]:
		rows = self.query(table, limit=1)
		if rows:
			return sorted(rows[0].keys())
		return None

	# -------------------------------------------------- REST Fallback -----
	def _rest_headers(self) -> Dict[str, str]:
		return {
			"apikey": self.key,
			"Authorization": f"Bearer {self.key}",
			"Accept": "application/json",
		}

	def _rest_query(
		self,
		table: str,
		filters: Optional[Dict[str, Any]] = None,
		limit: Optional[int] = None,
		select: Optional[List[str]] = None,
	) -> List[Dict[str, Any]]:
		params: Dict[str, Any] = {}
		if select:
			params["select"] = ",".join(select)
		for k, v in (filters or {}).items():
			params[k] = f"eq.{v}"
		if limit is not None:
			params["limit"] = limit
		r = requests.get(
			f"{self.url}/rest/v1/{table}",
			headers=self._rest_headers(),
			params=params,
			timeout=self.timeout,
		)
		r.raise_for_status()
		data = r.json()
		return data if isinstance(data, list) else []


__all__ = ["SupabaseConfigStore"]
