"""Salesforce Flow interpreter.

Runs autolaunched flows through the invocable-actions REST endpoint:

    POST {instance}/services/data/v{version}/actions/custom/flow/{flow_name}
    {"inputs": [{...}]}

The response is a list with one result per input set. A result carries
``isSuccess``, ``errors`` and ``outputValues``; the latter become the
session variables.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from flowproc.exceptions import InterpreterError

logger = logging.getLogger(__name__)


class SalesforceFlowSession:
    def __init__(self, interpreter: "SalesforceFlowInterpreter", flow_name: str, inputs: Dict[str, Any]):
        self._interpreter = interpreter
        self.flow_name = flow_name
        self.inputs = dict(inputs)
        self._outputs: Optional[Dict[str, Any]] = None

    def start(self) -> None:
        self._outputs = self._interpreter.invoke(self.flow_name, self.inputs)

    def get_variable(self, name: str) -> Any:
        if self._outputs is None:
            raise InterpreterError(f"Session for flow '{self.flow_name}' has not been started")
        return self._outputs.get(name)


class SalesforceFlowInterpreter:
    def __init__(
        self,
        instance_url: str,
        access_token: str,
        api_version: str = "60.0",
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
    ):
        self.instance_url = instance_url.rstrip("/")
        self.access_token = access_token
        self.api_version = api_version.lstrip("v")
        self.http = session or requests.Session()
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def flow_url(self, flow_name: str) -> str:
        return f"{self.instance_url}/services/data/v{self.api_version}/actions/custom/flow/{flow_name}"

    def create_session(self, flow_name: str, inputs: Dict[str, Any]) -> SalesforceFlowSession:
        return SalesforceFlowSession(self, flow_name, inputs)

    def invoke(self, flow_name: str, inputs: Dict[str, Any]) -> Dict[str, Any]:
        """Run ``flow_name`` once and return its output values."""
        url = self.flow_url(flow_name)
        logger.debug("invoking flow %s at %s", flow_name, url)
        try:
            r = self.http.post(url, headers=self._headers(), json={"inputs": [inputs]}, timeout=self.timeout)
        except requests.RequestException as e:
            raise InterpreterError(f"Flow '{flow_name}' request failed: {e}") from e
        if r.status_code >= 400:
            raise InterpreterError(f"Flow '{flow_name}' failed with HTTP {r.status_code}: {_error_text(r)}")
        try:
            body = r.json()
        except ValueError as e:
            raise InterpreterError(f"Flow '{flow_name}' returned a non-JSON response") from e
        result = body[0] if isinstance(body, list) and body else None
        if not isinstance(result, dict):
            raise InterpreterError(f"Flow '{flow_name}' returned an empty result")
        if not result.get("isSuccess", False):
            messages = [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in (result.get("errors") or [])]
            raise InterpreterError(f"Flow '{flow_name}' failed: {'; '.join(messages) or 'unknown error'}")
        return dict(result.get("outputValues") or {})


def _error_text(r: requests.Response) -> str:
    # Salesforce error bodies are [{"message": ..., "errorCode": ...}]
    try:
        body = r.json()
    except ValueError:
        return r.text[:200]
    if isinstance(body, list):
        return "; ".join(str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in body)
    return str(body)[:200]


__all__ = ["SalesforceFlowInterpreter", "SalesforceFlowSession"]
