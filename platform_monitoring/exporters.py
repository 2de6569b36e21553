from typing import Dict, Any, Union
import logging
import re

# Flow inputs routinely carry credentials (API keys, session tokens), so both
# keys and values are checked before an event reaches the log.
_SECRET_KEY_RE = re.compile(r"(?i)(key|token|secret|authorization|password|passwd|bearer|session_id)")
_SECRET_VAL_RE = re.compile(r"(?i)^(?:sk|ghp|xox|ya29|eyJ|00D)[A-Za-z0-9!\-\._]{8,}$")

REDACTED = "***REDACTED***"

logger = logging.getLogger('platform_monitoring')


def _mask_value(v: Any) -> Any:
    if isinstance(v, str):
        if _SECRET_VAL_RE.search(v.strip()):
            return REDACTED
        if v.lower().startswith("bearer "):
            return "Bearer " + REDACTED
    return v


def sanitize(obj: Any) -> Any:
    """Return a copy of ``obj`` with secret-looking keys and values redacted."""
    if isinstance(obj, dict):
        return {
            k: REDACTED if _SECRET_KEY_RE.search(str(k)) else sanitize(v)
            for k, v in obj.items()
        }
    if isinstance(obj, (list, tuple)):
        return [sanitize(x) for x in obj]
    return _mask_value(obj)


def log_event(event: Union[str, Dict[str, Any]], payload: Dict[str, Any] | None = None, level: int = logging.INFO):
    """Log a monitoring event to the central logger.

    Accepts either ``log_event('flow.run.start', {...})`` or a single dict
    carrying an ``event`` key.
    """
    if isinstance(event, str):
        record = {'event': event, **(payload or {})}
    else:
        record = dict(event)
    logger.log(level, 'MONITOR_EVENT %s', sanitize(record))
