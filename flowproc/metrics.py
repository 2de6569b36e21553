"""In-process counters and latency aggregates for flow runs and store lookups.

Keys are ``(op, target)`` pairs, e.g. ``("run", "Create_Case")`` or
``("query", "flow_settings")``.
"""
from __future__ import annotations
from typing import Dict, Tuple

_counter: Dict[Tuple[str, str], int] = {}
_latency: Dict[Tuple[str, str], Dict[str, float]] = {}


def inc(op: str, target: str):
    key = (op, target)
    _counter[key] = _counter.get(key, 0) + 1


def observe(op: str, target: str, ms: float):  # min/max/count/total
    key = (op, target)
    bucket = _latency.setdefault(key, {"count": 0, "total": 0.0, "min": ms, "max": ms})
    bucket["count"] += 1
    bucket["total"] += ms
    bucket["min"] = min(bucket["min"], ms)
    bucket["max"] = max(bucket["max"], ms)


def snapshot():
    out = []
    for (op, target), c in _counter.items():
        row = {"op": op, "target": target, "count": c}
        lat = _latency.get((op, target))
        if lat and lat["count"]:
            row.update({
                "lat_min_ms": round(lat["min"], 2),
                "lat_max_ms": round(lat["max"], 2),
                "lat_avg_ms": round(lat["total"] / lat["count"], 2),
            })
        out.append(row)
    return sorted(out, key=lambda r: (r["op"], r["target"]))


def reset():
    """Test helper: drop every collected counter and latency bucket."""
    _counter.clear()
    _latency.clear()


__all__ = ["inc", "observe", "snapshot", "reset"]
