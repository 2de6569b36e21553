"""Environment-driven settings for flow processes.

Values are read once at import (after loading a local ``.env``). Factories
read the module attributes at call time, so tests can monkeypatch them.
"""
from __future__ import annotations

import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

FLOWPROC_INTERPRETER = os.getenv("FLOWPROC_INTERPRETER", "salesforce").lower()
FLOWPROC_STORE = os.getenv("FLOWPROC_STORE", "supabase").lower()

# Default location of the configuration records used by lookup resolvers
CONFIG_TABLE = os.getenv("FLOWPROC_CONFIG_TABLE", "flow_settings")
CONFIG_FIELD = os.getenv("FLOWPROC_CONFIG_FIELD", "flow_name")
CONFIG_NAME_COLUMN = os.getenv("FLOWPROC_CONFIG_NAME_COLUMN", "developer_name")

SF_INSTANCE_URL = os.getenv("SF_INSTANCE_URL")
SF_ACCESS_TOKEN = os.getenv("SF_ACCESS_TOKEN")
SF_API_VERSION = os.getenv("SF_API_VERSION", "60.0")

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_SERVICE_KEY") or os.getenv("SUPABASE_KEY")


def _env_list(var: str) -> Optional[List[str]]:
    raw = os.getenv(var)
    if not raw:
        return None
    return [p.strip() for p in raw.split(",") if p.strip()]


def get_read_allowlist() -> Optional[List[str]]:
    """Tables lookup resolvers may read; ``None`` means unrestricted."""
    return _env_list("FLOWPROC_READ_TABLES")


def validate_keys(raise_on_missing: bool = False):
    missing = []
    if FLOWPROC_INTERPRETER == "salesforce":
        if not SF_INSTANCE_URL:
            missing.append('SF_INSTANCE_URL')
        if not SF_ACCESS_TOKEN:
            missing.append('SF_ACCESS_TOKEN')
    if FLOWPROC_STORE == "supabase":
        if not SUPABASE_URL:
            missing.append('SUPABASE_URL')
        if not SUPABASE_KEY:
            missing.append('SUPABASE_KEY')
    if missing and raise_on_missing:
        raise EnvironmentError(f"Missing required env vars: {', '.join(missing)}")
    return missing


__all__ = [
    "FLOWPROC_INTERPRETER",
    "FLOWPROC_STORE",
    "CONFIG_TABLE",
    "CONFIG_FIELD",
    "CONFIG_NAME_COLUMN",
    "SF_INSTANCE_URL",
    "SF_ACCESS_TOKEN",
    "SF_API_VERSION",
    "SUPABASE_URL",
    "SUPABASE_KEY",
    "get_read_allowlist",
    "validate_keys",
]
