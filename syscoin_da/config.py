"""
Syscoin DA client configuration.

This module defines the configuration surface for the blob client:
- RPC endpoint and static basic-auth credentials
- Blob explorer (PoDA) base URL, used only for log links
- JSON-RPC method names of the node's blob extension
- Optional HTTP timeout

All fields have defaults matching a local devnet node and can be overridden via
environment variables. Nothing here performs I/O.

Environment variables (all optional):

  SYSCOIN_DA_RPC_URL=http://l1:8370
  SYSCOIN_DA_RPC_USER=u
  SYSCOIN_DA_RPC_PASSWORD=p
  SYSCOIN_DA_PODA_URL=http://poda.tanenbaum.io/vh/

  # Method names of the blob RPC extension. A Syscoin Core node exposes them
  # as syscoincreatenevmblob / getnevmblobdata.
  SYSCOIN_DA_CREATE_METHOD=createblob
  SYSCOIN_DA_GET_METHOD=getblobdata

  # Unset means no timeout: a hung node blocks the call until the caller
  # cancels it. Accepts seconds ("30", "2.5") or "500ms", "2s", "1m".
  SYSCOIN_DA_HTTP_TIMEOUT=
"""

from __future__ import annotations

import os
import re
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Dict, Optional
from urllib.parse import urlparse

DEFAULT_RPC_URL = "http://l1:8370"
DEFAULT_RPC_USER = "u"
DEFAULT_RPC_PASSWORD = "p"
DEFAULT_PODA_URL = "http://poda.tanenbaum.io/vh/"

CREATE_BLOB_METHOD = "createblob"
GET_BLOB_DATA_METHOD = "getblobdata"


# ------------------------------- helpers ------------------------------------


_DURATION_RE = re.compile(r"^\s*(?P<num>\d+(?:\.\d+)?)\s*(?P<unit>ms|s|m)?\s*$", re.IGNORECASE)


def _getenv(key: str, default: str | None = None) -> str | None:
    v = os.environ.get(key)
    return v if v is not None and v.strip() != "" else default


def parse_duration(value: Optional[str]) -> Optional[float]:
    """
    Parse durations like "500ms", "2s", "1.5m" or plain seconds into float
    seconds. Empty or missing input yields None.
    """
    if value is None or value.strip() == "":
        return None
    m = _DURATION_RE.match(value)
    if not m:
        raise ValueError(f"Invalid duration: {value!r}")
    num = float(m.group("num"))
    unit = (m.group("unit") or "s").lower()
    if unit == "ms":
        return num / 1000.0
    if unit == "m":
        return num * 60.0
    return num


# ------------------------------- config -------------------------------------


@dataclass(frozen=True)
class SyscoinDAConfig:
    """
    Connection settings for one Syscoin node.

    - rpc_url: JSON-RPC endpoint (http/https)
    - user/password: static basic-auth credentials
    - poda_url: blob explorer base; blob ids are appended to it
    - create_method/get_method: RPC method names for submit and fetch
    - timeout_s: per-request timeout in seconds, None for no timeout
    """
    rpc_url: str = DEFAULT_RPC_URL
    user: str = DEFAULT_RPC_USER
    password: str = DEFAULT_RPC_PASSWORD
    poda_url: str = DEFAULT_PODA_URL
    create_method: str = CREATE_BLOB_METHOD
    get_method: str = GET_BLOB_DATA_METHOD
    timeout_s: Optional[float] = None

    def validate(self) -> None:
        p = urlparse(self.rpc_url)
        if p.scheme not in ("http", "https"):
            raise ValueError(f"rpc_url must be http/https, got: {self.rpc_url!r}")
        if not p.netloc:
            raise ValueError(f"rpc_url missing host:port: {self.rpc_url!r}")
        if not self.create_method or not self.get_method:
            raise ValueError("RPC method names must be non-empty")
        if self.timeout_s is not None and self.timeout_s <= 0:
            raise ValueError("timeout_s must be > 0 when set")

    def to_dict(self) -> Dict[str, object]:
        d = asdict(self)
        d["password"] = "***"
        return d


# ------------------------------- loader -------------------------------------


def load_config_from_env() -> SyscoinDAConfig:
    cfg = SyscoinDAConfig(
        rpc_url=_getenv("SYSCOIN_DA_RPC_URL", DEFAULT_RPC_URL) or DEFAULT_RPC_URL,
        user=_getenv("SYSCOIN_DA_RPC_USER", DEFAULT_RPC_USER) or DEFAULT_RPC_USER,
        password=_getenv("SYSCOIN_DA_RPC_PASSWORD", DEFAULT_RPC_PASSWORD) or DEFAULT_RPC_PASSWORD,
        poda_url=_getenv("SYSCOIN_DA_PODA_URL", DEFAULT_PODA_URL) or DEFAULT_PODA_URL,
        create_method=_getenv("SYSCOIN_DA_CREATE_METHOD", CREATE_BLOB_METHOD) or CREATE_BLOB_METHOD,
        get_method=_getenv("SYSCOIN_DA_GET_METHOD", GET_BLOB_DATA_METHOD) or GET_BLOB_DATA_METHOD,
        timeout_s=parse_duration(_getenv("SYSCOIN_DA_HTTP_TIMEOUT")),
    )
    cfg.validate()
    return cfg


@lru_cache(maxsize=1)
def get_config() -> SyscoinDAConfig:
    """
    Load and validate configuration (cached). Clear the cache in tests
    via `get_config.cache_clear()` to observe env changes.
    """
    return load_config_from_env()


__all__ = [
    "SyscoinDAConfig",
    "load_config_from_env",
    "get_config",
    "parse_duration",
    "CREATE_BLOB_METHOD",
    "GET_BLOB_DATA_METHOD",
]
