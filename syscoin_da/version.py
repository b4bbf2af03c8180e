"""
syscoin_da version utilities.

- __version__: base semantic version, overridable via SYSCOIN_DA_VERSION.
- user_agent(): User-Agent header value for RPC requests.
"""

from __future__ import annotations

import os

# Bump this when making a release of the adapter.
_BASE_SEMVER = "0.1.0"

__version__ = os.environ.get("SYSCOIN_DA_VERSION") or _BASE_SEMVER


def user_agent() -> str:
    """User-Agent header value sent with every RPC request."""
    return f"syscoin-da-python/{__version__}"


__all__ = ["__version__", "user_agent"]
