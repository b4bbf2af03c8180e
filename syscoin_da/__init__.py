"""
syscoin_da: data-availability client for Syscoin blob RPC.

Exports the client, its abstract contract, result types and errors.
"""

from .client import SyscoinClient
from .config import SyscoinDAConfig, get_config, load_config_from_env
from .errors import DAError, DecodeError, InvalidInput, RemoteError, TransportError
from .interface import DataAvailabilityClient
from .types import InclusionRecord, SubmissionResult
from .version import __version__

__all__ = [
    "SyscoinClient",
    "SyscoinDAConfig",
    "get_config",
    "load_config_from_env",
    "DataAvailabilityClient",
    "SubmissionResult",
    "InclusionRecord",
    "DAError",
    "TransportError",
    "RemoteError",
    "DecodeError",
    "InvalidInput",
    "__version__",
]
