"""
Syscoin DA client errors.

Every failure surfaced by the client is a :class:`DAError`. The host framework
only looks at two things: the message and the ``retriable`` flag. This adapter
never asks for an automatic retry, so ``retriable`` is always ``False``;
callers that need resilience must layer their own retry policy on top.

    from syscoin_da.errors import DAError, RemoteError

    try:
        res = await client.submit(payload)
    except RemoteError as e:
        log.warning("node rejected blob: %s (rpc code %s)", e.message, e.rpc_code)
    except DAError as e:
        log.warning("blob submission failed [%s]: %s", e.code, e.message)

All errors expose:
- .code      : stable machine-readable tag (snake_case)
- .message   : human readable message
- .data      : optional structured payload (dict)
- .retriable : whether the host may retry automatically (always False here)
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class DAError(Exception):
    """
    Base class for DA client errors.

    Subclasses set `default_code`.
    """
    default_code = "da_error"

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        data: Optional[Mapping[str, Any]] = None,
        retriable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.data: Dict[str, Any] = dict(data) if data else {}
        self.retriable = bool(retriable)

    def __str__(self) -> str:
        return self.message or self.code

    @classmethod
    def from_exc(cls, exc: BaseException, *, code: Optional[str] = None, data: Optional[Mapping[str, Any]] = None) -> "DAError":
        """
        Wrap an arbitrary exception with a best-effort message. Chain with
        ``raise Wrapped.from_exc(e) from e`` to keep the original cause.
        """
        detail = str(exc)
        msg = f"{exc.__class__.__name__}: {detail}" if detail else exc.__class__.__name__
        return cls(msg, code=code, data=data)


class TransportError(DAError):
    """
    The RPC call did not produce a usable JSON-RPC envelope: connection
    failure, timeout, non-JSON body or a response missing required fields.
    """
    default_code = "transport_error"


class RemoteError(DAError):
    """
    The node answered with a non-null JSON-RPC ``error`` object.
    """
    default_code = "remote_error"

    def __init__(self, message: str = "Unknown error", *, rpc_code: Optional[int] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.rpc_code = rpc_code
        if rpc_code is not None:
            self.data.setdefault("rpc_code", rpc_code)


class DecodeError(DAError):
    """
    Blob data returned by the node is not valid hex.
    """
    default_code = "decode_error"


class InvalidInput(DAError):
    """
    Caller supplied a malformed argument (e.g. a blob id that is too short).
    """
    default_code = "invalid_input"


__all__ = [
    "DAError",
    "TransportError",
    "RemoteError",
    "DecodeError",
    "InvalidInput",
]
