"""
JSON-RPC 2.0 transport for a Syscoin node.

One call = one HTTP POST with basic auth against the configured endpoint. There
is no retry loop: failures surface immediately as
:class:`~syscoin_da.errors.TransportError` or
:class:`~syscoin_da.errors.RemoteError` and the caller decides what to do.

The HTTP status code is not interpreted. Bitcoin-derived nodes answer RPC
errors with HTTP 500 and a regular JSON-RPC error envelope, so the body is
always parsed and only a non-JSON body counts as a transport failure.

Typical use
-----------
>>> rpc = JsonRpcTransport("http://127.0.0.1:8370", user="u", password="p")
>>> raw = await rpc.call("getblobdata", {"versionhash_or_txid": "ab12..."})
>>> raise_for_rpc_error(raw)
>>> await rpc.aclose()
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional

import httpx
from pydantic import ValidationError

from .errors import RemoteError, TransportError
from .models import UNKNOWN_ERROR_MESSAGE, JsonRpcError, JsonRpcRequest
from .version import user_agent

Json = Dict[str, Any]

log = logging.getLogger("syscoin_da.rpc")


def raise_for_rpc_error(payload: Mapping[str, Any], *, objects_only: bool = False) -> None:
    """
    Raise RemoteError if the envelope carries a non-null ``error``, whatever
    else it contains.

    With ``objects_only`` only a JSON object counts as an error; scalar
    values such as ``false`` or a bare string are ignored.
    """
    err = payload.get("error")
    if err is None:
        return
    if isinstance(err, Mapping):
        try:
            parsed = JsonRpcError.model_validate(dict(err))
        except ValidationError:
            msg = err.get("message")
            parsed = JsonRpcError(message=str(msg) if msg else None)
        raise RemoteError(parsed.message_or_default(), rpc_code=parsed.code)
    if objects_only:
        return
    raise RemoteError(str(err) or UNKNOWN_ERROR_MESSAGE)


class JsonRpcTransport:
    """
    Async JSON-RPC client over a (possibly shared) ``httpx.AsyncClient``.

    When no ``http_client`` is given one is created with ``timeout_s`` applied
    to every phase of the request (None disables timeouts) and closed by
    :meth:`aclose`. An injected client is used as-is and never closed here.
    """

    def __init__(
        self,
        url: str,
        *,
        user: str,
        password: str,
        timeout_s: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.url = url
        self._auth = httpx.BasicAuth(user, password)
        self._own_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_s),
            headers={"Content-Type": "application/json", "User-Agent": user_agent()},
        )

    @property
    def http(self) -> httpx.AsyncClient:
        return self._http

    async def aclose(self) -> None:
        if self._own_client:
            await self._http.aclose()

    async def call(self, method: str, params: Mapping[str, Any]) -> Json:
        """
        POST a single JSON-RPC request and return the decoded envelope.

        Raises TransportError for network/HTTP failures and for bodies that
        are not a JSON object. RPC-level errors are left in the envelope; see
        :func:`raise_for_rpc_error`.
        """
        body = JsonRpcRequest(method=method, params=dict(params)).model_dump()
        log.debug("rpc call method=%s url=%s", method, self.url)
        try:
            resp = await self._http.post(self.url, json=body, auth=self._auth)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError.from_exc(e, data={"method": method}) from e

        try:
            payload = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TransportError(
                f"Non-JSON response from RPC (HTTP {resp.status_code}): {resp.text[:256]}",
                data={"method": method, "status": resp.status_code},
            ) from e

        if not isinstance(payload, dict):
            raise TransportError(
                f"Invalid JSON-RPC response type: {type(payload).__name__}",
                data={"method": method, "status": resp.status_code},
            )
        log.debug("rpc reply method=%s status=%d", method, resp.status_code)
        return payload


__all__ = ["JsonRpcTransport", "raise_for_rpc_error"]
