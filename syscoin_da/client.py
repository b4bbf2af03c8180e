"""
Syscoin DA client
=================

Posts rollup batch data to a Syscoin node's blob RPC extension and reads it
back. Two RPC calls make up the whole protocol:

- create (default ``createblob``): ``{"data": <hex>}`` -> ``{"versionhash": ...}``
- get (default ``getblobdata``): ``{"versionhash_or_txid": <key>}`` -> ``{"data": <hex>|null}``

Blob ids handed out by :meth:`SyscoinClient.submit` are passed back verbatim
to :meth:`SyscoinClient.fetch`, which drops the first two characters before
the lookup. The node does not understand that prefix; it is kept untouched and
never interpreted.

Usage
-----
    from syscoin_da import SyscoinClient, SyscoinDAConfig

    async with SyscoinClient(SyscoinDAConfig(rpc_url="http://127.0.0.1:8370")) as da:
        res = await da.submit(b"batch bytes", context=42)
        rec = await da.fetch(res.blob_id)
        if rec is not None:
            assert rec.data == b"batch bytes"

Every failure is a non-retriable :class:`~syscoin_da.errors.DAError`. A blob
the node has no data for yet is reported as ``None``, not as an error.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .config import SyscoinDAConfig, get_config
from .errors import DAError, DecodeError, InvalidInput, TransportError
from .interface import DataAvailabilityClient
from .metrics import ClientMetrics, get_metrics
from .models import BlobDataResult, CreateBlobResponse
from .rpc import JsonRpcTransport, raise_for_rpc_error
from .types import InclusionRecord, SubmissionResult
from .utils.hexbytes import decode_hex, encode_hex

log = logging.getLogger("syscoin_da.client")

BLOB_ID_PREFIX_LEN = 2

_M = TypeVar("_M", bound=BaseModel)


def _parse(model: Type[_M], raw: Any, method: str) -> _M:
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise TransportError(
            f"Malformed {method} response: {e.error_count()} validation error(s)",
            data={"method": method},
        ) from e


def _blob_hex(raw: Mapping[str, Any]) -> Optional[str]:
    """
    Hex payload of a get reply, or None when the node holds no usable data.
    A non-object ``result`` or a non-string ``data`` counts as no record.
    """
    result = raw.get("result")
    if not isinstance(result, Mapping):
        return None
    try:
        return BlobDataResult.model_validate(dict(result)).data
    except ValidationError:
        return None


class SyscoinClient(DataAvailabilityClient):
    """
    DA client for a single Syscoin node.

    Parameters
    ----------
    config : SyscoinDAConfig | None
        Endpoint, credentials and method names. Defaults to ``SyscoinDAConfig()``.
    http_client : httpx.AsyncClient | None
        Optional pre-built client (custom transport, proxies, tests). When
        omitted one is created and owned by this client.
    metrics : ClientMetrics | None
        Metrics sink; the process-wide instance by default.
    transport : JsonRpcTransport | None
        Share an existing transport. Used by :meth:`clone`.
    """

    def __init__(
        self,
        config: Optional[SyscoinDAConfig] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        metrics: Optional[ClientMetrics] = None,
        transport: Optional[JsonRpcTransport] = None,
    ) -> None:
        self.config = config or SyscoinDAConfig()
        self._owns_transport = transport is None
        self._rpc = transport or JsonRpcTransport(
            self.config.rpc_url,
            user=self.config.user,
            password=self.config.password,
            timeout_s=self.config.timeout_s,
            http_client=http_client,
        )
        self._metrics = metrics or get_metrics()
        if self._owns_transport:
            log.debug("client configured %s", self.config.to_dict())

    @classmethod
    def from_env(cls, **kwargs: Any) -> "SyscoinClient":
        """Build a client from ``SYSCOIN_DA_*`` environment variables."""
        return cls(get_config(), **kwargs)

    # --- lifecycle

    async def aclose(self) -> None:
        """Close the transport if this handle created it. Clones never do."""
        if self._owns_transport:
            await self._rpc.aclose()

    async def __aenter__(self) -> "SyscoinClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"SyscoinClient(rpc_url={self.config.rpc_url!r})"

    # --- DataAvailabilityClient

    async def submit(self, data: bytes, context: Any = None) -> SubmissionResult:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidInput(f"blob data must be bytes-like, got {type(data).__name__}")
        payload = bytes(data)
        size = len(payload)
        method = self.config.create_method

        with self._metrics.time_rpc(method=method) as obs:
            try:
                raw = await self._rpc.call(method, {"data": encode_hex(payload)})
                raise_for_rpc_error(raw)
                resp = _parse(CreateBlobResponse, raw, method)
                if resp.result is None:
                    raise TransportError(f"{method} response has neither result nor error", data={"method": method})
            except DAError as e:
                obs.set_outcome(e.code)
                log.warning("blob submit failed size=%d context=%r code=%s: %s", size, context, e.code, e.message)
                raise
            obs.set_outcome("ok")

        blob_id = resp.result.versionhash
        self._metrics.note_submitted(size)
        log.info("blob submitted size=%d context=%r blob_id=%s explorer=%s", size, context, blob_id, self.explorer_url(blob_id))
        return SubmissionResult(blob_id=blob_id)

    async def fetch(self, blob_id: str) -> Optional[InclusionRecord]:
        if not isinstance(blob_id, str) or len(blob_id) < BLOB_ID_PREFIX_LEN:
            raise InvalidInput(
                f"blob id must be a string of at least {BLOB_ID_PREFIX_LEN} characters, got {blob_id!r}",
                data={"blob_id": blob_id if isinstance(blob_id, str) else repr(blob_id)},
            )
        key = blob_id[BLOB_ID_PREFIX_LEN:]
        method = self.config.get_method

        with self._metrics.time_rpc(method=method) as obs:
            try:
                raw = await self._rpc.call(method, {"versionhash_or_txid": key})
                raise_for_rpc_error(raw, objects_only=True)
                hex_data = _blob_hex(raw)
                if hex_data is None:
                    obs.set_outcome("not_found")
                    log.debug("blob not available blob_id=%s", blob_id)
                    return None
                try:
                    data = decode_hex(hex_data)
                except ValueError as e:
                    raise DecodeError.from_exc(e, data={"blob_id": blob_id}) from e
            except DAError as e:
                obs.set_outcome(e.code)
                log.warning("blob fetch failed blob_id=%s code=%s: %s", blob_id, e.code, e.message)
                raise
            obs.set_outcome("ok")

        self._metrics.note_retrieved(len(data))
        log.debug("blob fetched blob_id=%s size=%d", blob_id, len(data))
        return InclusionRecord(data=data)

    def clone(self) -> "SyscoinClient":
        return SyscoinClient(self.config, metrics=self._metrics, transport=self._rpc)

    def size_limit(self) -> Optional[int]:
        return None

    # --- helpers

    @property
    def transport(self) -> JsonRpcTransport:
        return self._rpc

    def explorer_url(self, blob_id: str) -> str:
        """Link to the blob on the configured PoDA explorer (informational)."""
        return f"{self.config.poda_url}{blob_id}"


__all__ = ["SyscoinClient", "BLOB_ID_PREFIX_LEN"]
