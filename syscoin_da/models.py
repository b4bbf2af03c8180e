"""
Wire models for the Syscoin blob RPC extension.

Typed views over the JSON-RPC 2.0 envelopes exchanged with the node:

- JsonRpcRequest: outgoing envelope (``id`` is always the string "1")
- JsonRpcError: the ``error`` object
- CreateBlobResponse: reply to the create method, ``result.versionhash``
- BlobDataResult: ``result`` of the get method, ``data`` (hex or null)

Every field the node may omit is Optional so absence is explicit; unknown
fields are ignored because nodes add diagnostics freely.
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

UNKNOWN_ERROR_MESSAGE = "Unknown error"


class JsonRpcRequest(BaseModel):
    model_config = ConfigDict(frozen=True)
    method: str
    params: Dict[str, Any]
    id: str = "1"
    jsonrpc: Literal["2.0"] = "2.0"


class JsonRpcError(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
    code: Optional[int] = None
    message: Optional[str] = None
    data: Optional[Any] = None

    def message_or_default(self) -> str:
        return self.message if self.message else UNKNOWN_ERROR_MESSAGE


class _Envelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
    error: Optional[JsonRpcError] = None
    id: Optional[Union[int, str]] = None


class CreateBlobResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
    versionhash: str


class CreateBlobResponse(_Envelope):
    result: Optional[CreateBlobResult] = None


class BlobDataResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
    data: Optional[str] = None


__all__ = [
    "UNKNOWN_ERROR_MESSAGE",
    "JsonRpcRequest",
    "JsonRpcError",
    "CreateBlobResult",
    "CreateBlobResponse",
    "BlobDataResult",
]
