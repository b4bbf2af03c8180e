from __future__ import annotations

import base64
import hashlib
import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
from prometheus_client import CollectorRegistry

from syscoin_da.client import SyscoinClient
from syscoin_da.config import SyscoinDAConfig
from syscoin_da.metrics import ClientMetrics

RPC_URL = "http://l1.test:8370"


class FakeSyscoinNode:
    """
    In-memory stand-in for a Syscoin node's blob RPC, served through
    httpx.MockTransport.

    Blob ids are "0x" + sha256(data); lookups are keyed by the bare digest,
    which is what the client sends after dropping the 2-char prefix.
    """

    def __init__(self, *, create_method: str = "createblob", get_method: str = "getblobdata") -> None:
        self.create_method = create_method
        self.get_method = get_method
        self.store: Dict[str, bytes] = {}
        self.requests: List[httpx.Request] = []
        self.bodies: List[Dict[str, Any]] = []
        # Set to a callable(body) -> httpx.Response to override the next replies.
        self.override: Optional[Callable[[Dict[str, Any]], httpx.Response]] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(request)
        self.bodies.append(body)
        if self.override is not None:
            return self.override(body)

        method = body["method"]
        params = body["params"]
        if method == self.create_method:
            data = bytes.fromhex(params["data"])
            digest = hashlib.sha256(data).hexdigest()
            self.store[digest] = data
            return httpx.Response(200, json={"result": {"versionhash": "0x" + digest}, "error": None, "id": body["id"]})
        if method == self.get_method:
            key = params["versionhash_or_txid"]
            blob = self.store.get(key)
            data = blob.hex() if blob is not None else None
            return httpx.Response(200, json={"result": {"data": data}, "error": None, "id": body["id"]})
        # bitcoind answers unknown methods with HTTP 404 and an error envelope
        return httpx.Response(
            404,
            json={"result": None, "error": {"code": -32601, "message": "Method not found"}, "id": body["id"]},
        )

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


def basic_auth_header(user: str, password: str) -> str:
    return "Basic " + base64.b64encode(f"{user}:{password}".encode()).decode()


def reply(payload: Any, status: int = 200) -> Callable[[Dict[str, Any]], httpx.Response]:
    return lambda body: httpx.Response(status, json=payload)


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture
def metrics(registry: CollectorRegistry) -> ClientMetrics:
    return ClientMetrics(registry=registry)


@pytest.fixture
def config() -> SyscoinDAConfig:
    return SyscoinDAConfig(rpc_url=RPC_URL, user="alice", password="s3cret")


@pytest.fixture
def node() -> FakeSyscoinNode:
    return FakeSyscoinNode()


@pytest.fixture
def client(node: FakeSyscoinNode, config: SyscoinDAConfig, metrics: ClientMetrics) -> SyscoinClient:
    return SyscoinClient(config, http_client=node.http_client(), metrics=metrics)
