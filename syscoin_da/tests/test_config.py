from __future__ import annotations

import pytest

from syscoin_da.client import SyscoinClient
from syscoin_da.config import SyscoinDAConfig, get_config, load_config_from_env, parse_duration

_ENV = (
    "SYSCOIN_DA_RPC_URL",
    "SYSCOIN_DA_RPC_USER",
    "SYSCOIN_DA_RPC_PASSWORD",
    "SYSCOIN_DA_PODA_URL",
    "SYSCOIN_DA_CREATE_METHOD",
    "SYSCOIN_DA_GET_METHOD",
    "SYSCOIN_DA_HTTP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for k in _ENV:
        monkeypatch.delenv(k, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


def test_defaults() -> None:
    cfg = load_config_from_env()
    assert cfg == SyscoinDAConfig()
    assert cfg.rpc_url == "http://l1:8370"
    assert (cfg.user, cfg.password) == ("u", "p")
    assert cfg.poda_url == "http://poda.tanenbaum.io/vh/"
    assert (cfg.create_method, cfg.get_method) == ("createblob", "getblobdata")
    assert cfg.timeout_s is None


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("SYSCOIN_DA_RPC_URL", "https://rpc.example:18370")
    monkeypatch.setenv("SYSCOIN_DA_RPC_USER", "bob")
    monkeypatch.setenv("SYSCOIN_DA_RPC_PASSWORD", "hunter2")
    monkeypatch.setenv("SYSCOIN_DA_PODA_URL", "https://poda.example/vh/")
    monkeypatch.setenv("SYSCOIN_DA_CREATE_METHOD", "syscoincreatenevmblob")
    monkeypatch.setenv("SYSCOIN_DA_GET_METHOD", "getnevmblobdata")
    monkeypatch.setenv("SYSCOIN_DA_HTTP_TIMEOUT", "1500ms")

    cfg = load_config_from_env()
    assert cfg.rpc_url == "https://rpc.example:18370"
    assert (cfg.user, cfg.password) == ("bob", "hunter2")
    assert cfg.poda_url == "https://poda.example/vh/"
    assert cfg.create_method == "syscoincreatenevmblob"
    assert cfg.get_method == "getnevmblobdata"
    assert cfg.timeout_s == 1.5


def test_blank_env_values_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("SYSCOIN_DA_RPC_URL", "   ")
    monkeypatch.setenv("SYSCOIN_DA_HTTP_TIMEOUT", "")
    cfg = load_config_from_env()
    assert cfg.rpc_url == "http://l1:8370"
    assert cfg.timeout_s is None


@pytest.mark.parametrize(
    "raw, seconds",
    [(None, None), ("", None), ("30", 30.0), ("2.5", 2.5), ("500ms", 0.5), ("2s", 2.0), ("1m", 60.0)],
)
def test_parse_duration(raw, seconds) -> None:
    assert parse_duration(raw) == seconds


def test_parse_duration_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_duration("soon")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rpc_url": "ftp://node:8370"},
        {"rpc_url": "http://"},
        {"create_method": ""},
        {"get_method": ""},
        {"timeout_s": 0},
    ],
)
def test_validate_rejects(kwargs) -> None:
    with pytest.raises(ValueError):
        SyscoinDAConfig(**kwargs).validate()


def test_loader_validates(monkeypatch) -> None:
    monkeypatch.setenv("SYSCOIN_DA_RPC_URL", "l1:8370")
    with pytest.raises(ValueError):
        load_config_from_env()


def test_to_dict_masks_password() -> None:
    d = SyscoinDAConfig(password="hunter2").to_dict()
    assert d["password"] == "***"
    assert d["user"] == "u"


def test_get_config_is_cached(monkeypatch) -> None:
    first = get_config()
    monkeypatch.setenv("SYSCOIN_DA_RPC_URL", "http://other:1")
    assert get_config() is first
    get_config.cache_clear()
    assert get_config().rpc_url == "http://other:1"


def test_client_from_env(monkeypatch, metrics) -> None:
    monkeypatch.setenv("SYSCOIN_DA_RPC_URL", "http://envnode:8370")
    monkeypatch.setenv("SYSCOIN_DA_HTTP_TIMEOUT", "3s")
    client = SyscoinClient.from_env(metrics=metrics)
    assert client.config.rpc_url == "http://envnode:8370"
    assert client.transport.url == "http://envnode:8370"
    assert client.transport.http.timeout.read == 3.0
