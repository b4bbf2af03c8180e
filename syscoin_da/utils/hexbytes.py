"""
Hex helpers for blob payloads.

The Syscoin blob RPCs carry payloads as bare hex (no "0x" prefix). Encoding
always yields lowercase; decoding accepts either case but is otherwise strict:
no prefix, no whitespace, even length.
"""
from __future__ import annotations

import re
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def _b(x: BytesLike) -> bytes:
    if isinstance(x, bytes):
        return x
    if isinstance(x, (bytearray, memoryview)):
        return bytes(x)
    raise TypeError(f"expected bytes-like, got {type(x).__name__}")


def encode_hex(b: BytesLike) -> str:
    """Return lowercase hex for the given bytes, without prefix."""
    return _b(b).hex()


def decode_hex(s: str) -> bytes:
    """
    Parse bare hex into bytes.
    Raises ValueError on non-hex characters or odd length.
    """
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    if _HEX_RE.fullmatch(s) is None:
        raise ValueError("invalid character in hex string")
    if len(s) % 2 != 0:
        raise ValueError("hex payload length must be even")
    return bytes.fromhex(s)


__all__ = ["BytesLike", "encode_hex", "decode_hex"]
