from __future__ import annotations

import re
from typing import Optional

from eth_utils import decode_hex, function_signature_to_4byte_selector


UINT128_MAX = (1 << 128) - 1
ADDRESS_LEN = 20

_UINT_RE = re.compile(r"\+?[0-9]+")


def selector(signature: str) -> bytes:
    return bytes(function_signature_to_4byte_selector(signature))


def to_hex_prefixed(value: bytes) -> str:
    return "0x" + bytes(value).hex()


def parse_uint128(value: object) -> Optional[int]:
    """Parse a decimal amount string, None if it is not a uint128."""
    if not isinstance(value, str) or not _UINT_RE.fullmatch(value):
        return None
    amount = int(value)
    if amount > UINT128_MAX:
        return None
    return amount


def decode_pool_address(value: object) -> Optional[bytes]:
    """Decode a (optionally 0x-prefixed) hex pool address, None unless it is 20 bytes."""
    if not isinstance(value, str):
        return None
    try:
        raw = decode_hex(value)
    except ValueError:
        return None
    if len(raw) != ADDRESS_LEN:
        return None
    return raw
