from __future__ import annotations

from typing import List, Union

from eth_utils import decode_hex, to_checksum_address

from calldata.encoder import FLAG_V3, FLAG_ZERO_FOR_ONE, HEADER_LEN, HOP_RECORD_LEN
from calldata.errors import MalformedRoute
from calldata.types import DecodedHop, DecodedRoute


_FLAG_MASK = FLAG_V3 | FLAG_ZERO_FOR_ONE


def _as_bytes(blob: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(blob, (bytes, bytearray)):
        return bytes(blob)
    try:
        return decode_hex(str(blob).strip())
    except ValueError as exc:
        raise MalformedRoute(f"route is not valid hex: {exc}") from exc


def decode_route(blob: Union[bytes, bytearray, str]) -> DecodedRoute:
    """Unpack an encoded route. Hops come back in swap order (first swap first)."""
    data = _as_bytes(blob)
    body = len(data) - HEADER_LEN
    if body < HOP_RECORD_LEN or body % HOP_RECORD_LEN:
        raise MalformedRoute(f"bad route length: {len(data)} bytes")

    amount_in = int.from_bytes(data[0:16], "big")
    profit = int.from_bytes(data[16:32], "big")

    hops: List[DecodedHop] = []
    i = HEADER_LEN
    while i < len(data):
        flags = data[i]
        if flags & ~_FLAG_MASK:
            raise MalformedRoute(f"reserved flag bits set: 0x{flags:02x}", hop_index=len(hops))
        hops.append(
            DecodedHop(
                is_v3=bool(flags & FLAG_V3),
                zero_for_one=bool(flags & FLAG_ZERO_FOR_ONE),
                pool_address=to_checksum_address(data[i + 1 : i + HOP_RECORD_LEN]),
            )
        )
        i += HOP_RECORD_LEN
    hops.reverse()
    return DecodedRoute(amount_in=amount_in, profit=profit, hops=hops)
