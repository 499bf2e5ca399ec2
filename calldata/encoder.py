from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from eth_abi.packed import encode_packed

from calldata.errors import (
    EmptyRoute,
    EncodeError,
    InvalidAmountIn,
    InvalidAmountOut,
    InvalidPoolAddress,
    UnprofitableRoute,
)
from calldata.types import Hop
from calldata.utils import decode_pool_address, parse_uint128


HEADER_LEN = 32
HOP_RECORD_LEN = 21

FLAG_V3 = 0x80
FLAG_ZERO_FOR_ONE = 0x40


def hop_flags(hop: Hop) -> int:
    flags = 0
    if hop.is_v3:
        flags |= FLAG_V3
    if hop.zero_for_one:
        flags |= FLAG_ZERO_FOR_ONE
    return flags


def encoded_length(n_hops: int) -> int:
    return HEADER_LEN + HOP_RECORD_LEN * int(n_hops)


def encode_route(hops: Sequence[Hop]) -> bytes:
    """
    Pack a route for the flash arbitrage executor.

    Layout: uint128 amount_in | uint128 profit | per hop, last swap first:
    flags byte (bit7 = v3 pool, bit6 = token_in < token_out) + 20-byte pool.
    Raises the matching EncodeError subclass; nothing is emitted on failure.
    """
    if not hops:
        raise EmptyRoute("route has no hops")

    first, last = hops[0], hops[-1]
    amount_in = parse_uint128(first.amount_in)
    if amount_in is None:
        raise InvalidAmountIn(f"invalid amount_in: {first.amount_in!r}", hop_index=0, value=first.amount_in)
    amount_out = parse_uint128(last.amount_out)
    if amount_out is None:
        raise InvalidAmountOut(
            f"invalid amount_out: {last.amount_out!r}", hop_index=len(hops) - 1, value=last.amount_out
        )
    if amount_in > amount_out:
        raise UnprofitableRoute(
            f"route does not generate a profit ({amount_in} in > {amount_out} out)",
            value=str(amount_out - amount_in),
        )

    types: List[str] = ["uint128", "uint128"]
    values: List[object] = [amount_in, amount_out - amount_in]
    for idx in range(len(hops) - 1, -1, -1):
        hop = hops[idx]
        pool = decode_pool_address(hop.pool_address)
        if pool is None:
            raise InvalidPoolAddress(
                f"invalid pool address at hop {idx}: {hop.pool_address!r}", hop_index=idx, value=hop.pool_address
            )
        types.extend(["uint8", "bytes20"])
        values.extend([hop_flags(hop), pool])

    return encode_packed(types, values)


def encode_route_hex(hops: Sequence[Hop]) -> str:
    return encode_route(hops).hex()


def try_encode_route(hops: Sequence[Hop]) -> Tuple[Optional[bytes], Optional[str]]:
    try:
        return encode_route(hops), None
    except EncodeError as exc:
        return None, exc.reason
