from __future__ import annotations

from typing import Union

from eth_abi import encode as abi_encode
from eth_utils import decode_hex

from calldata.utils import selector, to_hex_prefixed


EXECUTE_SIGNATURE = "executeAtomicArbitrageSwap(bytes)"


def build_execute_call(encoded_route: Union[bytes, bytearray, str]) -> bytes:
    """Wrap an encoded route as call data for the executor contract."""
    if isinstance(encoded_route, str):
        route = decode_hex(encoded_route.strip())
    else:
        route = bytes(encoded_route)
    return selector(EXECUTE_SIGNATURE) + abi_encode(["bytes"], [route])


def build_execute_call_hex(encoded_route: Union[bytes, bytearray, str]) -> str:
    return to_hex_prefixed(build_execute_call(encoded_route))
