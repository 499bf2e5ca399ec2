from calldata.decoder import decode_route
from calldata.encoder import encode_route, encode_route_hex, encoded_length, try_encode_route
from calldata.errors import (
    EmptyRoute,
    EncodeError,
    InvalidAmountIn,
    InvalidAmountOut,
    InvalidPoolAddress,
    MalformedRoute,
    RouteError,
    UnprofitableRoute,
)
from calldata.executor_call import build_execute_call, build_execute_call_hex
from calldata.types import DecodedHop, DecodedRoute, Hop

__all__ = [
    "DecodedHop",
    "DecodedRoute",
    "EmptyRoute",
    "EncodeError",
    "Hop",
    "InvalidAmountIn",
    "InvalidAmountOut",
    "InvalidPoolAddress",
    "MalformedRoute",
    "RouteError",
    "UnprofitableRoute",
    "build_execute_call",
    "build_execute_call_hex",
    "decode_route",
    "encode_route",
    "encode_route_hex",
    "encoded_length",
    "try_encode_route",
]
