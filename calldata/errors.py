from __future__ import annotations

from typing import Any, Dict, Optional


class RouteError(ValueError):
    """Base class for route blobs that cannot be built or read back.

    ``reason`` is a stable snake_case code suitable for counters and
    drop logs; the message is for humans.
    """

    reason = "route_error"

    def __init__(self, message: str = "", *, hop_index: Optional[int] = None, value: Optional[str] = None) -> None:
        super().__init__(message or self.reason.replace("_", " "))
        self.hop_index = hop_index
        self.value = value

    def as_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"reason": self.reason, "message": str(self)}
        if self.hop_index is not None:
            out["hop_index"] = int(self.hop_index)
        if self.value is not None:
            out["value"] = str(self.value)
        return out


class EncodeError(RouteError):
    """Raised by the encoder; nothing is emitted for the route."""

    reason = "encode_error"


class EmptyRoute(EncodeError):
    reason = "empty_route"


class InvalidAmountIn(EncodeError):
    reason = "invalid_amount_in"


class InvalidAmountOut(EncodeError):
    reason = "invalid_amount_out"


class UnprofitableRoute(EncodeError):
    reason = "unprofitable_route"


class InvalidPoolAddress(EncodeError):
    reason = "invalid_pool_address"


class MalformedRoute(RouteError):
    """Raised by the decoder for blobs that do not follow the route layout."""

    reason = "malformed_route"
