from __future__ import annotations

from dataclasses import dataclass
from typing import List


POOL_KIND_V3 = "uniswap_v3"


@dataclass(frozen=True)
class Hop:
    pool_kind: str
    pool_address: str
    amount_in: str
    amount_out: str
    token_in: str
    token_out: str

    @property
    def is_v3(self) -> bool:
        return self.pool_kind == POOL_KIND_V3

    @property
    def zero_for_one(self) -> bool:
        # Plain string order, not address magnitude ("0xB.." < "0xa..").
        return self.token_in < self.token_out


@dataclass(frozen=True)
class DecodedHop:
    is_v3: bool
    zero_for_one: bool
    pool_address: str


@dataclass(frozen=True)
class DecodedRoute:
    amount_in: int
    profit: int
    hops: List[DecodedHop]

    @property
    def amount_out(self) -> int:
        return self.amount_in + self.profit
