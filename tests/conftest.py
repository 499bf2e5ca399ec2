import pytest


# Two-hop WETH -> USDC -> WETH route sent by the hardhat swap script.
KNOWN_ROUTE_HEX = (
    "000000000000000000000000000f4240"
    "000000000000000000000000000003e8"
    "80" "3b00f82071576b8489a6e3df223dcc0e937841d1"
    "c0" "1fa8dda81477a5b6fa1b2e149e93ed9c7928992f"
)


@pytest.fixture
def known_route_hex() -> str:
    return KNOWN_ROUTE_HEX
