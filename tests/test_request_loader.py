import json
import sys
from pathlib import Path

import pytest

from pipeline.loader import RequestLoadError, load_request, parse_request


def _hop_json(**kw):
    hop = {
        "pool_type": "uniswap_v3",
        "pool_address": "0x" + "11" * 20,
        "amount_in": "1000",
        "amount_out": "1000",
        "token_in": "A",
        "token_out": "B",
    }
    hop.update(kw)
    return hop


def test_load_request_object(tmp_path: Path) -> None:
    path = tmp_path / "arb.json"
    path.write_text(json.dumps({"chain": "Mainnet", "request": [_hop_json(), _hop_json(pool_type="uniswap_v2")]}), encoding="utf-8")
    req = load_request(path, default_chain="mainnet")
    assert req.chain == "Mainnet"
    assert req.source == path
    assert [h.pool_kind for h in req.hops] == ["uniswap_v3", "uniswap_v2"]
    assert req.hops[0].pool_address == "0x" + "11" * 20


def test_bare_list_uses_default_chain() -> None:
    req = parse_request([_hop_json()], default_chain="sepolia")
    assert req.chain == "sepolia"
    assert len(req.hops) == 1


def test_numeric_amounts_become_strings() -> None:
    req = parse_request({"chain": "mainnet", "request": [_hop_json(amount_in=5, amount_out=7)]}, default_chain="x")
    assert req.hops[0].amount_in == "5"
    assert req.hops[0].amount_out == "7"


def test_pool_kind_alias() -> None:
    raw = _hop_json()
    raw["pool_kind"] = raw.pop("pool_type")
    req = parse_request([raw], default_chain="mainnet")
    assert req.hops[0].pool_kind == "uniswap_v3"


def test_empty_request_passes_through() -> None:
    req = parse_request({"chain": "mainnet", "request": []}, default_chain="mainnet")
    assert req.hops == []


@pytest.mark.parametrize(
    "data,reason",
    [
        ({"request": []}, "missing_chain"),
        ({"chain": 1, "request": []}, "missing_chain"),
        ({"chain": "mainnet"}, "invalid_request"),
        ({"chain": "mainnet", "request": {}}, "invalid_request"),
        ({"chain": "mainnet", "request": ["hop"]}, "invalid_request"),
        ("text", "invalid_request"),
    ],
)
def test_parse_request_errors(data, reason: str) -> None:
    with pytest.raises(RequestLoadError) as info:
        parse_request(data, default_chain="mainnet")
    assert info.value.reason == reason


def test_missing_hop_fields_named() -> None:
    raw = _hop_json()
    del raw["pool_type"]
    del raw["token_out"]
    with pytest.raises(RequestLoadError) as info:
        parse_request([raw], default_chain="mainnet")
    assert "pool_type" in str(info.value)
    assert "token_out" in str(info.value)


def test_invalid_json_file(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(RequestLoadError) as info:
        load_request(path, default_chain="mainnet")
    assert info.value.reason == "invalid_json"
    assert info.value.path == path


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(RequestLoadError) as info:
        load_request(tmp_path / "nope.json", default_chain="mainnet")
    assert info.value.reason == "unreadable_file"


@pytest.mark.parametrize(
    "text",
    [
        pytest.param(
            '{"chain": "mainnet", "request": [{"amount_in": ' + "9" * 5000 + "}]}",
            marks=pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit"),
        ),
        "[" * 100000 + "]" * 100000,
    ],
)
def test_oversized_json_is_invalid_json(tmp_path: Path, text: str) -> None:
    path = tmp_path / "huge.json"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(RequestLoadError) as info:
        load_request(path, default_chain="mainnet")
    assert info.value.reason == "invalid_json"
