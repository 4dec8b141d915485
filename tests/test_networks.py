from __future__ import annotations

import pytest

from app.domain.entities.network import TokenInfo
from app.domain.exceptions import UnknownNetworkError
from app.shared.networks import (
    NETWORKS,
    available_chains,
    find_network_by_chain_id,
    get_network,
    get_token,
    is_valid_address,
)


def test_registry_chain_ids():
    assert get_network("arbitrum").chain_id == "42161"
    assert get_network("arbitrum", "sepolia").chain_id == "421614"
    assert get_network("ethereum", "mainnet").chain_id == "1"
    assert available_chains() == ("arbitrum", "ethereum")


def test_get_token_returns_metadata():
    usdc = get_token("ethereum", "mainnet", "USDC")

    assert usdc == TokenInfo(
        symbol="USDC",
        address="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
        decimals=6,
    )
    assert get_token("arbitrum", "sepolia", "ETH").decimals == 18


@pytest.mark.parametrize(
    ("chain", "network", "symbol"),
    [
        ("optimism", "mainnet", "ETH"),
        ("arbitrum", "goerli", "ETH"),
        ("arbitrum", "sepolia", "USDC"),
    ],
)
def test_unknown_lookups_raise(chain: str, network: str, symbol: str):
    with pytest.raises(UnknownNetworkError):
        get_token(chain, network, symbol)


def test_every_registry_address_is_valid():
    for networks in NETWORKS.values():
        for config in networks.values():
            for token in config.tokens.values():
                assert is_valid_address(token.address)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        NETWORKS["base"] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        get_network("ethereum").tokens["DAI"] = None  # type: ignore[index]


def test_find_network_by_chain_id():
    assert find_network_by_chain_id("42161") == ("arbitrum", "mainnet")
    assert find_network_by_chain_id("421614") == ("arbitrum", "sepolia")
    assert find_network_by_chain_id("10") is None


def test_is_valid_address_rejects_malformed_values():
    assert not is_valid_address("0x1234")
    assert not is_valid_address("a0b86991c6218b36c1d19d4a2e9eb0ce3606eb4800")
    assert not is_valid_address("")
