from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal, get_args

from app.domain.entities.network import NetworkConfig, TokenInfo
from app.domain.exceptions import UnknownNetworkError


Chain = Literal["arbitrum", "ethereum"]

NATIVE_TOKEN_ADDRESS = "0xeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeeee"

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_valid_address(value: str) -> bool:
    return bool(_ADDRESS_RE.match(value or ""))


def _network(chain_id: str, *tokens: TokenInfo) -> NetworkConfig:
    return NetworkConfig(
        chain_id=chain_id,
        tokens=MappingProxyType({token.symbol: token for token in tokens}),
    )


_ETH = TokenInfo(symbol="ETH", address=NATIVE_TOKEN_ADDRESS, decimals=18)


NETWORKS: Mapping[str, Mapping[str, NetworkConfig]] = MappingProxyType(
    {
        "arbitrum": MappingProxyType(
            {
                "mainnet": _network(
                    "42161",
                    _ETH,
                    TokenInfo(
                        symbol="USDC",
                        address="0xaf88d065e77c8cc2239327c5edb3a432268e5831",
                        decimals=6,
                    ),
                ),
                "sepolia": _network("421614", _ETH),
            }
        ),
        "ethereum": MappingProxyType(
            {
                "mainnet": _network(
                    "1",
                    _ETH,
                    TokenInfo(
                        symbol="USDC",
                        address="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
                        decimals=6,
                    ),
                ),
            }
        ),
    }
)


def _check_registry() -> None:
    families = set(get_args(Chain))
    if families != set(NETWORKS):
        raise RuntimeError(
            f"Chain literal {sorted(families)} does not match registry {sorted(NETWORKS)}"
        )
    for chain, networks in NETWORKS.items():
        for network, config in networks.items():
            for symbol, token in config.tokens.items():
                if symbol != token.symbol or not is_valid_address(token.address):
                    raise RuntimeError(f"Invalid token entry {chain}/{network}/{symbol}")
                if token.decimals < 0:
                    raise RuntimeError(f"Negative decimals for {chain}/{network}/{symbol}")


_check_registry()


def available_chains() -> tuple[str, ...]:
    return tuple(NETWORKS)


def get_network(chain: str, network: str = "mainnet") -> NetworkConfig:
    networks = NETWORKS.get(chain)
    if networks is None:
        raise UnknownNetworkError(
            f"Unknown chain family '{chain}'. Available: {list(NETWORKS)}"
        )
    config = networks.get(network)
    if config is None:
        raise UnknownNetworkError(
            f"Unknown network '{network}' for chain '{chain}'. Available: {list(networks)}"
        )
    return config


def get_token(chain: str, network: str, symbol: str) -> TokenInfo:
    config = get_network(chain, network)
    token = config.tokens.get(symbol)
    if token is None:
        raise UnknownNetworkError(f"Unknown token '{symbol}' on {chain}/{network}")
    return token


def find_network_by_chain_id(chain_id: str) -> tuple[str, str] | None:
    for chain, networks in NETWORKS.items():
        for network, config in networks.items():
            if config.chain_id == str(chain_id):
                return chain, network
    return None
