from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlparse

from app.domain.exceptions import ProtocolConfigError
from app.shared.networks import NETWORKS, Chain


@dataclass(frozen=True)
class ProtocolConfig:
    base_url: str
    available_networks: tuple[Chain, ...]

    def __post_init__(self) -> None:
        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ProtocolConfigError(f"base_url must be an absolute URL: {self.base_url!r}")
        unknown = [chain for chain in self.available_networks if chain not in NETWORKS]
        if unknown:
            raise ProtocolConfigError(
                f"Unknown chain families {unknown}. Available: {list(NETWORKS)}"
            )

    def supports(self, chain: str) -> bool:
        return chain in self.available_networks


PENDLE_CONFIG = ProtocolConfig(
    base_url="https://api-v2.pendle.finance",
    available_networks=("arbitrum", "ethereum"),
)

# Morpho markets are read through the same Pendle backend for now.
MORPHO_CONFIG = ProtocolConfig(
    base_url="https://api-v2.pendle.finance",
    available_networks=("arbitrum", "ethereum"),
)
