from __future__ import annotations

import pytest

from app.domain.exceptions import ProtocolConfigError
from app.shared.protocols import MORPHO_CONFIG, PENDLE_CONFIG, ProtocolConfig


def test_pendle_config_targets_known_chains():
    assert PENDLE_CONFIG.base_url == "https://api-v2.pendle.finance"
    assert PENDLE_CONFIG.available_networks == ("arbitrum", "ethereum")
    assert PENDLE_CONFIG.supports("arbitrum")
    assert not PENDLE_CONFIG.supports("base")


def test_morpho_config_targets_known_chains():
    assert MORPHO_CONFIG.available_networks == ("arbitrum", "ethereum")


def test_unknown_chain_family_is_rejected_at_definition():
    with pytest.raises(ProtocolConfigError):
        ProtocolConfig(
            base_url="https://api.example.com",
            available_networks=("arbitrum", "solana"),  # type: ignore[arg-type]
        )


def test_relative_base_url_is_rejected():
    with pytest.raises(ProtocolConfigError):
        ProtocolConfig(base_url="/v2", available_networks=("ethereum",))
