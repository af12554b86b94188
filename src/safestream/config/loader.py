"""Load network deployments and token lists from a JSON file.

Expected shape::

    {
      "networks": {
        "mainnet": {
          "chain_id": 1,
          "streaming_contract": "0x...",
          "wrapped_native_asset": "0x...",
          "tokens": [
            {"id": "ETH", "label": "ETH", "name": "Ether", "decimals": 18,
             "kind": "native_asset"},
            {"id": "DAI", "label": "DAI", "name": "Dai", "decimals": 18,
             "address": "0x..."}
          ]
        }
      }
    }
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain.entities import NetworkDeployment, TokenDescriptor
from .deployments import DeploymentRegistry, default_deployment_registry
from .tokens import TokenRegistry, default_token_registry


class NetworkConfigEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    chain_id: int = Field(..., gt=0)
    streaming_contract: str
    wrapped_native_asset: str
    tokens: list[TokenDescriptor]


class NetworkConfigFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    networks: dict[str, NetworkConfigEntry]


def parse_network_config(raw: str) -> tuple[DeploymentRegistry, TokenRegistry]:
    """Parse JSON text into deployment and token registries.

    Raises:
        pydantic.ValidationError: If the document does not match the schema.
        ValueError: If a token list breaks a registry invariant.
    """
    config = NetworkConfigFile.model_validate_json(raw)
    deployments = DeploymentRegistry(
        NetworkDeployment(
            network=network,
            chain_id=entry.chain_id,
            streaming_contract=entry.streaming_contract,
            wrapped_native_asset=entry.wrapped_native_asset,
        )
        for network, entry in config.networks.items()
    )
    tokens = TokenRegistry(
        {network: entry.tokens for network, entry in config.networks.items()}
    )
    return deployments, tokens


def load_network_config(
    path: Optional[str],
) -> tuple[DeploymentRegistry, TokenRegistry]:
    """Registries from ``path``, or the built-in defaults when no path is set."""
    if not path:
        return default_deployment_registry(), default_token_registry()
    return parse_network_config(Path(path).read_text(encoding="utf-8"))
