"""Known streaming-contract deployments per network."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from ..domain.entities import NetworkDeployment
from ..domain.errors import UnsupportedNetworkError


class DeploymentRegistry:
    """Read-only lookup of contract deployments keyed by network id."""

    def __init__(self, deployments: Iterable[NetworkDeployment]) -> None:
        by_network: dict[str, NetworkDeployment] = {}
        for deployment in deployments:
            key = deployment.network.lower()
            if key in by_network:
                raise ValueError(f"Duplicate deployment for network '{key}'")
            by_network[key] = deployment
        self._deployments: Mapping[str, NetworkDeployment] = MappingProxyType(
            by_network
        )

    def get(self, network: str) -> NetworkDeployment:
        deployment = self._deployments.get(network.lower())
        if deployment is None:
            raise UnsupportedNetworkError(network)
        return deployment

    def networks(self) -> list[str]:
        return list(self._deployments)

    def __contains__(self, network: object) -> bool:
        return isinstance(network, str) and network.lower() in self._deployments


DEFAULT_DEPLOYMENTS: tuple[NetworkDeployment, ...] = (
    NetworkDeployment(
        network="mainnet",
        chain_id=1,
        streaming_contract="0xA4fc358455Febe425536fd1878bE67FfDBDEC59a",
        wrapped_native_asset="0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
    ),
    NetworkDeployment(
        network="rinkeby",
        chain_id=4,
        streaming_contract="0xc04ad234e01327b24a831e3718dbfcbe245904cc",
        wrapped_native_asset="0xc778417e063141139fce010982780140aa0cd5ab",
    ),
)


def default_deployment_registry() -> DeploymentRegistry:
    return DeploymentRegistry(DEFAULT_DEPLOYMENTS)
