"""Token lists offered per network."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from ..domain.entities import TokenDescriptor, TokenKind
from ..domain.errors import UnknownTokenError, UnsupportedNetworkError

DEFAULT_TOKEN_ID = "DAI"


class TokenRegistry:
    """Read-only, ordered token lists keyed by network id.

    Every list carries exactly one native-asset entry.
    """

    def __init__(self, tokens: Mapping[str, Iterable[TokenDescriptor]]) -> None:
        by_network: dict[str, tuple[TokenDescriptor, ...]] = {}
        for network, entries in tokens.items():
            token_list = tuple(entries)
            native = [t for t in token_list if t.kind is TokenKind.NATIVE_ASSET]
            if len(native) != 1:
                raise ValueError(
                    f"Token list for '{network}' must contain exactly one native "
                    f"asset entry, found {len(native)}"
                )
            ids = [t.id.upper() for t in token_list]
            if len(ids) != len(set(ids)):
                raise ValueError(f"Duplicate token ids in list for '{network}'")
            by_network[network.lower()] = token_list
        self._tokens: Mapping[str, tuple[TokenDescriptor, ...]] = MappingProxyType(
            by_network
        )

    def list_tokens(self, network: str) -> tuple[TokenDescriptor, ...]:
        tokens = self._tokens.get(network.lower())
        if tokens is None:
            raise UnsupportedNetworkError(network)
        return tokens

    def get_token(self, network: str, token_id: str) -> TokenDescriptor:
        wanted = token_id.upper()
        for token in self.list_tokens(network):
            if token.id.upper() == wanted:
                return token
        raise UnknownTokenError(network, token_id)

    def default_token(self, network: str) -> TokenDescriptor:
        tokens = self.list_tokens(network)
        for token in tokens:
            if token.id.upper() == DEFAULT_TOKEN_ID:
                return token
        return tokens[0]

    def native_token(self, network: str) -> TokenDescriptor:
        return next(t for t in self.list_tokens(network) if t.is_native)


_ETH = TokenDescriptor(
    id="ETH",
    label="ETH",
    name="Ether",
    decimals=18,
    kind=TokenKind.NATIVE_ASSET,
)

DEFAULT_TOKENS: dict[str, tuple[TokenDescriptor, ...]] = {
    "mainnet": (
        TokenDescriptor(
            id="DAI",
            label="DAI",
            name="Dai Stablecoin",
            decimals=18,
            address="0x6B175474E89094C44Da98b954EedeAC495271d0F",
        ),
        TokenDescriptor(
            id="USDC",
            label="USDC",
            name="USD Coin",
            decimals=6,
            address="0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
        ),
        _ETH,
    ),
    "rinkeby": (
        TokenDescriptor(
            id="DAI",
            label="DAI",
            name="Dai Stablecoin",
            decimals=18,
            address="0x5592ec0cfb4dbc12d3ab100b257153436a1f0fea",
        ),
        TokenDescriptor(
            id="USDC",
            label="USDC",
            name="USD Coin",
            decimals=6,
            address="0x4dbcdf9b62e891a7cec5a2568c3f4faf9e8abe2b",
        ),
        _ETH,
    ),
}


def default_token_registry() -> TokenRegistry:
    return TokenRegistry(DEFAULT_TOKENS)
