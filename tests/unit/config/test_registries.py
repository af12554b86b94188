"""Unit tests for deployment and token registries."""

import json

import pytest
from pydantic import ValidationError

from safestream.config.deployments import DeploymentRegistry, default_deployment_registry
from safestream.config.loader import load_network_config, parse_network_config
from safestream.config.tokens import TokenRegistry, default_token_registry
from safestream.domain.entities import NetworkDeployment, TokenDescriptor, TokenKind
from safestream.domain.errors import UnknownTokenError, UnsupportedNetworkError


class TestDeploymentRegistry:
    def test_defaults_include_mainnet(self) -> None:
        registry = default_deployment_registry()
        deployment = registry.get("mainnet")
        assert deployment.chain_id == 1
        assert "rinkeby" in registry

    def test_lookup_is_case_insensitive(self) -> None:
        registry = default_deployment_registry()
        assert registry.get("MainNet") == registry.get("mainnet")

    def test_unknown_network_raises(self) -> None:
        with pytest.raises(UnsupportedNetworkError):
            default_deployment_registry().get("ropsten")

    def test_duplicate_network_rejected(self, deployment: NetworkDeployment) -> None:
        with pytest.raises(ValueError, match="Duplicate deployment"):
            DeploymentRegistry([deployment, deployment])

    def test_malformed_contract_address_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NetworkDeployment(
                network="x",
                chain_id=1,
                streaming_contract="0x1234",
                wrapped_native_asset="0x" + "ee" * 20,
            )

    def test_contract_address_with_bad_checksum_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NetworkDeployment(
                network="x",
                chain_id=1,
                streaming_contract="0x6b175474E89094C44Da98b954EedeAC495271d0F",
                wrapped_native_asset="0x" + "ee" * 20,
            )


class TestTokenRegistry:
    def test_default_token_is_dai(self) -> None:
        assert default_token_registry().default_token("mainnet").id == "DAI"

    def test_get_token_case_insensitive(self) -> None:
        token = default_token_registry().get_token("mainnet", "usdc")
        assert token.decimals == 6

    def test_native_entry_is_distinguishable(self) -> None:
        native = default_token_registry().native_token("mainnet")
        assert native.kind is TokenKind.NATIVE_ASSET
        assert native.address is None

    def test_unknown_token_raises(self) -> None:
        with pytest.raises(UnknownTokenError):
            default_token_registry().get_token("mainnet", "XYZ")

    def test_unknown_network_raises(self) -> None:
        with pytest.raises(UnsupportedNetworkError):
            default_token_registry().list_tokens("ropsten")

    def test_list_without_native_entry_rejected(
        self, fungible_token: TokenDescriptor
    ) -> None:
        with pytest.raises(ValueError, match="exactly one native"):
            TokenRegistry({"testnet": [fungible_token]})

    def test_default_falls_back_to_first(
        self, fungible_token: TokenDescriptor, native_token: TokenDescriptor
    ) -> None:
        registry = TokenRegistry({"testnet": [fungible_token, native_token]})
        assert registry.default_token("testnet").id == "TKN"

    def test_native_token_with_address_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TokenDescriptor(
                id="ETH",
                label="ETH",
                name="Ether",
                decimals=18,
                kind=TokenKind.NATIVE_ASSET,
                address="0x" + "ee" * 20,
            )


class TestNetworkConfigFile:
    CONFIG = {
        "networks": {
            "devnet": {
                "chain_id": 31337,
                "streaming_contract": "0x" + "cc" * 20,
                "wrapped_native_asset": "0x" + "ee" * 20,
                "tokens": [
                    {
                        "id": "ETH",
                        "label": "ETH",
                        "name": "Ether",
                        "decimals": 18,
                        "kind": "native_asset",
                    },
                    {
                        "id": "DAI",
                        "label": "DAI",
                        "name": "Dai",
                        "decimals": 18,
                        "address": "0x" + "aa" * 20,
                    },
                ],
            }
        }
    }

    def test_parses_registries(self) -> None:
        deployments, tokens = parse_network_config(json.dumps(self.CONFIG))
        assert deployments.get("devnet").chain_id == 31337
        assert [t.id for t in tokens.list_tokens("devnet")] == ["ETH", "DAI"]
        with pytest.raises(UnsupportedNetworkError):
            deployments.get("mainnet")

    def test_loads_from_file(self, tmp_path) -> None:
        path = tmp_path / "networks.json"
        path.write_text(json.dumps(self.CONFIG), encoding="utf-8")
        deployments, tokens = load_network_config(str(path))
        assert deployments.networks() == ["devnet"]
        assert tokens.default_token("devnet").id == "DAI"

    def test_no_path_uses_defaults(self) -> None:
        deployments, _ = load_network_config(None)
        assert "mainnet" in deployments

    def test_unknown_field_rejected(self) -> None:
        config = json.loads(json.dumps(self.CONFIG))
        config["networks"]["devnet"]["extra"] = True
        with pytest.raises(ValidationError):
            parse_network_config(json.dumps(config))
