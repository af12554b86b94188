"""Unit tests for stream and network API routes."""

import unittest
from unittest.mock import AsyncMock, MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from safestream.api.dependencies import get_stream_service
from safestream.api.routers import networks, streams
from safestream.application.dtos import (
    StreamBatchResponseDTO,
    TokenDTO,
    TokenListResponseDTO,
    TransactionDTO,
)
from safestream.domain.entities import TokenKind
from safestream.domain.errors import (
    AmountTooSmallError,
    CollaboratorError,
    InsufficientBalanceError,
    UnsupportedNetworkError,
)
from tests.fixtures.addresses import RECIPIENT, SENDER


class TestStreamsRouter(unittest.TestCase):
    """Test cases for streams router."""

    def setUp(self):
        """Set up test fixtures."""
        self.app = FastAPI()
        self.app.include_router(streams.router, prefix="/api/v1")
        self.app.include_router(networks.router, prefix="/api/v1")

        self.batch = StreamBatchResponseDTO(
            network="mainnet",
            token_id="DAI",
            sender=SENDER,
            recipient=RECIPIENT,
            requested_amount=10**30 + 1,
            amount=10**30,
            amount_display="1000000000000.0000 DAI",
            rate_per_second=10**30 // 100,
            start_time=13_600,
            stop_time=13_700,
            submitted=True,
            transactions=[
                TransactionDTO(to="0x" + "aa" * 20, value="0", data="0x095ea7b3"),
                TransactionDTO(to="0x" + "cc" * 20, value="0", data="0x"),
            ],
        )
        self.payload = {
            "network": "mainnet",
            "token_id": "DAI",
            "recipient": RECIPIENT,
            "amount": str(10**30 + 1),
            "duration_seconds": 100,
        }

        # Create mock service
        self.mock_service = MagicMock()
        self.mock_service.create_stream = AsyncMock()
        self.mock_service.preview_stream = AsyncMock()

        # Override dependency
        self.app.dependency_overrides[get_stream_service] = lambda: self.mock_service

        self.client = TestClient(self.app)

    def tearDown(self):
        """Clean up after tests."""
        self.app.dependency_overrides.clear()

    def test_create_stream_success(self):
        """Big integers come back as decimal strings."""
        self.mock_service.create_stream.return_value = self.batch

        response = self.client.post("/api/v1/streams", json=self.payload)

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["amount"], str(10**30))
        self.assertEqual(body["requested_amount"], str(10**30 + 1))
        self.assertEqual(len(body["transactions"]), 2)
        self.mock_service.create_stream.assert_called_once()
        dto = self.mock_service.create_stream.call_args.args[0]
        self.assertEqual(dto.amount, 10**30 + 1)

    def test_preview_stream_success(self):
        self.mock_service.preview_stream.return_value = self.batch.model_copy(
            update={"submitted": False}
        )

        response = self.client.post("/api/v1/streams/preview", json=self.payload)

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()["submitted"])
        self.mock_service.create_stream.assert_not_called()

    def test_validation_condition_maps_to_400(self):
        self.mock_service.create_stream.side_effect = AmountTooSmallError(50, 300)

        response = self.client.post("/api/v1/streams", json=self.payload)

        self.assertEqual(response.status_code, 400)
        self.assertIn("smaller than the stream duration", response.json()["detail"])

    def test_insufficient_balance_maps_to_400(self):
        self.mock_service.create_stream.side_effect = InsufficientBalanceError(
            1000, 500, "You only have 0.0005 USDC in your Safe"
        )

        response = self.client.post("/api/v1/streams", json=self.payload)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json()["detail"], "You only have 0.0005 USDC in your Safe"
        )

    def test_collaborator_failure_maps_to_502(self):
        self.mock_service.create_stream.side_effect = CollaboratorError("node down")

        response = self.client.post("/api/v1/streams", json=self.payload)

        self.assertEqual(response.status_code, 502)

    def test_unexpected_failure_maps_to_500(self):
        self.mock_service.create_stream.side_effect = RuntimeError("boom")

        response = self.client.post("/api/v1/streams", json=self.payload)

        self.assertEqual(response.status_code, 500)
        self.assertNotIn("boom", response.json()["detail"])

    def test_malformed_payload_is_rejected(self):
        payload = dict(self.payload, amount="12abc")

        response = self.client.post("/api/v1/streams", json=payload)

        self.assertEqual(response.status_code, 422)
        self.mock_service.create_stream.assert_not_called()

    def test_boolean_duration_is_rejected(self):
        payload = dict(self.payload, duration_seconds=True)

        response = self.client.post("/api/v1/streams", json=payload)

        self.assertEqual(response.status_code, 422)
        self.mock_service.create_stream.assert_not_called()

    def test_display_amount_and_duration_parts_are_forwarded(self):
        self.mock_service.preview_stream.return_value = self.batch.model_copy(
            update={"submitted": False}
        )
        payload = {
            "token_id": "DAI",
            "recipient": self.payload["recipient"],
            "amount_display": "12.5",
            "days": 1,
            "hours": 2,
        }

        response = self.client.post("/api/v1/streams/preview", json=payload)

        self.assertEqual(response.status_code, 200)
        dto = self.mock_service.preview_stream.call_args.args[0]
        self.assertIsNone(dto.network)
        self.assertIsNone(dto.amount)
        self.assertEqual(dto.amount_display, "12.5")
        self.assertEqual(
            dto.duration_parts(), {"days": 1, "hours": 2, "minutes": 0, "seconds": 0}
        )

    def test_list_tokens_success(self):
        self.mock_service.list_tokens.return_value = TokenListResponseDTO(
            network="mainnet",
            default_token_id="DAI",
            native_token_id="ETH",
            tokens=[
                TokenDTO(
                    id="ETH",
                    label="ETH",
                    name="Ether",
                    decimals=18,
                    kind=TokenKind.NATIVE_ASSET,
                )
            ],
        )

        response = self.client.get("/api/v1/networks/mainnet/tokens")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["tokens"][0]["kind"], "native_asset")
        self.mock_service.list_tokens.assert_called_once_with("mainnet")

    def test_list_tokens_unknown_network(self):
        self.mock_service.list_tokens.side_effect = UnsupportedNetworkError("ropsten")

        response = self.client.get("/api/v1/networks/ropsten/tokens")

        self.assertEqual(response.status_code, 404)


if __name__ == "__main__":
    unittest.main()
