"""Tests for the x402 payment gate."""
import json
import os
import sys

import httpx
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from app import create_app
from engine import StockfishClient
from payment import BEST_MOVE_DESCRIPTION, input_schema, output_schema
from settings import Settings

SETTINGS = Settings(
    facilitator_url="https://x402.org/facilitator",
    pay_to="0x0000000000000000000000000000000000000001",
    network="base-sepolia",
)


class TestDiscoveryManifest:
    """Tests for the schemas published with the payment requirements."""

    def test_input_schema_lists_query_params(self):
        schema = input_schema()
        assert schema.query_params == {"fen": "string", "depth": "string"}

    def test_output_schema_covers_both_variants(self):
        schema = json.dumps(output_schema())
        assert "AnalysisSuccess" in schema
        assert "AnalysisFailure" in schema
        assert "bestmove" in schema

    def test_description(self):
        assert "stockfish" in BEST_MOVE_DESCRIPTION.lower()


class TestGate:
    """Unpaid requests never reach the handler."""

    def _client(self, calls):
        def recording(request):
            calls.append(request)
            return httpx.Response(200, json={"success": False, "error": "unreachable"})

        stockfish = StockfishClient("https://stockfish.test/api", transport=httpx.MockTransport(recording))
        return TestClient(create_app(SETTINGS, client=stockfish))

    def test_unpaid_request_gets_402(self):
        calls = []
        client = self._client(calls)

        resp = client.get("/best-move", params={"fen": "8/8/8/8/8/8/8/K6k w - - 0 1"})

        assert resp.status_code == 402
        assert calls == []

    def test_unpaid_invalid_request_gets_402(self):
        calls = []
        client = self._client(calls)

        resp = client.get("/best-move")

        assert resp.status_code == 402
        assert calls == []

    def test_landing_page_is_free(self):
        client = self._client([])

        assert client.get("/").status_code == 200
