import json
import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from errors import SchemaViolationError, TransportError, UpstreamHttpError
from schemas import AnalysisRequest, AnalysisResult, analysis_result_adapter
from settings import STOCKFISH_API_URL

logger = logging.getLogger(__name__)

# Left unescaped by JavaScript's encodeURIComponent, on top of what quote() keeps.
_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    """Percent-encode a query value the way browsers' encodeURIComponent does."""
    return quote(value, safe=_COMPONENT_SAFE)


def build_url(base_url: str, request: AnalysisRequest) -> str:
    # depth is escaped too; numeric depths are unchanged and a stray "&" cannot add parameters.
    return (
        f"{base_url}?fen={encode_component(request.fen)}"
        f"&depth={encode_component(request.depth)}"
    )


class StockfishClient:
    """Client for the stockfish.online analysis API.

    One GET per call, no retries and httpx's default timeout. A transport
    can be injected so tests never touch the network.
    """

    def __init__(self, base_url: str = STOCKFISH_API_URL, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = base_url
        self._transport = transport

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """Ask the Stockfish API for the best move in a position.

        Args:
            request: Validated FEN and depth.

        Returns:
            The validated success or failure payload, values untouched.

        Raises:
            UpstreamHttpError: The API answered with a non-2xx status.
            TransportError: The request could not complete.
            SchemaViolationError: The body is not JSON or matches neither shape.
        """
        logger.info("[/best-move] Request - FEN: %s, Depth: %s", request.fen, request.depth)

        url = build_url(self.base_url, request)
        logger.info("[/best-move] Fetching: %s", url)

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(url)
        except httpx.RequestError as e:
            raise TransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error(
                "[/best-move] API Error - Status: %s %s",
                response.status_code,
                response.reason_phrase,
            )
            raise UpstreamHttpError(response.status_code, response.reason_phrase)

        logger.info("[/best-move] Raw API Response: %s", response.text)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("[/best-move] Response body is not JSON: %s", e)
            raise SchemaViolationError(
                [{"type": "json_invalid", "loc": [], "msg": f"Invalid JSON: {e}"}]
            ) from e

        try:
            result = analysis_result_adapter.validate_python(data)
        except ValidationError as e:
            details = json.loads(e.json(include_url=False))
            logger.error("[/best-move] Validation Error: %s", details)
            raise SchemaViolationError(details) from e

        logger.info("[/best-move] Validation successful")
        return result
