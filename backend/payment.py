"""x402 payment gate for the priced routes.

The gate answers unpaid requests with HTTP 402 before they reach a
handler. Paid requests are verified and settled through the configured
facilitator. The discovery manifest (description plus input and output
schemas) is published with the payment requirements so discovery
tooling can list the endpoint.
"""
from typing import Any, Awaitable, Callable

from fastapi import Request, Response
from x402.fastapi.middleware import require_payment
from x402.types import HTTPInputSchema

from schemas import AnalysisRequest, analysis_result_adapter
from settings import Settings

BEST_MOVE_PATH = "/best-move"
BEST_MOVE_DESCRIPTION = "Get stockfish analysis for a given FEN"

Middleware = Callable[[Request, Callable[[Request], Awaitable[Response]]], Awaitable[Response]]


def input_schema() -> HTTPInputSchema:
    """Describe the query parameters of the analysis route."""
    properties = AnalysisRequest.model_json_schema()["properties"]
    return HTTPInputSchema(
        query_params={name: prop.get("type", "string") for name, prop in properties.items()},
    )


def output_schema() -> dict[str, Any]:
    return analysis_result_adapter.json_schema()


def payment_middleware(settings: Settings) -> Middleware:
    """Build the HTTP middleware charging ``settings.price`` for /best-move."""
    return require_payment(
        price=settings.price,
        pay_to_address=settings.pay_to,
        path=BEST_MOVE_PATH,
        network=settings.network,
        description=BEST_MOVE_DESCRIPTION,
        mime_type="application/json",
        input_schema=input_schema(),
        output_schema=output_schema(),
        discoverable=True,
        facilitator_config={"url": settings.facilitator_url},
    )
