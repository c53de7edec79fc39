import logging
import os
import sys
import time
from pathlib import Path
from typing import Annotated

import uvicorn
from fastapi import Depends, FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse

from engine import StockfishClient
from errors import ConfigurationError, SchemaViolationError, UpstreamHttpError
from pages import landing_page
from payment import BEST_MOVE_PATH, payment_middleware
from schemas import AnalysisRequest, ErrorResponse
from settings import Settings, load_settings

logger = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parent / "public"


def error_response(status_code: int, error: str, details: list | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def get_client(request: Request) -> StockfishClient:
    return request.app.state.client


def create_app(settings: Settings, client: StockfishClient | None = None) -> FastAPI:
    """Build the API with the payment gate in front of /best-move."""
    app = FastAPI(title="Chess Best Move x402 API", version="1.0.0")
    app.state.settings = settings
    app.state.client = client or StockfishClient(settings.stockfish_api_url)
    app.state.started_at = time.monotonic()

    app.middleware("http")(payment_middleware(settings))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origins] if settings.cors_origins != "*" else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        logger.warning("Rejected %s: %s", request.url.path, exc.errors())
        return error_response(400, "Invalid request parameters", list(exc.errors()))

    @app.get(BEST_MOVE_PATH)
    async def best_move(
        params: Annotated[AnalysisRequest, Query()],
        client: Annotated[StockfishClient, Depends(get_client)],
    ):
        try:
            result = await client.analyze(params)
        except UpstreamHttpError as e:
            return error_response(500, str(e))
        except SchemaViolationError as e:
            return error_response(500, str(e), e.details)
        except Exception as e:
            logger.exception("[/best-move] Error")
            return error_response(500, str(e) or "Unknown error occurred")
        # Upstream failures encoded in the payload still answer 200.
        return result.model_dump()

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        uptime = time.monotonic() - request.app.state.started_at
        return landing_page(request.headers.get("host"), uptime, settings.price)

    @app.get("/favicon.ico", include_in_schema=False)
    def favicon():
        return FileResponse(PUBLIC_DIR / "favicon.ico", media_type="image/x-icon")

    @app.get("/og-image.png", include_in_schema=False)
    def og_image():
        return FileResponse(PUBLIC_DIR / "og-image.png", media_type="image/png")

    return app


def main():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error("%s", e)
        sys.exit(1)
    logging.getLogger().setLevel(settings.log_level.upper())

    app = create_app(settings)
    logger.info("Server is running on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
