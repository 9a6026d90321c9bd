import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import Settings, settings
from .errors import InvalidInput
from .routers.analyze import router as analyze_router
from .routers.page import router as page_router
from .services.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    error = InvalidInput()
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.to_body())


def create_app(app_settings: Settings = settings) -> FastAPI:
    logging.basicConfig(
        level=app_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Scam Check API")
    app.state.rate_limiter = RateLimiter(delay=app_settings.rate_limit_delay_seconds)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(analyze_router)
    app.include_router(page_router)

    @app.get("/health")
    def health() -> dict[str, bool]:
        return {"ok": True}

    return app


app = create_app()
