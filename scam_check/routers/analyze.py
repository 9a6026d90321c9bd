import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from ..config import Settings, get_settings
from ..errors import AnalysisError
from ..models.verdict import AnalysisRequest, ErrorResponse, ScamVerdict
from ..services.analysis_service import analyze
from ..services.rate_limiter import RateLimiter

router = APIRouter(prefix="/api", tags=["Analyze"])
logger = logging.getLogger(__name__)


def get_rate_limiter(request: Request) -> RateLimiter:
    return request.app.state.rate_limiter


# ─────────────────────────────────────────────
# POST /api/analyze
# Rate limit → OCR (images only) → Classify → Validate
# ─────────────────────────────────────────────

@router.post(
    "/analyze",
    response_model=ScamVerdict,
    summary="Assess whether text or an image looks like a scam",
    description=(
        "Accepts raw text or a base64 image (data URL). Images are first run through "
        "an OCR call, then the text is classified by an OpenAI chat model and the "
        "reply is validated into a fixed verdict schema."
    ),
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def analyze_route(
    request: AnalysisRequest,
    settings: Settings = Depends(get_settings),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    try:
        return await analyze(request, settings, limiter)
    except AnalysisError as exc:
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())
    except Exception as exc:
        logger.exception("Unexpected analysis failure")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": f"分析中にエラーが発生しました: {exc}"},
        )
