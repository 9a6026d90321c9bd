import asyncio
import logging

from ..config import Settings
from ..errors import InvalidInput, UpstreamTimeout
from ..models.verdict import AnalysisRequest, ScamVerdict
from .classification_service import classify_text
from .ocr_service import extract_text
from .openai_client import build_client
from .rate_limiter import RateLimiter
from .verdict_parser import parse_verdict

logger = logging.getLogger(__name__)


async def _run_pipeline(request: AnalysisRequest, settings: Settings) -> ScamVerdict:
    async with build_client(settings) as client:
        content = request.text
        if request.image:
            content = await extract_text(client, request.image, settings)

        if not content or not content.strip():
            raise InvalidInput()

        raw = await classify_text(client, content, settings)
    return parse_verdict(raw)


async def analyze(request: AnalysisRequest, settings: Settings, limiter: RateLimiter) -> ScamVerdict:
    """
    Rate limit → input check → optional OCR → classification → parse & validate.

    Raises a subclass of ``AnalysisError`` on every expected failure.
    """
    limiter.acquire()

    has_text = bool(request.text and request.text.strip())
    has_image = bool(request.image and request.image.strip())
    if not has_text and not has_image:
        raise InvalidInput()

    try:
        verdict = await asyncio.wait_for(
            _run_pipeline(request, settings),
            timeout=settings.request_timeout_seconds,
        )
    except asyncio.TimeoutError as exc:
        logger.warning("Analysis exceeded %ss budget", settings.request_timeout_seconds)
        raise UpstreamTimeout("分析がタイムアウトしました") from exc

    logger.info(
        "Analysis finished: is_scam=%s risk_level=%s confidence=%.2f source=%s",
        verdict.is_scam,
        verdict.risk_level,
        verdict.confidence,
        "image" if has_image else "text",
    )
    return verdict
