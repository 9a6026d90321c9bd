import base64
import binascii
import logging

from openai import APIError, APITimeoutError, AsyncOpenAI

from ..config import Settings
from ..errors import EmptyCompletion, InvalidInput, UpstreamCallFailed, UpstreamTimeout
from .prompts import OCR_SYSTEM_PROMPT, OCR_USER_PROMPT

logger = logging.getLogger(__name__)

_EXTRACTION_EMPTY = "画像からテキストを抽出できませんでした"
_IMAGE_ANALYSIS_FAILED = "画像の分析中にエラーが発生しました"


def _guess_mime_type(image_bytes: bytes, fallback: str = "image/jpeg") -> str:
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in (b"GIF87a", b"GIF89a"):
        return "image/gif"
    return fallback


def decode_image(image: str, max_bytes: int) -> tuple[str, str]:
    """
    Split a data URL (or bare base64) into (base64 payload, mime type).

    The payload is decoded once to check it is valid base64 and within `max_bytes`.
    """
    payload = image.split(",", 1)[1] if "," in image else image
    payload = payload.strip()
    if not payload:
        raise InvalidInput("画像データが空です")

    try:
        image_bytes = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidInput("画像データの形式が正しくありません")

    if len(image_bytes) > max_bytes:
        raise InvalidInput(f"画像サイズは{max_bytes // (1024 * 1024)}MB以下にしてください")

    return payload, _guess_mime_type(image_bytes)


async def extract_text(client: AsyncOpenAI, image: str, settings: Settings) -> str:
    payload, mime = decode_image(image, settings.max_image_bytes)

    try:
        response = await client.chat.completions.create(
            model=settings.ocr_model,
            max_tokens=settings.ocr_max_tokens,
            messages=[
                {"role": "system", "content": OCR_SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": OCR_USER_PROMPT},
                        {
                            "type": "image_url",
                            "image_url": {"url": f"data:{mime};base64,{payload}", "detail": "high"},
                        },
                    ],
                },
            ],
        )
    except APITimeoutError as exc:
        logger.warning("OCR call timed out: %s", exc)
        raise UpstreamTimeout(f"{_IMAGE_ANALYSIS_FAILED}: 応答がタイムアウトしました") from exc
    except APIError as exc:
        logger.warning("OCR call failed: %s", exc)
        raise UpstreamCallFailed(f"{_IMAGE_ANALYSIS_FAILED}: {exc.message}") from exc

    choices = response.choices or []
    extracted = (choices[0].message.content or "").strip() if choices else ""
    if not extracted:
        raise EmptyCompletion(_EXTRACTION_EMPTY)

    logger.debug("Extracted text from image: %s", extracted)
    return extracted
