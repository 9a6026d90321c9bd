import base64
import logging
from html import escape
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import HTMLResponse

from ..config import Settings, get_settings
from ..errors import AnalysisError, InvalidInput
from ..models.verdict import AnalysisRequest
from ..services.analysis_service import analyze
from ..services.rate_limiter import RateLimiter
from ..services.render_service import render_html
from .analyze import get_rate_limiter

router = APIRouter(tags=["Page"])
logger = logging.getLogger(__name__)

_PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="ja">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>詐欺検出アシスタント</title>
<style>
body {{ font-family: sans-serif; max-width: 720px; margin: 2rem auto; padding: 0 1rem; }}
textarea {{ width: 100%; min-height: 8rem; }}
.verdict {{ border: 1px solid #ccc; border-radius: 6px; padding: 1rem; margin-top: 2rem; }}
.verdict.scam {{ border-color: #d33; background: #fff4f4; }}
.error {{ color: #d33; }}
.notice {{ background: #fff8e1; padding: 0.5rem 1rem; }}
</style>
</head>
<body>
<h1>詐欺検出アプリ</h1>
<p>テキストや画像の詐欺の可能性を分析します。</p>
<form method="post" action="/" enctype="multipart/form-data">
<p>テキストを入力するか、画像をアップロードしてください</p>
<textarea name="text" placeholder="分析したいテキストを入力してください...">{text}</textarea>
<p><input type="file" name="image" accept="image/*"></p>
<p><button type="reset">リセット</button> <button type="submit">分析する</button></p>
</form>
{result}
</body>
</html>
"""


def _render_page(text: str = "", result: str = "") -> str:
    return _PAGE_TEMPLATE.format(text=escape(text), result=result)


async def _upload_to_data_url(image: UploadFile, max_bytes: int) -> str:
    content_type = image.content_type or ""
    if not content_type.startswith("image/"):
        raise InvalidInput("画像ファイルを選択してください")

    data = await image.read()
    if len(data) > max_bytes:
        raise InvalidInput(f"画像サイズは{max_bytes // (1024 * 1024)}MB以下にしてください")

    return f"data:{content_type};base64,{base64.b64encode(data).decode()}"


@router.get("/", response_class=HTMLResponse)
async def form_page() -> HTMLResponse:
    return HTMLResponse(content=_render_page())


@router.post("/", response_class=HTMLResponse)
async def submit_form(
    text: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_settings),
    limiter: RateLimiter = Depends(get_rate_limiter),
) -> HTMLResponse:
    text = text or ""
    try:
        # An empty file input still arrives as a part with no filename.
        image_data = None
        if image is not None and image.filename:
            image_data = await _upload_to_data_url(image, settings.max_image_bytes)

        verdict = await analyze(AnalysisRequest(text=text, image=image_data), settings, limiter)
    except AnalysisError as exc:
        logger.info("Form analysis failed: %s", exc.message)
        error = f'<p class="error">{escape(exc.message)}</p>'
        return HTMLResponse(content=_render_page(text, error), status_code=exc.status_code)

    return HTMLResponse(content=_render_page(text, render_html(verdict)))
