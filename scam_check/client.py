"""
HTTP client for a running Scam Check server.

    scam-check "今すぐ口座情報を送らないと罰金が発生します"
    scam-check --image screenshot.png --url http://127.0.0.1:8000
"""

import argparse
import base64
import logging
import mimetypes
import sys
from pathlib import Path
from typing import Optional

import httpx
from pydantic import ValidationError

from .models.verdict import ScamVerdict
from .services.render_service import render_text

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:8000"
DEFAULT_TIMEOUT_SECONDS = 60.0
MAX_IMAGE_BYTES = 4 * 1024 * 1024


class AnalysisFailed(Exception):
    """Any failed analysis, carrying the message to show the user."""


def image_to_data_url(path: Path, max_bytes: int = MAX_IMAGE_BYTES) -> str:
    mime, _ = mimetypes.guess_type(path.name)
    if not mime or not mime.startswith("image/"):
        raise AnalysisFailed("画像ファイルを選択してください")

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise AnalysisFailed(f"画像を読み込めませんでした: {exc}") from exc
    if len(data) > max_bytes:
        raise AnalysisFailed(f"画像サイズは{max_bytes // (1024 * 1024)}MB以下にしてください")

    return f"data:{mime};base64,{base64.b64encode(data).decode()}"


class ScamCheckClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ScamCheckClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def analyze_text(self, text: str) -> ScamVerdict:
        if not text.strip():
            raise AnalysisFailed("テキストを入力してください")
        return self._analyze({"text": text})

    def analyze_image(self, path: Path) -> ScamVerdict:
        return self._analyze({"text": "", "image": image_to_data_url(path)})

    def _analyze(self, payload: dict[str, str]) -> ScamVerdict:
        try:
            response = self._http.post("/api/analyze", json=payload)
        except httpx.TimeoutException as exc:
            raise AnalysisFailed("リクエストがタイムアウトしました") from exc
        except httpx.HTTPError as exc:
            raise AnalysisFailed(f"分析中にエラーが発生しました: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Non-JSON response (%s): %s", response.status_code, response.text[:500])
            raise AnalysisFailed("APIからの応答を解析できませんでした") from exc

        if response.is_error:
            message = data.get("error") if isinstance(data, dict) else None
            raise AnalysisFailed(message or "分析中にエラーが発生しました")

        try:
            return ScamVerdict.model_validate(data)
        except ValidationError as exc:
            raise AnalysisFailed("無効なレスポンス形式です") from exc


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="scam-check", description="テキストや画像の詐欺の可能性を分析します。")
    parser.add_argument("text", nargs="?", help="分析したいテキスト")
    parser.add_argument("--image", type=Path, help="分析したい画像ファイル")
    parser.add_argument("--url", default=DEFAULT_BASE_URL, help="server base URL")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT_SECONDS)
    args = parser.parse_args(argv)

    if not args.text and not args.image:
        parser.error("text or --image is required")

    with ScamCheckClient(args.url, timeout=args.timeout) as client:
        try:
            if args.image:
                verdict = client.analyze_image(args.image)
            else:
                verdict = client.analyze_text(args.text)
        except AnalysisFailed as exc:
            print(f"エラー: {exc}", file=sys.stderr)
            return 1

    print(render_text(verdict))
    return 0


if __name__ == "__main__":
    sys.exit(main())
