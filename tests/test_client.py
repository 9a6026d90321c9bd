import json

import httpx
import pytest

from scam_check.client import AnalysisFailed, ScamCheckClient, image_to_data_url, main
from tests.helpers import SCAM_VERDICT


def _client(handler):
    return ScamCheckClient("http://testserver", transport=httpx.MockTransport(handler))


def test_analyze_text_posts_text_and_parses_verdict():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=SCAM_VERDICT)

    with _client(handler) as client:
        result = client.analyze_text("今すぐ口座情報を送らないと罰金が発生します")

    assert seen["path"] == "/api/analyze"
    assert seen["body"] == {"text": "今すぐ口座情報を送らないと罰金が発生します"}
    assert result.is_scam is True
    assert result.details.fear_appeal.detected is True


def test_blank_text_is_rejected_locally():
    def handler(request):
        raise AssertionError("no request expected")

    with _client(handler) as client, pytest.raises(AnalysisFailed, match="テキストを入力してください"):
        client.analyze_text("   ")


def test_server_error_message_is_surfaced():
    def handler(request):
        return httpx.Response(429, json={"error": "リクエストが多すぎます。少し待ってから再試行してください。"})

    with _client(handler) as client, pytest.raises(AnalysisFailed, match="リクエストが多すぎます"):
        client.analyze_text("テスト")


def test_non_json_response_is_reported():
    def handler(request):
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    with _client(handler) as client, pytest.raises(AnalysisFailed, match="APIからの応答を解析できませんでした"):
        client.analyze_text("テスト")


def test_incomplete_success_body_is_not_rendered():
    def handler(request):
        return httpx.Response(200, json={"isScam": True})

    with _client(handler) as client, pytest.raises(AnalysisFailed, match="無効なレスポンス形式です"):
        client.analyze_text("テスト")


def test_timeout_has_its_own_message():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with _client(handler) as client, pytest.raises(AnalysisFailed, match="リクエストがタイムアウトしました"):
        client.analyze_text("テスト")


def test_image_is_sent_as_data_url(tmp_path):
    image = tmp_path / "message.png"
    image.write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 8)
    seen = {}

    def handler(request):
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=SCAM_VERDICT)

    with _client(handler) as client:
        client.analyze_image(image)

    assert seen["body"]["text"] == ""
    assert seen["body"]["image"].startswith("data:image/png;base64,")


def test_non_image_file_is_rejected(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello")

    with pytest.raises(AnalysisFailed, match="画像ファイルを選択してください"):
        image_to_data_url(path)


def test_oversized_image_is_rejected(tmp_path):
    path = tmp_path / "big.jpg"
    path.write_bytes(b"\xff\xd8\xff" + b"\x00" * 64)

    with pytest.raises(AnalysisFailed, match="以下にしてください"):
        image_to_data_url(path, max_bytes=16)


def test_cli_requires_input(capsys):
    with pytest.raises(SystemExit):
        main([])


def test_cli_reports_failures(monkeypatch, capsys):
    def fake_analyze_text(self, text):
        raise AnalysisFailed("リクエストがタイムアウトしました")

    monkeypatch.setattr(ScamCheckClient, "analyze_text", fake_analyze_text)

    assert main(["テスト"]) == 1
    assert "リクエストがタイムアウトしました" in capsys.readouterr().err
