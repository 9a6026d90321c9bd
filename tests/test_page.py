from tests.helpers import SAFE_VERDICT, SCAM_VERDICT

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def test_form_page_renders(client):
    r = client.get("/")

    assert r.status_code == 200
    assert "詐欺検出アプリ" in r.text
    assert 'enctype="multipart/form-data"' in r.text


def test_text_submission_renders_verdict(client, fake_openai):
    fake_openai.completions.queue(SCAM_VERDICT)

    r = client.post("/", data={"text": "今すぐ口座情報を送らないと罰金が発生します"})

    assert r.status_code == 200
    assert "詐欺の可能性が高いです (92% の確率)" in r.text
    assert "注意事項" in r.text
    assert "今すぐ口座情報を送らないと罰金が発生します</textarea>" in r.text


def test_image_submission_runs_ocr(client, fake_openai):
    fake_openai.completions.queue("明日の会議は10時からです")
    fake_openai.completions.queue(SAFE_VERDICT)

    r = client.post("/", data={"text": ""}, files={"image": ("memo.png", PNG_BYTES, "image/png")})

    assert r.status_code == 200
    assert "詐欺の可能性は低いです" in r.text
    assert len(fake_openai.completions.calls) == 2


def test_non_image_upload_shows_error(client, fake_openai):
    r = client.post("/", data={"text": ""}, files={"image": ("notes.txt", b"hello", "text/plain")})

    assert r.status_code == 400
    assert "画像ファイルを選択してください" in r.text
    assert fake_openai.completions.calls == []


def test_empty_submission_shows_error_without_result(client, fake_openai):
    r = client.post("/", data={"text": ""})

    assert r.status_code == 400
    assert 'class="error"' in r.text
    assert "verdict" not in r.text.split("</form>")[1]


def test_provider_failure_shows_error(client, fake_openai):
    fake_openai.completions.queue("結果なし")

    r = client.post("/", data={"text": "テスト"})

    assert r.status_code == 500
    assert "分析結果の解析に失敗しました" in r.text
