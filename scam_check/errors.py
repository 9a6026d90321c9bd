"""
Failure conditions of the analysis pipeline.

Every condition is a subclass of ``AnalysisError`` and knows its HTTP status
and the JSON error body sent back to the caller.
"""

from typing import Any, Optional


class AnalysisError(Exception):
    status_code: int = 500
    default_message: str = "分析中にエラーが発生しました"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        return {"error": self.message}


class InvalidInput(AnalysisError):
    status_code = 400
    default_message = "テキストが正しく提供されていません。"


class RateLimited(AnalysisError):
    status_code = 429
    default_message = "リクエストが多すぎます。少し待ってから再試行してください。"


class Misconfigured(AnalysisError):
    default_message = "OpenAI APIキーが設定されていません。"


class UpstreamCallFailed(AnalysisError):
    default_message = "OpenAI APIの呼び出しに失敗しました"


class UpstreamTimeout(UpstreamCallFailed):
    default_message = "OpenAI APIの応答がタイムアウトしました"


class EmptyCompletion(AnalysisError):
    default_message = "分析結果が空でした"


class UnparsableResult(AnalysisError):
    default_message = "分析結果の解析に失敗しました"

    def __init__(self, raw: str, message: Optional[str] = None) -> None:
        super().__init__(message)
        self.raw = raw

    def to_body(self) -> dict[str, Any]:
        return {"error": self.message, "raw": self.raw}


class IncompleteResult(AnalysisError):
    default_message = "分析結果に必須フィールドが不足しています"

    def __init__(
        self,
        missing_fields: Optional[list[str]] = None,
        missing_detail_fields: Optional[list[str]] = None,
    ) -> None:
        message = None
        if missing_detail_fields and not missing_fields:
            message = "分析結果に必須の詳細フィールドが不足しています"
        super().__init__(message)
        self.missing_fields = missing_fields or []
        self.missing_detail_fields = missing_detail_fields or []

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.missing_fields:
            body["missingFields"] = self.missing_fields
        if self.missing_detail_fields:
            body["missingDetailFields"] = self.missing_detail_fields
        return body


class MalformedResult(AnalysisError):
    default_message = "分析結果の型が不正です"
