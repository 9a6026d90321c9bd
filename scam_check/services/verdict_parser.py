"""
Turning the classifier's free-text reply into a validated ``ScamVerdict``.

The model is asked for bare JSON but sometimes wraps it in prose or code
fences, so the object is cut out between the first ``{`` and the last ``}``
before parsing. Each failure maps to one error from ``scam_check.errors``.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from ..errors import IncompleteResult, MalformedResult, UnparsableResult
from ..models.verdict import REQUIRED_DETAIL_FIELDS, REQUIRED_FIELDS, ScamVerdict

logger = logging.getLogger(__name__)

_RISK_LEVELS = ("high", "medium", "low")


def extract_json_object(raw: str) -> dict[str, Any]:
    cleaned = raw.strip()
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end == -1 or end < start:
        logger.error("No JSON object in classifier reply: %s", raw)
        raise UnparsableResult(raw)

    try:
        data = json.loads(cleaned[start : end + 1])
    except json.JSONDecodeError as exc:
        logger.error("Malformed JSON in classifier reply (%s): %s", exc, raw)
        raise UnparsableResult(raw) from exc

    if not isinstance(data, dict):
        raise UnparsableResult(raw)
    return data


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_verdict(data: dict[str, Any]) -> ScamVerdict:
    missing_fields = [field for field in REQUIRED_FIELDS if field not in data]
    if missing_fields:
        logger.error("Verdict is missing fields: %s", missing_fields)
        raise IncompleteResult(missing_fields=missing_fields)

    details = data["details"]
    if not isinstance(details, dict):
        logger.error("Verdict details is not an object: %r", details)
        raise MalformedResult()

    missing_detail_fields = [field for field in REQUIRED_DETAIL_FIELDS if field not in details]
    if missing_detail_fields:
        logger.error("Verdict is missing detail fields: %s", missing_detail_fields)
        raise IncompleteResult(missing_detail_fields=missing_detail_fields)

    if (
        not isinstance(data["isScam"], bool)
        or not _is_number(data["confidence"])
        or not isinstance(data["reasons"], list)
        or data["riskLevel"] not in _RISK_LEVELS
    ):
        logger.error("Verdict has malformed fields: %r", data)
        raise MalformedResult()

    try:
        return ScamVerdict.model_validate(data)
    except ValidationError as exc:
        logger.error("Verdict failed schema validation: %s", exc)
        raise MalformedResult() from exc


def parse_verdict(raw: str) -> ScamVerdict:
    return validate_verdict(extract_json_object(raw))
