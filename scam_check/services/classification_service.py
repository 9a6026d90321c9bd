import logging
from typing import Any

from openai import APIError, APITimeoutError, AsyncOpenAI

from ..config import Settings
from ..errors import EmptyCompletion, UpstreamCallFailed, UpstreamTimeout
from .prompts import CLASSIFIER_SYSTEM_PROMPT, build_classifier_prompt

logger = logging.getLogger(__name__)


async def classify_text(client: AsyncOpenAI, text: str, settings: Settings) -> str:
    """Ask the model for a JSON verdict on `text` and return its raw reply."""
    kwargs: dict[str, Any] = {}
    if settings.classifier_json_mode:
        kwargs["response_format"] = {"type": "json_object"}

    try:
        response = await client.chat.completions.create(
            model=settings.classifier_model,
            temperature=settings.classifier_temperature,
            max_tokens=settings.classifier_max_tokens,
            messages=[
                {"role": "system", "content": CLASSIFIER_SYSTEM_PROMPT},
                {"role": "user", "content": build_classifier_prompt(text)},
            ],
            **kwargs,
        )
    except APITimeoutError as exc:
        logger.warning("Classification call timed out: %s", exc)
        raise UpstreamTimeout() from exc
    except APIError as exc:
        logger.warning("Classification call failed: %s", exc)
        raise UpstreamCallFailed(f"OpenAI APIエラー: {exc.message}") from exc

    choices = response.choices or []
    result = (choices[0].message.content or "") if choices else ""
    if not result.strip():
        raise EmptyCompletion()

    logger.debug("Classifier reply: %s", result)
    return result
