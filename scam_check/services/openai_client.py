from openai import AsyncOpenAI

from ..config import Settings
from ..errors import Misconfigured


def build_client(settings: Settings) -> AsyncOpenAI:
    """
    Build the provider client, failing before any outbound call when the key is missing.

    SDK retries are disabled; a failed call is reported to the caller as is.
    Use it as `async with` so the underlying HTTP pool is closed.
    """
    if not settings.openai_api_key:
        raise Misconfigured()

    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.openai_timeout_seconds,
        max_retries=0,
    )
