import logging
from typing import Any

from google import genai

logger = logging.getLogger(__name__)


ADVICE_MODEL = "gemini-2.0-flash"


class EmptyResponseError(RuntimeError):
    """Gemini answered without any text (blocked or malformed response)."""


def build_client(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


def ask_gemini(client: Any, prompt: str, model_name: str = ADVICE_MODEL) -> str:
    """Send one prompt and return the response text exactly as Gemini produced it."""
    try:
        logger.info("Calling Gemini model=%s prompt_len=%d", model_name, len(prompt))
        logger.debug("Prompt preview: %s", prompt[:1000])

        response = client.models.generate_content(model=model_name, contents=prompt)
        text = response.text
        if text is None:
            raise EmptyResponseError(f"Gemini returned no text for model={model_name}")

        logger.info("Gemini response received model=%s resp_len=%d", model_name, len(text))
        logger.debug("Response preview: %s", text[:1000])
        return text
    except Exception:
        logger.exception("Gemini request failed for model=%s", model_name)
        raise
