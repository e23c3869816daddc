"""Gemini implementation of the TranslationService interface."""

from google import genai

from speech_relay.exceptions import TranslationError
from speech_relay.logging import setup_logging

from .interfaces import TranslationService

logger = setup_logging()

_FORMALITY_GUIDANCE = {
    "more": "Use a formal, polite register.",
    "prefer_more": "Prefer a formal, polite register.",
    "less": "Use a casual, informal register.",
    "prefer_less": "Prefer a casual, informal register.",
    "default": "Keep the register of the original.",
}


class GeminiTranslator(TranslationService):
    """Translation service implementation using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str):
        self._client = client
        self._model_name = model_name

    def translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
        formality: str,
    ) -> str:
        """
        Translates text with Gemini using a translation-only system instruction.

        Raises:
            TranslationError: If the Gemini API call fails or returns no text.
        """
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=text,
                config={
                    "system_instruction": self._system_instruction(
                        source_language, target_language, formality
                    ),
                },
            )
        except Exception as e:
            logger.exception(
                "Gemini API call failed", extra={"model": self._model_name}
            )
            raise TranslationError(e) from e

        if not response.text or not response.text.strip():
            raise TranslationError(details="Gemini returned an empty translation")

        translated = response.text.strip()
        logger.info(
            "Text translated",
            extra={
                "model": self._model_name,
                "target_language": target_language,
                "characters": len(translated),
            },
        )
        return translated

    def _system_instruction(
        self, source_language: str, target_language: str, formality: str
    ) -> str:
        """Builds the instruction for a spoken-output translation."""
        register = _FORMALITY_GUIDANCE.get(formality, _FORMALITY_GUIDANCE["default"])
        return (
            f"You translate transcribed speech from {source_language} "
            f"into {target_language}. The result will be read aloud by a "
            f"speech synthesizer, so write natural spoken sentences. {register} "
            "Reply with the translation only, without notes, quotes or "
            "explanations."
        )
