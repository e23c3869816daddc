"""DeepL implementation of the TranslationService interface."""

import deepl

from speech_relay.exceptions import TranslationError
from speech_relay.logging import setup_logging

from .interfaces import TranslationService

logger = setup_logging()


class DeepLTranslator(TranslationService):
    """Handles text translation using DeepL."""

    def __init__(self, translator: deepl.Translator):
        self._translator = translator

    def translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
        formality: str,
    ) -> str:
        # DeepL source languages carry no regional variant.
        source_lang = source_language.split("-", 1)[0].upper()
        target_lang = target_language.upper()

        try:
            result = self._translator.translate_text(
                text,
                source_lang=source_lang,
                target_lang=target_lang,
                formality=formality,
            )
        except Exception as e:
            logger.exception(
                "DeepL translation failed",
                extra={"source_lang": source_lang, "target_lang": target_lang},
            )
            raise TranslationError(e) from e

        translated = getattr(result, "text", None)
        if not translated:
            raise TranslationError(details="DeepL returned an empty translation")

        logger.info(
            "Text translated",
            extra={
                "source_lang": source_lang,
                "target_lang": target_lang,
                "characters": len(translated),
            },
        )
        return translated
