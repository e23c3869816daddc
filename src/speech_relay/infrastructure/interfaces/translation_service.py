"""Abstract interface for translation service operations."""

from abc import ABC, abstractmethod


class TranslationService(ABC):
    """Abstract base class for text translation backends."""

    @abstractmethod
    def translate(
        self,
        text: str,
        source_language: str,
        target_language: str,
        formality: str,
    ) -> str:
        """
        Translates text from one language to another.

        Args:
            text: Text to translate.
            source_language: Language of the input text.
            target_language: Language to translate into.
            formality: Register hint for the output (e.g. "prefer_more").

        Returns:
            The translated text.

        Raises:
            TranslationError: If the call fails or returns no translation.
        """
        pass
