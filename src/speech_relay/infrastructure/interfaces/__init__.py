"""Infrastructure interface exports."""

from .synthesis_service import SynthesisService
from .transcription_service import TranscriptionService
from .translation_service import TranslationService

__all__ = ["SynthesisService", "TranscriptionService", "TranslationService"]
