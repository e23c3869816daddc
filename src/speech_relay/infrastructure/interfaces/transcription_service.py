"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from speech_relay.domain.models import AudioPayload, TranscriptionResult


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    def transcribe(
        self, payload: AudioPayload, language_code: str
    ) -> TranscriptionResult:
        """
        Transcribes an audio clip.

        Args:
            payload: The uploaded audio clip.
            language_code: Language spoken in the clip.

        Returns:
            TranscriptionResult with the recognized text.

        Raises:
            TranscriptionError: If transcription fails.
        """
        pass
