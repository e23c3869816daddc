"""Abstract interface for speech synthesis operations."""

from abc import ABC, abstractmethod

from speech_relay.domain.models import SynthesizedAudio, VoiceProfile


class SynthesisService(ABC):
    """Abstract base class for text-to-speech backends."""

    @abstractmethod
    def synthesize(self, text: str, voice: VoiceProfile) -> SynthesizedAudio:
        """
        Synthesizes speech for the given text.

        Args:
            text: Text to speak.
            voice: Voice identity and model parameters.

        Returns:
            SynthesizedAudio holding the raw audio bytes.

        Raises:
            SynthesisError: If synthesis fails.
        """
        pass
