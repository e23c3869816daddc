"""ElevenLabs implementation of the SynthesisService interface."""

from elevenlabs import VoiceSettings
from elevenlabs.client import ElevenLabs

from speech_relay.domain.models import SynthesizedAudio, VoiceProfile
from speech_relay.exceptions import SynthesisError
from speech_relay.logging import setup_logging

from .interfaces import SynthesisService

logger = setup_logging()


class ElevenLabsSynthesizer(SynthesisService):
    """Handles speech synthesis using the ElevenLabs text-to-speech API."""

    def __init__(self, client: ElevenLabs):
        self._client = client

    def synthesize(self, text: str, voice: VoiceProfile) -> SynthesizedAudio:
        try:
            chunks = self._client.text_to_speech.convert(
                voice_id=voice.voice_id,
                text=text,
                model_id=voice.model_id,
                output_format=voice.output_format,
                voice_settings=VoiceSettings(
                    stability=voice.stability,
                    similarity_boost=voice.similarity_boost,
                ),
            )
            # The SDK streams the response; consuming it can raise as well.
            data = b"".join(chunks)
        except Exception as e:
            logger.exception(
                "ElevenLabs synthesis failed",
                extra={"voice_id": voice.voice_id, "model_id": voice.model_id},
            )
            raise SynthesisError(voice.voice_id, e) from e

        logger.info(
            "Speech synthesized",
            extra={"voice_id": voice.voice_id, "size": len(data)},
        )
        return SynthesizedAudio(data=data)
