"""ElevenLabs implementation of the TranscriptionService interface."""

import io

from elevenlabs.client import ElevenLabs

from speech_relay.domain.models import AudioPayload, TranscriptionResult
from speech_relay.exceptions import TranscriptionError
from speech_relay.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class ElevenLabsTranscriber(TranscriptionService):
    """Handles audio transcription using the ElevenLabs speech-to-text API."""

    def __init__(self, client: ElevenLabs, model_id: str):
        self._client = client
        self._model_id = model_id

    def transcribe(
        self, payload: AudioPayload, language_code: str
    ) -> TranscriptionResult:
        file = io.BytesIO(payload.data)
        file.name = payload.filename
        try:
            response = self._client.speech_to_text.convert(
                file=file,
                model_id=self._model_id,
                language_code=language_code,
            )
        except Exception as e:
            logger.exception(
                "ElevenLabs transcription failed",
                extra={"file_name": payload.filename},
            )
            raise TranscriptionError(payload.filename, e) from e

        text = getattr(response, "text", None)
        if text is None:
            raise TranscriptionError(
                payload.filename, details="Transcription returned no text"
            )

        logger.info(
            "Audio transcription successful",
            extra={"file_name": payload.filename, "characters": len(text)},
        )
        return TranscriptionResult(
            text=text,
            language_code=getattr(response, "language_code", None) or language_code,
        )
