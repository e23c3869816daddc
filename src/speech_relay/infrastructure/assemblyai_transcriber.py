"""AssemblyAI implementation of the TranscriptionService interface."""

import os
import tempfile

import assemblyai as aai

from speech_relay.domain.models import AudioPayload, TranscriptionResult
from speech_relay.exceptions import TranscriptionError
from speech_relay.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    def transcribe(
        self, payload: AudioPayload, language_code: str
    ) -> TranscriptionResult:
        """
        Transcribes audio data using AssemblyAI.

        Writes audio to a temp file (required by the AssemblyAI SDK) and
        performs transcription. The temp file is removed when the block
        exits, whether transcription succeeded or not.
        """
        suffix = os.path.splitext(payload.filename)[1] or ".wav"
        config = aai.TranscriptionConfig(language_code=language_code)

        try:
            with tempfile.NamedTemporaryFile(suffix=suffix, delete=True) as temp_file:
                temp_file.write(payload.data)
                temp_file.flush()

                transcription = self._transcriber.transcribe(
                    temp_file.name, config=config
                )

                if transcription.status == aai.TranscriptStatus.error:
                    raise TranscriptionError(
                        payload.filename,
                        details=f"AssemblyAI error: {transcription.error}",
                    )

                if transcription.text is None:
                    raise TranscriptionError(
                        payload.filename,
                        details="Transcription returned no text",
                    )

            logger.info(
                "Audio transcription successful",
                extra={
                    "file_name": payload.filename,
                    "characters": len(transcription.text),
                },
            )
            return TranscriptionResult(
                text=transcription.text, language_code=language_code
            )

        except TranscriptionError:
            raise
        except Exception as e:
            logger.exception(
                "AssemblyAI transcription failed",
                extra={"file_name": payload.filename},
            )
            raise TranscriptionError(payload.filename, e) from e
