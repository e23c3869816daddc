"""Core business logic: transcribe, translate and re-voice one audio clip."""

from speech_relay.domain.models import (
    AudioPayload,
    ConversionResult,
    PipelineSettings,
)
from speech_relay.exceptions import SynthesisError, TranscriptionError, TranslationError
from speech_relay.infrastructure.interfaces import (
    SynthesisService,
    TranscriptionService,
    TranslationService,
)
from speech_relay.logging import setup_logging

logger = setup_logging()


class ConversionPipeline:
    """Runs the three conversion stages strictly in sequence."""

    def __init__(
        self,
        transcriber: TranscriptionService,
        translator: TranslationService,
        synthesizer: SynthesisService,
        settings: PipelineSettings,
    ):
        self._transcriber = transcriber
        self._translator = translator
        self._synthesizer = synthesizer
        self._settings = settings

    def convert(self, payload: AudioPayload) -> ConversionResult:
        """
        Converts spoken audio into synthesized speech in the target language.

        Each stage consumes the previous stage's output. The first failing
        stage aborts the run; nothing is returned for partial progress.

        Args:
            payload: The uploaded audio clip.

        Returns:
            ConversionResult with the transcript, translation and audio.

        Raises:
            TranscriptionError: If transcription fails or yields no text.
            TranslationError: If translation fails or yields no text.
            SynthesisError: If synthesis fails or yields no audio.
        """
        settings = self._settings

        logger.info(
            "Converting audio",
            extra={
                "file_name": payload.filename,
                "size": payload.size,
                "source_language": settings.source_language,
                "target_language": settings.target_language,
            },
        )

        transcript = self._transcriber.transcribe(payload, settings.source_language)
        if not transcript.text.strip():
            raise TranscriptionError(
                payload.filename, details="Transcription returned no text"
            )
        logger.info(
            "Transcription completed",
            extra={
                "characters": len(transcript.text),
                "language_code": transcript.language_code,
            },
        )

        translation = self._translator.translate(
            transcript.text,
            settings.source_language,
            settings.target_language,
            settings.formality,
        )
        if not translation or not translation.strip():
            raise TranslationError(details="Translation returned no text")
        logger.info("Translation completed", extra={"characters": len(translation)})

        audio = self._synthesizer.synthesize(translation, settings.voice)
        if not audio.data:
            raise SynthesisError(
                settings.voice.voice_id, details="Synthesis returned no audio"
            )
        logger.info(
            "Synthesis completed",
            extra={"size": len(audio.data), "voice_id": settings.voice.voice_id},
        )

        return ConversionResult(
            transcript=transcript,
            translation=translation,
            audio=audio,
        )
