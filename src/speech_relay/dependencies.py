"""FastAPI dependency injection configuration."""

from functools import lru_cache

import assemblyai as aai
import deepl
from elevenlabs.client import ElevenLabs
from google import genai

from speech_relay.config import AppConfig, load_config
from speech_relay.domain.conversion_pipeline import ConversionPipeline
from speech_relay.domain.models import PipelineSettings, VoiceProfile
from speech_relay.exceptions import ConfigurationError
from speech_relay.infrastructure import (
    AssemblyAITranscriber,
    DeepLTranslator,
    ElevenLabsSynthesizer,
    ElevenLabsTranscriber,
    GeminiTranslator,
)
from speech_relay.infrastructure.interfaces import (
    TranscriptionService,
    TranslationService,
)
from speech_relay.logging import setup_logging

logger = setup_logging()

_config = load_config()


def get_config() -> AppConfig:
    """Returns the process-wide configuration."""
    return _config


def build_pipeline(config: AppConfig) -> ConversionPipeline:
    """
    Wires SDK clients and backends into a pipeline.

    Args:
        config: A configuration for which ``missing_settings()`` is empty.

    Returns:
        ConversionPipeline using the configured backends.
    """
    elevenlabs_client = ElevenLabs(api_key=config.elevenlabs.api_key)

    transcriber: TranscriptionService
    if config.pipeline.transcription_provider == "assemblyai":
        aai.settings.api_key = config.assemblyai.api_key
        transcriber = AssemblyAITranscriber(aai.Transcriber())
    else:
        transcriber = ElevenLabsTranscriber(
            elevenlabs_client, config.elevenlabs.stt_model_id
        )

    translator: TranslationService
    if config.pipeline.translation_provider == "gemini":
        translator = GeminiTranslator(
            genai.Client(api_key=config.gemini.api_key), config.gemini.model_name
        )
    else:
        translator = DeepLTranslator(deepl.Translator(config.deepl.api_key))

    settings = PipelineSettings(
        source_language=config.pipeline.source_language,
        target_language=config.pipeline.target_language,
        formality=config.pipeline.formality,
        voice=VoiceProfile(
            voice_id=config.elevenlabs.voice_id,
            model_id=config.elevenlabs.tts_model_id,
            stability=config.elevenlabs.stability,
            similarity_boost=config.elevenlabs.similarity_boost,
            output_format=config.elevenlabs.output_format,
        ),
    )

    logger.info(
        "Conversion pipeline initialized",
        extra={
            "transcription_provider": config.pipeline.transcription_provider,
            "translation_provider": config.pipeline.translation_provider,
            "source_language": settings.source_language,
            "target_language": settings.target_language,
        },
    )
    return ConversionPipeline(
        transcriber, translator, ElevenLabsSynthesizer(elevenlabs_client), settings
    )


@lru_cache(maxsize=1)
def _shared_pipeline() -> ConversionPipeline:
    return build_pipeline(_config)


def get_pipeline() -> ConversionPipeline:
    """
    Returns the shared pipeline, building it on first use.

    Raises:
        ConfigurationError: If required settings are absent. Raised before
            any client is constructed or any upstream call is made.
    """
    missing = _config.missing_settings()
    if missing:
        logger.error("Service misconfigured", extra={"missing": missing})
        raise ConfigurationError(missing)
    return _shared_pipeline()
