"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel

TRANSCRIPTION_PROVIDERS = ("elevenlabs", "assemblyai")
TRANSLATION_PROVIDERS = ("deepl", "gemini")


class ElevenLabsConfig(BaseModel, frozen=True):
    """ElevenLabs API configuration (speech-to-text and text-to-speech)."""

    api_key: str
    voice_id: str
    tts_model_id: str = "eleven_multilingual_v2"
    stt_model_id: str = "scribe_v1"
    stability: float = 0.5
    similarity_boost: float = 0.75
    output_format: str = "mp3_44100_128"


class DeepLConfig(BaseModel, frozen=True):
    """DeepL API configuration."""

    api_key: str


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str


class GeminiConfig(BaseModel, frozen=True):
    """Gemini LLM configuration."""

    api_key: str
    model_name: str = "gemini-2.5-flash-lite"


class PipelineConfig(BaseModel, frozen=True):
    """Language pair, backend selection and upload limits."""

    transcription_provider: str = "elevenlabs"
    translation_provider: str = "deepl"
    source_language: str = "ja"
    target_language: str = "en-US"
    formality: str = "prefer_more"
    max_upload_bytes: int = 100 * 1024 * 1024
    upload_chunk_size: int = 1024 * 1024


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    pipeline: PipelineConfig
    elevenlabs: ElevenLabsConfig
    deepl: DeepLConfig
    assemblyai: AssemblyAIConfig
    gemini: GeminiConfig
    invalid_settings: tuple[str, ...] = ()

    def missing_settings(self) -> list[str]:
        """
        Lists the settings required by the selected backends that are not set.

        Returns:
            Environment variable names (or provider errors) that need attention,
            empty when the configuration is usable.
        """
        missing: list[str] = list(self.invalid_settings)

        # Synthesis always runs on ElevenLabs.
        if not self.elevenlabs.api_key:
            missing.append("ELEVENLABS_API_KEY")
        if not self.elevenlabs.voice_id:
            missing.append("ELEVENLABS_VOICE_ID")
        if not self.elevenlabs.output_format.startswith("mp3_"):
            # Results are delivered as audio/mp3 data URIs.
            missing.append(
                f"ELEVENLABS_OUTPUT_FORMAT (not mp3: '{self.elevenlabs.output_format}')"
            )

        transcription = self.pipeline.transcription_provider
        if transcription not in TRANSCRIPTION_PROVIDERS:
            missing.append(f"TRANSCRIPTION_PROVIDER (unknown: '{transcription}')")
        elif transcription == "assemblyai" and not self.assemblyai.api_key:
            missing.append("ASSEMBLYAI_API_KEY")

        translation = self.pipeline.translation_provider
        if translation not in TRANSLATION_PROVIDERS:
            missing.append(f"TRANSLATION_PROVIDER (unknown: '{translation}')")
        elif translation == "deepl" and not self.deepl.api_key:
            missing.append("DEEPL_API_KEY")
        elif translation == "gemini" and not self.gemini.api_key:
            missing.append("GEMINI_API_KEY")

        return missing


def _env_number(name: str, default, cast, invalid: list[str]):
    """Parses a numeric variable, recording it as invalid instead of raising."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return cast(raw)
    except ValueError:
        invalid.append(f"{name} (invalid: '{raw}')")
        return default


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    invalid: list[str] = []
    return AppConfig(
        pipeline=PipelineConfig(
            transcription_provider=os.getenv("TRANSCRIPTION_PROVIDER", "elevenlabs"),
            translation_provider=os.getenv("TRANSLATION_PROVIDER", "deepl"),
            source_language=os.getenv("SOURCE_LANGUAGE", "ja"),
            target_language=os.getenv("TARGET_LANGUAGE", "en-US"),
            formality=os.getenv("TRANSLATION_FORMALITY", "prefer_more"),
            max_upload_bytes=_env_number(
                "MAX_UPLOAD_BYTES", 100 * 1024 * 1024, int, invalid
            ),
        ),
        elevenlabs=ElevenLabsConfig(
            api_key=os.getenv("ELEVENLABS_API_KEY", ""),
            voice_id=os.getenv("ELEVENLABS_VOICE_ID", ""),
            tts_model_id=os.getenv("ELEVENLABS_TTS_MODEL_ID", "eleven_multilingual_v2"),
            stt_model_id=os.getenv("ELEVENLABS_STT_MODEL_ID", "scribe_v1"),
            stability=_env_number("ELEVENLABS_STABILITY", 0.5, float, invalid),
            similarity_boost=_env_number(
                "ELEVENLABS_SIMILARITY_BOOST", 0.75, float, invalid
            ),
            output_format=os.getenv("ELEVENLABS_OUTPUT_FORMAT", "mp3_44100_128"),
        ),
        deepl=DeepLConfig(
            api_key=os.getenv("DEEPL_API_KEY", ""),
        ),
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
        ),
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.5-flash-lite"),
        ),
        invalid_settings=tuple(invalid),
    )
