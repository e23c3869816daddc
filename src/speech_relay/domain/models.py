"""Domain models for the speech conversion pipeline."""

from pydantic import BaseModel, computed_field


class AudioPayload(BaseModel, frozen=True):
    """An uploaded audio clip held in memory for a single request."""

    data: bytes
    content_type: str
    filename: str

    @computed_field
    @property
    def size(self) -> int:
        """Byte length of the clip."""
        return len(self.data)


class TranscriptionResult(BaseModel, frozen=True):
    """Recognized text and the language the backend detected or was told."""

    text: str
    language_code: str | None = None


class VoiceProfile(BaseModel, frozen=True):
    """Voice and model parameters used for speech synthesis."""

    voice_id: str
    model_id: str
    stability: float
    similarity_boost: float
    output_format: str = "mp3_44100_128"


class SynthesizedAudio(BaseModel, frozen=True):
    """Raw audio produced by the synthesis backend."""

    data: bytes


class PipelineSettings(BaseModel, frozen=True):
    """Per-process parameters the pipeline applies to every request."""

    source_language: str
    target_language: str
    formality: str
    voice: VoiceProfile


class ConversionResult(BaseModel, frozen=True):
    """Outcome of one pass through the pipeline."""

    transcript: TranscriptionResult
    translation: str
    audio: SynthesizedAudio
