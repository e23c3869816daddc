"""Domain layer exports."""

from speech_relay.domain.data_uri import from_data_uri, to_data_uri
from speech_relay.domain.models import (
    AudioPayload,
    ConversionResult,
    PipelineSettings,
    SynthesizedAudio,
    TranscriptionResult,
    VoiceProfile,
)

__all__ = [
    "AudioPayload",
    "ConversionResult",
    "PipelineSettings",
    "SynthesizedAudio",
    "TranscriptionResult",
    "VoiceProfile",
    "from_data_uri",
    "to_data_uri",
]
