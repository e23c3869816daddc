"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .deepl_translator import DeepLTranslator
from .elevenlabs_synthesizer import ElevenLabsSynthesizer
from .elevenlabs_transcriber import ElevenLabsTranscriber
from .gemini_translator import GeminiTranslator

__all__ = [
    "AssemblyAITranscriber",
    "DeepLTranslator",
    "ElevenLabsSynthesizer",
    "ElevenLabsTranscriber",
    "GeminiTranslator",
]
