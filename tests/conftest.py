import pytest
from fastapi.testclient import TestClient

from speech_relay.dependencies import get_config, get_pipeline
from speech_relay.domain.conversion_pipeline import ConversionPipeline
from speech_relay.domain.models import PipelineSettings, VoiceProfile
from speech_relay.main import app

from .fakes import FakeSynthesizer, FakeTranscriber, FakeTranslator, make_config


@pytest.fixture
def settings():
    return PipelineSettings(
        source_language="ja",
        target_language="en-US",
        formality="prefer_more",
        voice=VoiceProfile(
            voice_id="voice-123",
            model_id="eleven_multilingual_v2",
            stability=0.5,
            similarity_boost=0.75,
        ),
    )


@pytest.fixture
def transcriber():
    return FakeTranscriber()


@pytest.fixture
def translator():
    return FakeTranslator()


@pytest.fixture
def synthesizer():
    return FakeSynthesizer()


@pytest.fixture
def pipeline(transcriber, translator, synthesizer, settings):
    return ConversionPipeline(transcriber, translator, synthesizer, settings)


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def client(pipeline, config):
    app.dependency_overrides[get_pipeline] = lambda: pipeline
    app.dependency_overrides[get_config] = lambda: config
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def wav_bytes():
    # RIFF/WAVE header followed by a few silent samples
    return b"RIFF$\x00\x00\x00WAVEfmt " + b"\x00" * 28 + b"\x00\x00" * 16
