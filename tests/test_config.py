import pytest

from speech_relay.config import load_config

from .fakes import make_config


def test_complete_default_config_has_nothing_missing():
    assert make_config().missing_settings() == []


def test_synthesis_credentials_are_always_required():
    config = make_config(elevenlabs_key="", voice_id="")

    assert config.missing_settings() == ["ELEVENLABS_API_KEY", "ELEVENLABS_VOICE_ID"]


def test_required_keys_follow_selected_providers():
    config = make_config(
        deepl_key="",
        transcription_provider="assemblyai",
        translation_provider="gemini",
    )

    assert config.missing_settings() == ["ASSEMBLYAI_API_KEY", "GEMINI_API_KEY"]


def test_unused_provider_keys_are_not_required():
    config = make_config(deepl_key="", translation_provider="gemini", gemini_key="g-key")

    assert config.missing_settings() == []


def test_unknown_provider_is_reported():
    config = make_config(translation_provider="babelfish")

    assert config.missing_settings() == ["TRANSLATION_PROVIDER (unknown: 'babelfish')"]


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("ELEVENLABS_API_KEY", "el-key")
    monkeypatch.setenv("ELEVENLABS_VOICE_ID", "voice-9")
    monkeypatch.setenv("ELEVENLABS_STABILITY", "0.3")
    monkeypatch.setenv("DEEPL_API_KEY", "deepl-key")
    monkeypatch.setenv("SOURCE_LANGUAGE", "ko")
    monkeypatch.setenv("TARGET_LANGUAGE", "en-GB")
    monkeypatch.setenv("MAX_UPLOAD_BYTES", "2048")

    config = load_config()

    assert config.elevenlabs.voice_id == "voice-9"
    assert config.elevenlabs.stability == pytest.approx(0.3)
    assert config.elevenlabs.similarity_boost == pytest.approx(0.75)
    assert config.pipeline.source_language == "ko"
    assert config.pipeline.target_language == "en-GB"
    assert config.pipeline.max_upload_bytes == 2048
    assert config.pipeline.formality == "prefer_more"
    assert config.missing_settings() == []


def test_load_config_defaults(monkeypatch):
    for name in (
        "ELEVENLABS_API_KEY",
        "ELEVENLABS_VOICE_ID",
        "DEEPL_API_KEY",
        "TRANSCRIPTION_PROVIDER",
        "TRANSLATION_PROVIDER",
        "MAX_UPLOAD_BYTES",
    ):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.pipeline.transcription_provider == "elevenlabs"
    assert config.pipeline.translation_provider == "deepl"
    assert config.pipeline.max_upload_bytes == 100 * 1024 * 1024
    assert config.elevenlabs.tts_model_id == "eleven_multilingual_v2"
    assert "DEEPL_API_KEY" in config.missing_settings()


def test_non_mp3_output_format_is_reported():
    config = make_config()
    config = config.model_copy(
        update={"elevenlabs": config.elevenlabs.model_copy(update={"output_format": "pcm_16000"})}
    )

    assert config.missing_settings() == ["ELEVENLABS_OUTPUT_FORMAT (not mp3: 'pcm_16000')"]


def test_malformed_numbers_are_reported_instead_of_raising(monkeypatch):
    monkeypatch.setenv("ELEVENLABS_API_KEY", "el-key")
    monkeypatch.setenv("ELEVENLABS_VOICE_ID", "voice-9")
    monkeypatch.setenv("DEEPL_API_KEY", "deepl-key")
    monkeypatch.setenv("MAX_UPLOAD_BYTES", "lots")
    monkeypatch.setenv("ELEVENLABS_STABILITY", "high")
    monkeypatch.delenv("ELEVENLABS_SIMILARITY_BOOST", raising=False)
    monkeypatch.delenv("ELEVENLABS_OUTPUT_FORMAT", raising=False)
    monkeypatch.delenv("TRANSCRIPTION_PROVIDER", raising=False)
    monkeypatch.delenv("TRANSLATION_PROVIDER", raising=False)

    config = load_config()

    assert config.pipeline.max_upload_bytes == 100 * 1024 * 1024
    assert config.elevenlabs.stability == pytest.approx(0.5)
    assert config.missing_settings() == [
        "MAX_UPLOAD_BYTES (invalid: 'lots')",
        "ELEVENLABS_STABILITY (invalid: 'high')",
    ]
