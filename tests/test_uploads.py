import io

import pytest

from speech_relay.exceptions import (
    MissingAudioError,
    UnsupportedAudioError,
    UploadTooLargeError,
)
from speech_relay.uploads import is_audio_upload, read_upload


class CountingStream(io.BytesIO):
    def __init__(self, data):
        super().__init__(data)
        self.reads = 0

    def read(self, size=-1):
        self.reads += 1
        return super().read(size)


def test_read_upload_joins_chunks():
    data = bytes(range(256)) * 10

    payload = read_upload(io.BytesIO(data), "clip.wav", "audio/wav", max_bytes=4096, chunk_size=100)

    assert payload.data == data
    assert payload.size == len(data)
    assert payload.filename == "clip.wav"
    assert payload.content_type == "audio/wav"


def test_upload_at_the_limit_is_accepted():
    payload = read_upload(io.BytesIO(b"x" * 100), "clip.mp3", "audio/mpeg", max_bytes=100, chunk_size=30)

    assert payload.size == 100


def test_oversized_upload_stops_reading_early():
    stream = CountingStream(b"x" * 10_000)

    with pytest.raises(UploadTooLargeError) as exc_info:
        read_upload(stream, "long.wav", "audio/wav", max_bytes=250, chunk_size=100)

    assert exc_info.value.max_bytes == 250
    assert stream.reads == 3
    assert exc_info.value.status_code == 413


def test_empty_upload_counts_as_missing_audio():
    with pytest.raises(MissingAudioError):
        read_upload(io.BytesIO(b""), "clip.wav", "audio/wav", max_bytes=100)


def test_non_audio_upload_is_rejected_before_reading():
    stream = CountingStream(b"%PDF")

    with pytest.raises(UnsupportedAudioError):
        read_upload(stream, "notes.pdf", "application/pdf", max_bytes=100)
    assert stream.reads == 0


def test_missing_metadata_gets_defaults():
    payload = read_upload(io.BytesIO(b"abc"), None, "audio/flac", max_bytes=100)

    assert payload.filename == "audio"
    assert payload.content_type == "audio/flac"


@pytest.mark.parametrize(
    ("filename", "content_type", "expected"),
    [
        ("clip.wav", "audio/wav", True),
        ("clip.bin", "audio/x-anything", True),
        ("CLIP.FLAC", "application/octet-stream", True),
        ("clip.m4a", None, True),
        ("clip.ogg", "application/octet-stream", False),
        ("video.mp4", "video/mp4", False),
    ],
)
def test_is_audio_upload(filename, content_type, expected):
    assert is_audio_upload(filename, content_type) is expected
