"""Bounded reading of multipart audio uploads."""

import os
from typing import BinaryIO

from speech_relay.domain.models import AudioPayload
from speech_relay.exceptions import (
    MissingAudioError,
    UnsupportedAudioError,
    UploadTooLargeError,
)
from speech_relay.logging import setup_logging

logger = setup_logging()

ALLOWED_EXTENSIONS = frozenset({".mp3", ".wav", ".flac", ".m4a"})
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def is_audio_upload(filename: str, content_type: str | None) -> bool:
    """Accepts any audio/* type, or a known audio extension for generic types."""
    if content_type and content_type.startswith("audio/"):
        return True
    extension = os.path.splitext(filename)[1].lower()
    return extension in ALLOWED_EXTENSIONS


def read_upload(
    stream: BinaryIO,
    filename: str | None,
    content_type: str | None,
    max_bytes: int,
    chunk_size: int = 1024 * 1024,
) -> AudioPayload:
    """
    Reads an uploaded file into memory in fixed-size chunks.

    Reading stops as soon as the running total passes ``max_bytes``, so an
    oversized upload is never held in memory in full.

    Args:
        stream: File-like object positioned at the start of the upload.
        filename: Client-supplied file name.
        content_type: Client-supplied MIME type.
        max_bytes: Hard size cap in bytes.
        chunk_size: Bytes read per call.

    Returns:
        AudioPayload with the file contents.

    Raises:
        UnsupportedAudioError: If the upload is not an audio file.
        UploadTooLargeError: If the upload exceeds ``max_bytes``.
        MissingAudioError: If the upload is empty.
    """
    name = filename or "audio"
    if not is_audio_upload(name, content_type):
        raise UnsupportedAudioError(name, content_type)

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            logger.warning(
                "Upload rejected: size limit exceeded",
                extra={"file_name": name, "max_bytes": max_bytes},
            )
            raise UploadTooLargeError(name, max_bytes)
        chunks.append(chunk)

    if total == 0:
        raise MissingAudioError(f"'{name}' is empty")

    logger.info(
        "Upload received",
        extra={"file_name": name, "content_type": content_type, "size": total},
    )
    return AudioPayload(
        data=b"".join(chunks),
        content_type=content_type or DEFAULT_CONTENT_TYPE,
        filename=name,
    )
