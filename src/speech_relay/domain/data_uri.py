"""Inline encoding of synthesized audio."""

import base64

from .models import SynthesizedAudio

DATA_URI_MIME_TYPE = "audio/mp3"


def to_data_uri(audio: SynthesizedAudio) -> str:
    """
    Encodes synthesized audio as a base64 data URI.

    Browsers play and download the URI directly, so the caller needs no
    second round trip to fetch the audio.
    """
    encoded = base64.b64encode(audio.data).decode("ascii")
    return f"data:{DATA_URI_MIME_TYPE};base64,{encoded}"


def from_data_uri(uri: str) -> bytes:
    """
    Decodes a base64 data URI back to raw bytes.

    Raises:
        ValueError: If the string is not a base64 data URI.
    """
    header, sep, payload = uri.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("Not a base64 data URI")
    return base64.b64decode(payload, validate=True)
