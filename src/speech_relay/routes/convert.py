"""Audio conversion endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from speech_relay.config import AppConfig
from speech_relay.dependencies import get_config, get_pipeline
from speech_relay.domain.conversion_pipeline import ConversionPipeline
from speech_relay.domain.data_uri import to_data_uri
from speech_relay.exceptions import MissingAudioError
from speech_relay.logging import setup_logging
from speech_relay.response_models import ConvertResponse, ErrorResponse
from speech_relay.uploads import read_upload

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["convert"])


def require_audio(audio: UploadFile | None = File(None)) -> UploadFile:
    """Dependency that rejects requests without an ``audio`` file field."""
    if audio is None:
        raise MissingAudioError("Form field 'audio' is required")
    return audio


AudioDep = Annotated[UploadFile, Depends(require_audio)]
ConfigDep = Annotated[AppConfig, Depends(get_config)]
PipelineDep = Annotated[ConversionPipeline, Depends(get_pipeline)]


@router.post(
    "/convert",
    response_model=ConvertResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def convert_audio(
    audio: AudioDep,
    config: ConfigDep,
    pipeline: PipelineDep,
) -> ConvertResponse:
    """
    Converts an uploaded speech clip into speech in the target language.

    Transcribes, translates and re-synthesizes the clip, returning the audio
    inline as a base64 data URI.
    """
    logger.info(
        "Received conversion request",
        extra={"file_name": audio.filename, "content_type": audio.content_type},
    )

    try:
        payload = read_upload(
            audio.file,
            audio.filename,
            audio.content_type,
            max_bytes=config.pipeline.max_upload_bytes,
            chunk_size=config.pipeline.upload_chunk_size,
        )
        result = pipeline.convert(payload)
    finally:
        audio.file.close()

    logger.info(
        "Conversion completed",
        extra={"file_name": payload.filename, "output_size": len(result.audio.data)},
    )
    return ConvertResponse(url=to_data_uri(result.audio))
