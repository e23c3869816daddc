"""Custom exceptions for the speech-relay service."""


class ConversionError(Exception):
    """Base class for errors that abort a conversion request."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: str | None = None,
        cause: Exception | None = None,
    ):
        self.message = message
        self.details = details
        self.cause = cause
        super().__init__(message)


class MissingAudioError(ConversionError):
    """Raised when the request carries no audio file."""

    status_code = 400

    def __init__(self, details: str | None = None):
        super().__init__("No audio file provided", details)


class UploadTooLargeError(ConversionError):
    """Raised when the uploaded file exceeds the configured size cap."""

    status_code = 413

    def __init__(self, filename: str, max_bytes: int):
        self.filename = filename
        self.max_bytes = max_bytes
        super().__init__(
            "Audio file is too large",
            f"'{filename}' exceeds the limit of {max_bytes} bytes",
        )


class UnsupportedAudioError(ConversionError):
    """Raised when the upload is not a recognised audio file."""

    status_code = 422

    def __init__(self, filename: str, content_type: str | None):
        self.filename = filename
        self.content_type = content_type
        super().__init__(
            "File must be an audio file",
            f"'{filename}' has content type '{content_type}'",
        )


class ConfigurationError(ConversionError):
    """Raised when required credentials or identifiers are not configured."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            "Service is misconfigured",
            f"Missing settings: {', '.join(missing)}",
        )


class TranscriptionError(ConversionError):
    """Raised when audio transcription fails."""

    def __init__(
        self,
        file_name: str,
        cause: Exception | None = None,
        details: str | None = None,
    ):
        self.file_name = file_name
        super().__init__(
            "Transcription failed",
            details or _describe(cause) or f"Failed to transcribe '{file_name}'",
            cause,
        )


class TranslationError(ConversionError):
    """Raised when translation fails or returns nothing."""

    def __init__(self, cause: Exception | None = None, details: str | None = None):
        super().__init__("Translation failed", details or _describe(cause), cause)


class SynthesisError(ConversionError):
    """Raised when speech synthesis fails."""

    def __init__(
        self,
        voice_id: str,
        cause: Exception | None = None,
        details: str | None = None,
    ):
        self.voice_id = voice_id
        super().__init__("Speech synthesis failed", details or _describe(cause), cause)


def _describe(cause: Exception | None) -> str | None:
    """Builds a diagnostic string from an upstream exception."""
    if cause is None:
        return None
    status = getattr(cause, "status_code", None)
    body = getattr(cause, "body", None)
    if status is not None:
        return f"Upstream returned {status}: {body if body is not None else cause}"
    return str(cause) or type(cause).__name__
