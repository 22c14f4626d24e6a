from enum import Enum


class ErrorKind(str, Enum):
    MISSING_PARAMETER = "missing_parameter"
    UPSTREAM_GENERATION = "upstream_generation"
    NO_IMAGE_RETURNED = "no_image_returned"
    DOWNLOAD_FAILED = "download_failed"
    WRAPPED = "wrapped"


class ImageGenerationError(Exception):
    """
    Base class for every failure the generate_image tool can report.

    Subclasses set `kind` and build their message from their own fields, so
    the text returned to the caller depends only on the error kind.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameterError(ImageGenerationError):
    kind = ErrorKind.MISSING_PARAMETER

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Missing required parameter: {parameter}")


class UpstreamGenerationError(ImageGenerationError):
    kind = ErrorKind.UPSTREAM_GENERATION

    def __init__(self, status_code: int, reason: str, body: str):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"OpenAI API error: {status_code} {reason} - {body}")


class NoImageReturnedError(ImageGenerationError):
    kind = ErrorKind.NO_IMAGE_RETURNED

    def __init__(self):
        super().__init__("No image URL returned from OpenAI API")


class DownloadError(ImageGenerationError):
    kind = ErrorKind.DOWNLOAD_FAILED

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Failed to download image: {status_code} {reason}")


class WrappedError(ImageGenerationError):
    kind = ErrorKind.WRAPPED

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(str(cause) or cause.__class__.__name__)


def format_error(exc: BaseException) -> str:
    """
    Converts any exception into the text payload returned by the tool.
    """
    if not isinstance(exc, ImageGenerationError):
        exc = WrappedError(exc)
    return f"Error generating image: {exc.message}"
