from dalle3_mcp.errors import (
    DownloadError,
    ErrorKind,
    MissingParameterError,
    NoImageReturnedError,
    UpstreamGenerationError,
    WrappedError,
    format_error,
)


class TestErrorMessages:
    """Test the message produced for each error kind."""

    def test_missing_parameter(self):
        error = MissingParameterError("output_path")
        assert error.kind is ErrorKind.MISSING_PARAMETER
        assert format_error(error) == (
            "Error generating image: Missing required parameter: output_path"
        )

    def test_upstream_generation(self):
        error = UpstreamGenerationError(500, "Internal Server Error", '{"error": "x"}')
        assert error.kind is ErrorKind.UPSTREAM_GENERATION
        assert format_error(error) == (
            'Error generating image: OpenAI API error: 500 Internal Server Error - {"error": "x"}'
        )

    def test_no_image_returned(self):
        error = NoImageReturnedError()
        assert error.kind is ErrorKind.NO_IMAGE_RETURNED
        assert format_error(error) == (
            "Error generating image: No image URL returned from OpenAI API"
        )

    def test_download_failed(self):
        error = DownloadError(404, "Not Found")
        assert error.kind is ErrorKind.DOWNLOAD_FAILED
        assert format_error(error) == (
            "Error generating image: Failed to download image: 404 Not Found"
        )

    def test_unclassified_exceptions_are_wrapped(self):
        cause = PermissionError("[Errno 13] Permission denied: '/root/x.png'")
        assert format_error(cause) == (
            "Error generating image: [Errno 13] Permission denied: '/root/x.png'"
        )
        wrapped = WrappedError(cause)
        assert wrapped.kind is ErrorKind.WRAPPED
        assert wrapped.cause is cause

    def test_wrapped_error_without_message_uses_class_name(self):
        assert format_error(TimeoutError()) == "Error generating image: TimeoutError"
