"""
Errors raised around the profile core.

normalize() and render_html() never raise; everything here is reported
by the caller before either of them runs.
"""


class WebCVError(Exception):
    """Base class for errors shown to the user."""


class UploadError(WebCVError):
    """Missing or non-PDF upload."""


class ExtractionError(WebCVError):
    """The AI endpoint failed or returned nothing usable."""


class ResponseParseError(WebCVError):
    """The AI reply is not valid JSON after fence stripping."""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text
