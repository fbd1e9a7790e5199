"""Errors raised by the domain and data layers.

Client mistakes derive from ValueError and collaborator failures from
RuntimeError, so routers can map them to 4xx and 5xx answers respectively.
"""


class InvalidImageError(ValueError):
    """The request carries no usable image or payload."""


class UnsupportedMediaError(InvalidImageError):
    pass


class ImageTooLargeError(InvalidImageError):
    pass


class DetectorError(RuntimeError):
    """The hosted detector was unreachable or answered something unusable."""


class DetectorConfigError(DetectorError):
    """Detector credentials or model are not configured."""


class ChatError(RuntimeError):
    """The conversational agent failed to answer."""


class ChatConfigError(ChatError):
    pass


class ReportError(RuntimeError):
    """The PDF report could not be rendered."""
