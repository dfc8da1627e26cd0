"""Public HTTP adapter API for Arctic Fox containers."""

from .response import JSON_MEDIA_TYPE, TEXT_MEDIA_TYPE, ResponseCollector, fox_response, media_type_for, to_response

__all__ = [
    "JSON_MEDIA_TYPE",
    "TEXT_MEDIA_TYPE",
    "ResponseCollector",
    "fox_response",
    "media_type_for",
    "to_response",
]
