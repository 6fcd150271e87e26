"""Core types, configuration and errors for hyperdoc."""

from .config import Config, HTTPConfig, LoggingConfig
from .exceptions import (
    DocumentFetchError,
    DocumentLoadError,
    HyperdocError,
    InvalidIntegerError,
    InvalidLinkPropertyError,
    InvalidTimestampError,
    InvalidUriError,
    InvalidUuidError,
    MalformedDocumentError,
    NoSuchPropertyError,
    NoSuchRelationError,
    NotFoundError,
    PropertyValueError,
    TypeMismatchError,
    ValidationError,
)
from .types import (
    ROOT_PATH,
    DocumentPath,
    JsonObject,
    JsonValue,
    json_type_name,
    to_json_pointer,
)

__all__ = [
    "Config",
    "HTTPConfig",
    "LoggingConfig",
    "HyperdocError",
    "ValidationError",
    "NotFoundError",
    "NoSuchRelationError",
    "NoSuchPropertyError",
    "MalformedDocumentError",
    "InvalidLinkPropertyError",
    "PropertyValueError",
    "TypeMismatchError",
    "InvalidUriError",
    "InvalidTimestampError",
    "InvalidIntegerError",
    "InvalidUuidError",
    "DocumentLoadError",
    "DocumentFetchError",
    "JsonValue",
    "JsonObject",
    "DocumentPath",
    "ROOT_PATH",
    "to_json_pointer",
    "json_type_name",
]
