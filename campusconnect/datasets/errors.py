"""Error types raised by the dataset layer."""

from __future__ import annotations


class DatasetError(Exception):
    """Base class for dataset failures."""


class SourceUnavailable(DatasetError):
    """The dataset file is missing or cannot be read."""


class MalformedSource(DatasetError):
    """The dataset file exists but is not valid JSON of the expected shape."""


class DatasetValidationError(DatasetError):
    """An admin replacement payload failed structural or required-field checks."""


class PersistenceFailure(DatasetError):
    """Writing a replacement payload to disk failed; memory was left untouched."""
