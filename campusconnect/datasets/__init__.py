"""Dataset loading, merging, storage and search for colleges, scholarships
and universities."""

from .errors import (
    DatasetError,
    DatasetValidationError,
    MalformedSource,
    PersistenceFailure,
    SourceUnavailable,
)
from .loader import load_dataset, read_source
from .merge import MergePolicy, merge_colleges
from .query import SearchResult, search_colleges
from .schemas import College, Dataset, Scholarship
from .storage import DatasetStore

__all__ = [
    "College",
    "Dataset",
    "DatasetError",
    "DatasetStore",
    "DatasetValidationError",
    "MalformedSource",
    "MergePolicy",
    "PersistenceFailure",
    "Scholarship",
    "SearchResult",
    "SourceUnavailable",
    "load_dataset",
    "merge_colleges",
    "read_source",
    "search_colleges",
]
