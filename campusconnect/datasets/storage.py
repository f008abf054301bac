"""In-memory dataset store backed by one JSON file per dataset.

The store owns the three collections for the lifetime of the process. It is
built once at startup (load + merge) and handed to the HTTP layer and the
assistant; the only way to change a collection afterwards is a wholesale
:meth:`DatasetStore.replace`, which writes the file first and swaps the list
in memory only once the write has succeeded.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from .errors import DatasetValidationError, PersistenceFailure
from .loader import load_dataset
from .merge import MergePolicy, merge_colleges
from .schemas import (
    DATASET_FILES,
    MISSING_FIELDS_MESSAGES,
    NOT_A_LIST_MESSAGES,
    REPLACEABLE,
    SUPPLEMENTAL_COLLEGES_FILE,
    Dataset,
)

logger = logging.getLogger(__name__)


def _as_dataset(name: Union[str, Dataset]) -> Dataset:
    try:
        return Dataset(name)
    except ValueError:
        raise KeyError(f"unknown dataset: {name!r}") from None


def validate_payload(dataset: Dataset, payload: Any) -> List[Dict[str, Any]]:
    """Check a replacement payload and return it as a list.

    Elements are validated against the dataset's record model but stored
    exactly as submitted, so unknown fields survive the round trip.
    """

    model = REPLACEABLE.get(dataset)
    if model is None:
        raise DatasetValidationError(f"Dataset '{dataset.value}' cannot be replaced")

    if not isinstance(payload, list):
        raise DatasetValidationError(NOT_A_LIST_MESSAGES[dataset])

    for item in payload:
        if not isinstance(item, dict):
            raise DatasetValidationError(MISSING_FIELDS_MESSAGES[dataset])
        try:
            model.model_validate(item)
        except ValidationError as e:
            raise DatasetValidationError(MISSING_FIELDS_MESSAGES[dataset]) from e

    return list(payload)


class DatasetStore:
    """Owns the colleges, scholarships and universities collections."""

    def __init__(
        self,
        data_dir: str | os.PathLike = "data",
        colleges: Optional[List[Any]] = None,
        scholarships: Optional[List[Any]] = None,
        universities: Optional[List[Any]] = None,
    ) -> None:
        self.data_dir = Path(data_dir)
        self._collections: Dict[Dataset, List[Any]] = {
            Dataset.COLLEGES: list(colleges or []),
            Dataset.SCHOLARSHIPS: list(scholarships or []),
            Dataset.UNIVERSITIES: list(universities or []),
        }
        self._write_lock = threading.Lock()

    @classmethod
    def load(
        cls,
        data_dir: str | os.PathLike = "data",
        policy: MergePolicy = MergePolicy.PRIMARY_WINS,
    ) -> "DatasetStore":
        """Build a store from the JSON files in ``data_dir``."""

        data_dir = Path(data_dir)
        colleges = load_dataset(data_dir / DATASET_FILES[Dataset.COLLEGES])
        supplemental = load_dataset(data_dir / SUPPLEMENTAL_COLLEGES_FILE, required=False)
        if supplemental:
            colleges = merge_colleges(colleges, supplemental, policy=policy)

        scholarships = load_dataset(data_dir / DATASET_FILES[Dataset.SCHOLARSHIPS])
        universities = load_dataset(
            data_dir / DATASET_FILES[Dataset.UNIVERSITIES],
            required=False,
            wrap_object=True,
        )

        store = cls(data_dir, colleges=colleges, scholarships=scholarships, universities=universities)
        logger.info("Loaded datasets: %s", store.stats())
        return store

    def path_for(self, name: Union[str, Dataset]) -> Path:
        return self.data_dir / DATASET_FILES[_as_dataset(name)]

    def get(self, name: Union[str, Dataset]) -> List[Any]:
        """Return the live collection. It is shared: do not mutate it."""
        return self._collections[_as_dataset(name)]

    @property
    def colleges(self) -> List[Any]:
        return self._collections[Dataset.COLLEGES]

    @property
    def scholarships(self) -> List[Any]:
        return self._collections[Dataset.SCHOLARSHIPS]

    @property
    def universities(self) -> List[Any]:
        return self._collections[Dataset.UNIVERSITIES]

    def stats(self) -> Dict[str, int]:
        return {dataset.value: len(items) for dataset, items in self._collections.items()}

    def replace(self, name: Union[str, Dataset], payload: Any) -> int:
        """Replace a whole dataset and return its new size.

        Raises :class:`DatasetValidationError` for a bad payload and
        :class:`PersistenceFailure` when the file cannot be written; in both
        cases the current collection is left as it was.
        """

        dataset = _as_dataset(name)
        records = validate_payload(dataset, payload)

        with self._write_lock:
            self._write(self.path_for(dataset), records)
            self._collections[dataset] = records

        logger.info("Replaced %s dataset (%d records)", dataset.value, len(records))
        return len(records)

    def _write(self, path: Path, records: List[Any]) -> None:
        tmp_name: Optional[str] = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceFailure(f"could not write {path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug("Could not remove temp file %s", tmp_name)
