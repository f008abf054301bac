from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field


class Dataset(str, Enum):
    COLLEGES = "colleges"
    SCHOLARSHIPS = "scholarships"
    UNIVERSITIES = "universities"


class College(BaseModel):
    """Minimum shape of a college record; unknown fields are kept as-is."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, description="Merge key, compared case-insensitively")
    location: str = Field(..., min_length=1)
    branches: Optional[Any] = Field(None, description="List of branch names")
    hostel: Optional[Any] = None
    fee: Optional[Any] = Field(None, description="Numeric or numeric string; loosely typed in source data")


class Scholarship(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)


# Datasets that can be replaced wholesale through the admin API, with the
# record model each element must satisfy and the rejection messages.
REPLACEABLE: Dict[Dataset, Type[BaseModel]] = {
    Dataset.COLLEGES: College,
    Dataset.SCHOLARSHIPS: Scholarship,
}

NOT_A_LIST_MESSAGES: Dict[Dataset, str] = {
    Dataset.COLLEGES: "Body must be an array of college objects",
    Dataset.SCHOLARSHIPS: "Body must be an array of scholarship objects",
}

MISSING_FIELDS_MESSAGES: Dict[Dataset, str] = {
    Dataset.COLLEGES: "Each item must include at least 'name' and 'location'",
    Dataset.SCHOLARSHIPS: "Each item must include at least 'name' and 'category'",
}

DATASET_FILES: Dict[Dataset, str] = {
    Dataset.COLLEGES: "colleges.json",
    Dataset.SCHOLARSHIPS: "scholarships.json",
    Dataset.UNIVERSITIES: "universities.json",
}

SUPPLEMENTAL_COLLEGES_FILE = "rtu_colleges.json"
